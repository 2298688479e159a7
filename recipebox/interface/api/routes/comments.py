"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from recipebox.application.facade import SocialFacade
from recipebox.application.result import Failure
from recipebox.application.usecase.comment import (
    CreateCommentResponse,
    DeleteCommentResponse,
    GetCommentsResponse,
    UpdateCommentResponse,
)
from recipebox.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentBody(BaseModel):
    """Create comment request body."""

    content: str
    parent_id: str | None = None


class UpdateCommentBody(BaseModel):
    """Update comment request body."""

    content: str


@router.get("/recipes/{recipe_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    recipe_id: str,
    social: FromDishka[SocialFacade],
) -> GetCommentsResponse:
    """Get a recipe's comments as reply trees, oldest first.

    Public endpoint.
    """
    result = await social.list_comments(recipe_id)
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value


@router.post(
    "/recipes/{recipe_id}/comments",
    response_model=CreateCommentResponse,
    status_code=201,
)
async def create_comment(
    recipe_id: str,
    body: CreateCommentBody,
    social: FromDishka[SocialFacade],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a recipe or reply to a comment.

    Requires authentication.

    Args:
        recipe_id: Recipe UUID
        body: Comment content and optional parent comment ID
        social: Social façade from DI
        auth_token: JWT token from cookie

    Returns:
        Created comment and the recipe's comment count

    Raises:
        HTTPException: If not authenticated, content invalid, rate limited,
            or the store fails
    """
    result = await social.create_comment(
        recipe_id, body.content, auth_token, parent_id=body.parent_id
    )
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    body: UpdateCommentBody,
    social: FromDishka[SocialFacade],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit one of your comments.

    Requires authentication. Responds 404 when the comment does not exist
    or belongs to someone else.
    """
    result = await social.update_comment(comment_id, body.content, auth_token)
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    social: FromDishka[SocialFacade],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete one of your comments.

    Requires authentication. What happens to replies depends on the
    configured reply policy.
    """
    result = await social.delete_comment(comment_id, auth_token)
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value

"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from recipebox.application.facade import SocialFacade
from recipebox.application.result import Failure
from recipebox.application.usecase.like import (
    GetLikeStatusResponse,
    ToggleLikeResponse,
)
from recipebox.interface.error import to_http_exception

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.post("/recipes/{recipe_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    recipe_id: str,
    social: FromDishka[SocialFacade],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a recipe, or unlike it if already liked.

    Requires authentication.

    Args:
        recipe_id: Recipe UUID
        social: Social façade from DI
        auth_token: JWT token from cookie

    Returns:
        New like state with the recomputed like count

    Raises:
        HTTPException: If not authenticated, rate limited, or the store fails
    """
    result = await social.toggle_like(recipe_id, auth_token)
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value


@router.get("/recipes/{recipe_id}/like", response_model=GetLikeStatusResponse)
async def get_like_status(
    recipe_id: str,
    social: FromDishka[SocialFacade],
    auth_token: str | None = Cookie(default=None),
) -> GetLikeStatusResponse:
    """Get a recipe's like count and whether the caller likes it.

    Authentication is optional; anonymous callers get is_liked=false.
    """
    result = await social.like_status(recipe_id, auth_token)
    if isinstance(result, Failure):
        raise to_http_exception(result)
    return result.value

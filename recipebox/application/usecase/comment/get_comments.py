"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import CommentService, assemble_thread, count_nodes
from recipebox.domain.value import RecipeId

from .common import CommentNode


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    recipe_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    recipe_id: str
    comments: list[CommentNode]  # Root comments with nested replies
    total: int  # Comments stored for the recipe
    visible: int  # Comments reachable from a root


class GetCommentsUseCase(
    BaseUseCase[GetCommentsRequest, GetCommentsResponse]
):
    """Use case for getting a recipe's comments as reply trees."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments are fetched oldest first and assembled into reply trees,
        so roots and every replies list stay in chronological order.
        Replies whose parent no longer exists are not returned.

        Args:
            request: Get comments request with recipe ID

        Returns:
            Reply trees with totals
        """
        comments = await self.comment_service.list_comments(
            RecipeId(UUID(request.recipe_id))
        )
        roots = assemble_thread(comments)

        return GetCommentsResponse(
            recipe_id=request.recipe_id,
            comments=[CommentNode.from_tree(root) for root in roots],
            total=len(comments),
            visible=count_nodes(roots),
        )

"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import CommentService
from recipebox.domain.value import CommentContent, CommentId, RecipeId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    recipe_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    comment_count: int
    count_authoritative: bool


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for commenting on a recipe or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate and trim content
        2. Insert the comment (service validates the parent when configured)
        3. Recompute the recipe's comment count

        Args:
            request: Create comment request

        Returns:
            The created comment and the recipe's comment count

        Raises:
            ValidationError: If content is empty or too long, or the parent
                is rejected
        """
        content = CommentContent.parse(request.content)

        created = await self.comment_service.create_comment(
            recipe_id=RecipeId(UUID(request.recipe_id)),
            author_id=UserId(UUID(request.author_id)),
            content=content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CreateCommentResponse(
            comment=CommentItem.from_domain(created.comment),
            comment_count=created.comment_count.root,
            count_authoritative=created.comment_count.authoritative,
        )

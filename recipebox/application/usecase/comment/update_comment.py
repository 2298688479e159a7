"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import CommentService
from recipebox.domain.value import CommentContent, CommentId, UserId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(
    BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]
):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundOrForbiddenError: If the comment does not exist or is not
                owned by the requester
        """
        content = CommentContent.parse(request.content)

        comment = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=UserId(UUID(request.author_id)),
            content=content,
        )

        return UpdateCommentResponse(comment=CommentItem.from_domain(comment))

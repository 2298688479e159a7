"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import CommentService
from recipebox.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    author_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    recipe_id: str
    comment_count: int
    count_authoritative: bool
    removed_reply_ids: list[str] = []
    reparented_replies: int = 0


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            What was removed and the recipe's comment count

        Raises:
            NotFoundOrForbiddenError: If the comment does not exist or is not
                owned by the requester
        """
        deleted = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=UserId(UUID(request.author_id)),
        )

        return DeleteCommentResponse(
            comment_id=str(deleted.comment_id),
            recipe_id=str(deleted.recipe_id),
            comment_count=deleted.comment_count.root,
            count_authoritative=deleted.comment_count.authoritative,
            removed_reply_ids=[str(cid) for cid in deleted.removed_reply_ids],
            reparented_replies=deleted.reparented_replies,
        )

"""Comment entity.

Comments on a recipe form a forest: parent_id None marks a root comment,
otherwise it points at the comment being replied to. Depth is unlimited.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from recipebox.domain.model.common import DomainModel
from recipebox.domain.value import (
    COMMENT_MAX_LENGTH,
    AuthorDisplay,
    CommentId,
    RecipeId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Only the author may edit or delete a comment. Deleting a parent does not
    touch its replies unless the configured reply policy says so.
    """

    id: CommentId
    recipe_id: RecipeId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class AuthoredComment(Comment):
    """Comment joined with its author's display identity at read time."""

    author: AuthorDisplay = AuthorDisplay()

    @classmethod
    def from_comment(
        cls, comment: Comment, author: AuthorDisplay | None = None
    ) -> "AuthoredComment":
        """Attach author display data to a stored comment."""
        return cls(
            **comment.model_dump(exclude={"author"}),
            author=author or AuthorDisplay(),
        )

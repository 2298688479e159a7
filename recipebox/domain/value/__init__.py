"""Domain value objects for recipebox."""

from recipebox.domain.value.identifiers import CommentId, LikeId, RecipeId, UserId
from recipebox.domain.value.types import (
    COMMENT_MAX_LENGTH,
    AuthorDisplay,
    AuthoritativeCount,
    CachedCount,
    CommentContent,
    CounterKind,
)

__all__ = [
    # Identifiers
    "RecipeId",
    "UserId",
    "LikeId",
    "CommentId",
    # Types
    "COMMENT_MAX_LENGTH",
    "AuthorDisplay",
    "AuthoritativeCount",
    "CachedCount",
    "CommentContent",
    "CounterKind",
]

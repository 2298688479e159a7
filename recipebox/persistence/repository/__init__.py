"""PostgreSQL repository implementations."""

from recipebox.persistence.repository.comment import PostgresCommentRepository
from recipebox.persistence.repository.like import PostgresLikeRepository
from recipebox.persistence.repository.profile import PostgresProfileRepository
from recipebox.persistence.repository.recipe import PostgresRecipeRepository

__all__ = [
    "PostgresRecipeRepository",
    "PostgresLikeRepository",
    "PostgresCommentRepository",
    "PostgresProfileRepository",
]

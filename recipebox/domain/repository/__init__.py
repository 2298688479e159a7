"""Repository interfaces for the recipebox domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from recipebox.domain.repository.comment import CommentRepository
from recipebox.domain.repository.like import UNIQUE_LIKE_CONSTRAINT, LikeRepository
from recipebox.domain.repository.profile import ProfileRepository
from recipebox.domain.repository.recipe import RecipeRepository

__all__ = [
    "UNIQUE_LIKE_CONSTRAINT",
    "RecipeRepository",
    "LikeRepository",
    "CommentRepository",
    "ProfileRepository",
]

"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .profile import InMemoryProfileRepository
from .recipe import InMemoryRecipeRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryProfileRepository",
    "InMemoryRecipeRepository",
]

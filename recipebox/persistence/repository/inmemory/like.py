"""In-memory like repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from recipebox.domain.model import Like
from recipebox.domain.repository import UNIQUE_LIKE_CONSTRAINT, LikeRepository
from recipebox.domain.value import RecipeId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Enforces the (recipe_id, user_id) uniqueness the database enforces.
    """

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_one(self, recipe_id: RecipeId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a recipe."""
        for like in self._likes:
            if like.recipe_id == recipe_id and like.user_id == user_id:
                return like
        return None

    async def insert(self, like: Like) -> Like:
        """Insert a like.

        Raises:
            IntegrityError: If the user already likes the recipe
        """
        for existing in self._likes:
            if existing.recipe_id == like.recipe_id and existing.user_id == like.user_id:
                raise IntegrityError(
                    "INSERT INTO likes",
                    None,
                    Exception(
                        "duplicate key value violates unique constraint "
                        f"\"{UNIQUE_LIKE_CONSTRAINT}\""
                    ),
                )

        self._likes.append(like)
        return like

    async def delete(self, recipe_id: RecipeId, user_id: UserId) -> bool:
        """Delete a user's like on a recipe."""
        for i, like in enumerate(self._likes):
            if like.recipe_id == recipe_id and like.user_id == user_id:
                self._likes.pop(i)
                return True
        return False

    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count likes on a recipe."""
        return sum(1 for like in self._likes if like.recipe_id == recipe_id)

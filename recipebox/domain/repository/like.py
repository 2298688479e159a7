"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from recipebox.domain.model.like import Like
from recipebox.domain.value import RecipeId, UserId

# Store constraint that keeps one like per (recipe_id, user_id)
UNIQUE_LIKE_CONSTRAINT = "unique_like"


class LikeRepository(ABC):
    """Repository for the Like entity.

    Defines the contract for like persistence operations.
    """

    @abstractmethod
    async def find_one(self, recipe_id: RecipeId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a recipe.

        Args:
            recipe_id: The recipe ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, like: Like) -> Like:
        """Insert a like.

        Args:
            like: The like to insert

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the recipe (the
                error names UNIQUE_LIKE_CONSTRAINT), or the recipe row is
                missing
        """
        pass

    @abstractmethod
    async def delete(self, recipe_id: RecipeId, user_id: UserId) -> bool:
        """Delete a user's like on a recipe.

        Args:
            recipe_id: The recipe ID
            user_id: The user's ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count likes on a recipe.

        Args:
            recipe_id: The recipe ID

        Returns:
            Number of like rows
        """
        pass

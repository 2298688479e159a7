"""Recipe repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from recipebox.domain.model.recipe import Recipe
from recipebox.domain.value import CounterKind, RecipeId


class RecipeRepository(ABC):
    """Repository for the Recipe entity.

    The social layer reads recipes and writes their counter fields; recipe
    authoring lives elsewhere.
    """

    @abstractmethod
    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        """Find a recipe by ID.

        Args:
            recipe_id: The recipe's unique identifier

        Returns:
            The recipe if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Recipe]:
        """List every recipe, oldest first.

        Used by bulk counter reconciliation.
        """
        pass

    @abstractmethod
    async def save(self, recipe: Recipe) -> Recipe:
        """Save a recipe (create or update).

        Args:
            recipe: The recipe to save

        Returns:
            The saved recipe
        """
        pass

    @abstractmethod
    async def set_counter(
        self, recipe_id: RecipeId, counter: CounterKind, value: int
    ) -> bool:
        """Overwrite a denormalized counter field.

        Implementations must isolate a failed write so it does not undo
        other work in the same unit of work.

        Args:
            recipe_id: The recipe ID
            counter: Which counter field to write
            value: New value

        Returns:
            True if a recipe row was updated, False if none matched
        """
        pass

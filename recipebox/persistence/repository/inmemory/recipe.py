"""In-memory recipe repository for testing."""

from typing import List, Optional

from recipebox.domain.model import Recipe
from recipebox.domain.repository import RecipeRepository
from recipebox.domain.value import CachedCount, CounterKind, RecipeId


class InMemoryRecipeRepository(RecipeRepository):
    """In-memory implementation of RecipeRepository for testing."""

    def __init__(self) -> None:
        self._recipes: dict[RecipeId, Recipe] = {}

    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        """Find a recipe by ID."""
        return self._recipes.get(recipe_id)

    async def list_all(self) -> List[Recipe]:
        """List every recipe, oldest first."""
        return sorted(self._recipes.values(), key=lambda r: r.created_at)

    async def save(self, recipe: Recipe) -> Recipe:
        """Save a recipe."""
        self._recipes[recipe.id] = recipe
        return recipe

    async def set_counter(
        self, recipe_id: RecipeId, counter: CounterKind, value: int
    ) -> bool:
        """Overwrite a counter field."""
        recipe = self._recipes.get(recipe_id)
        if not recipe:
            return False

        self._recipes[recipe_id] = recipe.model_copy(
            update={counter.value: CachedCount(value)}
        )
        return True

"""Recipe domain service."""

import logfire

from recipebox.domain.error import NotFoundError
from recipebox.domain.model.recipe import Recipe
from recipebox.domain.repository import RecipeRepository
from recipebox.domain.value import RecipeId

from .base import Service


class RecipeService(Service):
    """Domain service for recipe lookups.

    Recipe authoring lives elsewhere; the social engine only reads recipes.
    """

    def __init__(self, recipe_repository: RecipeRepository) -> None:
        """Initialize recipe service.

        Args:
            recipe_repository: Recipe repository
        """
        self.recipe_repository = recipe_repository

    async def get_recipe_by_id(self, recipe_id: RecipeId) -> Recipe:
        """Get a recipe by ID.

        Args:
            recipe_id: Recipe ID

        Returns:
            Recipe

        Raises:
            NotFoundError: If the recipe does not exist
        """
        with logfire.span("recipe_service.get_recipe_by_id", recipe_id=str(recipe_id)):
            recipe = await self.recipe_repository.find_by_id(recipe_id)

            if recipe is None:
                logfire.warn("Recipe not found", recipe_id=str(recipe_id))
                raise NotFoundError("Recipe", str(recipe_id))

            return recipe

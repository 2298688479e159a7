"""PostgreSQL implementation of Recipe repository."""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from recipebox.domain.model import Recipe
from recipebox.domain.repository import RecipeRepository
from recipebox.domain.value import CounterKind, RecipeId
from recipebox.persistence.mappers import recipe_to_dict, row_to_recipe
from recipebox.persistence.tables import recipes_table


class PostgresRecipeRepository(RecipeRepository):
    """PostgreSQL implementation of RecipeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, recipe_id: RecipeId) -> Optional[Recipe]:
        """Find a recipe by ID."""
        stmt = select(recipes_table).where(recipes_table.c.id == recipe_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_recipe(row._asdict()) if row else None

    async def list_all(self) -> List[Recipe]:
        """List every recipe, oldest first."""
        stmt = select(recipes_table).order_by(recipes_table.c.created_at.asc())
        result = await self.session.execute(stmt)
        return [row_to_recipe(row._asdict()) for row in result.fetchall()]

    async def save(self, recipe: Recipe) -> Recipe:
        """Save a recipe (create or update)."""
        existing = await self.find_by_id(recipe.id)

        recipe_dict = recipe_to_dict(recipe)

        if existing:
            stmt = (
                recipes_table.update()
                .where(recipes_table.c.id == recipe.id)
                .values(**recipe_dict)
            )
        else:
            stmt = recipes_table.insert().values(**recipe_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return recipe

    async def set_counter(
        self, recipe_id: RecipeId, counter: CounterKind, value: int
    ) -> bool:
        """Overwrite a counter field inside a savepoint.

        A failure rolls back to the savepoint only, leaving the enclosing
        transaction (and the mutation that triggered the write) intact.
        """
        stmt = (
            update(recipes_table)
            .where(recipes_table.c.id == recipe_id)
            .values({counter.value: value})
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

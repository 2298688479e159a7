"""PostgreSQL implementation of Like repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from recipebox.domain.model import Like
from recipebox.domain.repository import LikeRepository
from recipebox.domain.value import RecipeId, UserId
from recipebox.persistence.mappers import like_to_dict, row_to_like
from recipebox.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Writes and counts run inside savepoints so a rejected insert (the
    unique_like constraint) does not poison the request transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_one(self, recipe_id: RecipeId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a recipe."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.recipe_id == recipe_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def insert(self, like: Like) -> Like:
        """Insert a like.

        Raises:
            IntegrityError: If the user already likes the recipe, or the
                recipe does not exist
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete(self, recipe_id: RecipeId, user_id: UserId) -> bool:
        """Delete a user's like on a recipe."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.recipe_id == recipe_id,
                likes_table.c.user_id == user_id,
            )
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count likes on a recipe."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.recipe_id == recipe_id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.scalar_one()

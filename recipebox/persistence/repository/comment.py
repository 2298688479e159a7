"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from recipebox.domain.model import Comment
from recipebox.domain.repository import CommentRepository
from recipebox.domain.value import CommentId, RecipeId, UserId
from recipebox.persistence.mappers import comment_to_dict, row_to_comment
from recipebox.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Author-scoped writes filter on both ``id`` and ``user_id``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID if it belongs to author_id."""
        stmt = select(comments_table).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.user_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_recipe(self, recipe_id: RecipeId) -> List[Comment]:
        """Find all comments for a recipe, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.recipe_id == recipe_id)
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update content where both the comment ID and author match."""
        stmt = (
            update(comments_table)
            .where(
                and_(
                    comments_table.c.id == comment_id,
                    comments_table.c.user_id == author_id,
                )
            )
            .values(content=content, updated_at=updated_at)
            .returning(*comments_table.c)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def delete_owned(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Delete where both the comment ID and author match."""
        stmt = delete(comments_table).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.user_id == author_id,
            )
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID."""
        if not comment_ids:
            return 0

        stmt = delete(comments_table).where(comments_table.c.id.in_(comment_ids))
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def reparent_children(
        self, parent_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Move direct replies of parent_id under new_parent_id."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .values(parent_id=new_parent_id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count comments on a recipe."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.recipe_id == recipe_id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.scalar_one()

"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recipebox.domain.model import Profile
from recipebox.domain.repository import ProfileRepository
from recipebox.domain.value import UserId
from recipebox.persistence.mappers import profile_to_dict, row_to_profile
from recipebox.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find profiles for several users (batch query)."""
        if not user_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        existing = await self.find_by_id(profile.id)

        profile_dict = profile_to_dict(profile)

        if existing:
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = profiles_table.insert().values(**profile_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return profile

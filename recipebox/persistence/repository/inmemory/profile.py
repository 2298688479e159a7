"""In-memory profile repository for testing."""

from typing import List, Optional, Sequence

from recipebox.domain.model import Profile
from recipebox.domain.repository import ProfileRepository
from recipebox.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find profiles for several users."""
        return [self._profiles[uid] for uid in user_ids if uid in self._profiles]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._profiles[profile.id] = profile
        return profile

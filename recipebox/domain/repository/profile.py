"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from recipebox.domain.model.profile import Profile
from recipebox.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for the Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: The user's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find profiles for several users (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            Profiles that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

"""Profile entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from recipebox.domain.model.common import DomainModel
from recipebox.domain.value import AuthorDisplay, UserId


class Profile(DomainModel):
    """Public profile of a user, keyed by the identity provider's user ID."""

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    full_name: str = Field(default="", max_length=255)
    bio: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def display(self) -> AuthorDisplay:
        """Author identity shown on comments."""
        return AuthorDisplay(username=self.username, full_name=self.full_name)

"""Domain value objects for recipebox.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import ClassVar

from pydantic import field_validator

from recipebox.domain.error import ValidationError
from recipebox.domain.value.common import RootValueObject, ValueObject

COMMENT_MAX_LENGTH = 2000


class CounterKind(str, Enum):
    """Denormalized counter fields on a recipe.

    The value is the column name on ``recipes``.
    """

    LIKE_COUNT = "like_count"
    COMMENT_COUNT = "comment_count"

    @property
    def source(self) -> str:
        """Table whose rows are the ground truth for this counter."""
        return "likes" if self is CounterKind.LIKE_COUNT else "comments"


class AuthoritativeCount(RootValueObject[int]):
    """A count computed from source rows at request time.

    Safe to show to users and to write into a counter field.
    """

    authoritative: ClassVar[bool] = True

    @field_validator("root")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Counts are never negative."""
        if v < 0:
            raise ValueError("Count must be non-negative")
        return v


class CachedCount(RootValueObject[int]):
    """A denormalized counter value or any other non-authoritative hint.

    May lag behind the source rows; never write it back or prefer it over
    an AuthoritativeCount.
    """

    authoritative: ClassVar[bool] = False


class CommentContent(RootValueObject[str]):
    """Comment body.

    Stored trimmed; 1-2000 characters after trimming.
    """

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Trim and enforce length bounds."""
        return _clean_content(v)

    @classmethod
    def parse(cls, text: str | None) -> "CommentContent":
        """Build from raw user input.

        Raises:
            ValidationError: If the text is empty or too long
        """
        try:
            return cls(_clean_content(text or ""))
        except ValueError as e:
            raise ValidationError(str(e)) from e


def _clean_content(v: str) -> str:
    v = v.strip()
    if len(v) == 0:
        raise ValueError("Comment cannot be empty")
    if len(v) > COMMENT_MAX_LENGTH:
        raise ValueError(f"Comment must be {COMMENT_MAX_LENGTH} characters or less")
    return v


class AuthorDisplay(ValueObject):
    """Author identity shown next to a comment."""

    username: str = "Unknown"
    full_name: str = "Unknown User"

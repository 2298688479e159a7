"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen; repositories return new instances via
    ``model_copy(update=...)`` instead of mutating in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

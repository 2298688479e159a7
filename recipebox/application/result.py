"""Tagged results returned by the social façade."""

from enum import Enum
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a caller can branch on."""

    AUTH_REQUIRED = "auth_required"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    NOT_FOUND_OR_FORBIDDEN = "not_found_or_forbidden"
    RATE_LIMITED = "rate_limited"
    STORE_UNAVAILABLE = "store_unavailable"
    UNEXPECTED = "unexpected"


class Success(BaseModel, Generic[T]):
    """Operation succeeded."""

    ok: bool = True
    value: T


class Failure(BaseModel):
    """Operation failed; nothing was mutated unless noted in the message."""

    ok: bool = False
    error_kind: ErrorKind
    message: str
    retry_after: float | None = None


Result = Union[Success[T], Failure]

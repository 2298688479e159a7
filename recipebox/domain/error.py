"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthRequiredError(DomainError):
    """Raised when an operation needs an authenticated user and has none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class RateLimitedError(DomainError):
    """Raised when admission control rejects a request."""

    def __init__(self, action: str, retry_after: float | None = None):
        self.action = action
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded for {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotFoundOrForbiddenError(DomainError):
    """Raised when an ownership-scoped write matches no row.

    The resource may not exist or may belong to someone else; callers are
    not told which.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} not found or not owned by the current user"
        )

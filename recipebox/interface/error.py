"""Interface layer errors and failure-to-HTTP mapping."""

from fastapi import HTTPException, status

from recipebox.application.result import ErrorKind, Failure

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.AUTH_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # Ownership misses look like missing rows to the caller
    ErrorKind.NOT_FOUND_OR_FORBIDDEN: status.HTTP_404_NOT_FOUND,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for a failure kind."""
    return _STATUS_BY_KIND[kind]


def to_http_exception(failure: Failure) -> HTTPException:
    """Convert a façade Failure into an HTTPException.

    Rate-limited failures carry a Retry-After header when the limiter
    reported one.
    """
    headers = None
    if failure.error_kind is ErrorKind.RATE_LIMITED and failure.retry_after is not None:
        headers = {"Retry-After": str(max(1, round(failure.retry_after)))}

    return HTTPException(
        status_code=status_for(failure.error_kind),
        detail={"error": failure.error_kind.value, "message": failure.message},
        headers=headers,
    )

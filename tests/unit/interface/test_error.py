"""Unit tests for failure-to-HTTP mapping."""

import pytest

from recipebox.application.result import ErrorKind, Failure
from recipebox.interface.error import status_for, to_http_exception


@pytest.mark.parametrize(
    ("kind", "status_code"),
    [
        (ErrorKind.AUTH_REQUIRED, 401),
        (ErrorKind.VALIDATION, 400),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.NOT_FOUND_OR_FORBIDDEN, 404),
        (ErrorKind.RATE_LIMITED, 429),
        (ErrorKind.STORE_UNAVAILABLE, 503),
        (ErrorKind.UNEXPECTED, 500),
    ],
)
def test_status_for(kind, status_code):
    assert status_for(kind) == status_code


def test_detail_carries_kind_and_message():
    failure = Failure(error_kind=ErrorKind.VALIDATION, message="Comment cannot be empty")

    exc = to_http_exception(failure)

    assert exc.status_code == 400
    assert exc.detail == {"error": "validation", "message": "Comment cannot be empty"}
    assert exc.headers is None


def test_rate_limited_sets_retry_after():
    failure = Failure(
        error_kind=ErrorKind.RATE_LIMITED,
        message="Rate limit exceeded. Please try again later.",
        retry_after=0.2,
    )

    exc = to_http_exception(failure)

    assert exc.status_code == 429
    assert exc.headers == {"Retry-After": "1"}

"""Unit tests for cache invalidators."""

import json

import httpx
import pytest

from recipebox.adapter.cache import HttpCacheInvalidator, LocalCacheInvalidator
from recipebox.adapter.error import CacheInvalidationError

REVALIDATE_URL = "https://recipebox.test/api/revalidate"


class TestLocalCacheInvalidator:
    """Tests for LocalCacheInvalidator."""

    @pytest.mark.asyncio
    async def test_records_paths(self):
        """Invalidated paths are kept in order."""
        invalidator = LocalCacheInvalidator()

        await invalidator.invalidate(["/recipes/1", "/dashboard"])
        await invalidator.invalidate(["/recipes/2"])

        assert invalidator.invalidated == ["/recipes/1", "/dashboard", "/recipes/2"]


class TestHttpCacheInvalidator:
    """Tests for HttpCacheInvalidator."""

    @pytest.mark.asyncio
    async def test_posts_paths_with_secret(self):
        """Paths are posted as JSON with the shared secret as bearer token."""
        # Arrange
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"revalidated": True})

        invalidator = HttpCacheInvalidator(
            REVALIDATE_URL, secret="s3cret", transport=httpx.MockTransport(handler)
        )

        # Act
        await invalidator.invalidate(["/recipes/1", "/recipes"])

        # Assert
        assert len(requests) == 1
        assert str(requests[0].url) == REVALIDATE_URL
        assert requests[0].headers["Authorization"] == "Bearer s3cret"
        assert json.loads(requests[0].content) == {"paths": ["/recipes/1", "/recipes"]}

    @pytest.mark.asyncio
    async def test_no_request_for_empty_paths(self):
        """Nothing is sent when there is nothing to invalidate."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        invalidator = HttpCacheInvalidator(
            REVALIDATE_URL, transport=httpx.MockTransport(handler)
        )

        await invalidator.invalidate([])

        assert requests == []

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        """A non-2xx response raises CacheInvalidationError."""
        invalidator = HttpCacheInvalidator(
            REVALIDATE_URL,
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )

        with pytest.raises(CacheInvalidationError, match="500"):
            await invalidator.invalidate(["/recipes/1"])

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Connection failures are wrapped in CacheInvalidationError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        invalidator = HttpCacheInvalidator(
            REVALIDATE_URL, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(CacheInvalidationError):
            await invalidator.invalidate(["/recipes/1"])

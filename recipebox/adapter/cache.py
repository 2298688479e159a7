"""Downstream cache invalidation.

After a successful mutation the pages that render the affected recipe are
marked stale so the next visit re-fetches them.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import httpx
import logfire

from recipebox.adapter.error import CacheInvalidationError


class CacheInvalidator(ABC):
    """Marks rendered pages stale."""

    @abstractmethod
    async def invalidate(self, paths: Sequence[str]) -> None:
        """Invalidate cached pages.

        Args:
            paths: Page paths, e.g. ``/recipes/<id>``

        Raises:
            CacheInvalidationError: If the downstream cache rejects the request
        """
        pass


class HttpCacheInvalidator(CacheInvalidator):
    """Posts paths to the frontend's revalidation endpoint."""

    def __init__(
        self,
        revalidate_url: str,
        secret: str | None = None,
        timeout: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize invalidator.

        Args:
            revalidate_url: Revalidation endpoint URL
            secret: Shared secret sent as a bearer token (optional)
            timeout: Request timeout in seconds
            transport: httpx transport override (tests)
        """
        self.revalidate_url = revalidate_url
        self.secret = secret
        self.timeout = timeout
        self.transport = transport

    async def invalidate(self, paths: Sequence[str]) -> None:
        if not paths:
            return

        headers = {"Authorization": f"Bearer {self.secret}"} if self.secret else {}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.revalidate_url,
                    json={"paths": list(paths)},
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Cache revalidation HTTP error", error=str(e))
            raise CacheInvalidationError(f"HTTP error during revalidation: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Cache revalidation failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise CacheInvalidationError(
                f"Revalidation failed: {response.status_code}"
            )

        logfire.info("Cache revalidated", paths=list(paths))


class LocalCacheInvalidator(CacheInvalidator):
    """Logs invalidations and keeps them in memory.

    Used when no revalidation endpoint is configured, and in tests.
    """

    def __init__(self) -> None:
        self.invalidated: list[str] = []

    async def invalidate(self, paths: Sequence[str]) -> None:
        self.invalidated.extend(paths)
        logfire.debug("Cache paths invalidated locally", paths=list(paths))

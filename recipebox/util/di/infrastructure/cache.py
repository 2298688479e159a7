"""Cache invalidation providers."""

from dishka import Scope, provide
import logfire

from recipebox.adapter.cache import (
    CacheInvalidator,
    HttpCacheInvalidator,
    LocalCacheInvalidator,
)
from recipebox.config import CacheSettings
from recipebox.util.di.base import ProviderBase
from recipebox.util.observability import instrument_httpx


class CacheProvider(ProviderBase):
    """Cache invalidation component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache invalidation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_cache_invalidator(self, settings: CacheSettings) -> CacheInvalidator:
        """Provide the HTTP invalidator, or a local one when no endpoint is set."""
        if not settings.revalidate_url:
            logfire.info("No revalidation endpoint configured, invalidating locally")
            return LocalCacheInvalidator()

        instrument_httpx()
        return HttpCacheInvalidator(
            revalidate_url=settings.revalidate_url,
            secret=settings.revalidate_secret,
            timeout=settings.timeout_seconds,
        )

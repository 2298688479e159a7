"""Mock cache invalidation provider for testing."""

from dishka import Scope, provide

from recipebox.adapter.cache import CacheInvalidator, LocalCacheInvalidator
from recipebox.util.di.infrastructure.cache import CacheProvider


class MockCacheProvider(CacheProvider):
    """Records invalidated paths instead of calling the frontend."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_cache_invalidator(self) -> CacheInvalidator:
        """Provide a recording cache invalidator."""
        return LocalCacheInvalidator()

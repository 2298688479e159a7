"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from recipebox.config import (
    AuthSettings,
    CacheSettings,
    RateLimitSettings,
    Settings,
    SocialSettings,
)
from recipebox.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_social_settings(self, settings: Settings) -> SocialSettings:
        """Provide likes and comments settings."""
        return settings.social

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide admission control settings."""
        return settings.rate_limit

    @provide(scope=Scope.APP)
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        """Provide cache invalidation settings."""
        return settings.cache

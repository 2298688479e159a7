"""Admission control providers."""

from dishka import Scope, provide
import logfire

from recipebox.adapter.ratelimit import (
    AdmissionControl,
    AllowAllAdmissionControl,
    FixedWindowRateLimiter,
)
from recipebox.config import RateLimitSettings
from recipebox.util.di.base import ProviderBase


class AdmissionProvider(ProviderBase):
    """Admission control component base."""

    __mock_component__ = "admission"


class ProdAdmissionProvider(AdmissionProvider):
    """Production admission control provider.

    APP-scoped: limiter windows must outlive a single request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_admission_control(self, settings: RateLimitSettings) -> AdmissionControl:
        """Provide the rate limiter, or allow-all when rate limiting is disabled."""
        if not settings.enabled:
            logfire.info("Rate limiting disabled")
            return AllowAllAdmissionControl()
        return FixedWindowRateLimiter.from_settings(settings)

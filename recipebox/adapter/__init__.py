"""Adapters for external systems."""

from .cache import CacheInvalidator, HttpCacheInvalidator, LocalCacheInvalidator
from .ratelimit import (
    AdmissionAction,
    AdmissionControl,
    AdmissionDecision,
    AllowAllAdmissionControl,
    FixedWindowRateLimiter,
)

__all__ = [
    "AdmissionAction",
    "AdmissionControl",
    "AdmissionDecision",
    "AllowAllAdmissionControl",
    "CacheInvalidator",
    "FixedWindowRateLimiter",
    "HttpCacheInvalidator",
    "LocalCacheInvalidator",
]

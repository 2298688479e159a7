"""Admission control for social mutations.

A fixed-window limiter keyed by action and subject (the user ID). The
window opens on the first request and resets once it has elapsed.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import logfire

from recipebox.config import RateLimitSettings, RateWindow


class AdmissionAction(str, Enum):
    """Rate-limited action families."""

    LIKE = "like"
    COMMENT = "comment"


@dataclass(frozen=True)
class AdmissionDecision:
    """Whether a request may proceed."""

    allowed: bool
    remaining: int = 0
    retry_after: float | None = None


class AdmissionControl(ABC):
    """Admits or rejects a request before any state is touched."""

    @abstractmethod
    def check(self, action: AdmissionAction, subject: str) -> AdmissionDecision:
        """Record a request attempt and decide whether it may proceed.

        Args:
            action: Action family being attempted
            subject: Who is attempting it (usually the user ID)

        Returns:
            Admission decision
        """
        pass


class AllowAllAdmissionControl(AdmissionControl):
    """Admission control that admits everything."""

    def check(self, action: AdmissionAction, subject: str) -> AdmissionDecision:
        return AdmissionDecision(allowed=True)


@dataclass
class _Window:
    started_at: float
    count: int


class FixedWindowRateLimiter(AdmissionControl):
    """In-process fixed-window rate limiter.

    State lives in this process only; each worker keeps its own windows.
    Expired windows are dropped during checks, at most once per longest
    window.
    """

    def __init__(
        self,
        windows: dict[AdmissionAction, RateWindow],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the limiter.

        Args:
            windows: Window size and request limit per action
            clock: Monotonic time source in seconds
        """
        self.windows = windows
        self.clock = clock
        self._state: dict[tuple[AdmissionAction, str], _Window] = {}
        self._sweep_interval = max(
            (w.window_seconds for w in windows.values()), default=0.0
        )
        self._last_sweep = clock()

    @classmethod
    def from_settings(cls, settings: RateLimitSettings) -> "FixedWindowRateLimiter":
        """Build a limiter from rate limit settings."""
        return cls(
            windows={
                AdmissionAction.LIKE: settings.like,
                AdmissionAction.COMMENT: settings.comment,
            }
        )

    def check(self, action: AdmissionAction, subject: str) -> AdmissionDecision:
        limit = self.windows.get(action)
        if limit is None:
            return AdmissionDecision(allowed=True)

        now = self.clock()
        if now - self._last_sweep >= self._sweep_interval:
            self._sweep(now)

        key = (action, subject)
        window = self._state.get(key)

        if window is None or now - window.started_at >= limit.window_seconds:
            window = _Window(started_at=now, count=0)
            self._state[key] = window

        if window.count >= limit.max_requests:
            retry_after = max(0.0, window.started_at + limit.window_seconds - now)
            logfire.warn(
                "Request rejected by rate limiter",
                action=action.value,
                subject=subject,
                retry_after=retry_after,
            )
            return AdmissionDecision(allowed=False, retry_after=retry_after)

        window.count += 1
        return AdmissionDecision(
            allowed=True, remaining=limit.max_requests - window.count
        )

    @property
    def tracked(self) -> int:
        """Number of windows currently held in memory."""
        return len(self._state)

    def reset(self) -> None:
        """Forget every window."""
        self._state.clear()

    def _sweep(self, now: float) -> None:
        expired = [
            key
            for key, window in self._state.items()
            if now - window.started_at >= self.windows[key[0]].window_seconds
        ]
        for key in expired:
            del self._state[key]
        self._last_sweep = now

        if expired:
            logfire.debug("Expired rate limit windows dropped", count=len(expired))

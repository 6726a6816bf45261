"""Per-client fixed-window request counters.

Each rule counts hits per client key in windows of ``window_seconds``. The
first hit opens a window; once ``limit`` hits are used further requests are
rejected until the window closes.
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from storefront_api.core.application.exceptions import RateLimitExceededError
from storefront_api.infrastructure.configuration.rate_limit_settings import RateLimitSettings

PRUNE_EVERY = 1000


@dataclass(frozen=True)
class RateLimitRule:
    name: str
    limit: int
    window_seconds: int
    message: str
    error: str


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after: int

    def headers(self) -> dict[str, str]:
        return {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset_after),
        }


@dataclass
class _Window:
    started_at: float
    count: int = 0


class FixedWindowRateLimiter:
    def __init__(self, enabled: bool = True, timer: Callable[[], float] = time.monotonic):
        self.enabled = enabled
        self._timer = timer
        self._windows: dict[tuple[str, str], _Window] = {}
        self._lock = threading.Lock()
        self._hits_since_prune = 0

    def hit(self, rule: RateLimitRule, client_key: str) -> RateLimitDecision:
        if not self.enabled:
            return RateLimitDecision(True, rule.limit, rule.limit, 0)

        now = self._timer()
        with self._lock:
            self._maybe_prune(now)
            key = (rule.name, client_key)
            window = self._windows.get(key)
            if window is None or now - window.started_at >= rule.window_seconds:
                window = self._windows[key] = _Window(started_at=now)
            window.count += 1

            reset_after = max(0, math.ceil(window.started_at + rule.window_seconds - now))
            return RateLimitDecision(
                allowed=window.count <= rule.limit,
                limit=rule.limit,
                remaining=max(0, rule.limit - window.count),
                reset_after=reset_after,
            )

    def check(self, rule: RateLimitRule, client_key: str) -> RateLimitDecision:
        """Counts the hit and raises RateLimitExceededError once the rule is exhausted."""
        decision = self.hit(rule, client_key)
        if not decision.allowed:
            raise RateLimitExceededError(
                rule.message,
                [rule.error],
                limit=decision.limit,
                reset_after=decision.reset_after,
            )
        return decision

    def _maybe_prune(self, now: float) -> None:
        self._hits_since_prune += 1
        if self._hits_since_prune < PRUNE_EVERY:
            return
        self._hits_since_prune = 0
        # no rule window is longer than an hour
        stale = [key for key, window in self._windows.items() if now - window.started_at > 3600]
        for key in stale:
            del self._windows[key]


@dataclass(frozen=True)
class RateLimitRules:
    general: RateLimitRule
    auth: RateLimitRule
    order: RateLimitRule
    admin: RateLimitRule
    search: RateLimitRule

    @classmethod
    def from_settings(cls, settings: RateLimitSettings) -> RateLimitRules:
        return cls(
            general=RateLimitRule(
                "general",
                settings.rate_limit_general_max,
                settings.rate_limit_general_window_seconds,
                "Too many requests",
                "Too many requests from this IP, please try again later",
            ),
            auth=RateLimitRule(
                "auth",
                settings.rate_limit_auth_max,
                settings.rate_limit_auth_window_seconds,
                "Too many authentication attempts",
                "Too many login/register attempts from this IP, please try again later",
            ),
            order=RateLimitRule(
                "order",
                settings.rate_limit_order_max,
                settings.rate_limit_order_window_seconds,
                "Too many order attempts",
                "Too many order placement attempts, please wait before trying again",
            ),
            admin=RateLimitRule(
                "admin",
                settings.rate_limit_admin_max,
                settings.rate_limit_admin_window_seconds,
                "Too many admin operations",
                "Too many admin operations from this IP, please try again later",
            ),
            search=RateLimitRule(
                "search",
                settings.rate_limit_search_max,
                settings.rate_limit_search_window_seconds,
                "Too many search requests",
                "Too many search requests, please slow down",
            ),
        )

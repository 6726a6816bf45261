from storefront_api.infrastructure.rate_limiting.fixed_window_rate_limiter import (
    FixedWindowRateLimiter,
    RateLimitDecision,
    RateLimitRule,
    RateLimitRules,
)

__all__ = ["FixedWindowRateLimiter", "RateLimitDecision", "RateLimitRule", "RateLimitRules"]

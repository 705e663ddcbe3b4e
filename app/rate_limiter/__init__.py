"""app/rate_limiter/__init__.py — public API of the rate_limiter package."""

from app.rate_limiter.base import RateLimiter
from app.rate_limiter.sliding_window import SlidingWindowRateLimiter

__all__ = [
    "RateLimiter",
    "SlidingWindowRateLimiter",
]

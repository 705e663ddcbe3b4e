"""
app/rate_limiter/sliding_window.py

In-process sliding-window rate limiter.

For each client id the limiter keeps the timestamps of its admitted
attempts. On every check, timestamps older than the window are dropped
and the attempt is admitted only if fewer than ``max_requests`` remain.

State lives in this object and dies with the process; separate worker
processes or instances each keep their own counts.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, List

from app.core.logger import get_logger
from app.rate_limiter.base import RateLimiter

logger = get_logger(__name__)


class SlidingWindowRateLimiter(RateLimiter):
    """
    At most ``max_requests`` admitted attempts per client in any trailing
    ``window_seconds`` interval.

    Entries are never swept; stale timestamps are filtered lazily on the
    next check for the same client, so memory grows with the number of
    distinct client ids seen.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            max_requests   : Admitted attempts allowed per window (must be >= 1).
            window_seconds : Length of the trailing window in seconds (must be > 0).
            clock          : Returns the current time in seconds. Tests pass a fake.
        """
        if max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {max_requests}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be > 0, got {window_seconds}")

        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._attempts: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    # ── RateLimiter interface ──────────────────────────────────────────────────

    def admit(self, client_id: str) -> bool:
        with self._lock:
            now = self._clock()
            recent = [
                t for t in self._attempts.get(client_id, [])
                if now - t < self._window_seconds
            ]

            if len(recent) >= self._max_requests:
                # Keep the pruned list; the rejected attempt is not recorded.
                self._attempts[client_id] = recent
                logger.debug(
                    "Client '%s' rejected — %d attempt(s) in window.",
                    client_id,
                    len(recent),
                )
                return False

            recent.append(now)
            self._attempts[client_id] = recent
            return True

    def reset(self) -> None:
        with self._lock:
            self._attempts.clear()
        logger.info("Rate limiter state cleared.")

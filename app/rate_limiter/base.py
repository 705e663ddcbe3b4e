"""
app/rate_limiter/base.py

Abstract interface for the rate limiter layer.

The submission pipeline depends only on this interface, so the in-process
implementation can be replaced by a shared store (e.g. Redis) without
touching the service or the controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class RateLimiter(ABC):
    """Contract every rate-limiter backend must fulfil."""

    @abstractmethod
    def admit(self, client_id: str) -> bool:
        """
        Record one attempt for ``client_id`` if it is still within its quota.

        Args:
            client_id: Opaque key identifying the caller (usually an IP address).

        Returns:
            True if the attempt is admitted and counted, False if the client
            has exhausted its quota. A rejected attempt is not counted.
        """

    @abstractmethod
    def reset(self) -> None:
        """Forget every recorded attempt for every client."""

"""Injectable per-key request limiter used in front of the planner."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict


class RateLimiter(ABC):
    """Decides whether a caller may make another request."""

    @abstractmethod
    def try_acquire(self, key: str) -> bool:
        """Consume one slot for ``key``; return False when none remain."""


@dataclass
class _Window:
    count: int
    reset_at: float


@dataclass(frozen=True)
class RateLimitInfo:
    remaining: int
    reset_at: float


class InMemoryRateLimiter(RateLimiter):
    """Fixed-window counter per key, held in process memory."""

    def __init__(
        self,
        limit: int = 30,
        window_seconds: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def try_acquire(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                self._sweep(now)
                self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
                return True
            if window.count >= self.limit:
                return False
            window.count += 1
            return True

    def _sweep(self, now: float) -> None:
        # Caller holds the lock.
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._windows)

    def get_info(self, key: str) -> RateLimitInfo | None:
        with self._lock:
            window = self._windows.get(key)
            if window is None:
                return None
            return RateLimitInfo(remaining=max(0, self.limit - window.count), reset_at=window.reset_at)


class UnlimitedRateLimiter(RateLimiter):
    """Limiter that never refuses; used by the CLI and evaluation harness."""

    def try_acquire(self, key: str) -> bool:
        return True


__all__ = ["InMemoryRateLimiter", "RateLimitInfo", "RateLimiter", "UnlimitedRateLimiter"]

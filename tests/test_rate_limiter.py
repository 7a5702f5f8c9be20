"""In-memory rate limiter behaviour."""

import threading

import pytest

from tools.rate_limiter import InMemoryRateLimiter, UnlimitedRateLimiter


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_limit_is_enforced_per_key() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=60, clock=_Clock())

    assert limiter.try_acquire("a")
    assert limiter.try_acquire("a")
    assert not limiter.try_acquire("a")
    assert limiter.try_acquire("b")


def test_window_resets_after_expiry() -> None:
    clock = _Clock()
    limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)

    assert limiter.try_acquire("a")
    clock.now += 60
    assert not limiter.try_acquire("a")
    clock.now += 0.5
    assert limiter.try_acquire("a")


def test_expired_windows_of_departed_clients_are_dropped() -> None:
    clock = _Clock()
    limiter = InMemoryRateLimiter(limit=5, window_seconds=1, clock=clock)
    for idx in range(1000):
        limiter.try_acquire(f"10.0.{idx // 256}.{idx % 256}")
    assert limiter.tracked_keys == 1000

    clock.now = 100.0 + 1000.0
    assert limiter.try_acquire("newcomer")

    assert limiter.tracked_keys == 1
    assert limiter.get_info("10.0.0.1") is None


def test_live_windows_survive_a_sweep() -> None:
    clock = _Clock()
    limiter = InMemoryRateLimiter(limit=2, window_seconds=60, clock=clock)
    limiter.try_acquire("stale")
    clock.now += 30
    limiter.try_acquire("active")
    limiter.try_acquire("active")
    clock.now += 31

    assert limiter.try_acquire("newcomer")

    assert limiter.get_info("stale") is None
    assert not limiter.try_acquire("active")


def test_get_info_reports_remaining() -> None:
    clock = _Clock()
    limiter = InMemoryRateLimiter(limit=30, window_seconds=600, clock=clock)

    assert limiter.get_info("a") is None
    limiter.try_acquire("a")
    limiter.try_acquire("a")

    info = limiter.get_info("a")
    assert info is not None
    assert info.remaining == 28
    assert info.reset_at == 1600.0


def test_refused_requests_do_not_consume_slots() -> None:
    limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=_Clock())
    limiter.try_acquire("a")
    for _ in range(5):
        limiter.try_acquire("a")

    assert limiter.get_info("a").remaining == 0


def test_concurrent_acquires_never_exceed_limit() -> None:
    limiter = InMemoryRateLimiter(limit=50, window_seconds=600)
    granted = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(20):
            if limiter.try_acquire("shared"):
                with lock:
                    granted.append(1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(granted) == 50


def test_invalid_limit_rejected() -> None:
    with pytest.raises(ValueError):
        InMemoryRateLimiter(limit=0)


def test_unlimited_limiter_always_grants() -> None:
    limiter = UnlimitedRateLimiter()
    assert all(limiter.try_acquire("x") for _ in range(100))

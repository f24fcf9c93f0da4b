"""
Unit tests for the sliding-window rate limiter.
"""

import threading

import pytest

from api.services.rate_limiter import SlidingWindowRateLimiter


@pytest.fixture
def limiter():
    return SlidingWindowRateLimiter(limit=5, window_ms=60_000)


def test_window_admits_then_rejects_then_recovers(limiter):
    for _ in range(5):
        assert limiter.admit("1.2.3.4", now_ms=0)

    rejected = limiter.admit("1.2.3.4", now_ms=1_000)
    assert not rejected
    assert rejected.retry_after_ms == 59_000

    assert limiter.admit("1.2.3.4", now_ms=61_000)


def test_timestamp_expires_exactly_at_window(limiter):
    for _ in range(5):
        limiter.admit("c", now_ms=0)
    assert not limiter.admit("c", now_ms=59_999)
    assert limiter.admit("c", now_ms=60_000)


def test_rejection_is_not_recorded(limiter):
    for t in range(5):
        limiter.admit("c", now_ms=t * 10_000)  # 0, 10s, ..., 40s
    for _ in range(20):
        assert not limiter.admit("c", now_ms=50_000)
    # Only the t=0 entry has expired; rejected calls did not extend the window
    assert limiter.admit("c", now_ms=60_000)
    assert not limiter.admit("c", now_ms=60_001)


def test_remaining_quota(limiter):
    assert limiter.admit("c", now_ms=0).remaining == 4
    assert limiter.admit("c", now_ms=1).remaining == 3


def test_clients_are_independent(limiter):
    for _ in range(5):
        limiter.admit("a", now_ms=0)
    assert not limiter.admit("a", now_ms=0)
    assert limiter.admit("b", now_ms=0)


def test_least_recently_seen_client_evicted():
    limiter = SlidingWindowRateLimiter(limit=1, window_ms=60_000, max_keys=2)
    limiter.admit("a", now_ms=0)
    limiter.admit("b", now_ms=0)
    limiter.admit("a", now_ms=1)  # rejected, but marks "a" as recently seen
    limiter.admit("c", now_ms=2)  # evicts "b"

    assert len(limiter) == 2
    assert limiter.admit("b", now_ms=3)
    assert not limiter.admit("c", now_ms=3)


def test_reset(limiter):
    for _ in range(5):
        limiter.admit("a", now_ms=0)
    limiter.reset("a")
    assert limiter.admit("a", now_ms=0)
    limiter.reset()
    assert len(limiter) == 0


@pytest.mark.parametrize("kwargs", [{"limit": 0}, {"window_ms": 0}, {"max_keys": 0}])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        SlidingWindowRateLimiter(**kwargs)


def test_concurrent_admissions_never_exceed_limit():
    limiter = SlidingWindowRateLimiter(limit=5, window_ms=60_000)
    results = []
    lock = threading.Lock()

    def worker():
        admitted = bool(limiter.admit("shared", now_ms=0))
        with lock:
            results.append(admitted)

    threads = [threading.Thread(target=worker) for _ in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(results) == 5

"""
TTL Cache Tests - Unit Tests for the Time-bounded Cache

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- shopfx.shared.ttl_cache (TTLCache)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from shopfx.shared.ttl_cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestTTLCache:
    def test_get_before_expiry(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=60, clock=clock)
        cache.set("k", "v")
        clock.now = 59.9
        assert cache.get("k") == "v"
        assert "k" in cache

    def test_expires_at_ttl(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=60, clock=clock)
        cache.set("k", "v")
        clock.now = 60
        assert cache.get("k") is None
        assert "k" not in cache

    def test_missing_key(self):
        assert TTLCache(ttl_seconds=1).get("nope") is None

    def test_per_entry_ttl(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=60, clock=clock)
        cache.set("short", 1, ttl_seconds=5)
        cache.set("long", 2)
        clock.now = 10
        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_last_write_wins(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=60, clock=clock)
        cache.set("k", "old")
        clock.now = 30
        cache.set("k", "new")
        assert cache.get("k") == "new"
        assert cache.expires_at("k") == 90

    def test_expires_at_missing(self):
        assert TTLCache(ttl_seconds=60).expires_at("k") is None

    def test_invalidate(self):
        cache = TTLCache(ttl_seconds=60)
        cache.set("k", "v")
        assert cache.invalidate("k") is True
        assert cache.invalidate("k") is False
        assert cache.get("k") is None

    def test_clear(self):
        cache = TTLCache(ttl_seconds=60)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert "a" not in cache and "b" not in cache

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_rejects_non_positive_ttl(self, ttl):
        with pytest.raises(ValueError):
            TTLCache(ttl_seconds=ttl)


class WritingClock(FakeClock):
    """Clock that runs a write the next time it is read."""

    def __init__(self):
        super().__init__()
        self.on_read = None

    def __call__(self):
        hook, self.on_read = self.on_read, None
        if hook is not None:
            hook()
        return self.now


class TestConcurrentWrites:
    def test_expiry_does_not_drop_newer_write(self):
        clock = WritingClock()
        cache = TTLCache(ttl_seconds=60, clock=clock)
        cache.set("k", "old")
        clock.now = 60
        # The write lands after get() has read the expired entry
        clock.on_read = lambda: cache.set("k", "new")

        assert cache.get("k") is None
        assert cache.get("k") == "new"
        assert cache.expires_at("k") == 120

# tests/test_rates_service.py
"""
Rates Service Tests - Unit Tests for the Cached Rate Table Provider

This module contains unit tests for RateTableProvider, including the cache
window, forced expiry through an injected clock, failure handling that never
evicts a valid table, refresh ordering, and deduplication of concurrent
async fetches.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- shopfx.application.rates_service (RateTableProvider, build_rate_table_provider)
- shopfx.shared.ttl_cache (TTLCache with a fake clock)
- unittest.mock (Mock for rate source mocking)
- pytest (testing framework)
"""
import asyncio
import threading
import time

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects for testing without a real rate source

from shopfx.adapters.providers.base import RateSource
from shopfx.adapters.providers.static import StaticRateSource
from shopfx.application.rates_service import RateTableProvider, build_rate_table_provider
from shopfx.domain.errors import RateSourceError
from shopfx.domain.models import CurrencyCode
from shopfx.shared.ttl_cache import TTLCache

EUR, USD, CZK = CurrencyCode.EUR, CurrencyCode.USD, CurrencyCode.CZK

TABLE = {EUR: 0.92, USD: 1.0, CZK: 23.1}
HOUR = 3600


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_source(*results):
    source = Mock(spec=RateSource)
    source.name = "mock"
    source.fetch_rates.side_effect = list(results)
    return source


def make_provider(source, clock):
    return RateTableProvider(source, cache=TTLCache(ttl_seconds=HOUR, clock=clock))


class TestCacheWindow:
    def test_first_call_fetches(self):
        clock = FakeClock()
        source = make_source(TABLE)
        provider = make_provider(source, clock)

        assert provider.get_rates() == TABLE
        source.fetch_rates.assert_called_once()

    def test_within_window_uses_cache(self):
        clock = FakeClock()
        source = make_source(TABLE)
        provider = make_provider(source, clock)

        first = provider.get_rates()
        clock.advance(HOUR - 1)
        second = provider.get_rates()

        assert second is first
        assert source.fetch_rates.call_count == 1

    def test_expired_window_fetches_again(self):
        clock = FakeClock()
        newer = {EUR: 0.9, USD: 1.0, CZK: 22.0}
        source = make_source(TABLE, newer)
        provider = make_provider(source, clock)

        provider.get_rates()
        clock.advance(HOUR)
        assert provider.get_rates() == newer
        assert source.fetch_rates.call_count == 2

    def test_table_is_read_only(self):
        provider = make_provider(make_source(TABLE), FakeClock())
        table = provider.get_rates()
        with pytest.raises(TypeError):
            table[USD] = 2.0

    def test_table_is_a_snapshot(self):
        raw = dict(TABLE)
        provider = make_provider(make_source(raw), FakeClock())
        table = provider.get_rates()
        raw[USD] = 99.0
        assert table[USD] == 1.0


class TestFailureHandling:
    def test_failure_returns_none(self):
        source = make_source(RateSourceError("Rates API timeout after 10s"))
        provider = make_provider(source, FakeClock())

        assert provider.get_rates() is None
        assert provider.last_error == "Rates API timeout after 10s"

    def test_unexpected_error_returns_none(self):
        provider = make_provider(make_source(KeyError("boom")), FakeClock())
        assert provider.get_rates() is None
        assert "boom" in provider.last_error

    def test_failure_is_retried_on_next_call(self):
        source = make_source(RateSourceError("down"), TABLE)
        provider = make_provider(source, FakeClock())

        assert provider.get_rates() is None
        assert provider.get_rates() == TABLE
        assert provider.last_error is None

    def test_failed_refresh_keeps_valid_table(self):
        clock = FakeClock()
        source = make_source(TABLE, RateSourceError("down"))
        provider = make_provider(source, clock)

        provider.get_rates()
        clock.advance(60)
        assert provider.refresh() == TABLE
        assert provider.get_rates() == TABLE
        assert source.fetch_rates.call_count == 2

    def test_failed_fetch_after_expiry_yields_none(self):
        clock = FakeClock()
        source = make_source(TABLE, RateSourceError("down"))
        provider = make_provider(source, clock)

        provider.get_rates()
        clock.advance(HOUR + 1)
        assert provider.get_rates() is None


class TestRefresh:
    def test_refresh_ignores_window(self):
        newer = {EUR: 0.95, USD: 1.0, CZK: 24.0}
        source = make_source(TABLE, newer)
        provider = make_provider(source, FakeClock())

        provider.get_rates()
        assert provider.refresh() == newer
        assert provider.get_rates() == newer

    def test_last_refresh_wins(self):
        tables = [{EUR: 1.0, USD: float(n)} for n in range(1, 4)]
        provider = make_provider(make_source(*tables), FakeClock())
        for _ in tables:
            provider.refresh()
        assert provider.get_rates()[USD] == 3.0

    def test_refresh_restarts_window(self):
        clock = FakeClock()
        source = make_source(TABLE, TABLE)
        provider = make_provider(source, clock)

        provider.get_rates()
        clock.advance(HOUR - 10)
        provider.refresh()
        clock.advance(HOUR - 10)
        provider.get_rates()
        assert source.fetch_rates.call_count == 2

    def test_invalidate_forces_fetch(self):
        source = make_source(TABLE, TABLE)
        provider = make_provider(source, FakeClock())
        provider.get_rates()
        provider.invalidate()
        provider.get_rates()
        assert source.fetch_rates.call_count == 2


class TestStatus:
    def test_empty_cache(self):
        provider = make_provider(make_source(), FakeClock())
        status = provider.status()
        assert not status.available

    def test_partial_table(self):
        provider = make_provider(make_source({EUR: 0.92, USD: 1.0}), FakeClock())
        provider.get_rates()
        status = provider.status()
        assert status.available
        assert status.missing == (CZK,)

    def test_full_table(self):
        provider = make_provider(make_source(TABLE), FakeClock())
        provider.get_rates()
        assert provider.status().complete


class SlowSource(RateSource):
    name = "slow"

    def __init__(self, delay=0.2):
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_rates(self):
        with self._lock:
            self.calls += 1
        time.sleep(self.delay)
        return dict(TABLE)


class TestAsync:
    def test_get_rates_async_fetches_and_caches(self):
        provider = make_provider(make_source(TABLE), FakeClock())

        async def run():
            first = await provider.get_rates_async()
            second = await provider.get_rates_async()
            return first, second

        first, second = asyncio.run(run())
        assert first == TABLE
        assert second is first

    def test_concurrent_callers_share_one_fetch(self):
        source = SlowSource()
        provider = make_provider(source, FakeClock())

        async def run():
            return await asyncio.gather(*(provider.get_rates_async() for _ in range(5)))

        results = asyncio.run(run())
        assert source.calls == 1
        assert all(result == TABLE for result in results)

    def test_concurrent_refreshes_share_one_fetch(self):
        source = SlowSource()
        provider = make_provider(source, FakeClock())

        async def run():
            return await asyncio.gather(provider.refresh_async(), provider.refresh_async())

        asyncio.run(run())
        assert source.calls == 1

    def test_sequential_refreshes_fetch_again(self):
        source = SlowSource(delay=0)
        provider = make_provider(source, FakeClock())

        async def run():
            await provider.refresh_async()
            await provider.refresh_async()

        asyncio.run(run())
        assert source.calls == 2

    def test_async_failure_keeps_valid_table(self):
        provider = make_provider(make_source(TABLE, RateSourceError("down")), FakeClock())

        async def run():
            await provider.get_rates_async()
            return await provider.refresh_async()

        assert asyncio.run(run()) == TABLE


class TestBuildRateTableProvider:
    def test_static_kind(self):
        provider = build_rate_table_provider("static", clock=FakeClock())
        assert isinstance(provider.source, StaticRateSource)
        assert provider.get_rates()[CZK] == 23.1

    def test_cache_window_from_settings(self):
        from shopfx.config import settings

        provider = build_rate_table_provider("static")
        assert provider.cache.ttl_seconds == settings.rates_cache_seconds

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown rate source kind"):
            build_rate_table_provider("nope")

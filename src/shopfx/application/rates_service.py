# src/shopfx/application/rates_service.py
"""
Rates Service - Cached Rate Table Provider

This module owns the process-wide rate table. A rate source is asked for a
fresh table at most once per cache window (1 hour by default); inside the
window callers get the cached snapshot. Refresh is triggered from outside
(currency change, explicit refetch), never by a timer.

A failed fetch yields None instead of raising; every consumer already falls
back to showing EUR amounts when rates are missing. A failed fetch never
replaces a table that is still valid, and the last successful fetch always
wins the cache entry.

Files that USE this module:
- Host application code (get_rates / get_rates_async before pricing)
- tests.test_rates_service (unit tests)

Files that this module USES:
- shopfx.adapters.providers (RateSource, make_rate_source)
- shopfx.application.conversion (rate_table_status)
- shopfx.shared.ttl_cache (TTLCache)
- shopfx.config (settings for the cache window)
"""
from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Callable, Optional

from shopfx.adapters.providers.base import RateSource
from shopfx.adapters.providers.registry import make_rate_source
from shopfx.application.conversion import rate_table_status
from shopfx.config import settings
from shopfx.domain.errors import RateSourceError
from shopfx.domain.models import RateTable, RateTableStatus
from shopfx.shared.ttl_cache import TTLCache

log = logging.getLogger(__name__)

RATES_CACHE_KEY = "rates:latest"


class RateTableProvider:
    """
    Cached access to the current rate table.

    The cache is injected so tests can control the clock and force expiry.
    """

    def __init__(
        self,
        source: RateSource,
        cache: Optional[TTLCache] = None,
        cache_key: str = RATES_CACHE_KEY,
    ):
        """
        Args:
            source: Rate source asked for fresh tables
            cache: TTL cache (defaults to one with settings.rates_cache_seconds)
            cache_key: Cache entry holding the table
        """
        self.source = source
        self.cache = cache or TTLCache(ttl_seconds=settings.rates_cache_seconds)
        self.cache_key = cache_key
        self.last_error: Optional[str] = None
        self._inflight: Optional[asyncio.Future] = None

    def get_rates(self) -> Optional[RateTable]:
        """
        Return the cached table, fetching when the cache window has lapsed.

        Returns:
            Read-only rate table, or None if no table is available
        """
        cached = self.cache.get(self.cache_key)
        if cached is not None:
            log.debug("Using cached rate table")
            return cached
        return self._fetch()

    def refresh(self) -> Optional[RateTable]:
        """
        Fetch a new table regardless of the cache window.

        Returns:
            The new table, or the still-valid cached one if the fetch failed
        """
        table = self._fetch()
        if table is None:
            return self.cache.get(self.cache_key)
        return table

    async def get_rates_async(self) -> Optional[RateTable]:
        """
        Async variant of get_rates for event-loop callers.

        The blocking fetch runs in the default executor. Concurrent callers
        that miss the cache share a single in-flight fetch.
        """
        cached = self.cache.get(self.cache_key)
        if cached is not None:
            log.debug("Using cached rate table")
            return cached
        return await self._shared_fetch()

    async def refresh_async(self) -> Optional[RateTable]:
        """Async variant of refresh; joins a fetch that is already running."""
        table = await self._shared_fetch()
        if table is None:
            return self.cache.get(self.cache_key)
        return table

    def status(self) -> RateTableStatus:
        """Report whether the cached table can serve every allowed currency."""
        return rate_table_status(self.cache.get(self.cache_key))

    def invalidate(self) -> None:
        self.cache.invalidate(self.cache_key)

    async def _shared_fetch(self) -> Optional[RateTable]:
        loop = asyncio.get_running_loop()
        inflight = self._inflight
        if inflight is None or inflight.done() or inflight.get_loop() is not loop:
            log.debug("Starting rate table fetch in executor")
            inflight = loop.run_in_executor(None, self._fetch)
            self._inflight = inflight
        else:
            log.debug("Joining in-flight rate table fetch")
        # One cancelled caller must not cancel the fetch the others wait on
        return await asyncio.shield(inflight)

    def _fetch(self) -> Optional[RateTable]:
        try:
            table = self.source.fetch_rates()
        except RateSourceError as e:
            self.last_error = str(e)
            log.warning("Rate table fetch from %s failed, prices stay in EUR: %s", self.source.name, e)
            return None
        except Exception as e:
            self.last_error = str(e)
            log.error("Unexpected error fetching rate table from %s: %s", self.source.name, e, exc_info=True)
            return None

        snapshot = MappingProxyType(dict(table))
        self.cache.set(self.cache_key, snapshot)
        self.last_error = None
        log.info(
            "Rate table updated from %s: %d currencies (ttl=%ss)",
            self.source.name, len(snapshot), self.cache.ttl_seconds,
        )
        return snapshot


def build_rate_table_provider(
    kind: Optional[str] = None,
    clock: Optional[Callable[[], float]] = None,
) -> RateTableProvider:
    """
    Wire a RateTableProvider from settings.

    Args:
        kind: Rate source kind (defaults to settings.rate_source)
        clock: Optional clock for the cache

    Returns:
        RateTableProvider with its own TTL cache
    """
    cache = TTLCache(ttl_seconds=settings.rates_cache_seconds, clock=clock)
    return RateTableProvider(make_rate_source(kind), cache=cache)

# src/shopfx/adapters/providers/base.py
"""
Base Interface for Rate Table Sources

This module defines the abstract base class for all rate sources. A source
performs one fetch per call and knows nothing about caching; the
application-level RateTableProvider owns the cache window.

Files that USE this module:
- shopfx.adapters.providers.currencyapi (CurrencyApiSource implements RateSource)
- shopfx.adapters.providers.static (StaticRateSource implements RateSource)
- shopfx.application.rates_service (RateTableProvider depends on RateSource)

Files that this module USES:
- shopfx.domain.models (CurrencyCode)
"""
from abc import ABC, abstractmethod
from typing import Dict

from shopfx.domain.models import CurrencyCode


class RateSource(ABC):
    name: str = "base"

    @abstractmethod
    def fetch_rates(self) -> Dict[CurrencyCode, float]:
        """
        Return a fresh table of allowed currency code -> exchange value.

        Raises:
            RateSourceError: If the source cannot produce a table
        """
        raise NotImplementedError

# src/shopfx/adapters/providers/registry.py
"""
Rate Source Registry

Maps the RATE_SOURCE setting to a concrete RateSource class.

Files that USE this module:
- shopfx.application.rates_service (build_rate_table_provider)

Files that this module USES:
- shopfx.adapters.providers.currencyapi, shopfx.adapters.providers.static
"""
from typing import Dict, Optional, Type

from shopfx.adapters.providers.base import RateSource
from shopfx.adapters.providers.currencyapi import CurrencyApiSource
from shopfx.adapters.providers.static import StaticRateSource
from shopfx.config import settings

RATE_SOURCE_REGISTRY: Dict[str, Type[RateSource]] = {
    CurrencyApiSource.name: CurrencyApiSource,
    StaticRateSource.name: StaticRateSource,
}


def make_rate_source(kind: Optional[str] = None) -> RateSource:
    """
    Build the rate source named by kind (defaults to settings.rate_source).

    Raises:
        ValueError: If kind is not registered
    """
    kind = (kind or settings.rate_source).strip().lower()
    cls = RATE_SOURCE_REGISTRY.get(kind)
    if cls is None:
        raise ValueError(f"Unknown rate source kind '{kind}'")
    return cls()

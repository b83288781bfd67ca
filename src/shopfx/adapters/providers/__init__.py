# src/shopfx/adapters/providers/__init__.py
"""
Provider Adapters - Rate Source Clients

This package contains adapters for external exchange rate sources.
All sources implement the RateSource interface.
"""

from shopfx.adapters.providers.base import RateSource
from shopfx.adapters.providers.currencyapi import CurrencyApiSource, parse_rate_payload
from shopfx.adapters.providers.static import StaticRateSource
from shopfx.adapters.providers.registry import RATE_SOURCE_REGISTRY, make_rate_source

__all__ = [
    "RateSource",
    "CurrencyApiSource",
    "StaticRateSource",
    "RATE_SOURCE_REGISTRY",
    "make_rate_source",
    "parse_rate_payload",
]

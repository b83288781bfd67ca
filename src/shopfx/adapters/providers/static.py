# src/shopfx/adapters/providers/static.py
"""
Static Rate Source

Fixed in-memory rate table for offline development, demos and tests.
"""
from typing import Dict, Mapping, Optional

from shopfx.adapters.providers.base import RateSource
from shopfx.domain.errors import InvalidRateError
from shopfx.domain.models import CurrencyCode
from shopfx.shared.validators import is_finite_number, require_currency

# Placeholder values relative to USD
_STATIC_RATES: Dict[CurrencyCode, float] = {
    CurrencyCode.USD: 1.0,
    CurrencyCode.EUR: 0.92,
    CurrencyCode.CZK: 23.1,
}


class StaticRateSource(RateSource):
    name = "static"

    def __init__(self, rates: Optional[Mapping[str, float]] = None):
        table: Dict[CurrencyCode, float] = {}
        for code, value in (rates if rates is not None else _STATIC_RATES).items():
            if not is_finite_number(value) or value <= 0:
                raise InvalidRateError(f"Rate for {code} must be a positive number, got {value!r}")
            table[require_currency(code)] = float(value)
        self._rates = table

    def fetch_rates(self) -> Dict[CurrencyCode, float]:  # type: ignore[override]
        return dict(self._rates)

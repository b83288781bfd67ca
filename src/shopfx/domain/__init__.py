# src/shopfx/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from shopfx.domain.models import (
    ALLOWED_CURRENCIES,
    CURRENCIES,
    LEDGER_CURRENCY,
    CheckoutBreakdown,
    CurrencyCode,
    CurrencyInfo,
    PaymentRounding,
    PaymentSummary,
    PriceDisplay,
    RateTable,
    RateTableStatus,
    SummaryRow,
    currency_symbol,
)
from shopfx.domain.errors import (
    DomainError,
    InvalidRateError,
    RateSourceError,
    UnsupportedCurrencyError,
)

__all__ = [
    "ALLOWED_CURRENCIES",
    "CURRENCIES",
    "LEDGER_CURRENCY",
    "CheckoutBreakdown",
    "CurrencyCode",
    "CurrencyInfo",
    "PaymentRounding",
    "PaymentSummary",
    "PriceDisplay",
    "RateTable",
    "RateTableStatus",
    "SummaryRow",
    "currency_symbol",
    "DomainError",
    "InvalidRateError",
    "RateSourceError",
    "UnsupportedCurrencyError",
]

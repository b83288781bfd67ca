# src/shopfx/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core pricing concepts:
- Supported currency codes and the currency catalog
- Rate table snapshots
- Checkout breakdowns and payment rounding results
- Price display values for product cards

All amounts persisted or transmitted by the storefront are EUR. Other
currencies only exist at the display boundary, so every converted value in
these models is derived and ephemeral.

Files that USE this module:
- shopfx.application.* (conversion, rounding, checkout, payment summary)
- shopfx.adapters.* (rate sources build rate tables, formatter reads symbols)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class CurrencyCode(str, Enum):
    """Closed set of currencies the storefront can display."""
    EUR = "EUR"
    USD = "USD"
    CZK = "CZK"


# Canonical unit of account for every stored amount
LEDGER_CURRENCY = CurrencyCode.EUR

ALLOWED_CURRENCIES: tuple[CurrencyCode, ...] = (
    CurrencyCode.EUR,
    CurrencyCode.USD,
    CurrencyCode.CZK,
)

# Exchange values relative to a single unstated base currency. May be partial.
RateTable = Mapping[CurrencyCode, float]


@dataclass(frozen=True)
class CurrencyInfo:
    """Catalog entry shown in the currency picker."""
    code: CurrencyCode
    label: str
    symbol: str


# Picker order
CURRENCIES: dict[CurrencyCode, CurrencyInfo] = {
    CurrencyCode.USD: CurrencyInfo(CurrencyCode.USD, "US Dollar", "$"),
    CurrencyCode.EUR: CurrencyInfo(CurrencyCode.EUR, "Euro", "€"),
    CurrencyCode.CZK: CurrencyInfo(CurrencyCode.CZK, "Czech Koruna", "Kč"),
}


def currency_symbol(code: CurrencyCode) -> str:
    """Return the display symbol for a currency code."""
    return CURRENCIES[CurrencyCode(code)].symbol


@dataclass(frozen=True)
class RateTableStatus:
    """
    Health of a rate table for display purposes.

    Attributes:
        available: False when no table has been fetched (or the fetch failed)
        missing: Allowed codes absent from the table (or with a zero value)
    """
    available: bool
    missing: tuple[CurrencyCode, ...] = ()

    @property
    def complete(self) -> bool:
        return self.available and not self.missing


@dataclass(frozen=True)
class PaymentRounding:
    """
    Result of rounding a converted grand total to a whole currency unit.

    Attributes:
        actual: Converted grand total before rounding
        rounded: Whole-unit amount actually charged
        difference: rounded - actual
        show_round_off: Whether the round-off row is displayed at all
        label: "Round Up", "Round Down", or None when the row is hidden
    """
    actual: float
    rounded: int
    difference: float
    show_round_off: bool
    label: Optional[str] = None


@dataclass(frozen=True)
class CheckoutBreakdown:
    """Derived checkout values for one computation. Never mutated."""
    currency: CurrencyCode

    # In EUR (ledger)
    subtotal_eur: float
    total_savings_eur: float
    coupon_discount_eur: float
    delivery_charges_eur: float
    grand_total_eur: float

    # Converted to the selected currency
    subtotal_converted: float
    total_savings_converted: float
    coupon_discount_converted: float
    delivery_charges_converted: float
    grand_total_converted: float

    # Rounded for payment
    grand_total_rounded: int
    round_off_amount: float
    amount_to_pay: int

    # Display strings
    display_subtotal: str
    display_savings: str
    display_coupon: str
    display_delivery: str
    display_grand_total: str
    display_round_off: str
    display_amount_to_pay: str

    rates_degraded: bool = False


@dataclass(frozen=True)
class SummaryRow:
    label: str
    value: str


@dataclass(frozen=True)
class PaymentSummary:
    """
    Itemized payment view: optional line rows, grand total, round-off row,
    and the whole-unit amount to pay.
    """
    currency: CurrencyCode
    rounding: PaymentRounding
    display_grand_total: str
    display_amount_to_pay: str
    display_round_off: Optional[str] = None
    rows: tuple[SummaryRow, ...] = ()
    note: Optional[str] = None
    rates_degraded: bool = False


@dataclass(frozen=True)
class PriceDisplay:
    """Current price, plus the struck-through original when discounted."""
    current: str
    original: Optional[str] = None
    has_discount: bool = False

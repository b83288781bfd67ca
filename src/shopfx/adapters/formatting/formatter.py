# src/shopfx/adapters/formatting/formatter.py
"""
Price Formatter - Display Strings for Amounts

This module renders amounts as display strings with the currency symbol
after the number ("12.50 €"). Three modes exist:

- precise (format_price): 2 decimals, sign kept, a trailing ".00" dropped
- line (format_amount): always 2 decimals, for bill rows and product prices
- whole-unit (format_rounded): nearest integer, used only for the amount
  the user actually pays

Formatting never raises on bad amounts: None, garbage strings, NaN and
infinities are shown as zero.

Files that USE this module:
- shopfx.application.checkout (display strings of the checkout breakdown)
- shopfx.application.payment_summary (rows of the itemized payment view)
- tests.test_formatter (unit tests)

Files that this module USES:
- shopfx.application.conversion (convert_from_eur for convert_and_format_price)
- shopfx.domain.models (currency symbols, PaymentSummary, PriceDisplay)
- shopfx.shared.money, shopfx.shared.validators
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from shopfx.application.conversion import convert_from_eur
from shopfx.domain.models import (
    LEDGER_CURRENCY,
    CurrencyCode,
    PaymentSummary,
    PriceDisplay,
    RateTable,
    currency_symbol,
)
from shopfx.shared.money import round_half_up
from shopfx.shared.validators import coerce_amount, parse_currency


def _symbol(currency: Any) -> str:
    # Unknown codes are never converted either, so the EUR symbol is truthful
    return currency_symbol(parse_currency(currency, default=LEDGER_CURRENCY))


def format_currency_number(value: Any) -> str:
    """
    Format a number with exactly 2 decimals, keeping the sign.

    Args:
        value: Amount (coerced to 0 when invalid)

    Returns:
        String like '12.00', '12.50', '-3.40'; values that round to zero are '0.00'
    """
    rounded = round_half_up(coerce_amount(value), 2)
    if rounded == 0:
        return "0.00"
    text = f"{abs(rounded):.2f}"
    return f"-{text}" if rounded < 0 else text


def _precise_number(value: Any) -> str:
    text = format_currency_number(value)
    if text.endswith(".00"):
        return text[:-3]
    return text


def format_price(amount: Any, currency: CurrencyCode) -> str:
    """Precise mode: '12 €', '12.50 $', '-3.40 Kč' (a trailing .00 is dropped)."""
    return f"{_precise_number(amount)} {_symbol(currency)}"


def format_amount(amount: Any, currency: CurrencyCode) -> str:
    """Line mode: always 2 decimals ('10.00 €'), used for bill rows and product prices."""
    return f"{format_currency_number(amount)} {_symbol(currency)}"


def format_rounded(amount: Any, currency: CurrencyCode) -> str:
    """Whole-unit mode: nearest integer, no decimals ever ('85 €')."""
    whole = int(round_half_up(coerce_amount(amount)))
    return f"{whole} {_symbol(currency)}"


def format_signed(amount: Any, currency: CurrencyCode) -> str:
    """
    Precise mode with an explicit sign: '+0.40 €', '-0.25 $'.

    Used for round-off rows, where the direction matters to the user.
    """
    value = coerce_amount(amount)
    magnitude = format_price(abs(value), currency)
    if _precise_number(value) == "0":
        return magnitude
    sign = "-" if value < 0 else "+"
    return f"{sign}{magnitude}"


def convert_and_format_price(
    price_eur: Any,
    currency: CurrencyCode,
    rates: Optional[RateTable] = None,
) -> str:
    """
    Convert an EUR price into the display currency and format it.

    - invalid input (None, '', non-numeric) -> zero string for the currency
    - EUR selected or no rate table -> the EUR amount with the EUR symbol
    - non-finite conversion result -> the original amount, currency symbol

    Args:
        price_eur: Price in EUR (number or numeric string)
        currency: Selected display currency
        rates: Rate table, or None

    Returns:
        Display string
    """
    amount = coerce_amount(price_eur)

    if currency == LEDGER_CURRENCY or rates is None:
        return format_amount(amount, LEDGER_CURRENCY)

    converted = convert_from_eur(amount, currency, rates)
    if not math.isfinite(converted):
        return format_amount(amount, currency)

    return format_amount(converted, currency)


def _first_price(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def get_price_display(
    item: Optional[Mapping[str, Any]],
    currency: CurrencyCode,
    rates: Optional[RateTable] = None,
) -> PriceDisplay:
    """
    Build the current/original price pair for a product or event card.

    The discounted price comes from variants[0].actual_price, actual_price or
    price; the original from variants[0].price, total_price or price.

    Args:
        item: Product payload from the backend (prices in EUR)
        currency: Selected display currency
        rates: Rate table, or None

    Returns:
        PriceDisplay; original is only set when the item is discounted
    """
    if not item:
        return PriceDisplay(current=format_amount(0, currency))

    variants = item.get("variants") or []
    first_variant = variants[0] if variants and isinstance(variants[0], Mapping) else {}

    discounted_eur = _first_price(
        first_variant.get("actual_price"), item.get("actual_price"), item.get("price")
    )
    original_eur = _first_price(
        first_variant.get("price"), item.get("total_price"), item.get("price")
    )

    current = convert_and_format_price(discounted_eur or original_eur, currency, rates)
    has_discount = bool(
        discounted_eur
        and original_eur
        and coerce_amount(discounted_eur) < coerce_amount(original_eur)
    )
    original = convert_and_format_price(original_eur, currency, rates) if has_discount else None
    return PriceDisplay(current=current, original=original, has_discount=has_discount)


def format_bill_details(summary: PaymentSummary, title: str = "Bill details") -> str:
    """
    Render an itemized payment summary as plain text lines.

    Args:
        summary: PaymentSummary from build_payment_summary
        title: First line

    Returns:
        Multi-line string: rows, Grand Total, optional round-off row,
        Amount to Pay, optional rounding note
    """
    lines = [title]
    for row in summary.rows:
        lines.append(f"{row.label}: {row.value}")
    lines.append(f"Grand Total: {summary.display_grand_total}")
    if summary.rounding.show_round_off and summary.display_round_off:
        lines.append(f"{summary.rounding.label}: {summary.display_round_off}")
    lines.append(f"Amount to Pay: {summary.display_amount_to_pay}")
    if summary.note:
        lines.append(summary.note)
    return "\n".join(lines)

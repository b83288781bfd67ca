# src/shopfx/application/payment_summary.py
"""
Payment Summary - Itemized "Bill details" View Model

Builds the itemized payment breakdown shown before payment: optional line
rows, the pre-rounding Grand Total, a Round Up / Round Down row, and the
whole-unit Amount to Pay. Rounding goes through the same round_payment()
used by the checkout aggregator, so both views always agree on what is
charged.

Files that USE this module:
- Host UI code rendering the payment breakdown
- tests.test_payment_summary (unit tests)

Files that this module USES:
- shopfx.application.conversion, shopfx.application.rounding
- shopfx.adapters.formatting.formatter (display strings)
"""
from __future__ import annotations

from typing import Any, List, Optional

from shopfx.adapters.formatting.formatter import (
    format_amount,
    format_price,
    format_rounded,
    format_signed,
)
from shopfx.application.checkout import FREE_DELIVERY
from shopfx.application.conversion import can_convert, convert_from_eur
from shopfx.application.rounding import round_payment
from shopfx.domain.models import (
    CheckoutBreakdown,
    CurrencyCode,
    PaymentRounding,
    PaymentSummary,
    RateTable,
    SummaryRow,
)
from shopfx.shared.validators import coerce_amount


def rounding_note(currency: CurrencyCode) -> str:
    code = currency.value if isinstance(currency, CurrencyCode) else str(currency)
    return f"Amount rounded to nearest whole {code} for payment convenience"


def _finish(
    currency: CurrencyCode,
    rounding: PaymentRounding,
    rows: List[SummaryRow],
    rates_degraded: bool,
) -> PaymentSummary:
    display_round_off = None
    note = None
    if rounding.show_round_off:
        display_round_off = format_signed(rounding.difference, currency)
        note = rounding_note(currency)
    return PaymentSummary(
        currency=currency,
        rounding=rounding,
        display_grand_total=format_price(rounding.actual, currency),
        display_amount_to_pay=format_rounded(rounding.rounded, currency),
        display_round_off=display_round_off,
        rows=tuple(rows),
        note=note,
        rates_degraded=rates_degraded,
    )


def build_payment_summary(
    amount_eur: Any,
    currency: CurrencyCode,
    rates: Optional[RateTable] = None,
    subtotal_eur: Any = 0,
    total_savings_eur: Any = 0,
    discount_eur: Any = 0,
    delivery_charges_eur: Any = 0,
    show_detailed_breakdown: bool = True,
) -> PaymentSummary:
    """
    Build the itemized payment view for a payable EUR amount.

    Args:
        amount_eur: Payable grand total in EUR
        currency: Selected display currency
        rates: Rate table, or None
        subtotal_eur: Subtotal row (shown when > 0)
        total_savings_eur: Savings row (shown when > 0, with a minus)
        discount_eur: Coupon row (shown when > 0, with a minus)
        delivery_charges_eur: Delivery row (always shown; 'Free' when not > 0)
        show_detailed_breakdown: Whether to include the line rows at all

    Returns:
        Immutable PaymentSummary
    """
    def display(amount: float) -> str:
        return format_amount(convert_from_eur(amount, currency, rates), currency)

    rows: List[SummaryRow] = []
    if show_detailed_breakdown:
        subtotal = coerce_amount(subtotal_eur)
        savings = coerce_amount(total_savings_eur)
        discount = coerce_amount(discount_eur)
        delivery = coerce_amount(delivery_charges_eur)
        if subtotal > 0:
            rows.append(SummaryRow("Subtotal", display(subtotal)))
        if savings > 0:
            rows.append(SummaryRow("Total Savings", f"-{display(savings)}"))
        if discount > 0:
            rows.append(SummaryRow("Coupon Discount", f"-{display(discount)}"))
        rows.append(
            SummaryRow("Delivery Charges", display(delivery) if delivery > 0 else FREE_DELIVERY)
        )

    converted = convert_from_eur(coerce_amount(amount_eur), currency, rates)
    return _finish(
        currency,
        round_payment(converted),
        rows,
        rates_degraded=not can_convert(currency, rates),
    )


def summary_from_checkout(
    breakdown: CheckoutBreakdown,
    show_detailed_breakdown: bool = True,
) -> PaymentSummary:
    """
    Adapt a CheckoutBreakdown into the itemized payment view.

    Reuses the breakdown's own display strings so the two views cannot drift.
    """
    rows: List[SummaryRow] = []
    if show_detailed_breakdown:
        if breakdown.subtotal_eur > 0:
            rows.append(SummaryRow("Subtotal", breakdown.display_subtotal))
        if breakdown.total_savings_eur > 0:
            rows.append(SummaryRow("Total Savings", breakdown.display_savings))
        if breakdown.coupon_discount_eur > 0:
            rows.append(SummaryRow("Coupon Discount", breakdown.display_coupon))
        rows.append(SummaryRow("Delivery Charges", breakdown.display_delivery))

    return _finish(
        breakdown.currency,
        round_payment(breakdown.grand_total_converted),
        rows,
        rates_degraded=breakdown.rates_degraded,
    )

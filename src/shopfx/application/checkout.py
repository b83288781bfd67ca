# src/shopfx/application/checkout.py
"""
Checkout Aggregator - Grand Total, Conversion and Payment Rounding

Combines the EUR order lines (subtotal, savings, coupon discount, delivery)
into a grand total, converts every line independently into the selected
currency, rounds the converted grand total for payment and builds the display
strings of the checkout summary.

Each line is converted on its own rather than splitting the converted total.
Because conversion is a linear scaling, the converted lines still add up to
the converted grand total within float tolerance (see converted_lines_total).

Files that USE this module:
- shopfx.application.payment_summary (summary_from_checkout)
- tests.test_checkout (unit tests)

Files that this module USES:
- shopfx.application.conversion (convert_from_eur, can_convert)
- shopfx.application.rounding (round_payment)
- shopfx.adapters.formatting.formatter (display strings)
- shopfx.shared.validators (coerce_amount)
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional

from shopfx.adapters.formatting.formatter import (
    format_amount,
    format_price,
    format_rounded,
    format_signed,
)
from shopfx.application.conversion import can_convert, convert_from_eur
from shopfx.application.rounding import round_payment
from shopfx.domain.models import CheckoutBreakdown, CurrencyCode, RateTable
from shopfx.shared.validators import coerce_amount

log = logging.getLogger(__name__)

FREE_DELIVERY = "Free"
ZERO_DISPLAY = "0"


def _deduction(amount_eur: float, converted: float, currency: CurrencyCode) -> str:
    # Savings and coupons only show a minus when something was deducted
    if amount_eur > 0:
        return f"-{format_amount(converted, currency)}"
    return ZERO_DISPLAY


def calculate_checkout(
    subtotal_eur: Any,
    total_savings_eur: Any,
    coupon_discount_eur: Any,
    delivery_charges_eur: Any,
    currency: CurrencyCode,
    rates: Optional[RateTable] = None,
) -> CheckoutBreakdown:
    """
    Compute the checkout breakdown for one set of inputs.

    Args:
        subtotal_eur: Cart subtotal in EUR
        total_savings_eur: Product savings in EUR
        coupon_discount_eur: Coupon discount in EUR
        delivery_charges_eur: Delivery charge in EUR (0 means free delivery)
        currency: Selected display currency
        rates: Rate table, or None

    Returns:
        Immutable CheckoutBreakdown
    """
    subtotal = coerce_amount(subtotal_eur)
    savings = coerce_amount(total_savings_eur)
    coupon = coerce_amount(coupon_discount_eur)
    delivery = coerce_amount(delivery_charges_eur)

    grand_total_eur = subtotal - savings - coupon + delivery

    overflowed = False

    def convert(amount_eur: float) -> float:
        nonlocal overflowed
        converted = convert_from_eur(amount_eur, currency, rates)
        if not math.isfinite(converted):
            # Non-finite conversions fall back to the EUR amount
            overflowed = True
            return amount_eur
        return converted

    subtotal_converted = convert(subtotal)
    savings_converted = convert(savings)
    coupon_converted = convert(coupon)
    delivery_converted = convert(delivery)
    grand_total_converted = convert(grand_total_eur)

    rounding = round_payment(grand_total_converted)
    rates_degraded = overflowed or not can_convert(currency, rates)
    if rates_degraded:
        log.warning(
            "Checkout shown in %s without usable rates; amounts are unconverted EUR",
            currency.value if isinstance(currency, CurrencyCode) else currency,
        )

    if rounding.show_round_off:
        display_round_off = format_signed(rounding.difference, currency)
    else:
        display_round_off = ZERO_DISPLAY

    return CheckoutBreakdown(
        currency=currency,
        subtotal_eur=subtotal,
        total_savings_eur=savings,
        coupon_discount_eur=coupon,
        delivery_charges_eur=delivery,
        grand_total_eur=grand_total_eur,
        subtotal_converted=subtotal_converted,
        total_savings_converted=savings_converted,
        coupon_discount_converted=coupon_converted,
        delivery_charges_converted=delivery_converted,
        grand_total_converted=grand_total_converted,
        grand_total_rounded=rounding.rounded,
        round_off_amount=rounding.difference,
        amount_to_pay=rounding.rounded,
        display_subtotal=format_amount(subtotal_converted, currency),
        display_savings=_deduction(savings, savings_converted, currency),
        display_coupon=_deduction(coupon, coupon_converted, currency),
        display_delivery=(
            format_amount(delivery_converted, currency) if delivery != 0 else FREE_DELIVERY
        ),
        display_grand_total=format_price(grand_total_converted, currency),
        display_round_off=display_round_off,
        display_amount_to_pay=format_rounded(rounding.rounded, currency),
        rates_degraded=rates_degraded,
    )


def converted_lines_total(breakdown: CheckoutBreakdown) -> float:
    """Recombine the converted lines; equals grand_total_converted up to float error."""
    return (
        breakdown.subtotal_converted
        - breakdown.total_savings_converted
        - breakdown.coupon_discount_converted
        + breakdown.delivery_charges_converted
    )

# src/shopfx/application/rounding.py
"""
Payment Rounding - Whole-unit Amount to Pay

The amount charged is always a whole unit of the selected currency. This is
the single rounding policy shared by the checkout aggregator and the itemized
payment view, so the displayed round-off always matches the charged amount.

Files that USE this module:
- shopfx.application.checkout (calculate_checkout)
- shopfx.application.payment_summary (build_payment_summary)
- tests.test_rounding (unit tests)

Files that this module USES:
- shopfx.shared.money (round_half_up)
- shopfx.shared.validators (coerce_amount)
"""
from __future__ import annotations

from shopfx.domain.models import PaymentRounding
from shopfx.shared.money import round_half_up
from shopfx.shared.validators import coerce_amount

# A round-off row is shown once the charged amount differs by a cent or more.
# Deltas below a cent, including float residue such as 10.01 -> 10, stay hidden.
ROUND_OFF_THRESHOLD = 0.01

ROUND_UP = "Round Up"
ROUND_DOWN = "Round Down"


def round_to_whole(value: float) -> int:
    """Round to the nearest integer, ties away from zero (84.5 -> 85, -2.5 -> -3)."""
    return int(round_half_up(coerce_amount(value)))


def round_payment(converted_total: float) -> PaymentRounding:
    """
    Round a converted grand total for payment.

    Args:
        converted_total: Grand total already converted to the display currency

    Returns:
        PaymentRounding with the whole-unit amount, the signed delta
        (rounded - actual) and the round-off row label
    """
    actual = coerce_amount(converted_total)
    rounded = round_to_whole(actual)
    difference = rounded - actual

    show_round_off = abs(difference) >= ROUND_OFF_THRESHOLD
    label = None
    if show_round_off:
        label = ROUND_UP if difference > 0 else ROUND_DOWN

    return PaymentRounding(
        actual=actual,
        rounded=rounded,
        difference=difference,
        show_round_off=show_round_off,
        label=label,
    )

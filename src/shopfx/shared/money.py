# src/shopfx/shared/money.py
"""
Money / rounding helpers.

Centralized so the formatter and the payment rounder use identical rounding
semantics. Amounts stay floats everywhere else; Decimal is only used to make
the half-up tie-break exact at the requested precision.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_QUANTS = {0: Decimal("1"), 2: Decimal("0.01")}


def round_half_up(value: float, places: int = 0) -> Decimal:
    """
    Round a finite float half away from zero (12.345 -> 12.35, -0.5 -> -1).

    The float goes through its shortest repr first, so 1.005 rounds as the
    user reads it (1.01) rather than as its binary approximation.
    """
    quant = _QUANTS.get(places) or Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Wide enough for any finite float (max ~1.8e308)
        ctx.prec = 350
        return Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP)

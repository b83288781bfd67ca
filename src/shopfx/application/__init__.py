# src/shopfx/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the pricing services:
- conversion: EUR -> display currency
- rounding: whole-unit payment rounding
- rates_service: cached rate table provider
- checkout / payment_summary: checkout aggregation and the itemized view
  (import those modules directly; they depend on the formatting adapter)
"""

from shopfx.application.conversion import can_convert, convert_from_eur, rate_table_status
from shopfx.application.rounding import ROUND_OFF_THRESHOLD, round_payment, round_to_whole
from shopfx.application.rates_service import RateTableProvider, build_rate_table_provider

__all__ = [
    "can_convert",
    "convert_from_eur",
    "rate_table_status",
    "ROUND_OFF_THRESHOLD",
    "round_payment",
    "round_to_whole",
    "RateTableProvider",
    "build_rate_table_provider",
]

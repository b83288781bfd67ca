# src/shopfx/adapters/formatting/__init__.py
"""
Formatting Adapters - Price Display Strings

This package contains the price formatting used by every display surface.
"""

from shopfx.adapters.formatting.formatter import (
    convert_and_format_price,
    format_amount,
    format_bill_details,
    format_currency_number,
    format_price,
    format_rounded,
    format_signed,
    get_price_display,
)

__all__ = [
    "convert_and_format_price",
    "format_amount",
    "format_bill_details",
    "format_currency_number",
    "format_price",
    "format_rounded",
    "format_signed",
    "get_price_display",
]

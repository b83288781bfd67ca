# src/shopfx/__init__.py
"""
shopfx - Storefront Currency Conversion and Checkout Rounding

Converts EUR ledger amounts into the shopper's selected display currency,
aggregates checkout lines into a grand total, and rounds the amount charged
to a whole currency unit with a visible round-off row.
"""

__version__ = "1.0.0"

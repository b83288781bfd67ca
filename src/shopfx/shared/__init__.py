# src/shopfx/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation and amount coercion
- TTL caching
- Logging configuration (shopfx.shared.logging_conf, imported explicitly)
"""

from shopfx.shared.validators import (
    coerce_amount,
    is_finite_number,
    parse_currency,
    require_currency,
    validate_api_key,
    validate_currency_code,
)
from shopfx.shared.ttl_cache import TTLCache

__all__ = [
    "coerce_amount",
    "is_finite_number",
    "parse_currency",
    "require_currency",
    "validate_api_key",
    "validate_currency_code",
    "TTLCache",
]

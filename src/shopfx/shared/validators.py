# src/shopfx/shared/validators.py
"""
Input Validation Utilities - Amount Coercion and Currency Parsing

This module provides the input guards used at the edges of the pricing
engine. Amounts arriving from the backend or UI may be None, strings, or
garbage; they are coerced to a finite float (0.0 when invalid) so that every
input, however malformed, still yields a displayable price.

Files that USE this module:
- shopfx.config.settings (currency and API key validation)
- shopfx.application.checkout (coerce_amount for order lines)
- shopfx.adapters.formatting.formatter (coerce_amount before formatting)
- shopfx.adapters.providers.currencyapi (is_finite_number for rate values)

Files that this module USES:
- shopfx.domain (CurrencyCode, UnsupportedCurrencyError)
"""
import math
from typing import Any, Optional

from shopfx.domain.errors import UnsupportedCurrencyError
from shopfx.domain.models import LEDGER_CURRENCY, CurrencyCode


def is_finite_number(value: Any) -> bool:
    """
    Check whether value is a real, finite number (bools excluded).

    Args:
        value: Value to check

    Returns:
        True for finite int/float values, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def coerce_amount(value: Any) -> float:
    """
    Coerce an amount to a finite float, defaulting invalid values to 0.0.

    Accepts numbers and numeric strings ("12.50", " 3 "). None, empty strings,
    non-numeric strings, bools, NaN and infinities all become 0.0.

    Args:
        value: Raw amount

    Returns:
        Finite float amount
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def validate_currency_code(code: Any) -> bool:
    """
    Validate that code names one of the supported currencies.

    Args:
        code: Currency code (case-insensitive string or CurrencyCode)

    Returns:
        True if valid, False otherwise
    """
    if isinstance(code, CurrencyCode):
        return True
    if not isinstance(code, str):
        return False
    return code.strip().upper() in CurrencyCode.__members__


def require_currency(code: Any) -> CurrencyCode:
    """
    Strictly parse a currency code.

    Raises:
        UnsupportedCurrencyError: If code is outside the allow-list
    """
    if not validate_currency_code(code):
        raise UnsupportedCurrencyError(f"Unsupported currency: {code!r}")
    if isinstance(code, CurrencyCode):
        return code
    return CurrencyCode(code.strip().upper())


def parse_currency(code: Any, default: Optional[CurrencyCode] = None) -> CurrencyCode:
    """
    Leniently parse a currency code, falling back to default when unsupported.

    Args:
        code: Currency code from external state (e.g. the user's selection)
        default: Fallback currency (defaults to the ledger currency, EUR)

    Returns:
        Parsed CurrencyCode
    """
    if validate_currency_code(code):
        return require_currency(code)
    return default if default is not None else LEDGER_CURRENCY


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not api_key.isspace()

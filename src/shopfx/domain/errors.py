# src/shopfx/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions. None of them escape the
conversion or formatting functions: adapters raise them, and the application
layer catches them at the provider boundary and degrades gracefully.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateSourceError(DomainError):
    """Raised when the rate source cannot produce a rate table."""
    pass


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class UnsupportedCurrencyError(DomainError):
    """Raised when a currency code is outside the allow-list."""
    pass

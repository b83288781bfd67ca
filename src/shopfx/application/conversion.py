# src/shopfx/application/conversion.py
"""
Currency Conversion - EUR to Display Currency

Pure conversion of ledger (EUR) amounts into the selected display currency.
A rate table that is absent or partial never blocks the UI: conversion falls
back to returning the EUR amount unchanged. Callers that must not mislabel
EUR amounts check can_convert() / rate_table_status() separately.

Files that USE this module:
- shopfx.application.checkout (converts each checkout line)
- shopfx.application.payment_summary (converts the payable total)
- shopfx.application.rates_service (rate_table_status for provider status)
- shopfx.adapters.formatting.formatter (convert_and_format_price)

Files that this module USES:
- shopfx.domain.models (CurrencyCode, RateTable, RateTableStatus)
"""
from __future__ import annotations

from typing import Optional

from shopfx.domain.models import (
    ALLOWED_CURRENCIES,
    LEDGER_CURRENCY,
    CurrencyCode,
    RateTable,
    RateTableStatus,
)


def convert_from_eur(
    amount_eur: float,
    target: CurrencyCode,
    rates: Optional[RateTable] = None,
) -> float:
    """
    Convert an EUR amount into the target currency.

    Formula: (amount_eur / rates[EUR]) * rates[target]. No rounding is
    applied; precision is kept until formatting.

    Args:
        amount_eur: Amount in EUR (assumed to be a valid number)
        target: Display currency
        rates: Rate table, or None when not fetched yet / fetch failed

    Returns:
        Converted amount, or amount_eur unchanged when target is EUR or
        either required rate is missing or zero
    """
    if target == LEDGER_CURRENCY or rates is None:
        return amount_eur

    eur_rate = rates.get(CurrencyCode.EUR)
    target_rate = rates.get(target)
    if not eur_rate or not target_rate:
        return amount_eur

    return (amount_eur / eur_rate) * target_rate


def can_convert(target: CurrencyCode, rates: Optional[RateTable] = None) -> bool:
    """True when convert_from_eur would apply real rates (or target is EUR)."""
    if target == LEDGER_CURRENCY:
        return True
    if rates is None:
        return False
    return bool(rates.get(CurrencyCode.EUR)) and bool(rates.get(target))


def rate_table_status(rates: Optional[RateTable]) -> RateTableStatus:
    """Describe which allowed currencies a rate table can serve."""
    if rates is None:
        return RateTableStatus(available=False, missing=ALLOWED_CURRENCIES)
    missing = tuple(code for code in ALLOWED_CURRENCIES if not rates.get(code))
    return RateTableStatus(available=True, missing=missing)

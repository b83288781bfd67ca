"""
Validator Tests - Unit Tests for Input Validation Utilities

This module contains unit tests for amount coercion and currency parsing.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- shopfx.shared.validators (all validation functions for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from shopfx.domain.errors import UnsupportedCurrencyError
from shopfx.domain.models import CURRENCIES, CurrencyCode, currency_symbol
from shopfx.shared.validators import (
    coerce_amount,
    is_finite_number,
    parse_currency,
    require_currency,
    validate_api_key,
    validate_currency_code,
)


class TestCoerceAmount:
    @pytest.mark.parametrize(
        "value, expected",
        [(12, 12.0), (12.5, 12.5), ("12.50", 12.5), (" 3 ", 3.0), ("-4", -4.0)],
    )
    def test_valid(self, value, expected):
        assert coerce_amount(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "abc", True, float("nan"), float("inf"), "inf", [], {}],
    )
    def test_invalid_is_zero(self, value):
        assert coerce_amount(value) == 0.0


class TestIsFiniteNumber:
    def test_numbers(self):
        assert is_finite_number(1)
        assert is_finite_number(0.5)

    def test_non_numbers(self):
        assert not is_finite_number(True)
        assert not is_finite_number("1")
        assert not is_finite_number(float("nan"))
        assert not is_finite_number(None)


class TestCurrencyParsing:
    def test_validate_currency_code(self):
        assert validate_currency_code("usd")
        assert validate_currency_code(CurrencyCode.CZK)
        assert not validate_currency_code("GBP")
        assert not validate_currency_code(None)

    def test_require_currency(self):
        assert require_currency(" czk ") is CurrencyCode.CZK
        with pytest.raises(UnsupportedCurrencyError):
            require_currency("GBP")

    def test_parse_currency_falls_back_to_eur(self):
        assert parse_currency("GBP") is CurrencyCode.EUR
        assert parse_currency(None) is CurrencyCode.EUR
        assert parse_currency("GBP", default=CurrencyCode.USD) is CurrencyCode.USD
        assert parse_currency("usd") is CurrencyCode.USD

    def test_string_enum_compares_to_plain_code(self):
        assert CurrencyCode.USD == "USD"
        assert {"USD": 1.1}[CurrencyCode.USD] == 1.1


class TestCurrencyCatalog:
    def test_symbols(self):
        assert currency_symbol(CurrencyCode.EUR) == "€"
        assert currency_symbol(CurrencyCode.USD) == "$"
        assert currency_symbol(CurrencyCode.CZK) == "Kč"

    def test_catalog_covers_allow_list(self):
        assert set(CURRENCIES) == set(CurrencyCode)
        assert CURRENCIES[CurrencyCode.CZK].label == "Czech Koruna"


class TestValidateApiKey:
    def test_valid(self):
        assert validate_api_key("cur_live_0123456789")

    def test_invalid(self):
        assert not validate_api_key("")
        assert not validate_api_key("short")
        assert not validate_api_key(" " * 12)

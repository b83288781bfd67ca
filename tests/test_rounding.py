"""
Rounding Tests - Unit Tests for Payment Rounding

This module contains unit tests for the shared payment rounding policy:
whole-unit rounding, the round-off delta and the Round Up / Round Down label.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- shopfx.application.rounding (round_payment, round_to_whole)
- shopfx.shared.money (round_half_up)
- pytest (testing framework)
"""
from decimal import Decimal

import pytest  # Testing framework for writing and running tests

from shopfx.application.rounding import (
    ROUND_DOWN,
    ROUND_UP,
    round_payment,
    round_to_whole,
)
from shopfx.shared.money import round_half_up


class TestRoundToWhole:
    @pytest.mark.parametrize(
        "value, expected",
        [(84.6, 85), (84.4, 84), (84.5, 85), (85.5, 86), (0.49, 0), (-2.5, -3), (-2.4, -2)],
    )
    def test_half_away_from_zero(self, value, expected):
        assert round_to_whole(value) == expected

    def test_invalid_is_zero(self):
        assert round_to_whole(float("nan")) == 0
        assert round_to_whole(None) == 0


class TestRoundHalfUp:
    def test_cents(self):
        assert round_half_up(1.005, 2) == Decimal("1.01")
        assert round_half_up(-1.005, 2) == Decimal("-1.01")

    def test_other_precision(self):
        assert round_half_up(1.2345, 3) == Decimal("1.235")

    def test_large_values(self):
        assert round_half_up(1e300) == Decimal("1e300")


class TestRoundPayment:
    def test_round_up(self):
        result = round_payment(84.6)
        assert result.actual == 84.6
        assert result.rounded == 85
        assert result.difference == pytest.approx(0.4)
        assert result.show_round_off
        assert result.label == ROUND_UP

    def test_round_down(self):
        result = round_payment(85.25)
        assert result.rounded == 85
        assert result.difference == pytest.approx(-0.25)
        assert result.show_round_off
        assert result.label == ROUND_DOWN

    def test_whole_amount_hides_row(self):
        result = round_payment(85.0)
        assert result.rounded == 85
        assert result.difference == 0
        assert not result.show_round_off
        assert result.label is None

    def test_below_one_cent_hides_row(self):
        result = round_payment(85.005)
        assert abs(result.difference) < 0.01
        assert not result.show_round_off
        assert result.label is None

    def test_float_residue_below_one_cent_hides_row(self):
        # 10 - 10.01 is -0.009999999999999787 in floating point
        result = round_payment(10.01)
        assert result.rounded == 10
        assert abs(result.difference) < 0.01
        assert not result.show_round_off
        assert result.label is None

    def test_one_cent_and_more_shows_row(self):
        result = round_payment(10.02)
        assert result.show_round_off
        assert result.label == ROUND_DOWN

    def test_charged_amount_is_whole(self):
        for value in (0.3, 19.99, 123.456, 9999.5):
            assert isinstance(round_payment(value).rounded, int)

    def test_delta_matches_charged_amount(self):
        result = round_payment(2123.37)
        assert result.actual + result.difference == pytest.approx(result.rounded)

    def test_invalid_total_is_zero(self):
        result = round_payment(float("inf"))
        assert result.actual == 0
        assert result.rounded == 0
        assert not result.show_round_off

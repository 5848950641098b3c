"""
Tests for Tax Comparator Data Models

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from modules.tax.models import (
    INFINITY,
    BracketTableError,
    InvalidIncomeError,
    TaxBracket,
    round_currency,
    round_rate,
    to_decimal,
    validate_brackets,
)
from modules.tax.calculators import SpainTaxCalculator


class TestValidateBrackets:

    def test_spain_schedule_is_valid(self):
        assert len(validate_brackets(SpainTaxCalculator.BRACKETS)) == 6

    def test_empty(self):
        with pytest.raises(BracketTableError, match="empty"):
            validate_brackets([])

    def test_unsorted_bounds(self):
        with pytest.raises(BracketTableError, match="not above"):
            validate_brackets([
                TaxBracket.of(20000, "0.2"),
                TaxBracket.of(10000, "0.1"),
                TaxBracket.of(math.inf, "0.3"),
            ])

    def test_duplicate_bounds(self):
        with pytest.raises(BracketTableError):
            validate_brackets([TaxBracket.of(10000, "0.1"), TaxBracket.of(10000, "0.2"), TaxBracket(INFINITY, Decimal("0.3"))])

    def test_rate_out_of_range(self):
        with pytest.raises(BracketTableError, match="outside"):
            validate_brackets([TaxBracket.of(math.inf, "1.5")])

    def test_last_bracket_must_be_open(self):
        with pytest.raises(BracketTableError, match="open-ended"):
            validate_brackets([TaxBracket.of(10000, "0.1")])

    def test_bracket_table_error_is_value_error(self):
        assert issubclass(BracketTableError, ValueError)


class TestTaxBracket:

    def test_of_accepts_math_inf(self):
        bracket = TaxBracket.of(math.inf, 0.47)
        assert bracket.is_open_ended
        assert bracket.rate == Decimal("0.47")

    def test_frozen(self):
        bracket = TaxBracket.of(12450, "0.19")
        with pytest.raises(FrozenInstanceError):
            bracket.rate = Decimal("0.5")


class TestConversionsAndRounding:

    def test_float_keeps_decimal_digits(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string_is_stripped(self):
        assert to_decimal(" 50000 ") == Decimal("50000")

    def test_invalid_income_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_decimal("n/a")
        assert issubclass(InvalidIncomeError, ValueError)

    @pytest.mark.parametrize("value,expected", [
        ("8665.5", "8666"),
        ("8665.49", "8665"),
        ("0.5", "1"),
        ("2.5", "3"),
    ])
    def test_round_currency_half_up(self, value, expected):
        assert round_currency(Decimal(value)) == Decimal(expected)

    @pytest.mark.parametrize("value,expected", [
        ("68.332", "68.3"),
        ("69.16", "69.2"),
        ("65.75", "65.8"),
    ])
    def test_round_rate(self, value, expected):
        assert round_rate(Decimal(value)) == Decimal(expected)

"""
Tests for Display Formatting

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from decimal import Decimal

from lib.formatting import format_currency, format_number, format_percentage


class TestFormatCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (50000, "50.000 €"),
        (34166, "34.166 €"),
        (1234567, "1.234.567 €"),
        (10000, "10.000 €"),
        (9999, "9999 €"),
        (5000, "5000 €"),
        (0, "0 €"),
        (-3600, "-3600 €"),
        (-50000, "-50.000 €"),
    ])
    def test_spanish_euros(self, amount, expected):
        assert format_currency(amount) == expected

    def test_rounds_half_up(self):
        assert format_currency(Decimal("8665.5")) == "8666 €"
        assert format_currency(2.5) == "3 €"

    def test_spanish_decimals(self):
        assert format_currency(Decimal("12345.678"), decimals=2) == "12.345,68 €"
        assert format_currency(1234.5, decimals=2) == "1234,50 €"

    @pytest.mark.parametrize("amount,currency,expected", [
        (50000, "USD", "$50,000"),
        (1234, "USD", "$1,234"),
        (50000, "EUR", "€50,000"),
        (-25, "USD", "-$25"),
    ])
    def test_us_locale(self, amount, currency, expected):
        assert format_currency(amount, currency=currency, locale="en-US") == expected

    def test_us_decimals(self):
        assert format_currency(1234.5, currency="EUR", locale="en-US", decimals=2) == "€1,234.50"

    def test_unknown_currency_uses_code(self):
        assert format_currency(100, currency="gbp", locale="en-US") == "GBP100"

    def test_unsupported_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            format_currency(100, locale="fr-FR")

    def test_spanish_symbol_separated_by_plain_space(self):
        text = format_currency(50000)
        assert "\xa0" not in text
        assert text.split(" ") == ["50.000", "€"]


class TestFormatNumber:

    @pytest.mark.parametrize("amount,locale,expected", [
        (1399, "es-ES", "1399"),
        (12500, "es-ES", "12.500"),
        (1399, "en-US", "1,399"),
        (-50000, "es-ES", "50.000"),
    ])
    def test_grouping(self, amount, locale, expected):
        assert format_number(amount, locale) == expected

    def test_unsupported_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            format_number(100, "de-DE")


class TestFormatPercentage:

    def test_one_decimal(self):
        assert format_percentage(Decimal("68.3")) == "68.3%"
        assert format_percentage(0) == "0.0%"

    def test_whole_number(self):
        assert format_percentage(Decimal("68.332"), decimals=0) == "68%"
        assert format_percentage(Decimal("68.5"), decimals=0) == "69%"

    def test_locale_independent_decimal_point(self):
        assert format_percentage(Decimal("65.7")) == "65.7%"

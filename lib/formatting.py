"""
Display Formatting

Locale-aware rendering of money and percentages for the comparator UI.
The calculators return Decimals; nothing in modules/ formats values.

Supported locales mirror what the funnel page shows:
- es-ES: "50.000 €" (dot grouping, plain space before the trailing symbol,
  no grouping below 10.000)
- en-US: "$50,000"

Percentages are always rendered with a decimal point ("68.3%"), as the
funnel page prints the raw rate regardless of locale.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
}

SUPPORTED_LOCALES = ("es-ES", "en-US")

# (thousands separator, decimal separator, minimum integer digits before grouping kicks in)
_LOCALE_RULES = {
    "es-ES": (".", ",", 5),
    "en-US": (",", ".", 4),
}


def _quantize(amount: Number, decimals: int) -> Decimal:
    exponent = Decimal(1).scaleb(-decimals)
    return Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)


def _check_locale(locale: str):
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale '{locale}'. Available: {', '.join(SUPPORTED_LOCALES)}")


def format_number(amount: Number, locale: str = "es-ES", decimals: int = 0) -> str:
    """
    Format |amount| with the locale's separators (no sign, no symbol).

    Raises:
        ValueError: Unknown locale
    """
    _check_locale(locale)
    thousands, decimal_sep, min_digits = _LOCALE_RULES[locale]

    value = abs(_quantize(amount, decimals))
    raw = f"{value:,.{decimals}f}"
    if len(raw.split(".")[0].replace(",", "")) < min_digits:
        raw = f"{value:.{decimals}f}"
    return raw.replace(",", "\x00").replace(".", decimal_sep).replace("\x00", thousands)


def format_currency(
    amount: Number,
    currency: str = "EUR",
    locale: str = "es-ES",
    decimals: int = 0
) -> str:
    """
    Format a monetary amount for display.

    Args:
        amount: Value to format (any numeric or numeric string)
        currency: ISO currency code (EUR, USD)
        locale: es-ES or en-US
        decimals: Fraction digits (rounded half-up)

    Raises:
        ValueError: Unknown locale
    """
    _check_locale(locale)

    value = _quantize(amount, decimals)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    sign = "-" if value < 0 else ""
    body = format_number(value, locale, decimals)

    if locale == "es-ES":
        return f"{sign}{body} {symbol}"
    return f"{sign}{symbol}{body}"


def format_percentage(value: Number, decimals: int = 1) -> str:
    """Format a percentage value already scaled to 0..100 (68.3 -> '68.3%')."""
    return f"{_quantize(value, decimals):.{decimals}f}%"

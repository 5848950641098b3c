"""
Tax Comparator Data Models

Value objects shared by every income tax calculator:
- TaxBracket: One slice of a progressive schedule
- TaxBreakdown: Result of computing one jurisdiction's burden on an income
- TaxComparison: Two breakdowns for the same income plus the savings

All objects are immutable and rebuilt on every calculation.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List, Sequence, Union

Number = Union[int, float, str, Decimal]

INFINITY = Decimal("Infinity")
ZERO = Decimal(0)


class InvalidIncomeError(ValueError):
    """Raised when an income value cannot be interpreted as a finite number."""
    pass


class BracketTableError(ValueError):
    """Raised when a bracket schedule violates the ordering invariants."""
    pass


def to_decimal(value: Number) -> Decimal:
    """
    Convert a user-supplied amount to Decimal.

    Floats go through str() so 0.1 stays 0.1.

    Raises:
        InvalidIncomeError: For non-numeric, NaN or infinite input
    """
    if isinstance(value, bool):
        raise InvalidIncomeError(f"Income must be numeric, got {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidIncomeError(f"Income must be numeric, got {value!r}") from e

    if not result.is_finite():
        raise InvalidIncomeError(f"Income must be finite, got {value!r}")
    return result


def round_currency(amount: Decimal) -> Decimal:
    """Round to whole currency units, halves away from zero."""
    return amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def round_rate(rate: Decimal) -> Decimal:
    """Round a percentage to one decimal place, halves away from zero."""
    return rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TaxBracket:
    """
    One band of a progressive schedule.

    upper_bound is the inclusive top of the band (INFINITY for the last one);
    rate is the marginal rate applied only to income inside the band.
    """

    upper_bound: Decimal
    rate: Decimal

    @classmethod
    def of(cls, upper_bound: Number, rate: Number) -> "TaxBracket":
        # str(math.inf) == 'inf', which Decimal accepts
        return cls(upper_bound=Decimal(str(upper_bound)), rate=Decimal(str(rate)))

    @property
    def is_open_ended(self) -> bool:
        return self.upper_bound == INFINITY


def validate_brackets(brackets: Sequence[TaxBracket]) -> List[TaxBracket]:
    """
    Check a bracket schedule and return it as a list.

    Rules:
    - At least one bracket
    - Upper bounds strictly ascending and positive
    - Rates within [0, 1]
    - Last bracket open-ended (INFINITY)

    Raises:
        BracketTableError: On the first violated rule
    """
    brackets = list(brackets)
    if not brackets:
        raise BracketTableError("Bracket table is empty")

    previous = ZERO
    for index, bracket in enumerate(brackets):
        if not (ZERO <= bracket.rate <= Decimal(1)):
            raise BracketTableError(f"Bracket {index}: rate {bracket.rate} outside [0, 1]")
        if bracket.upper_bound <= previous:
            raise BracketTableError(
                f"Bracket {index}: upper bound {bracket.upper_bound} not above {previous}"
            )
        previous = bracket.upper_bound

    if not brackets[-1].is_open_ended:
        raise BracketTableError("Last bracket must be open-ended (Infinity)")

    return brackets


@dataclass(frozen=True)
class TaxBreakdown:
    """
    Tax burden of one jurisdiction on a gross income.

    Components are already rounded to whole currency units and
    total_tax is their sum. effective_rate is a percentage (one decimal).
    """

    jurisdiction: str
    gross_income: Decimal
    income_tax: Decimal
    social_security: Decimal
    vat: Decimal
    total_tax: Decimal
    net_income: Decimal
    effective_rate: Decimal

    def components(self) -> dict:
        """Named components in display order."""
        return {
            "income_tax": self.income_tax,
            "social_security": self.social_security,
            "vat": self.vat,
        }


@dataclass(frozen=True)
class TaxComparison:
    """Baseline vs. alternative breakdown for one income."""

    baseline: TaxBreakdown
    alternative: TaxBreakdown
    savings: Decimal
    savings_percentage: Decimal

    @property
    def gross_income(self) -> Decimal:
        return self.baseline.gross_income

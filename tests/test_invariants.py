"""
Property-Based Tests - The Hypothesis

Uses hypothesis to verify the comparator's invariants over arbitrary incomes.

Invariants:
1. Total tax = income tax + social security + VAT (after rounding)
2. Total tax never decreases as income grows
3. Social security follows the 3,600 / 16,000 clamp
4. The US LLC baseline never owes tax
5. Same input -> identical output
6. Savings = baseline total - alternative total

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal, ROUND_HALF_UP

from hypothesis import given, strategies as st, settings

from modules.tax.calculators import SpainTaxCalculator, FlatZeroCalculator, bracket_tax
from modules.tax.comparison import compare_incomes


spain = SpainTaxCalculator()
us_llc = FlatZeroCalculator()

# Strategy for generating valid annual incomes (cents precision)
income_strategy = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("2000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False
)


@given(income=income_strategy)
@settings(max_examples=200)
def test_invariant_total_is_sum_of_components(income):
    """Invariant 1: total_tax is exactly the sum of the rounded components."""
    result = spain.compute(income)
    assert result.total_tax == result.income_tax + result.social_security + result.vat
    assert result.net_income == (income - result.total_tax).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


@given(income=income_strategy, raise_by=income_strategy)
@settings(max_examples=200)
def test_invariant_monotonic_total(income, raise_by):
    """Invariant 2: earning more never lowers the total tax."""
    assert spain.compute(income).total_tax <= spain.compute(income + raise_by).total_tax


@given(income=income_strategy)
@settings(max_examples=200)
def test_invariant_social_security_clamp(income):
    """Invariant 3: proportional levy between the floor and the ceiling."""
    proportional = income * Decimal("0.30")
    social_security = spain.compute(income).social_security

    if proportional < 3600:
        assert social_security == Decimal("3600")
    elif proportional > 16000:
        assert social_security == Decimal("16000")
    else:
        assert social_security == proportional.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


@given(income=income_strategy)
@settings(max_examples=100)
def test_invariant_us_llc_never_taxes(income):
    """Invariant 4: the pass-through baseline keeps the whole income."""
    result = us_llc.compute(income)
    assert result.total_tax == 0
    assert result.effective_rate == 0


@given(income=income_strategy)
@settings(max_examples=100)
def test_invariant_idempotent(income):
    """Invariant 5: pure function, no hidden state."""
    assert spain.compute(income) == spain.compute(income)


@given(income=income_strategy)
@settings(max_examples=100)
def test_invariant_savings_definition(income):
    """Invariant 6: savings and savings percentage follow from the two totals."""
    comparison = compare_incomes(income)
    assert comparison.savings == comparison.baseline.total_tax - comparison.alternative.total_tax
    if income > 0:
        assert comparison.savings_percentage == comparison.savings / income * 100
    else:
        assert comparison.savings_percentage == 0


@given(index=st.integers(min_value=0, max_value=len(SpainTaxCalculator.BRACKETS) - 2))
def test_invariant_bracket_continuity(index):
    """
    Tax at a bracket's upper bound equals the sum of full lower slices,
    and moving one unit past the bound only adds the next marginal rate.
    """
    brackets = SpainTaxCalculator.BRACKETS
    bound = brackets[index].upper_bound

    expected = Decimal(0)
    previous = Decimal(0)
    for bracket in brackets[:index + 1]:
        expected += (bracket.upper_bound - previous) * bracket.rate
        previous = bracket.upper_bound

    assert bracket_tax(bound, brackets) == expected
    assert bracket_tax(bound + 1, brackets) == expected + brackets[index + 1].rate


@given(income=income_strategy)
@settings(max_examples=100)
def test_invariant_effective_rate_consistent(income):
    """Effective rate is the rounded share of total tax in gross income."""
    result = spain.compute(income)
    if income > 0:
        expected = (result.total_tax / income * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        assert result.effective_rate == expected
    else:
        assert result.effective_rate == 0

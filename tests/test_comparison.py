"""
Tests for Jurisdiction Comparison

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from decimal import Decimal

from modules.tax.calculators import SpainTaxCalculator, FlatZeroCalculator
from modules.tax.comparison import (
    compare_calculators,
    compare_incomes,
    breakdown_table,
    savings_curve,
    income_range,
)


class TestCompareIncomes:

    def test_default_pair_at_50000(self):
        """
        Scenario:
        - Spain total: 34,166
        - US LLC total: 0
        - Savings: 34,166 = 68.332% of gross
        """
        comparison = compare_incomes(50000)

        assert comparison.baseline.jurisdiction == "Spain (freelancer) (ES)"
        assert comparison.alternative.jurisdiction == "US LLC (US)"
        assert comparison.savings == Decimal("34166")
        assert comparison.savings_percentage == Decimal("68.332")
        assert comparison.gross_income == Decimal("50000")

    def test_zero_income_has_no_percentage(self):
        comparison = compare_incomes(0)

        assert comparison.savings == Decimal("3600")
        assert comparison.savings_percentage == Decimal("0")

    def test_reversed_pair_gives_negative_savings(self):
        comparison = compare_incomes(50000, baseline_code="US", alternative_code="ES")
        assert comparison.savings == Decimal("-34166")

    def test_unknown_jurisdiction(self):
        with pytest.raises(ValueError, match="not found"):
            compare_incomes(50000, baseline_code="PT")

    def test_compare_calculators_with_instances(self):
        comparison = compare_calculators("75000", SpainTaxCalculator(), FlatZeroCalculator())
        assert comparison.savings == Decimal("49282")
        assert comparison.alternative.net_income == Decimal("75000")


class TestBreakdownTable:

    def test_shape_and_labels(self):
        table = breakdown_table(compare_incomes(50000))

        assert list(table.columns) == ["Spain (freelancer) (ES)", "US LLC (US)"]
        assert list(table.index) == [
            "Income tax",
            "Social security",
            "VAT",
            "Total taxes",
            "Effective rate (%)",
            "Net income",
        ]

    def test_values(self):
        table = breakdown_table(compare_incomes(50000))

        assert table.loc["Total taxes", "Spain (freelancer) (ES)"] == Decimal("34166")
        assert table.loc["Effective rate (%)", "Spain (freelancer) (ES)"] == Decimal("68.3")
        assert table.loc["Net income", "US LLC (US)"] == Decimal("50000")


class TestSavingsCurve:

    def test_funnel_slider_range(self):
        incomes = income_range(20000, 200000, 5000)
        df = savings_curve(incomes)

        assert len(df) == 37
        assert df["gross_income"].iloc[0] == 20000.0
        assert df["gross_income"].iloc[-1] == 200000.0
        assert (df["alternative_total"] == 0).all()
        assert df["savings"].is_monotonic_increasing

    def test_row_matches_single_comparison(self):
        df = savings_curve([50000])

        assert df.loc[0, "baseline_total"] == 34166.0
        assert df.loc[0, "savings_percentage"] == pytest.approx(68.332)
        assert df.loc[0, "baseline_effective_rate"] == pytest.approx(68.3)

    def test_empty_input(self):
        df = savings_curve([])
        assert df.empty
        assert "savings" in df.columns


class TestIncomeRange:

    def test_inclusive_bounds(self):
        assert income_range(0, 10, 5) == [Decimal("0"), Decimal("5"), Decimal("10")]

    def test_step_must_be_positive(self):
        with pytest.raises(ValueError, match="positive"):
            income_range(0, 10, 0)

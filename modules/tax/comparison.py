"""
Jurisdiction Comparison

Runs two calculators on the same income and derives the savings figure the
funnel page headlines, plus DataFrames for tables and charts.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import Iterable

import pandas as pd

from modules.tax.models import Number, TaxComparison, ZERO, to_decimal
from modules.tax.calculators import IncomeTaxCalculator, get_calculator
from lib.utils.logging_config import setup_logger, get_perf_logger, log_dataframe_info

logger = setup_logger(__name__)

BREAKDOWN_ROWS = [
    ("income_tax", "Income tax"),
    ("social_security", "Social security"),
    ("vat", "VAT"),
    ("total_tax", "Total taxes"),
    ("effective_rate", "Effective rate (%)"),
    ("net_income", "Net income"),
]


def compare_calculators(
    gross_income: Number,
    baseline: IncomeTaxCalculator,
    alternative: IncomeTaxCalculator
) -> TaxComparison:
    """
    Compare two regimes on one income.

    savings = baseline total - alternative total
    savings_percentage = savings / gross * 100 (0 when gross is 0)
    """
    income = to_decimal(gross_income)
    baseline_breakdown = baseline.compute(income)
    alternative_breakdown = alternative.compute(income)

    savings = baseline_breakdown.total_tax - alternative_breakdown.total_tax
    if baseline_breakdown.gross_income > 0:
        savings_percentage = savings / baseline_breakdown.gross_income * 100
    else:
        savings_percentage = ZERO

    return TaxComparison(
        baseline=baseline_breakdown,
        alternative=alternative_breakdown,
        savings=savings,
        savings_percentage=savings_percentage,
    )


def compare_incomes(
    gross_income: Number,
    baseline_code: str = "ES",
    alternative_code: str = "US"
) -> TaxComparison:
    """
    Compare two registered jurisdictions on one income.

    Raises:
        ValueError: If either jurisdiction code is unknown
    """
    return compare_calculators(
        gross_income,
        get_calculator(baseline_code),
        get_calculator(alternative_code),
    )


def breakdown_table(comparison: TaxComparison) -> pd.DataFrame:
    """
    Side-by-side breakdown, one column per jurisdiction.

    Values stay Decimal; formatting happens in the UI layer.
    """
    data = {
        comparison.baseline.jurisdiction: [
            getattr(comparison.baseline, field) for field, _ in BREAKDOWN_ROWS
        ],
        comparison.alternative.jurisdiction: [
            getattr(comparison.alternative, field) for field, _ in BREAKDOWN_ROWS
        ],
    }
    return pd.DataFrame(data, index=[label for _, label in BREAKDOWN_ROWS])


def savings_curve(
    incomes: Iterable[Number],
    baseline_code: str = "ES",
    alternative_code: str = "US"
) -> pd.DataFrame:
    """
    Totals and savings over a range of incomes (for the savings chart).

    Columns: gross_income, baseline_total, alternative_total, savings,
    savings_percentage, baseline_effective_rate. Numeric columns are floats.
    """
    baseline = get_calculator(baseline_code)
    alternative = get_calculator(alternative_code)

    rows = []
    with get_perf_logger(logger, "savings_curve", threshold_ms=100):
        for income in incomes:
            comparison = compare_calculators(income, baseline, alternative)
            rows.append({
                "gross_income": float(comparison.gross_income),
                "baseline_total": float(comparison.baseline.total_tax),
                "alternative_total": float(comparison.alternative.total_tax),
                "savings": float(comparison.savings),
                "savings_percentage": float(comparison.savings_percentage),
                "baseline_effective_rate": float(comparison.baseline.effective_rate),
            })

    df = pd.DataFrame(rows, columns=[
        "gross_income",
        "baseline_total",
        "alternative_total",
        "savings",
        "savings_percentage",
        "baseline_effective_rate",
    ])
    log_dataframe_info(logger, df, "savings_curve")
    return df


def income_range(start: Number, stop: Number, step: Number) -> list:
    """Inclusive list of incomes from start to stop (Decimal steps)."""
    start, stop, step = to_decimal(start), to_decimal(stop), to_decimal(step)
    if step <= 0:
        raise ValueError("step must be positive")

    values = []
    current = start
    while current <= stop:
        values.append(current)
        current += step
    return values

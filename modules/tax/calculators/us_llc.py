"""
US LLC Calculator (pass-through, no local tax)

Baseline comparator for a single-member LLC owned by a non-resident:
income passes through the entity and no local tax is charged.

US federal and state obligations are deliberately ignored; this mirrors
the funnel's simplified comparison and is not a statement of tax law.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import List

from modules.tax.models import Number, TaxBreakdown
from modules.tax.calculators.base import IncomeTaxCalculator, register_calculator


@register_calculator("US")
class FlatZeroCalculator(IncomeTaxCalculator):
    """Every component is zero; net income equals gross income."""

    def get_jurisdiction_name(self) -> str:
        return "US LLC"

    def get_jurisdiction_code(self) -> str:
        return "US"

    def compute(self, gross_income: Number) -> TaxBreakdown:
        income = self._normalize_income(gross_income)
        return self._zero_breakdown(income)

    def get_assumptions(self) -> List[str]:
        return [
            "Pass-through entity income: no local income tax, social security or VAT",
            "US federal and state taxes not modelled",
        ]

"""
Spanish Freelancer Tax Calculator (Autónomo)

Approximates the yearly burden of a self-employed person in Spain:
- IRPF: progressive income tax, 19% to 47% over six brackets
- Social security (cuota de autónomos): 30% of gross income,
  at least €3,600 and at most €16,000 per year, deductible from the IRPF base
- IVA: 21% of gross income, treated as fully VAT-liable revenue

This is the marketing comparator's simplification, not a tax filing tool.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import List

from modules.tax.calculators.base import register_calculator
from modules.tax.calculators.progressive import ProgressiveTaxCalculator


@register_calculator("ES")
class SpainTaxCalculator(ProgressiveTaxCalculator):
    """
    Tax calculator for a Spanish freelancer.

    Key Rules:
    - Social security first, clamped to [€3,600, €16,000]
    - IRPF brackets apply to gross minus social security
    - IVA on the full gross income

    Rates are the ProgressiveTaxCalculator defaults; this class registers them as "ES".
    This subclass only adds the Spanish naming.
    """

    JURISDICTION_NAME = "Spain (freelancer)"
    JURISDICTION_CODE = "ES"

    def get_assumptions(self) -> List[str]:
        return super().get_assumptions() + [
            "IVA counted as a cost on all revenue (no input VAT recovered)",
            "No personal allowances, deductible expenses or regional variations",
        ]

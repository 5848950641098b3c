"""
Progressive Income Tax Calculator

Generic engine for regimes built from:
- A progressive bracket schedule on the taxable base
- A flat social-security levy on gross income, clamped to a floor/ceiling
  and deducted from the base before brackets apply
- A flat consumption levy (VAT-like) on gross income

The class defaults are the Spanish freelancer figures; spain.py registers
them under "ES". Other schedules are passed to the constructor.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import List, Optional, Sequence

from modules.tax.models import (
    INFINITY,
    ZERO,
    Number,
    TaxBracket,
    TaxBreakdown,
    round_currency,
    round_rate,
    validate_brackets,
)
from modules.tax.calculators.base import IncomeTaxCalculator
from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)


def bracket_tax(taxable_income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    """
    Apply marginal rates slice by slice, lowest bracket first.

    Each bracket only taxes the part of the income between the previous
    bound and its own. Negative taxable income is treated as zero.

    Returns:
        Unrounded tax amount
    """
    remaining = max(taxable_income, ZERO)
    previous_limit = ZERO
    tax = ZERO

    for bracket in brackets:
        taxable_in_bracket = min(remaining, bracket.upper_bound - previous_limit)
        if taxable_in_bracket > 0:
            tax += taxable_in_bracket * bracket.rate
            remaining -= taxable_in_bracket
        previous_limit = bracket.upper_bound
        if remaining <= 0:
            break

    return tax


class ProgressiveTaxCalculator(IncomeTaxCalculator):
    """
    Bracketed income tax plus flat social-security and consumption levies.

    Defaults to the Spanish freelancer schedule (IRPF 19% to 47%, social
    security 30% clamped to [3600, 16000], VAT 21%). Constructor arguments
    replace any part of it for ad-hoc schedules.
    Each component is rounded to whole units before summing.
    """

    JURISDICTION_NAME = "Progressive schedule"
    JURISDICTION_CODE = "CUSTOM"

    # IRPF state + regional scale, combined
    BRACKETS: Sequence[TaxBracket] = (
        TaxBracket(Decimal("12450"), Decimal("0.19")),
        TaxBracket(Decimal("20200"), Decimal("0.24")),
        TaxBracket(Decimal("35200"), Decimal("0.30")),
        TaxBracket(Decimal("60000"), Decimal("0.37")),
        TaxBracket(Decimal("300000"), Decimal("0.45")),
        TaxBracket(INFINITY, Decimal("0.47")),
    )

    SOCIAL_SECURITY_RATE = Decimal("0.30")
    SOCIAL_SECURITY_MINIMUM = Decimal("3600")
    SOCIAL_SECURITY_MAXIMUM = Decimal("16000")

    VAT_RATE = Decimal("0.21")

    def __init__(
        self,
        brackets: Optional[Sequence[TaxBracket]] = None,
        social_security_rate: Optional[Number] = None,
        social_security_minimum: Optional[Number] = None,
        social_security_maximum: Optional[Number] = None,
        vat_rate: Optional[Number] = None,
    ):
        """
        Args:
            brackets: Ascending schedule ending in an open-ended bracket
            social_security_rate: Share of gross income paid as social security
            social_security_minimum: Floor of the social-security levy
            social_security_maximum: Ceiling of the social-security levy
            vat_rate: Consumption levy rate on gross income

        Raises:
            BracketTableError: If the schedule is malformed
            ValueError: If the levy floor exceeds its ceiling
        """
        self.brackets: List[TaxBracket] = validate_brackets(
            self.BRACKETS if brackets is None else brackets
        )
        self.social_security_rate = self._param(social_security_rate, self.SOCIAL_SECURITY_RATE)
        self.social_security_minimum = self._param(social_security_minimum, self.SOCIAL_SECURITY_MINIMUM)
        self.social_security_maximum = self._param(social_security_maximum, self.SOCIAL_SECURITY_MAXIMUM)
        self.vat_rate = self._param(vat_rate, self.VAT_RATE)

        if self.social_security_minimum > self.social_security_maximum:
            raise ValueError(
                f"Social security floor {self.social_security_minimum} exceeds "
                f"ceiling {self.social_security_maximum}"
            )

    @staticmethod
    def _param(value: Optional[Number], default: Decimal) -> Decimal:
        return default if value is None else Decimal(str(value))

    def get_jurisdiction_name(self) -> str:
        return self.JURISDICTION_NAME

    def get_jurisdiction_code(self) -> str:
        return self.JURISDICTION_CODE

    def social_security_levy(self, gross_income: Decimal) -> Decimal:
        """Proportional levy clamped to [minimum, maximum]."""
        proportional = gross_income * self.social_security_rate
        return min(max(proportional, self.social_security_minimum), self.social_security_maximum)

    def compute(self, gross_income: Number) -> TaxBreakdown:
        """
        Calculate the tax burden on a gross annual income.

        Order matters for reproducibility:
        1. Social security on gross (clamped)
        2. Brackets on gross minus social security
        3. VAT on gross
        4. Round each component, then sum
        """
        income = self._normalize_income(gross_income)

        social_security = self.social_security_levy(income)
        taxable_income = max(income - social_security, ZERO)
        income_tax = bracket_tax(taxable_income, self.brackets)
        vat = income * self.vat_rate

        income_tax = round_currency(income_tax)
        social_security = round_currency(social_security)
        vat = round_currency(vat)

        total_tax = income_tax + social_security + vat
        net_income = round_currency(income - total_tax)

        if income > 0:
            effective_rate = round_rate(total_tax / income * 100)
        else:
            effective_rate = ZERO

        logger.debug(
            f"gross={income} taxable={taxable_income} income_tax={income_tax} "
            f"social_security={social_security} vat={vat} total={total_tax}",
            extra={"calc_context": f"[jurisdiction={self.get_jurisdiction_code()}]"},
        )

        return TaxBreakdown(
            jurisdiction=self.label(),
            gross_income=income,
            income_tax=income_tax,
            social_security=social_security,
            vat=vat,
            total_tax=total_tax,
            net_income=net_income,
            effective_rate=effective_rate,
        )

    def get_assumptions(self) -> List[str]:
        top = self.brackets[-1].rate * 100
        return [
            f"Progressive income tax from {self.brackets[0].rate * 100:.0f}% to {top:.0f}% "
            f"over {len(self.brackets)} brackets",
            f"Social security: {self.social_security_rate * 100:.0f}% of gross income, "
            f"min €{self.social_security_minimum:,.0f}, max €{self.social_security_maximum:,.0f}",
            "Social security is deducted before brackets apply",
            f"VAT: {self.vat_rate * 100:.0f}% of gross income",
            "Each component rounded to whole euros before totalling",
        ]

"""
Tax Comparator - Usage Example

Demonstrates the Spain vs. US LLC comparison for the funnel's income presets.

Run from the project root:
    python -m examples.tax_comparator_demo

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from functools import partial

from modules.tax.calculators import get_calculator
from modules.tax.comparison import compare_incomes
from lib.config import load_settings
from lib.formatting import format_currency, format_percentage


def main():
    """Print the comparison for every configured preset."""
    settings = load_settings()
    money = partial(format_currency, currency=settings.currency, locale=settings.locale)

    print("=" * 70)
    print("Spanish Freelancer vs. US LLC - Demo")
    print("=" * 70)
    print()

    for income in settings.income_presets:
        comparison = compare_incomes(
            income,
            settings.baseline_jurisdiction,
            settings.alternative_jurisdiction
        )
        spain = comparison.baseline

        print(f"Gross income: {money(income)}")
        print(f"  IRPF:            {money(spain.income_tax):>14}")
        print(f"  Social security: {money(spain.social_security):>14}")
        print(f"  IVA:             {money(spain.vat):>14}")
        print(f"  Total taxes:     {money(spain.total_tax):>14}  ({format_percentage(spain.effective_rate)})")
        print(f"  Net in Spain:    {money(spain.net_income):>14}")
        print(f"  Net with LLC:    {money(comparison.alternative.net_income):>14}")
        print(f"  Savings:         {money(comparison.savings):>14}  "
              f"({format_percentage(comparison.savings_percentage, decimals=0)})")
        print()

    print("=" * 70)
    print("ASSUMPTIONS")
    print("=" * 70)
    for code in (settings.baseline_jurisdiction, settings.alternative_jurisdiction):
        calculator = get_calculator(code)
        print(f"{calculator.get_jurisdiction_name()}:")
        for assumption in calculator.get_assumptions():
            print(f"  • {assumption}")
    print()


if __name__ == "__main__":
    main()

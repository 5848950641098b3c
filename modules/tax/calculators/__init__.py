"""
Income Tax Calculator System

Provides jurisdiction-specific income tax calculators for the comparator.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .base import IncomeTaxCalculator, get_calculator, list_available_jurisdictions, register_calculator
from .progressive import ProgressiveTaxCalculator, bracket_tax
from .spain import SpainTaxCalculator
from .us_llc import FlatZeroCalculator

__all__ = [
    "IncomeTaxCalculator",
    "ProgressiveTaxCalculator",
    "SpainTaxCalculator",
    "FlatZeroCalculator",
    "bracket_tax",
    "get_calculator",
    "list_available_jurisdictions",
    "register_calculator",
]

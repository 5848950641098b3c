"""
Abstract Base Class for Income Tax Calculators

Defines the interface every jurisdiction calculator implements.
Each calculator takes a gross annual income and produces a TaxBreakdown.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List, Type

from modules.tax.models import Number, TaxBreakdown, round_currency, to_decimal, ZERO
from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)


class IncomeTaxCalculator(ABC):
    """
    Abstract base class for jurisdiction-specific income tax calculators.

    Calculators are stateless: compute() is pure and may be called
    repeatedly (e.g. on every slider move) with identical results.
    """

    @abstractmethod
    def compute(self, gross_income: Number) -> TaxBreakdown:
        """
        Calculate the tax burden on a gross annual income.

        Args:
            gross_income: Annual income in currency units (expected >= 0)

        Returns:
            TaxBreakdown with rounded components
        """
        pass

    @abstractmethod
    def get_jurisdiction_name(self) -> str:
        """
        Return the human-readable name of this regime.

        Returns:
            Name (e.g., "Spain (freelancer)", "US LLC")
        """
        pass

    @abstractmethod
    def get_jurisdiction_code(self) -> str:
        """
        Return the registry code for this regime.

        Returns:
            Code (e.g., "ES", "US")
        """
        pass

    def get_assumptions(self) -> List[str]:
        """Human-readable simplifications behind the figures."""
        return []

    def label(self) -> str:
        return f"{self.get_jurisdiction_name()} ({self.get_jurisdiction_code()})"

    def _normalize_income(self, gross_income: Number) -> Decimal:
        income = to_decimal(gross_income)
        if income < 0:
            # Out of contract; computed anyway so UI callers never crash
            logger.warning(f"{self.get_jurisdiction_code()}: negative income {income} passed to compute()")
        return income

    def _zero_breakdown(self, income: Decimal) -> TaxBreakdown:
        """Breakdown where nothing is owed and the full income is kept."""
        return TaxBreakdown(
            jurisdiction=self.label(),
            gross_income=income,
            income_tax=ZERO,
            social_security=ZERO,
            vat=ZERO,
            total_tax=ZERO,
            net_income=round_currency(income),
            effective_rate=ZERO,
        )


# Registry of available calculators
_CALCULATOR_REGISTRY: Dict[str, Type[IncomeTaxCalculator]] = {}


def register_calculator(jurisdiction_code: str):
    """
    Decorator to register a calculator class.

    Usage:
        @register_calculator("ES")
        class SpainTaxCalculator(ProgressiveTaxCalculator):
            ...
    """
    def decorator(cls: Type[IncomeTaxCalculator]):
        _CALCULATOR_REGISTRY[jurisdiction_code.upper()] = cls
        return cls
    return decorator


def get_calculator(jurisdiction_code: str) -> IncomeTaxCalculator:
    """
    Factory method to get a calculator instance.

    Args:
        jurisdiction_code: Registry code (e.g., "ES", "us")

    Returns:
        Instance of the registered IncomeTaxCalculator subclass

    Raises:
        ValueError: If the jurisdiction is not supported
    """
    code = jurisdiction_code.upper()

    if code not in _CALCULATOR_REGISTRY:
        available = ", ".join(sorted(_CALCULATOR_REGISTRY.keys()))
        raise ValueError(
            f"Tax calculator for '{jurisdiction_code}' not found. "
            f"Available: {available}"
        )

    return _CALCULATOR_REGISTRY[code]()


def list_available_jurisdictions() -> List[str]:
    """
    Get list of all supported jurisdictions.

    Returns:
        Sorted registry codes (e.g., ["ES", "US"])
    """
    return sorted(_CALCULATOR_REGISTRY.keys())

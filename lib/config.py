"""
Comparator Settings

Defaults for the funnel page (income presets, slider range, locale and the
two jurisdictions being compared). Values can be overridden through
TAX_COMPARATOR_* environment variables.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from decimal import Decimal
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)

ENV_PREFIX = "TAX_COMPARATOR_"


class ComparatorSettings(BaseModel):
    """Validated settings for the tax comparator page."""

    default_income: Decimal = Decimal("50000")
    slider_min: Decimal = Decimal("20000")
    slider_max: Decimal = Decimal("200000")
    slider_step: Decimal = Decimal("5000")
    income_presets: List[Decimal] = Field(
        default_factory=lambda: [Decimal(v) for v in ("30000", "50000", "75000", "100000", "150000")]
    )

    locale: str = "es-ES"
    currency: str = "EUR"

    baseline_jurisdiction: str = "ES"
    alternative_jurisdiction: str = "US"

    @field_validator('income_presets', mode='before')
    @classmethod
    def parse_presets(cls, v):
        """Accept '30000,50000' as well as a list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(',') if item.strip()]
        return v

    @field_validator('baseline_jurisdiction', 'alternative_jurisdiction', 'currency')
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator('slider_step')
    @classmethod
    def positive_step(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("slider_step must be positive")
        return v

    @model_validator(mode='after')
    def check_ranges(self):
        if self.slider_min < 0:
            raise ValueError("slider_min cannot be negative")
        if self.slider_min >= self.slider_max:
            raise ValueError(
                f"slider_min ({self.slider_min}) must be below slider_max ({self.slider_max})"
            )
        if not (self.slider_min <= self.default_income <= self.slider_max):
            raise ValueError(
                f"default_income {self.default_income} outside slider range "
                f"{self.slider_min}-{self.slider_max}"
            )
        if self.income_presets != sorted(self.income_presets):
            raise ValueError("income_presets must be sorted ascending")
        for preset in self.income_presets:
            if not (self.slider_min <= preset <= self.slider_max):
                raise ValueError(f"Preset {preset} outside slider range")
        return self


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ComparatorSettings:
    """
    Build settings from defaults plus TAX_COMPARATOR_* overrides.

    Example: TAX_COMPARATOR_DEFAULT_INCOME=75000, TAX_COMPARATOR_INCOME_PRESETS=40000,80000

    Raises:
        pydantic.ValidationError: If an override is invalid
    """
    if environ is None:
        environ = os.environ

    overrides = {}
    for field_name in ComparatorSettings.model_fields:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        if env_key in environ:
            overrides[field_name] = environ[env_key]

    if overrides:
        logger.info(f"Settings overrides from environment: {sorted(overrides)}")

    return ComparatorSettings(**overrides)

"""
LLC Pricing Catalogue

Formation and annual maintenance prices per state, plus add-on services.
The state comparison table on the funnel page is built from here.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from typing import Dict

import pandas as pd

from lib.formatting import format_number
from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class FormationPlan:
    state: str
    price: int
    currency: str
    processing_days: str


@dataclass(frozen=True)
class MaintenancePlan:
    state: str
    price: int
    currency: str


@dataclass(frozen=True)
class AdditionalService:
    name: str
    price: int
    currency: str
    duration_minutes: int = 0


FORMATION: Dict[str, FormationPlan] = {
    "new_mexico": FormationPlan("New Mexico", 739, "EUR", "2-3"),
    "wyoming": FormationPlan("Wyoming", 899, "EUR", "2-3"),
    "delaware": FormationPlan("Delaware", 1399, "EUR", "3-5"),
}

MAINTENANCE: Dict[str, MaintenancePlan] = {
    "new_mexico": MaintenancePlan("New Mexico", 539, "EUR"),
    "wyoming": MaintenancePlan("Wyoming", 699, "EUR"),
    "delaware": MaintenancePlan("Delaware", 999, "EUR"),
}

ADDITIONAL_SERVICES: Dict[str, AdditionalService] = {
    "consultation": AdditionalService("Consultation", 120, "EUR", duration_minutes=30),
    "dissolution": AdditionalService("Dissolution", 350, "EUR"),
}

# Shown as badges in the comparison table
STATE_BADGES = {
    "new_mexico": "Popular",
    "wyoming": "Premium",
    "delaware": "Startups",
}

# "Ideal for" row of the comparison table
STATE_IDEAL_FOR = {
    "new_mexico": "Freelancers and digital nomads on a budget",
    "wyoming": "Privacy and asset protection",
    "delaware": "Startups raising investment",
}


def _lookup(catalogue: dict, name: str, kind: str = "state"):
    key = name.strip().lower().replace(" ", "_").replace("-", "_")
    if key not in catalogue:
        logger.warning(f"Pricing lookup for unknown {kind}: {name}")
        raise KeyError(f"Unknown {kind} '{name}'. Available: {', '.join(catalogue)}")
    return catalogue[key]


def format_price(price: int, currency: str = "EUR") -> str:
    """
    Catalogue price label: '739€' / '1399€' for EUR, '$1,399' otherwise.

    EUR labels use es-ES grouping (none below 10.000) with the symbol attached.
    """
    if currency.upper() == "EUR":
        return f"{format_number(price, 'es-ES')}€"
    return f"${format_number(price, 'en-US')}"


def get_formation_price(state: str) -> int:
    return _lookup(FORMATION, state).price


def get_maintenance_price(state: str) -> int:
    return _lookup(MAINTENANCE, state).price


def get_additional_service_price(service: str) -> int:
    return _lookup(ADDITIONAL_SERVICES, service, kind="service").price


def get_formation_price_formatted(state: str) -> str:
    plan = _lookup(FORMATION, state)
    return format_price(plan.price, plan.currency)


def get_maintenance_price_formatted(state: str) -> str:
    plan = _lookup(MAINTENANCE, state)
    return format_price(plan.price, plan.currency)


def get_additional_service_price_formatted(service: str) -> str:
    item = _lookup(ADDITIONAL_SERVICES, service, kind="service")
    return format_price(item.price, item.currency)


def state_comparison_table() -> pd.DataFrame:
    """One row per state: badge, formation/maintenance price, processing time, ideal use."""
    rows = []
    for key, plan in FORMATION.items():
        rows.append({
            "State": plan.state,
            "Badge": STATE_BADGES.get(key, ""),
            "Formation": get_formation_price_formatted(key),
            "Annual maintenance": get_maintenance_price_formatted(key),
            "Processing (days)": plan.processing_days,
            "Privacy": True,
            "No state income tax": True,
            "Ideal for": STATE_IDEAL_FOR.get(key, ""),
        })
    return pd.DataFrame(rows)

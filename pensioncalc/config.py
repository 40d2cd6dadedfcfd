"""Pension rules, validation bounds and app-wide settings."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict


class PensionRules(BaseModel):
    """UK pension rules the calculators are parameterised with.

    Defaults follow the current UK rules; pass a different instance to test
    against rule changes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tax_free_lump_sum_rate: float = 0.25
    max_tax_free_lump: float = 268275.0
    safe_withdrawal_rate: float = 0.04

    min_pension_age: int = 55
    max_pension_age: int = 75
    state_pension_age: int = 67
    target_age: int = 100


class ValidationBounds(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    min_user_age: int = 18
    max_user_age: int = 75
    max_pension_pot: float = 10_000_000
    max_monthly_contribution: float = 100_000
    max_growth_percent: float = 15
    max_inflation_percent: float = 5


class Scenario(str, Enum):
    WEAK = "weak"
    AVERAGE = "average"
    STRONG = "strong"


class ScenarioRate(BaseModel):
    """One growth-rate assumption. Only id and rate matter to the calculators."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Scenario
    rate: float
    label: str = ""
    color: str = ""


UK_PENSION_RULES = PensionRules()
DEFAULT_BOUNDS = ValidationBounds()

# Ordered weak -> strong
DEFAULT_SCENARIOS: Tuple[ScenarioRate, ...] = (
    ScenarioRate(id=Scenario.WEAK, rate=0.02, label="Weak Growth (2%)", color="#dc3545"),
    ScenarioRate(id=Scenario.AVERAGE, rate=0.05, label="Average Growth (5%)", color="#667eea"),
    ScenarioRate(id=Scenario.STRONG, rate=0.08, label="Strong Growth (8%)", color="#28a745"),
)

DEFAULT_GROWTH_RATE = 0.05
DEFAULT_INFLATION_RATE = 0.025


def default_settings() -> Dict[str, Any]:
    """Flask settings; each key can be overridden with a PENSIONCALC_* env var."""
    return {
        "CORS_ORIGINS": [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        "JSON_SORT_KEYS": False,
    }

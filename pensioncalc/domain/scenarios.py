"""Scenario lists built from user-entered percentages and fees."""

from __future__ import annotations

from typing import List

from pensioncalc.config import Scenario, ScenarioRate

_COLORS = {
    Scenario.WEAK: "#dc3545",
    Scenario.AVERAGE: "#667eea",
    Scenario.STRONG: "#28a745",
}


def total_fee_percent(platform: float = 0.0, fund: float = 0.0, adviser: float = 0.0) -> float:
    """Combined annual fee as a percentage, e.g. 0.40."""
    return round(platform + fund + adviser, 2)


def apply_fee_to_rate(gross_rate: float, fee_percent: float) -> float:
    """Net growth rate (decimal) after fees; never below zero."""
    return max(0.0, gross_rate - fee_percent / 100)


def _label(name: str, percent: float, fee_percent: float) -> str:
    if fee_percent > 0:
        return f"{name} Growth ({percent:g}% − {fee_percent:g}% fees)"
    return f"{name} Growth ({percent:g}%)"


def scenarios_from_percentages(
    weak: float,
    average: float,
    strong: float,
    fee_percent: float = 0.0,
) -> List[ScenarioRate]:
    """
    Build the weak/average/strong list from percentages (5 means 5%), with
    fees already deducted from each rate.

    Ordering is checked on the gross percentages. A fee larger than the
    lower rates floors them all at 0, so two scenarios can end up with the
    same net rate.
    """
    out: List[ScenarioRate] = []
    for scenario, name, percent in (
        (Scenario.WEAK, "Weak", weak),
        (Scenario.AVERAGE, "Average", average),
        (Scenario.STRONG, "Strong", strong),
    ):
        out.append(
            ScenarioRate(
                id=scenario,
                rate=apply_fee_to_rate(percent / 100, fee_percent),
                label=_label(name, percent, fee_percent),
                color=_COLORS[scenario],
            )
        )
    return out

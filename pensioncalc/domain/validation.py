from __future__ import annotations

from typing import List, Optional

from pensioncalc.config import DEFAULT_BOUNDS, UK_PENSION_RULES, PensionRules, ValidationBounds


class PlanValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_inputs(
    current_age: int,
    retirement_age: int,
    current_pot: float,
    monthly_contribution: float,
    growth_percent: float,
    inflation_percent: Optional[float] = None,
    life_expectancy: Optional[int] = None,
    rules: PensionRules = UK_PENSION_RULES,
    bounds: ValidationBounds = DEFAULT_BOUNDS,
) -> List[str]:
    """Collect every business-rule violation; an empty list means valid."""
    errors: List[str] = []

    if current_age < bounds.min_user_age:
        errors.append(f"You must be at least {bounds.min_user_age} years old")
    if current_age > bounds.max_user_age:
        errors.append("Please enter a valid date of birth")
    if retirement_age <= current_age:
        errors.append("Retirement age must be in the future")
    if retirement_age < rules.min_pension_age:
        errors.append(f"UK minimum pension access age is {rules.min_pension_age}")
    if retirement_age > rules.max_pension_age:
        errors.append(f"Please choose a retirement age under {rules.max_pension_age}")
    if current_pot < 0 or current_pot > bounds.max_pension_pot:
        errors.append(f"Pension pot must be between £0 and £{bounds.max_pension_pot:,.0f}")
    if monthly_contribution < 0 or monthly_contribution > bounds.max_monthly_contribution:
        errors.append(
            f"Monthly contribution must be between £0 and £{bounds.max_monthly_contribution:,.0f}"
        )
    if growth_percent < 0 or growth_percent > bounds.max_growth_percent:
        errors.append(f"Investment growth rate must be between 0% and {bounds.max_growth_percent:g}%")
    if inflation_percent is not None and (
        inflation_percent < 0 or inflation_percent > bounds.max_inflation_percent
    ):
        errors.append(f"Inflation rate must be between 0% and {bounds.max_inflation_percent:g}%")
    if life_expectancy is not None and life_expectancy <= retirement_age:
        errors.append("Life expectancy must be after retirement age")

    return errors


def validate_scenario_rates(weak: float, average: float, strong: float) -> List[str]:
    if weak < average < strong:
        return []
    return ["Scenario growth rates must satisfy weak < average < strong"]


def ensure_valid(errors: List[str]) -> None:
    if errors:
        raise PlanValidationError(errors)

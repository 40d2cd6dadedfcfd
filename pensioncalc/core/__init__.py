"""Pure calculators: no I/O, no shared state, plain numbers in and out."""

from pensioncalc.core.drawdown import (
    DrawdownResult,
    DrawdownYearResult,
    ScenarioDrawdowns,
    StackingBands,
    compute_stacking_bands,
    find_depletion_age,
    simulate_all_scenarios,
    simulate_drawdown,
)
from pensioncalc.core.income_projection import IncomeResult, project_income
from pensioncalc.core.inflation import (
    InflationAdjustedIncome,
    RealValueSnapshot,
    adjust_series_for_inflation,
    inflation_adjusted_income,
    to_nominal_value,
    to_real_value,
)
from pensioncalc.core.pension_projection import ProjectionResult, YearSnapshot, project_pension
from pensioncalc.core.retirement_income import (
    MAX_SPEND_SEARCH_ITERATIONS,
    MaxSpendResult,
    RetirementStatus,
    SpendingPlanResult,
    SpendingPlanYear,
    max_sustainable_spend,
    plan_spending,
    retirement_status,
)

__all__ = [
    "DrawdownResult",
    "DrawdownYearResult",
    "ScenarioDrawdowns",
    "StackingBands",
    "compute_stacking_bands",
    "find_depletion_age",
    "simulate_all_scenarios",
    "simulate_drawdown",
    "IncomeResult",
    "project_income",
    "InflationAdjustedIncome",
    "RealValueSnapshot",
    "adjust_series_for_inflation",
    "inflation_adjusted_income",
    "to_nominal_value",
    "to_real_value",
    "ProjectionResult",
    "YearSnapshot",
    "project_pension",
    "MAX_SPEND_SEARCH_ITERATIONS",
    "MaxSpendResult",
    "RetirementStatus",
    "SpendingPlanResult",
    "SpendingPlanYear",
    "max_sustainable_spend",
    "plan_spending",
    "retirement_status",
]

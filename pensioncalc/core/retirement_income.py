"""
Spending plan analysis and maximum sustainable withdrawal.

Mode A (plan_spending) checks whether a fixed annual spend lasts until life
expectancy. Mode B (max_sustainable_spend) binary-searches for the largest
spend that does.
"""

from __future__ import annotations

from typing import Callable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

# Fixed iteration count keeps results deterministic to the penny.
MAX_SPEND_SEARCH_ITERATIONS = 20
MAX_SPEND_BALANCE_TOLERANCE = -100.0


class SpendingPlanYear(BaseModel):
    model_config = ConfigDict(extra="forbid")

    year: int
    age: int
    potAtStart: float
    annualSpend: float
    otherIncome: float
    withdrawal: float
    potAtEnd: float
    moneyRunsOut: bool


class SpendingPlanResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["spending-plan"] = "spending-plan"
    moneyLasts: bool
    ageWhenRunsOut: Optional[int] = None
    finalBalance: float
    totalSpent: float
    yearByYear: List[SpendingPlanYear]


class MaxSpendResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    maxAnnualSpend: float
    maxMonthlySpend: float
    projection: SpendingPlanResult


class RetirementStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["success", "warning"]
    message: str
    ageWhenRunsOut: Optional[int] = None


def plan_spending(
    starting_pot: float,
    annual_spend: float,
    retirement_age: int,
    life_expectancy: int,
    growth_rate: float,
    inflation_rate: float,
    get_other_income_at_age: Optional[Callable[[int], float]] = None,
) -> SpendingPlanResult:
    """
    Year-by-year check of a fixed spending plan.

    Per year:
      1) Inflate the spend by (1 + inflation)^(year - 1) when inflation > 0.
      2) Offset it by other income at this age (taken as already nominal).
      3) Grow the pot for the year, then take the withdrawal.
    Stops once the pot is empty; the pot never goes below zero.
    """
    retirement_years = life_expectancy - retirement_age

    pot = float(starting_pot)
    total_spent = 0.0
    money_runs_out = False
    age_when_runs_out: Optional[int] = None
    rows: List[SpendingPlanYear] = []

    year = 1
    while year <= retirement_years and pot > 0:
        age = retirement_age + year - 1

        yearly_spend = annual_spend
        if inflation_rate > 0:
            yearly_spend = annual_spend * (1 + inflation_rate) ** (year - 1)

        other_income = get_other_income_at_age(age) if get_other_income_at_age is not None else 0.0
        withdrawal = max(0.0, yearly_spend - other_income)

        year_start = pot
        # same result as twelve monthly steps at (1 + g)^(1/12) - 1
        pot = pot * (1 + growth_rate)
        pot -= withdrawal
        total_spent += withdrawal

        if pot < 0:
            if not money_runs_out:
                age_when_runs_out = age
            money_runs_out = True
            pot = 0.0

        rows.append(
            SpendingPlanYear(
                year=year,
                age=age,
                potAtStart=round(year_start, 2),
                annualSpend=round(yearly_spend, 2),
                otherIncome=round(other_income, 2),
                withdrawal=round(withdrawal, 2),
                potAtEnd=round(max(0.0, pot), 2),
                moneyRunsOut=pot <= 0,
            )
        )
        year += 1

    return SpendingPlanResult(
        moneyLasts=not money_runs_out,
        ageWhenRunsOut=age_when_runs_out,
        finalBalance=round(max(0.0, pot), 2),
        totalSpent=round(total_spent, 2),
        yearByYear=rows,
    )


def max_sustainable_spend(
    starting_pot: float,
    retirement_age: int,
    life_expectancy: int,
    growth_rate: float,
    inflation_rate: float,
    get_other_income_at_age: Optional[Callable[[int], float]] = None,
) -> MaxSpendResult:
    """
    Binary search for the highest annual spend that still lasts until
    life_expectancy. The bracket is [0, starting_pot / retirement_years] and
    the search always runs MAX_SPEND_SEARCH_ITERATIONS times.
    """
    retirement_years = life_expectancy - retirement_age

    low = 0.0
    high = starting_pot / retirement_years if retirement_years > 0 else 0.0
    best = 0.0

    for _ in range(MAX_SPEND_SEARCH_ITERATIONS):
        candidate = (low + high) / 2
        result = plan_spending(
            starting_pot,
            candidate,
            retirement_age,
            life_expectancy,
            growth_rate,
            inflation_rate,
            get_other_income_at_age,
        )
        if result.moneyLasts and result.finalBalance >= MAX_SPEND_BALANCE_TOLERANCE:
            best = candidate
            low = candidate
        else:
            high = candidate

    return MaxSpendResult(
        maxAnnualSpend=round(best, 2),
        maxMonthlySpend=round(best / 12, 2),
        projection=plan_spending(
            starting_pot,
            best,
            retirement_age,
            life_expectancy,
            growth_rate,
            inflation_rate,
            get_other_income_at_age,
        ),
    )


def retirement_status(result: SpendingPlanResult) -> RetirementStatus:
    if result.moneyLasts:
        return RetirementStatus(
            status="success",
            message="Your money will last throughout your retirement!",
        )
    return RetirementStatus(
        status="warning",
        message=f"Your money will run out at age {result.ageWhenRunsOut}",
        ageWhenRunsOut=result.ageWhenRunsOut,
    )

"""
Retirement drawdown simulation.

One annual step per year: growth on the opening balance, then the year's
withdrawal. The multi-scenario runner feeds the same spending stream to the
weak/average/strong worlds so they can be compared like for like.
"""

from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from pensioncalc.config import DEFAULT_SCENARIOS, Scenario, ScenarioRate

AgeCallback = Callable[[int], float]


class DrawdownYearResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    year: int
    age: int
    spending: float
    potBefore: float
    potAfter: float
    funded: float
    shortfall: float
    growth: float


class DrawdownResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    results: List[DrawdownYearResult]
    finalBalance: float
    moneyLasts: bool
    depletionAge: Optional[int] = None


class ScenarioDrawdowns(BaseModel):
    model_config = ConfigDict(extra="forbid")

    weak: DrawdownResult
    average: DrawdownResult
    strong: DrawdownResult


class StackingBands(BaseModel):
    model_config = ConfigDict(extra="forbid")

    bandWeak: List[Optional[float]]
    bandAvgExtra: List[Optional[float]]
    bandStrongExtra: List[Optional[float]]


def _spending_for_age(
    age: int,
    annual_spending: float,
    get_spending_at_age: Optional[AgeCallback],
    get_other_income_at_age: Optional[AgeCallback],
) -> float:
    if get_spending_at_age is not None:
        return get_spending_at_age(age)
    if get_other_income_at_age is not None:
        return max(0.0, annual_spending - get_other_income_at_age(age))
    return annual_spending


def find_depletion_age(results: Sequence[DrawdownYearResult]) -> Optional[int]:
    """Age of the first simulated year that ends with an empty pot."""
    for entry in results:
        if entry.year > 0 and entry.potAfter <= 0:
            return entry.age
    return None


def simulate_drawdown(
    *,
    starting_pot: float,
    annual_spending: float,
    growth_rate: float,
    years: int,
    retirement_age: int = 0,
    get_spending_at_age: Optional[AgeCallback] = None,
    get_other_income_at_age: Optional[AgeCallback] = None,
) -> DrawdownResult:
    """
    Simulate annual drawdown from a pot.

    Spending per year is, in order of preference:
      - get_spending_at_age(age): the net withdrawal, already computed by the caller
      - max(0, annual_spending - get_other_income_at_age(age))
      - annual_spending

    Year 0 is the retirement start point; nothing is withdrawn. Values are
    left unrounded so funded + shortfall equals the year's spending exactly.
    """
    if get_spending_at_age is not None and get_other_income_at_age is not None:
        raise ValueError("pass either get_spending_at_age or get_other_income_at_age, not both")

    balance = float(starting_pot)
    results: List[DrawdownYearResult] = [
        DrawdownYearResult(
            year=0,
            age=retirement_age,
            spending=0.0,
            potBefore=balance,
            potAfter=balance,
            funded=0.0,
            shortfall=0.0,
            growth=0.0,
        )
    ]

    for year in range(1, years + 1):
        age = retirement_age + year
        spending = _spending_for_age(age, annual_spending, get_spending_at_age, get_other_income_at_age)

        # no growth on an empty pot, and no borrowing against it
        growth = balance * growth_rate if balance > 0 else 0.0
        available = balance + growth

        funded = min(spending, max(0.0, available))
        shortfall = max(0.0, spending - available)
        balance = max(0.0, available - spending)

        results.append(
            DrawdownYearResult(
                year=year,
                age=age,
                spending=spending,
                potBefore=available,
                potAfter=balance,
                funded=funded,
                shortfall=shortfall,
                growth=growth,
            )
        )

    return DrawdownResult(
        results=results,
        finalBalance=balance,
        moneyLasts=balance > 0,
        depletionAge=find_depletion_age(results),
    )


def simulate_all_scenarios(
    *,
    annual_spending: float,
    years: int,
    retirement_age: int,
    retirement_pots: Mapping[str, float],
    get_spending_at_age: Optional[AgeCallback] = None,
    get_other_income_at_age: Optional[AgeCallback] = None,
    scenarios: Optional[Sequence[ScenarioRate]] = None,
) -> ScenarioDrawdowns:
    """
    Run the drawdown once per scenario, each with its own growth rate and
    starting pot. retirement_pots is keyed by scenario id ("weak", "average",
    "strong"); a missing key raises KeyError.
    """
    out = {}
    for scenario in scenarios or DEFAULT_SCENARIOS:
        key = Scenario(scenario.id).value
        out[key] = simulate_drawdown(
            starting_pot=retirement_pots[key],
            annual_spending=annual_spending,
            growth_rate=scenario.rate,
            years=years,
            retirement_age=retirement_age,
            get_spending_at_age=get_spending_at_age,
            get_other_income_at_age=get_other_income_at_age,
        )
    return ScenarioDrawdowns(**out)


def compute_stacking_bands(
    weak_values: Sequence[Optional[float]],
    avg_values: Sequence[Optional[float]],
    strong_values: Sequence[Optional[float]],
) -> StackingBands:
    """
    Turn three ordered scenario series into incremental bands for a stacked
    chart: weak, then what average adds, then what strong adds. None means
    "not applicable" at that index and propagates to the dependent band.
    """
    band_weak = list(weak_values)
    band_avg_extra: List[Optional[float]] = []
    band_strong_extra: List[Optional[float]] = []

    for weak, avg in zip(weak_values, avg_values):
        band_avg_extra.append(None if weak is None or avg is None else max(0.0, avg - weak))

    for avg, strong in zip(avg_values, strong_values):
        band_strong_extra.append(None if avg is None or strong is None else max(0.0, strong - avg))

    return StackingBands(
        bandWeak=band_weak,
        bandAvgExtra=band_avg_extra,
        bandStrongExtra=band_strong_extra,
    )

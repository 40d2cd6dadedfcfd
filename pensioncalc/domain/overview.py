"""
Full lifecycle overview: accumulation to retirement, then drawdown to life
expectancy, for all three growth scenarios at once.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from pensioncalc.config import Scenario
from pensioncalc.core.drawdown import (
    DrawdownResult,
    StackingBands,
    compute_stacking_bands,
    simulate_all_scenarios,
)
from pensioncalc.core.income_projection import IncomeResult, project_income
from pensioncalc.core.inflation import RealValueSnapshot, adjust_series_for_inflation, to_real_value
from pensioncalc.core.pension_projection import ProjectionResult, project_pension
from pensioncalc.core.retirement_income import (
    MaxSpendResult,
    RetirementStatus,
    SpendingPlanResult,
    max_sustainable_spend,
    plan_spending,
    retirement_status,
)
from pensioncalc.domain.scenarios import scenarios_from_percentages, total_fee_percent
from pensioncalc.domain.validation import ensure_valid, validate_inputs, validate_scenario_rates
from pensioncalc.schemas.calculations import RetirementOverviewRequest

logger = logging.getLogger(__name__)


class ScenarioOverview(BaseModel):
    """
    Everything computed for one growth scenario. The per-age series line up
    with RetirementOverview.ages; None marks pre-retirement slots where a
    retirement-only quantity does not apply.
    """

    model_config = ConfigDict(extra="forbid")

    rate: float
    label: str
    projection: ProjectionResult
    realSeries: List[RealValueSnapshot]
    realFinalPot: float
    income: IncomeResult
    drawdown: DrawdownResult
    potByAge: List[float]
    potWithdrawal: List[Optional[float]]
    shortfall: List[Optional[float]]


class RetirementOverview(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ages: List[int]
    retirementAge: int
    lifeExpectancy: int
    feePercent: float
    scenarios: Dict[str, ScenarioOverview]
    potBands: StackingBands
    incomeSourceBands: Dict[str, List[Optional[float]]]
    selectedScenario: Scenario
    spendingPlan: SpendingPlanResult
    status: RetirementStatus
    maxSpend: MaxSpendResult


def _validate(request: RetirementOverviewRequest) -> None:
    rates = request.scenarioPercentages
    selected = getattr(rates, request.selectedScenario.value)
    errors = validate_inputs(
        current_age=request.currentAge,
        retirement_age=request.retirementAge,
        current_pot=request.currentPot,
        monthly_contribution=request.monthlyContribution,
        growth_percent=selected,
        inflation_percent=request.inflationRate * 100,
        life_expectancy=request.lifeExpectancy,
    )
    errors.extend(validate_scenario_rates(rates.weak, rates.average, rates.strong))
    ensure_valid(errors)


def build_retirement_overview(request: RetirementOverviewRequest) -> RetirementOverview:
    """
    Steps:
      1) Validate business rules (raises PlanValidationError).
      2) Project each scenario's pot to retirement (monthly compounding).
      3) Draw every pot down to life expectancy against the same spending,
         net of phased other income (annual steps).
      4) Stack the three pot series and allocate other income per source.
      5) Check the spending plan and solve the max spend for the selected scenario.
    """
    _validate(request)

    fee = total_fee_percent(request.fees.platform, request.fees.fund, request.fees.adviser)
    scenarios = scenarios_from_percentages(
        request.scenarioPercentages.weak,
        request.scenarioPercentages.average,
        request.scenarioPercentages.strong,
        fee_percent=fee,
    )

    years_to_retirement = request.retirementAge - request.currentAge
    years_in_retirement = request.lifeExpectancy - request.retirementAge
    ages = list(range(request.currentAge, request.lifeExpectancy + 1))
    income_at_age = request.otherIncome.other_income_at_age

    projections: Dict[str, ProjectionResult] = {
        s.id.value: project_pension(
            request.currentPot,
            request.monthlyContribution,
            years_to_retirement,
            s.rate,
        )
        for s in scenarios
    }

    drawdowns = simulate_all_scenarios(
        annual_spending=request.annualSpending,
        years=years_in_retirement,
        retirement_age=request.retirementAge,
        retirement_pots={key: p.finalPot for key, p in projections.items()},
        get_other_income_at_age=income_at_age,
        scenarios=scenarios,
    )

    pre_retirement_nones: List[Optional[float]] = [None] * years_to_retirement
    overviews: Dict[str, ScenarioOverview] = {}
    for s in scenarios:
        key = s.id.value
        projection = projections[key]
        drawdown: DrawdownResult = getattr(drawdowns, key)

        # age currentAge holds today's pot; each later working age holds the
        # pot at the end of the previous year (validation guarantees >= 1 year)
        pre_retirement = [float(request.currentPot)] + [snap.pot for snap in projection.yearByYear[:-1]]

        overviews[key] = ScenarioOverview(
            rate=s.rate,
            label=s.label,
            projection=projection,
            realSeries=adjust_series_for_inflation(projection.yearByYear, request.inflationRate),
            realFinalPot=round(to_real_value(projection.finalPot, years_to_retirement, request.inflationRate), 2),
            income=project_income(projection.finalPot),
            drawdown=drawdown,
            potByAge=pre_retirement + [row.potAfter for row in drawdown.results],
            potWithdrawal=pre_retirement_nones + [row.funded for row in drawdown.results],
            shortfall=pre_retirement_nones + [row.shortfall for row in drawdown.results],
        )

    pot_bands = compute_stacking_bands(
        overviews[Scenario.WEAK.value].potByAge,
        overviews[Scenario.AVERAGE.value].potByAge,
        overviews[Scenario.STRONG.value].potByAge,
    )

    selected = overviews[request.selectedScenario.value]
    spending_plan = plan_spending(
        selected.projection.finalPot,
        request.annualSpending,
        request.retirementAge,
        request.lifeExpectancy,
        selected.rate,
        request.inflationRate,
        income_at_age,
    )
    max_spend = max_sustainable_spend(
        selected.projection.finalPot,
        request.retirementAge,
        request.lifeExpectancy,
        selected.rate,
        request.inflationRate,
        income_at_age,
    )

    logger.debug(
        "overview built: ages %s-%s, fee %.2f%%, selected %s",
        request.currentAge,
        request.lifeExpectancy,
        fee,
        request.selectedScenario.value,
    )

    return RetirementOverview(
        ages=ages,
        retirementAge=request.retirementAge,
        lifeExpectancy=request.lifeExpectancy,
        feePercent=fee,
        scenarios=overviews,
        potBands=pot_bands,
        # the retirement-age slot is the drawdown start point with nothing
        # spent, so income allocation starts the year after
        incomeSourceBands=request.otherIncome.source_bands(
            request.annualSpending,
            request.retirementAge + 1,
            request.lifeExpectancy,
            pre_retirement_years=years_to_retirement + 1,
        ),
        selectedScenario=request.selectedScenario,
        spendingPlan=spending_plan,
        status=retirement_status(spending_plan),
        maxSpend=max_spend,
    )

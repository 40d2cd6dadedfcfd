"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from pensioncalc.core.drawdown import compute_stacking_bands, simulate_all_scenarios
from pensioncalc.core.income_projection import project_income
from pensioncalc.core.inflation import adjust_series_for_inflation, inflation_adjusted_income
from pensioncalc.core.pension_projection import project_pension
from pensioncalc.core.ping import get_ping_message, get_version
from pensioncalc.core.retirement_income import (
    max_sustainable_spend,
    plan_spending,
    retirement_status,
)
from pensioncalc.domain.overview import build_retirement_overview
from pensioncalc.domain.scenarios import scenarios_from_percentages, total_fee_percent
from pensioncalc.domain.validation import PlanValidationError, ensure_valid, validate_scenario_rates
from pensioncalc.schemas.calculations import (
    DrawdownRequest,
    IncomeRequest,
    MaxSpendRequest,
    ProjectionRequest,
    RetirementOverviewRequest,
    SpendingPlanRequest,
)
from pensioncalc.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(PlanValidationError)
def _handle_plan_error(exc: PlanValidationError):
    logger.info("rejected plan: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_version())
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Pot projection to retirement, optionally with today's-money values."""
    payload = ProjectionRequest.model_validate(_payload())
    result = project_pension(
        payload.currentPot,
        payload.monthlyContribution,
        payload.years,
        payload.annualGrowthRate,
    )

    body = result.model_dump()
    if payload.inflationRate is not None:
        body["realYearByYear"] = [
            row.model_dump() for row in adjust_series_for_inflation(result.yearByYear, payload.inflationRate)
        ]
    return jsonify(body)


@api_bp.post("/calc/income")
def income() -> Any:
    payload = IncomeRequest.model_validate(_payload())
    result = project_income(payload.pensionPot)

    body = result.model_dump()
    if payload.yearsUntilRetirement is not None:
        body["inflationAdjusted"] = inflation_adjusted_income(
            result.annualIncome,
            payload.yearsUntilRetirement,
            payload.inflationRate,
        ).model_dump()
    return jsonify(body)


@api_bp.post("/calc/drawdown")
def drawdown() -> Any:
    """All three scenarios drawn down against the same spending."""
    payload = DrawdownRequest.model_validate(_payload())
    rates = payload.scenarioPercentages
    ensure_valid(validate_scenario_rates(rates.weak, rates.average, rates.strong))

    fee = total_fee_percent(payload.fees.platform, payload.fees.fund, payload.fees.adviser)
    result = simulate_all_scenarios(
        annual_spending=payload.annualSpending,
        years=payload.years,
        retirement_age=payload.retirementAge,
        retirement_pots=payload.retirementPots.model_dump(),
        get_spending_at_age=(
            payload.otherIncome.spending_callback(payload.annualSpending) if payload.otherIncome else None
        ),
        scenarios=scenarios_from_percentages(rates.weak, rates.average, rates.strong, fee_percent=fee),
    )

    bands = compute_stacking_bands(
        [row.potAfter for row in result.weak.results],
        [row.potAfter for row in result.average.results],
        [row.potAfter for row in result.strong.results],
    )
    return jsonify({"scenarios": result.model_dump(), "potBands": bands.model_dump()})


@api_bp.post("/calc/spending-plan")
def spending_plan() -> Any:
    payload = SpendingPlanRequest.model_validate(_payload())
    result = plan_spending(
        payload.startingPot,
        payload.annualSpend,
        payload.retirementAge,
        payload.lifeExpectancy,
        payload.growthRate,
        payload.inflationRate,
        payload.otherIncome.other_income_at_age if payload.otherIncome else None,
    )
    return jsonify({"result": result.model_dump(), "status": retirement_status(result).model_dump()})


@api_bp.post("/calc/max-spend")
def max_spend() -> Any:
    payload = MaxSpendRequest.model_validate(_payload())
    result = max_sustainable_spend(
        payload.startingPot,
        payload.retirementAge,
        payload.lifeExpectancy,
        payload.growthRate,
        payload.inflationRate,
        payload.otherIncome.other_income_at_age if payload.otherIncome else None,
    )
    return jsonify(result.model_dump())


@api_bp.post("/calc/overview")
def overview() -> Any:
    """Everything the results page renders, for all three scenarios."""
    payload = RetirementOverviewRequest.model_validate(_payload())
    result = build_retirement_overview(payload)
    return jsonify(result.model_dump(mode="json"))

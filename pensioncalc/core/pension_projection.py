"""Accumulation-phase pension projection (monthly compounding)."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from pensioncalc.config import DEFAULT_GROWTH_RATE


class YearSnapshot(BaseModel):
    """Pot value at the end of one projection year."""

    model_config = ConfigDict(extra="forbid")

    year: int
    pot: float
    totalContributions: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    finalPot: float
    yearByYear: List[YearSnapshot]
    totalContributed: float
    growthAmount: float
    annualGrowthRate: float


def monthly_rate(annual_growth_rate: float) -> float:
    """Monthly rate that compounds to the given effective annual rate."""
    return (1.0 + annual_growth_rate) ** (1.0 / 12.0) - 1.0


def project_pension(
    current_pot: float,
    monthly_contribution: float,
    years: int,
    annual_growth_rate: float = DEFAULT_GROWTH_RATE,
) -> ProjectionResult:
    """
    Project a pension pot forward month by month.

    Order of operations (per month):
      1) Apply one month of growth to the running balance.
      2) Add the monthly contribution (it does not grow in the month it lands).

    A snapshot is recorded at the end of every 12th month. Drawdown uses a
    single annual growth step instead (see core.drawdown); the two models are
    kept separate on purpose since they give different numbers.
    """
    rate = monthly_rate(annual_growth_rate)
    pot = float(current_pot)

    year_by_year: List[YearSnapshot] = []
    for year in range(1, years + 1):
        for _ in range(12):
            pot = pot * (1.0 + rate)
            pot += monthly_contribution

        year_by_year.append(
            YearSnapshot(
                year=year,
                pot=round(pot, 2),
                totalContributions=current_pot + monthly_contribution * 12 * year,
            )
        )

    total_contributed = current_pot + monthly_contribution * years * 12

    return ProjectionResult(
        finalPot=round(pot, 2),
        yearByYear=year_by_year,
        totalContributed=total_contributed,
        growthAmount=round(pot - total_contributed, 2),
        annualGrowthRate=annual_growth_rate,
    )

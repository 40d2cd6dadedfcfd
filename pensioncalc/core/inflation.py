"""Conversions between nominal (future) pounds and real (today's) pounds."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from pensioncalc.config import DEFAULT_INFLATION_RATE
from pensioncalc.core.pension_projection import YearSnapshot


class RealValueSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    year: int
    nominalPot: float
    realPot: float
    nominalContributions: float
    realContributions: float


class InflationAdjustedIncome(BaseModel):
    model_config = ConfigDict(extra="forbid")

    realAnnualIncome: float
    nominalAnnualIncome: float
    realMonthlyIncome: float
    nominalMonthlyIncome: float


def to_real_value(nominal_value: float, years_ahead: float, rate: float = DEFAULT_INFLATION_RATE) -> float:
    """Future nominal value expressed in today's money."""
    return nominal_value / (1.0 + rate) ** years_ahead


def to_nominal_value(real_value: float, years_ahead: float, rate: float = DEFAULT_INFLATION_RATE) -> float:
    """Today's money grown into future nominal terms."""
    return real_value * (1.0 + rate) ** years_ahead


def adjust_series_for_inflation(
    year_by_year: Sequence[YearSnapshot],
    rate: float = DEFAULT_INFLATION_RATE,
) -> List[RealValueSnapshot]:
    """Attach real values to a projection series; entry i is deflated by i + 1 years."""
    out: List[RealValueSnapshot] = []
    for index, item in enumerate(year_by_year):
        year = index + 1
        out.append(
            RealValueSnapshot(
                year=year,
                nominalPot=item.pot,
                realPot=round(to_real_value(item.pot, year, rate), 2),
                nominalContributions=item.totalContributions,
                realContributions=round(to_real_value(item.totalContributions, year, rate), 2),
            )
        )
    return out


def inflation_adjusted_income(
    annual_income: float,
    years_until_retirement: int,
    rate: float = DEFAULT_INFLATION_RATE,
) -> InflationAdjustedIncome:
    """
    Show an income in both today's pounds and the pounds of the first
    retirement year.
    """
    nominal_income = to_nominal_value(annual_income, years_until_retirement, rate)
    return InflationAdjustedIncome(
        realAnnualIncome=round(annual_income, 2),
        nominalAnnualIncome=round(nominal_income, 2),
        realMonthlyIncome=round(annual_income / 12, 2),
        nominalMonthlyIncome=round(nominal_income / 12, 2),
    )

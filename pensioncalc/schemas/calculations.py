"""Request contracts for the single-calculator endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pensioncalc.config import (
    DEFAULT_BOUNDS,
    DEFAULT_GROWTH_RATE,
    DEFAULT_INFLATION_RATE,
    UK_PENSION_RULES,
    Scenario,
)
from pensioncalc.domain.income_sources import OtherIncomeSources

MAX_GROWTH_RATE = DEFAULT_BOUNDS.max_growth_percent / 100
MAX_INFLATION_RATE = DEFAULT_BOUNDS.max_inflation_percent / 100


class ProjectionRequest(BaseModel):
    """Inputs for the accumulation-phase pot projection."""

    model_config = ConfigDict(extra="forbid")

    currentPot: float = Field(..., ge=0, description="Pot value today.")
    monthlyContribution: float = Field(0.0, ge=0)
    years: int = Field(..., ge=0, le=80, description="Years until retirement.")
    annualGrowthRate: float = Field(
        DEFAULT_GROWTH_RATE,
        ge=0,
        le=MAX_GROWTH_RATE,
        description="Annual growth expressed as a decimal (e.g. 0.05 for 5%).",
    )
    inflationRate: Optional[float] = Field(
        None,
        ge=0,
        le=MAX_INFLATION_RATE,
        description="When set, the response also carries today's-money values.",
    )


class IncomeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pensionPot: float = Field(..., ge=0)
    yearsUntilRetirement: Optional[int] = Field(None, ge=0, le=80)
    inflationRate: float = Field(DEFAULT_INFLATION_RATE, ge=0, le=MAX_INFLATION_RATE)


class RetirementPots(BaseModel):
    model_config = ConfigDict(extra="forbid")

    weak: float = Field(..., ge=0)
    average: float = Field(..., ge=0)
    strong: float = Field(..., ge=0)


class ScenarioPercentages(BaseModel):
    """Growth assumptions in percent (5 means 5%), before fees."""

    model_config = ConfigDict(extra="forbid")

    weak: float = Field(2.0, ge=0, le=DEFAULT_BOUNDS.max_growth_percent)
    average: float = Field(5.0, ge=0, le=DEFAULT_BOUNDS.max_growth_percent)
    strong: float = Field(8.0, ge=0, le=DEFAULT_BOUNDS.max_growth_percent)


class Fees(BaseModel):
    model_config = ConfigDict(extra="forbid")

    platform: float = Field(0.0, ge=0, le=5)
    fund: float = Field(0.0, ge=0, le=5)
    adviser: float = Field(0.0, ge=0, le=5)


class DrawdownRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    annualSpending: float = Field(..., ge=0)
    years: int = Field(..., ge=0, le=80)
    retirementAge: int = Field(..., ge=20, le=110)
    retirementPots: RetirementPots
    scenarioPercentages: ScenarioPercentages = Field(default_factory=ScenarioPercentages)
    fees: Fees = Field(default_factory=Fees)
    otherIncome: Optional[OtherIncomeSources] = None


class SpendingPlanRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    startingPot: float = Field(..., ge=0)
    annualSpend: float = Field(..., ge=0)
    retirementAge: int = Field(..., ge=20, le=110)
    lifeExpectancy: int = Field(..., ge=20, le=120)
    growthRate: float = Field(DEFAULT_GROWTH_RATE, ge=0, le=MAX_GROWTH_RATE)
    inflationRate: float = Field(0.0, ge=0, le=MAX_INFLATION_RATE)
    otherIncome: Optional[OtherIncomeSources] = None

    @model_validator(mode="after")
    def ensure_validity(self) -> "SpendingPlanRequest":
        if self.lifeExpectancy <= self.retirementAge:
            raise ValueError("lifeExpectancy must be greater than retirementAge")
        return self


class MaxSpendRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    startingPot: float = Field(..., ge=0)
    retirementAge: int = Field(..., ge=20, le=110)
    lifeExpectancy: int = Field(..., ge=20, le=120)
    growthRate: float = Field(DEFAULT_GROWTH_RATE, ge=0, le=MAX_GROWTH_RATE)
    inflationRate: float = Field(0.0, ge=0, le=MAX_INFLATION_RATE)
    otherIncome: Optional[OtherIncomeSources] = None

    @model_validator(mode="after")
    def ensure_validity(self) -> "MaxSpendRequest":
        if self.lifeExpectancy <= self.retirementAge:
            raise ValueError("lifeExpectancy must be greater than retirementAge")
        return self


class RetirementOverviewRequest(BaseModel):
    """Everything the results page needs, in one request."""

    model_config = ConfigDict(extra="forbid")

    currentAge: int = Field(..., ge=10, le=100)
    retirementAge: int = Field(..., ge=20, le=110)
    lifeExpectancy: int = Field(UK_PENSION_RULES.target_age, ge=20, le=120)
    currentPot: float = Field(..., ge=0)
    monthlyContribution: float = Field(0.0, ge=0)
    annualSpending: float = Field(0.0, ge=0)
    inflationRate: float = Field(DEFAULT_INFLATION_RATE, ge=0, le=MAX_INFLATION_RATE)
    scenarioPercentages: ScenarioPercentages = Field(default_factory=ScenarioPercentages)
    selectedScenario: Scenario = Scenario.AVERAGE
    fees: Fees = Field(default_factory=Fees)
    otherIncome: OtherIncomeSources = Field(default_factory=OtherIncomeSources)

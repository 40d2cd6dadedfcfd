"""
Phased other income (state pension, DB pension, annuity, rental, other).

The calculators never work this out themselves; they take the
other_income_at_age / net_withdrawal callables built here.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pensioncalc.config import UK_PENSION_RULES

# Allocation priority when covering spending
SOURCE_ORDER = ("statePension", "dbPension", "annuity", "rental", "other")


class IncomeBreakdown(BaseModel):
    model_config = ConfigDict(extra="forbid")

    statePension: float = 0.0
    dbPension: float = 0.0
    annuity: float = 0.0
    rental: float = 0.0
    other: float = 0.0
    total: float = 0.0


class OtherIncomeSources(BaseModel):
    """
    Annual amounts of each source. State pension always counts from its
    start age; the remaining sources only count when includeAdditional is
    set. DB pension has its own start age, annuity/rental/other apply from
    retirement onward.
    """

    model_config = ConfigDict(extra="forbid")

    statePension: float = Field(default=0.0, ge=0)
    statePensionAge: int = Field(default=UK_PENSION_RULES.state_pension_age, ge=55, le=80)
    includeAdditional: bool = False
    dbPension: float = Field(default=0.0, ge=0)
    dbPensionAge: int = Field(default=65, ge=50, le=80)
    annuity: float = Field(default=0.0, ge=0)
    rental: float = Field(default=0.0, ge=0)
    other: float = Field(default=0.0, ge=0)

    def breakdown_at_age(self, age: Optional[int] = None) -> IncomeBreakdown:
        """Per-source income at age; age=None means every source is active."""
        state = self.statePension if self.statePension > 0 and (age is None or age >= self.statePensionAge) else 0.0

        db = annuity = rental = other = 0.0
        if self.includeAdditional:
            if self.dbPension > 0 and (age is None or age >= self.dbPensionAge):
                db = self.dbPension
            annuity, rental, other = self.annuity, self.rental, self.other

        return IncomeBreakdown(
            statePension=state,
            dbPension=db,
            annuity=annuity,
            rental=rental,
            other=other,
            total=state + db + annuity + rental + other,
        )

    def other_income_at_age(self, age: Optional[int] = None) -> float:
        return self.breakdown_at_age(age).total

    def net_withdrawal(self, gross_spending: float, age: Optional[int] = None) -> float:
        """What the pot has to fund once other income is taken off."""
        return max(0.0, gross_spending - self.other_income_at_age(age))

    def spending_callback(self, gross_spending: float) -> Callable[[int], float]:
        return lambda age: self.net_withdrawal(gross_spending, age)

    def allocate_sources(self, spending: float, age: Optional[int] = None) -> IncomeBreakdown:
        """
        Cover spending from each source in SOURCE_ORDER, capping each at
        what is still left to cover. The total never exceeds spending.
        """
        available = self.breakdown_at_age(age)
        remaining = spending
        allocated: Dict[str, float] = {}
        for name in SOURCE_ORDER:
            amount = max(0.0, min(getattr(available, name), remaining))
            allocated[name] = amount
            remaining -= amount
        return IncomeBreakdown(total=sum(allocated.values()), **allocated)

    def source_bands(
        self,
        spending: float,
        retirement_age: int,
        end_age: int,
        pre_retirement_years: int = 0,
    ) -> Dict[str, List[Optional[float]]]:
        """Allocated amount per source for each age, None before retirement."""
        bands: Dict[str, List[Optional[float]]] = {
            name: [None] * pre_retirement_years for name in SOURCE_ORDER
        }
        for age in range(retirement_age, end_age + 1):
            allocated = self.allocate_sources(spending, age)
            for name in SOURCE_ORDER:
                bands[name].append(getattr(allocated, name))
        return bands

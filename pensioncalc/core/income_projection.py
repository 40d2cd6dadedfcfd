"""Tax-free lump sum and safe-withdrawal income from a pension pot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pensioncalc.config import UK_PENSION_RULES, PensionRules


class IncomeResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    taxFreeLumpSum: float
    drawdownPot: float
    annualIncome: float
    monthlyIncome: float


def project_income(pension_pot: float, rules: PensionRules = UK_PENSION_RULES) -> IncomeResult:
    """Split the pot into a capped tax-free lump and a drawdown income."""
    tax_free_lump = min(pension_pot * rules.tax_free_lump_sum_rate, rules.max_tax_free_lump)
    drawdown_pot = pension_pot - tax_free_lump
    annual_income = drawdown_pot * rules.safe_withdrawal_rate

    return IncomeResult(
        taxFreeLumpSum=round(tax_free_lump, 2),
        drawdownPot=round(drawdown_pot, 2),
        annualIncome=round(annual_income, 2),
        monthlyIncome=round(annual_income / 12, 2),
    )

from __future__ import annotations

from math import isclose

from pensioncalc.config import PensionRules
from pensioncalc.core.income_projection import project_income


def test_quarter_of_pot_is_tax_free():
    result = project_income(100000)

    assert result.taxFreeLumpSum == 25000
    assert result.drawdownPot == 75000
    assert result.annualIncome == 3000
    assert result.monthlyIncome == 250


def test_lump_sum_is_capped():
    result = project_income(2_000_000)

    assert result.taxFreeLumpSum == 268275
    assert result.drawdownPot == 2_000_000 - 268275
    assert isclose(result.annualIncome, 1_731_725 * 0.04, abs_tol=0.01)
    assert result.monthlyIncome == round(result.annualIncome / 12, 2)


def test_empty_pot_has_no_income():
    result = project_income(0)

    assert result.taxFreeLumpSum == 0
    assert result.annualIncome == 0
    assert result.monthlyIncome == 0


def test_rules_are_injectable():
    rules = PensionRules(tax_free_lump_sum_rate=0.1, max_tax_free_lump=5000, safe_withdrawal_rate=0.05)

    result = project_income(100000, rules)

    assert result.taxFreeLumpSum == 5000
    assert result.drawdownPot == 95000
    assert result.annualIncome == 4750

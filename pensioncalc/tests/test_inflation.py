from __future__ import annotations

import pytest

from pensioncalc.core.inflation import (
    adjust_series_for_inflation,
    inflation_adjusted_income,
    to_nominal_value,
    to_real_value,
)
from pensioncalc.core.pension_projection import project_pension


@pytest.mark.parametrize(
    "value, years, rate",
    [(100000, 10, 0.025), (1, 40, 0.05), (5_000_000, 0, 0.03), (250000, 30, 0.0)],
)
def test_round_trip(value, years, rate):
    assert to_nominal_value(to_real_value(value, years, rate), years, rate) == pytest.approx(value, abs=1)


def test_identity_at_zero_rate_or_zero_years():
    assert to_real_value(123456.78, 20, 0) == 123456.78
    assert to_real_value(123456.78, 0, 0.04) == 123456.78
    assert to_nominal_value(123456.78, 0, 0.04) == 123456.78


def test_real_value_is_smaller_with_positive_inflation():
    real = to_real_value(100000, 10, 0.025)

    assert real < 100000
    assert real == pytest.approx(100000 / 1.025**10)


def test_series_uses_index_plus_one_as_exponent():
    projection = project_pension(10000, 200, 3, 0.05)

    series = adjust_series_for_inflation(projection.yearByYear, 0.02)

    assert [row.year for row in series] == [1, 2, 3]
    for index, row in enumerate(series):
        snap = projection.yearByYear[index]
        assert row.nominalPot == snap.pot
        assert row.realPot == round(snap.pot / 1.02 ** (index + 1), 2)
        assert row.realContributions == round(snap.totalContributions / 1.02 ** (index + 1), 2)


def test_inflation_adjusted_income():
    result = inflation_adjusted_income(30000, 10, 0.025)

    assert result.realAnnualIncome == 30000
    assert result.realMonthlyIncome == 2500
    assert result.nominalAnnualIncome == round(30000 * 1.025**10, 2)
    assert result.nominalAnnualIncome > result.realAnnualIncome


def test_inflation_adjusted_income_now():
    result = inflation_adjusted_income(30000, 0, 0.025)

    assert result.nominalAnnualIncome == result.realAnnualIncome

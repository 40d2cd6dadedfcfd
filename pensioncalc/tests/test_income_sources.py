from __future__ import annotations

from pensioncalc.config import UK_PENSION_RULES
from pensioncalc.core.drawdown import simulate_drawdown
from pensioncalc.domain.income_sources import SOURCE_ORDER, OtherIncomeSources


def sources() -> OtherIncomeSources:
    return OtherIncomeSources(
        statePension=11502,
        statePensionAge=67,
        includeAdditional=True,
        dbPension=5000,
        dbPensionAge=65,
        annuity=1000,
        rental=2000,
    )


def test_state_pension_starts_at_its_age():
    only_state = OtherIncomeSources(statePension=11502, statePensionAge=67)

    assert only_state.other_income_at_age(66) == 0
    assert only_state.other_income_at_age(67) == 11502
    assert only_state.other_income_at_age() == 11502


def test_additional_sources_need_the_toggle():
    toggled_off = sources().model_copy(update={"includeAdditional": False})

    assert toggled_off.other_income_at_age(70) == 11502


def test_phased_breakdown():
    income = sources()

    assert income.other_income_at_age(64) == 3000  # annuity + rental only
    assert income.other_income_at_age(65) == 8000
    at_67 = income.breakdown_at_age(67)
    assert (at_67.statePension, at_67.dbPension, at_67.total) == (11502, 5000, 19502)
    assert income.other_income_at_age() == 19502


def test_net_withdrawal_is_floored():
    income = sources()

    assert income.net_withdrawal(25000, 67) == 25000 - 19502
    assert income.net_withdrawal(10000, 67) == 0


def test_allocation_follows_priority_order():
    allocated = sources().allocate_sources(12000, 67)

    assert allocated.statePension == 11502
    assert allocated.dbPension == 498
    assert allocated.annuity == 0
    assert allocated.rental == 0
    assert allocated.total == 12000


def test_allocation_never_exceeds_spending():
    for spending in (0, 500, 15000, 50000):
        allocated = sources().allocate_sources(spending, 70)
        assert allocated.total <= spending


def test_source_bands_pad_pre_retirement_years():
    bands = sources().source_bands(20000, retirement_age=65, end_age=70, pre_retirement_years=3)

    assert set(bands) == set(SOURCE_ORDER)
    for band in bands.values():
        assert len(band) == 3 + 6
        assert band[:3] == [None, None, None]
    assert bands["statePension"][3:] == [0, 0, 11502, 11502, 11502, 11502]
    assert bands["dbPension"][3:5] == [5000, 5000]


def test_spending_callback_matches_other_income_path():
    income = sources()
    common = dict(starting_pot=250000, annual_spending=30000, growth_rate=0.04, years=25, retirement_age=62)

    via_spending = simulate_drawdown(get_spending_at_age=income.spending_callback(30000), **common)
    via_income = simulate_drawdown(get_other_income_at_age=income.other_income_at_age, **common)

    assert via_spending == via_income


def test_state_pension_age_defaults_to_rules():
    assert OtherIncomeSources().statePensionAge == UK_PENSION_RULES.state_pension_age

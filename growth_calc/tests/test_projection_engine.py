from __future__ import annotations

import math
from math import isclose

import pytest

from growth_calc.core.projection import PERIODS_PER_YEAR, clamp_horizon, periods_per_year, project
from growth_calc.schemas.projection import Frequency, ProjectionInput


def make_input(**overrides) -> ProjectionInput:
    values = {
        "starting_balance": 1000.0,
        "contribution_amount": 100.0,
        "contribution_frequency": Frequency.MONTHLY,
        "annual_rate": 0.06,
        "horizon_years": 1,
    }
    values.update(overrides)
    return ProjectionInput(**values)


def test_monthly_one_year_scenario():
    """1000 start, 100/month at 6% for one year, deposits at the start of each month."""
    result = project(make_input())
    year_one = result.series[1]

    principal = 1000 * 1.005 ** 12
    contributions = 100 * ((1.005 ** 12 - 1) / 0.005) * 1.005

    assert isclose(principal, 1061.68, abs_tol=0.01)
    assert isclose(contributions, 1239.72, abs_tol=0.01)
    assert isclose(year_one.total_value, principal + contributions, rel_tol=1e-12)
    assert isclose(year_one.total_value, 2301.40, abs_tol=0.01)
    assert isclose(year_one.total_invested, 2200.0, abs_tol=1e-9)
    assert isclose(year_one.total_interest, 101.40, abs_tol=0.01)


def test_annuity_due_beats_ordinary_annuity_by_one_period():
    result = project(make_input(starting_balance=0.0, horizon_years=10))

    rate = 0.06 / 12
    ordinary = 100 * ((1 + rate) ** 120 - 1) / rate
    assert isclose(result.final_total_value, ordinary * (1 + rate), rel_tol=1e-12)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"horizon_years": 30},
        {"contribution_frequency": Frequency.WEEKLY, "horizon_years": 17},
        {"contribution_frequency": Frequency.NONE, "annual_rate": 0.12, "horizon_years": 40},
        {"annual_rate": 0.0, "horizon_years": 100},
    ],
)
def test_final_totals_match_last_row(overrides):
    result = project(make_input(**overrides))
    last = result.series[-1]

    assert len(result.series) == result.horizon_years + 1
    assert last.year_index == result.horizon_years
    assert result.final_total_value == last.total_value
    assert result.final_total_invested == last.total_invested
    assert result.final_total_interest == last.total_interest


@pytest.mark.parametrize("frequency", list(Frequency))
def test_year_zero_row_is_starting_balance(frequency):
    result = project(
        make_input(starting_balance=4321.5, contribution_frequency=frequency, annual_rate=0.09)
    )
    first = result.series[0]

    assert first.year_index == 0
    assert first.label == "Year 0"
    assert first.total_value == 4321.5
    assert first.total_invested == 4321.5
    assert first.total_interest == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"horizon_years": 50},
        {"annual_rate": 0.0, "horizon_years": 20},
        {"starting_balance": 0.0, "contribution_frequency": Frequency.FORTNIGHTLY, "horizon_years": 25},
        {"contribution_amount": 0.0, "annual_rate": 0.2, "horizon_years": 100},
    ],
)
def test_value_never_decreases(overrides):
    values = project(make_input(**overrides)).values()

    for previous, current in zip(values, values[1:]):
        assert current >= previous


@pytest.mark.parametrize("frequency", [Frequency.NONE, Frequency.ANNUAL])
def test_no_contribution_reduces_to_compound_interest(frequency):
    result = project(
        make_input(
            starting_balance=5000.0,
            contribution_amount=250.0 if frequency == Frequency.NONE else 0.0,
            contribution_frequency=frequency,
            annual_rate=0.07,
            horizon_years=10,
        )
    )

    for point in result.series:
        assert isclose(point.total_value, 5000.0 * 1.07 ** point.year_index, rel_tol=1e-12)
        assert point.total_invested == 5000.0


def test_zero_contribution_monthly_compounds_monthly():
    result = project(make_input(contribution_amount=0.0, horizon_years=3))

    for point in result.series:
        expected = 1000.0 * (1 + 0.06 / 12) ** (12 * point.year_index)
        assert isclose(point.total_value, expected, rel_tol=1e-12)


def test_interest_is_value_minus_invested():
    result = project(make_input(contribution_frequency=Frequency.WEEKLY, horizon_years=12))

    for point in result.series:
        assert point.total_interest == point.total_value - point.total_invested


def test_periods_per_year_table_is_total():
    assert set(PERIODS_PER_YEAR) == set(Frequency)
    assert periods_per_year(Frequency.ANNUAL) == 1
    assert periods_per_year(Frequency.MONTHLY) == 12
    assert periods_per_year(Frequency.FORTNIGHTLY) == 26
    assert periods_per_year(Frequency.WEEKLY) == 52
    assert periods_per_year("weekly") == 52


def test_negative_amounts_and_rate_are_treated_as_zero():
    clamped = project(
        make_input(starting_balance=-10.0, contribution_amount=-5.0, annual_rate=-0.05, horizon_years=4)
    )

    for point in clamped.series:
        assert point.total_value == 0.0
        assert point.total_invested == 0.0


def test_result_is_a_fresh_immutable_object():
    request = make_input()
    first = project(request)
    second = project(request)

    assert first == second
    assert first is not second
    with pytest.raises(Exception):
        first.series[0].total_value = 1.0  # frozen model


@pytest.mark.parametrize("years,expected", [(-3, 1), (0, 1), (1, 1), (42, 42), (100, 100), (250, 100)])
def test_clamp_horizon(years, expected):
    assert clamp_horizon(years) == expected


def test_huge_rate_saturates_to_infinity_instead_of_raising():
    result = project(
        make_input(
            contribution_amount=10.0,
            contribution_frequency=Frequency.WEEKLY,
            annual_rate=10.0,
            horizon_years=100,
        )
    )

    assert len(result.series) == 101
    assert math.isfinite(result.series[1].total_value)
    assert result.final_total_value == math.inf
    assert result.final_total_interest == math.inf
    assert math.isfinite(result.final_total_invested)
    values = result.values()
    for previous, current in zip(values, values[1:]):
        assert current >= previous


def test_huge_rate_with_nothing_invested_stays_zero():
    result = project(
        make_input(starting_balance=0.0, contribution_amount=0.0, annual_rate=10.0, horizon_years=100)
    )

    for point in result.series:
        assert point.total_value == 0.0
        assert point.total_interest == 0.0


def test_overflowing_invested_total_reports_infinite_interest():
    result = project(
        make_input(
            starting_balance=1e308,
            contribution_amount=1e308,
            contribution_frequency=Frequency.WEEKLY,
            annual_rate=0.05,
            horizon_years=2,
        )
    )

    assert result.final_total_invested == math.inf
    assert result.final_total_interest == math.inf

from __future__ import annotations

import logging
import math
from typing import Dict, List

from growth_calc.config import MAX_HORIZON_YEARS, MIN_HORIZON_YEARS
from growth_calc.schemas.projection import (
    Frequency,
    ProjectionInput,
    ProjectionResult,
    YearPoint,
)

logger = logging.getLogger(__name__)


# NONE still compounds the starting balance once a year
PERIODS_PER_YEAR: Dict[Frequency, int] = {
    Frequency.NONE: 1,
    Frequency.ANNUAL: 1,
    Frequency.MONTHLY: 12,
    Frequency.FORTNIGHTLY: 26,
    Frequency.WEEKLY: 52,
}


def periods_per_year(frequency: Frequency) -> int:
    return PERIODS_PER_YEAR[Frequency(frequency)]


def clamp_horizon(years: int) -> int:
    """Clamp a horizon into [MIN_HORIZON_YEARS, MAX_HORIZON_YEARS]."""
    return max(MIN_HORIZON_YEARS, min(int(years), MAX_HORIZON_YEARS))


def _compound(rate_per_period: float, periods: int) -> float:
    """(1 + rate)^periods, saturating to inf instead of raising OverflowError."""
    try:
        return (1.0 + rate_per_period) ** periods
    except OverflowError:
        return math.inf


def _principal_growth(balance: float, rate: float, n: int, year: int) -> float:
    if rate == 0 or balance == 0:
        return balance
    return balance * _compound(rate / n, n * year)


def _contribution_growth(amount: float, rate: float, n: int, periods: int) -> float:
    """Future value of an annuity-due: each deposit lands at the start of its period."""
    if periods == 0 or amount == 0:
        return 0.0
    if rate == 0:
        # r/n would be 0/0 below
        return amount * periods
    rate_per_period = rate / n
    growth = _compound(rate_per_period, periods)
    return amount * (growth - 1.0) / rate_per_period * (1.0 + rate_per_period)


def project(request: ProjectionInput) -> ProjectionResult:
    """
    Build a year-by-year projection for years 0..horizon (inclusive).

    Per year i, with n periods per year:
      1) principal = start * (1 + r/n)^(n*i)
      2) contributions grow as an annuity-due over n*i periods
      3) invested = start + contribution * n*i (no interest)
      4) interest = value - invested

    Final totals are read off the last row so they always match the series.
    """
    horizon = clamp_horizon(request.horizon_years)
    start = max(request.starting_balance, 0.0)
    amount = max(request.contribution_amount, 0.0)
    rate = max(request.annual_rate, 0.0)
    n = periods_per_year(request.contribution_frequency)
    contributes = request.contribution_frequency != Frequency.NONE

    logger.debug(
        "Projecting start=%s amount=%s frequency=%s n=%s rate=%s horizon=%s",
        start,
        amount,
        request.contribution_frequency.value,
        n,
        rate,
        horizon,
    )

    series: List[YearPoint] = []
    for year in range(0, horizon + 1):
        periods = n * year if contributes else 0

        principal = _principal_growth(start, rate, n, year)
        contrib_growth = _contribution_growth(amount, rate, n, periods)

        total_value = principal + contrib_growth
        total_invested = start + amount * periods
        if math.isinf(total_invested):
            # inf - inf; value is never below invested
            total_interest = math.inf
        else:
            total_interest = total_value - total_invested
        series.append(
            YearPoint(
                year_index=year,
                total_value=total_value,
                total_invested=total_invested,
                total_interest=total_interest,
            )
        )

    last = series[-1]
    return ProjectionResult(
        horizon_years=horizon,
        periods_per_year=n,
        series=series,
        final_total_value=last.total_value,
        final_total_invested=last.total_invested,
        final_total_interest=last.total_interest,
    )


__all__ = [
    "PERIODS_PER_YEAR",
    "periods_per_year",
    "clamp_horizon",
    "project",
]

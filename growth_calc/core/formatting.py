"""Currency strings for the result summary and chart ticks."""

from __future__ import annotations

import math

from growth_calc.config import CURRENCY_SYMBOL
from growth_calc.schemas.projection import ProjectionResult, ResultSummary

_COMPACT_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def _compact(value: float) -> str:
    """Three significant digits with a magnitude suffix (1234567 -> 1.23M)."""
    for threshold, suffix in _COMPACT_SUFFIXES:
        if value >= threshold:
            scaled = float(f"{value / threshold:.3g}")
            # 999_999 rounds to 1000K; bump it to the next suffix
            if scaled >= 1000 and threshold < 1e12:
                return _compact(scaled * threshold)
            return f"{scaled:g}{suffix}"
    return f"{float(f'{value:.3g}'):g}"


def format_currency(value: float, compact: bool = False) -> str:
    """US-dollar style: "$1,234.56", "-$1,234.56"; compact gives "$1.23M"."""
    if not math.isfinite(value):
        return "-"
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if compact:
        return f"{sign}{CURRENCY_SYMBOL}{_compact(magnitude)}"
    text = f"{magnitude:,.2f}"
    if text == "0.00":
        sign = ""
    return f"{sign}{CURRENCY_SYMBOL}{text}"


def summarize(result: ProjectionResult) -> ResultSummary:
    return ResultSummary(
        total_value=format_currency(result.final_total_value),
        total_interest=format_currency(result.final_total_interest),
        total_invested=format_currency(result.final_total_invested),
    )

"""Turn raw form text into a ProjectionInput."""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping, Optional

from growth_calc.config import (
    DEFAULT_FREQUENCY,
    MAX_HORIZON_YEARS,
    MIN_HORIZON_YEARS,
)
from growth_calc.core.errors import InputValidationError, InvalidNumericInput
from growth_calc.schemas.projection import Frequency, ProjectionInput

logger = logging.getLogger(__name__)

FREQUENCY_ALIASES = {
    "once": Frequency.NONE,
    "yearly": Frequency.ANNUAL,
}

_STRIP_CHARS = re.compile(r"[,\s$]")


def sanitize_number_text(text: Optional[str]) -> str:
    """Drop grouping commas, whitespace, a currency symbol and a trailing percent sign."""
    if text is None:
        return ""
    cleaned = _STRIP_CHARS.sub("", str(text))
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    return cleaned


def parse_number(text: Optional[str]) -> Optional[float]:
    cleaned = sanitize_number_text(text)
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_frequency(text: Optional[str]) -> Frequency:
    if text is None or not str(text).strip():
        return Frequency(DEFAULT_FREQUENCY)
    key = str(text).strip().lower()
    if key in FREQUENCY_ALIASES:
        return FREQUENCY_ALIASES[key]
    try:
        return Frequency(key)
    except ValueError:
        allowed = ", ".join(member.value for member in Frequency)
        raise InputValidationError(
            [f"contributionFrequency must be one of: {allowed} (got {text!r})"]
        ) from None


def _group_digits(digits: str) -> str:
    # slicing instead of int(): typed amounts can exceed the int-to-str digit limit
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return ",".join(groups)


def format_thousands(text: Optional[str]) -> str:
    """Re-insert grouping commas into a typed amount, keeping any decimal part.

    "1234567.5" -> "1,234,567.5"; text that is not a number is returned as typed.
    """
    if text is None:
        return ""
    cleaned = sanitize_number_text(text)
    match = re.fullmatch(r"(-?)(\d*)(\.\d*)?", cleaned)
    if not cleaned or match is None:
        return str(text)
    sign, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    grouped = _group_digits(whole.lstrip("0") or "0") if whole else ""
    return f"{sign}{grouped}{fraction}"


def _non_negative(name: str, value: float) -> float:
    if value < 0:
        logger.info("Clamping negative %s (%s) to 0", name, value)
        return 0.0
    return value


def read_projection_input(fields: Mapping[str, Optional[str]]) -> ProjectionInput:
    """
    Parse the five calculator fields.

      - interestRate (percent) and years must parse, else InvalidNumericInput
      - startingBalance / contributionAmount default to 0 when blank or garbage
      - negatives are clamped to 0, years to [MIN_HORIZON_YEARS, MAX_HORIZON_YEARS]
    """
    rate_pct = parse_number(fields.get("interestRate"))
    years_raw = parse_number(fields.get("years"))

    bad_fields = []
    if rate_pct is None:
        bad_fields.append("interestRate")
    if years_raw is None:
        bad_fields.append("years")
    if bad_fields:
        logger.warning("Rejecting calculator input, unparseable fields: %s", bad_fields)
        raise InvalidNumericInput(bad_fields)

    frequency = parse_frequency(fields.get("contributionFrequency"))

    balance = parse_number(fields.get("startingBalance")) or 0.0
    amount = parse_number(fields.get("contributionAmount")) or 0.0

    years = int(years_raw)  # truncates toward zero like parseInt
    if not MIN_HORIZON_YEARS <= years <= MAX_HORIZON_YEARS:
        clamped = max(MIN_HORIZON_YEARS, min(years, MAX_HORIZON_YEARS))
        logger.info("Clamping years %s to %s", years, clamped)
        years = clamped

    return ProjectionInput(
        starting_balance=_non_negative("startingBalance", balance),
        contribution_amount=_non_negative("contributionAmount", amount),
        contribution_frequency=frequency,
        annual_rate=_non_negative("interestRate", rate_pct) / 100.0,
        horizon_years=years,
    )


__all__ = [
    "FREQUENCY_ALIASES",
    "sanitize_number_text",
    "parse_number",
    "parse_frequency",
    "format_thousands",
    "read_projection_input",
]

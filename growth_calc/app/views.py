"""Server-rendered calculator page."""

import logging
from typing import Any, Dict

from flask import Blueprint, render_template, request

from growth_calc.config import DEFAULT_FREQUENCY, INVALID_INPUT_MESSAGE
from growth_calc.core.calculator import calculate
from growth_calc.core.chart import figure_html
from growth_calc.core.errors import InputValidationError
from growth_calc.core.inputs import format_thousands
from growth_calc.schemas.projection import Frequency

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__)

FREQUENCY_CHOICES = [
    (Frequency.NONE.value, "One-off (no contributions)"),
    (Frequency.ANNUAL.value, "Yearly"),
    (Frequency.MONTHLY.value, "Monthly"),
    (Frequency.FORTNIGHTLY.value, "Fortnightly"),
    (Frequency.WEEKLY.value, "Weekly"),
]


@pages_bp.route("/", methods=["GET", "POST"])
def calculator() -> Any:
    """Render the form; on POST also render the summary and chart."""
    context: Dict[str, Any] = {
        "frequencies": FREQUENCY_CHOICES,
        "form": {
            "startingBalance": "",
            "contributionAmount": "",
            "contributionFrequency": DEFAULT_FREQUENCY,
            "interestRate": "",
            "years": "",
            "includeInterest": False,
        },
        "summary": None,
        "chart_html": None,
        "error": None,
    }
    if request.method == "GET":
        return render_template("index.html", **context)

    fields = request.form
    include_interest = fields.get("includeInterest") == "on"
    context["form"] = {
        "startingBalance": format_thousands(fields.get("startingBalance")),
        "contributionAmount": format_thousands(fields.get("contributionAmount")),
        "contributionFrequency": fields.get("contributionFrequency", DEFAULT_FREQUENCY),
        "interestRate": fields.get("interestRate", ""),
        "years": fields.get("years", ""),
        "includeInterest": include_interest,
    }

    try:
        calc = calculate(fields, include_interest=include_interest)
    except InputValidationError as exc:
        logger.warning("Calculator form rejected: %s", exc)
        context["error"] = INVALID_INPUT_MESSAGE
        return render_template("index.html", **context), 400

    # show the clamped horizon back in the form
    context["form"]["years"] = str(calc.result.horizon_years)
    context["summary"] = calc.summary
    context["chart_html"] = figure_html(calc.figure)
    return render_template("index.html", **context)

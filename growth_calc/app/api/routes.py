"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from growth_calc.config import INVALID_INPUT_MESSAGE
from growth_calc.core.calculator import calculate
from growth_calc.core.chart import figure_json
from growth_calc.core.errors import InputValidationError
from growth_calc.core.ping import get_ping
from growth_calc.schemas.projection import ProjectionForm, ProjectionResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InputValidationError)
def _handle_input_error(exc: InputValidationError):
    return (
        jsonify({"detail": exc.errors, "message": INVALID_INPUT_MESSAGE}),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project the calculator fields and return series, summary and chart."""
    raw_payload = request.get_json(force=True, silent=False)
    form = ProjectionForm.model_validate(raw_payload)
    calc = calculate(form.model_dump(by_alias=True), include_interest=form.include_interest)

    response = ProjectionResponse(
        input=calc.input,
        result=calc.result,
        summary=calc.summary,
        chart=figure_json(calc.figure),
    )
    # model_dump_json writes non-finite totals as null rather than a bare Infinity
    return current_app.response_class(response.model_dump_json(), mimetype="application/json")

"""Glue between the form fields, the engine and the renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import plotly.graph_objects as go

from growth_calc.core.chart import ChartRenderer
from growth_calc.core.formatting import summarize
from growth_calc.core.inputs import read_projection_input
from growth_calc.core.projection import project
from growth_calc.schemas.projection import ProjectionInput, ProjectionResult, ResultSummary

logger = logging.getLogger(__name__)


@dataclass
class Calculation:
    input: ProjectionInput
    result: ProjectionResult
    summary: ResultSummary
    figure: go.Figure


def calculate(
    fields: Mapping[str, Optional[str]],
    include_interest: bool = False,
    renderer: Optional[ChartRenderer] = None,
) -> Calculation:
    """Read the raw fields, project, and render. Raises InputValidationError on bad input."""
    projection_input = read_projection_input(fields)
    result = project(projection_input)
    renderer = renderer or ChartRenderer()
    figure = renderer.render(result, include_interest=include_interest)

    logger.info(
        "Calculated %s-year projection (%s): final value %.2f",
        result.horizon_years,
        projection_input.contribution_frequency.value,
        result.final_total_value,
    )
    return Calculation(
        input=projection_input,
        result=result,
        summary=summarize(result),
        figure=figure,
    )

"""Plotly line chart of projected value versus cumulative contributions."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

import plotly.graph_objects as go
import plotly.io as pio

from growth_calc import config
from growth_calc.core.formatting import format_currency
from growth_calc.schemas.projection import ProjectionResult

logger = logging.getLogger(__name__)

HOVER_TEMPLATE = "%{fullData.name}: %{y:$,.2f}<extra></extra>"


def chart_labels(horizon_years: int) -> List[str]:
    return [f"Year {year}" for year in range(0, horizon_years + 1)]


def axis_ticks(max_value: float, count: int = 5) -> Tuple[List[float], List[str]]:
    """Evenly spaced "nice" y-axis ticks from 0 up past max_value, compact currency labels."""
    if max_value <= 0 or not math.isfinite(max_value):
        return [0.0], [format_currency(0.0, compact=True)]

    raw_step = max_value / count
    magnitude = 10.0 ** math.floor(math.log10(raw_step))
    residual = raw_step / magnitude
    if residual <= 1:
        nice = 1
    elif residual <= 2:
        nice = 2
    elif residual <= 5:
        nice = 5
    else:
        nice = 10
    step = nice * magnitude

    values = [step * k for k in range(0, math.ceil(max_value / step) + 1)]
    return values, [format_currency(value, compact=True) for value in values]


class ChartRenderer:
    """
    Owns at most one live figure.

    render() always disposes the previous figure before building the next one,
    so repeated calculations never accumulate charts.
    """

    def __init__(self, include_interest: bool = False):
        self.include_interest = include_interest
        self.render_count = 0
        self._figure: Optional[go.Figure] = None

    @property
    def current(self) -> Optional[go.Figure]:
        return self._figure

    def dispose(self) -> None:
        if self._figure is None:
            return
        logger.debug("Disposing chart #%s", self.render_count)
        self._figure.data = []
        self._figure = None

    def render(
        self, result: ProjectionResult, include_interest: Optional[bool] = None
    ) -> go.Figure:
        self.dispose()

        show_interest = self.include_interest if include_interest is None else include_interest
        labels = chart_labels(result.horizon_years)

        figure = go.Figure()
        figure.add_trace(
            go.Scatter(
                x=labels,
                y=result.values(),
                name="Total with Interest",
                mode="lines+markers",
                line=dict(color=config.CHART_VALUE_COLOR, width=3, shape="spline"),
                fill="tozeroy",
                fillcolor=config.CHART_VALUE_FILL,
                hovertemplate=HOVER_TEMPLATE,
            )
        )
        figure.add_trace(
            go.Scatter(
                x=labels,
                y=result.invested(),
                name="Total Invested (No Interest)",
                mode="lines+markers",
                line=dict(color=config.CHART_INVESTED_COLOR, width=3, dash="dash", shape="spline"),
                fill="tozeroy",
                fillcolor=config.CHART_INVESTED_FILL,
                hovertemplate=HOVER_TEMPLATE,
            )
        )
        if show_interest:
            figure.add_trace(
                go.Scatter(
                    x=labels,
                    y=result.interest(),
                    name="Interest Earned",
                    mode="lines",
                    line=dict(color=config.CHART_INTEREST_COLOR, width=2, dash="dot"),
                    hovertemplate=HOVER_TEMPLATE,
                )
            )

        tick_values, tick_text = axis_ticks(max(result.values()))
        figure.update_layout(
            template=config.PLOTLY_TEMPLATE,
            font=dict(family=config.CHART_FONT_FAMILY),
            hovermode="x unified",
            legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
            margin=dict(l=60, r=20, t=40, b=40),
        )
        figure.update_yaxes(tickmode="array", tickvals=tick_values, ticktext=tick_text)

        self._figure = figure
        self.render_count += 1
        return figure


def figure_json(figure: go.Figure) -> Dict[str, Any]:
    return json.loads(pio.to_json(figure))


def figure_html(figure: go.Figure) -> str:
    return pio.to_html(figure, full_html=False, include_plotlyjs="cdn")

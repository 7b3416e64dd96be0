"""App-wide constants for the calculator."""

from __future__ import annotations

import logging

# Projection bounds
MIN_HORIZON_YEARS = 1
MAX_HORIZON_YEARS = 100
DEFAULT_FREQUENCY = "monthly"

# Frontend dev servers allowed to call /api/*
CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

CURRENCY_SYMBOL = "$"
INVALID_INPUT_MESSAGE = "Please enter valid numbers."

# Chart styling
CHART_VALUE_COLOR = "#4facfe"
CHART_VALUE_FILL = "rgba(79, 172, 254, 0.2)"
CHART_INVESTED_COLOR = "#ff9a9e"
CHART_INVESTED_FILL = "rgba(255, 154, 158, 0.2)"
CHART_INTEREST_COLOR = "#7ee787"
CHART_FONT_FAMILY = "Inter, sans-serif"
PLOTLY_TEMPLATE = "plotly_dark"

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

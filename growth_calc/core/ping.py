"""Ping utility used by the API health-check."""

from growth_calc import __version__
from growth_calc.schemas.ping import PingResponse


def get_ping() -> PingResponse:
    """Return the health-check payload."""
    return PingResponse(message="pong", service="growth-calc", version=__version__)

"""Ping payload used by the API health-check."""

from finplan import __version__
from finplan.schemas.ping import PingResponse


def get_ping_response(service_name: str) -> PingResponse:
    """Static liveness answer tagged with the service name and package version."""
    return PingResponse(message="pong", service=service_name, version=__version__)

"""Endpoints advertised by ``/`` and ``/info``."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EndpointDoc:
    path: str
    method: str
    summary: str
    description: str


ENDPOINTS: tuple[EndpointDoc, ...] = (
    EndpointDoc("/", "GET", "This page", "Main application page"),
    EndpointDoc("/health", "GET", "Health check with system info", "Health check with metrics"),
    EndpointDoc("/info", "GET", "Detailed application info", "Application information"),
    EndpointDoc("/env", "GET", "Environment variables (filtered)", "Environment variables (filtered)"),
)


def endpoint_index() -> dict[str, str]:
    """Path to one-line summary, as shown on the root page."""
    return {endpoint.path: endpoint.summary for endpoint in ENDPOINTS}

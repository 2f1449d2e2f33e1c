"""Custom exceptions for the status service."""

from typing import Any


class StatusServiceError(Exception):
    """Base exception for the status service."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class IntrospectionError(StatusServiceError):
    """A host or process query failed."""

    def __init__(self, probe: str, message: str):
        super().__init__(
            f"Failed to read {probe}: {message}",
            {"probe": probe},
        )
        self.probe = probe

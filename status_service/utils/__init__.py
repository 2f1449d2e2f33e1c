"""Utility functions for the status service."""

from status_service.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]

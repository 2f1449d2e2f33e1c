"""Response models for the status service."""

from status_service.models.status import (
    ApplicationInfo,
    AuthorInfo,
    BuildInfo,
    CpuStats,
    EndpointInfo,
    EnvResponse,
    ErrorResponse,
    HealthFailure,
    HealthResponse,
    InfoResponse,
    MemoryStats,
    ProcessStats,
    RootResponse,
    SystemStats,
)

__all__ = [
    # Root
    "RootResponse",
    # Health
    "HealthResponse",
    "HealthFailure",
    "SystemStats",
    "MemoryStats",
    "CpuStats",
    "ProcessStats",
    # Info
    "InfoResponse",
    "ApplicationInfo",
    "BuildInfo",
    "AuthorInfo",
    "EndpointInfo",
    # Env
    "EnvResponse",
    # Errors
    "ErrorResponse",
]

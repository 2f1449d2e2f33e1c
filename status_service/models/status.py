"""Response models for the status endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Identity and endpoint index served at ``/``."""

    application: str
    version: str
    status: Literal["UP"] = "UP"
    message: str
    timestamp: str
    endpoints: dict[str, str]


class MemoryStats(BaseModel):
    total_mb: int
    free_mb: int
    used_percent: int = Field(ge=0, le=100)


class CpuStats(BaseModel):
    cores: int
    model: str


class SystemStats(BaseModel):
    hostname: str
    platform: str
    architecture: str
    python_version: str
    uptime_seconds: int
    uptime_human: str
    memory: MemoryStats
    cpu: CpuStats


class ProcessStats(BaseModel):
    pid: int
    memory_usage_mb: int
    build_date: str
    commit_sha: str = Field(max_length=8)


class HealthResponse(BaseModel):
    """Liveness snapshot with host and process metrics."""

    status: Literal["healthy"] = "healthy"
    version: str
    timestamp: str
    system: SystemStats
    application: ProcessStats


class HealthFailure(BaseModel):
    """Body returned when introspection fails inside the health check."""

    status: Literal["unhealthy"] = "unhealthy"
    error: str
    timestamp: str


class ApplicationInfo(BaseModel):
    name: str
    description: str
    version: str
    framework: str
    language: str
    language_version: str


class BuildInfo(BaseModel):
    build_date: str
    commit_sha: str
    docker_base_image: str
    port: int


class AuthorInfo(BaseModel):
    name: str
    purpose: str
    repository: str | None = None


class EndpointInfo(BaseModel):
    path: str
    method: str
    description: str


class InfoResponse(BaseModel):
    """Build, author and endpoint metadata."""

    application: ApplicationInfo
    build: BuildInfo
    author: AuthorInfo
    endpoints: list[EndpointInfo]


class EnvResponse(BaseModel):
    """Process environment with sensitive values redacted."""

    environment_variables: dict[str, str]
    count: int
    timestamp: str


class ErrorResponse(BaseModel):
    """Shared body for the 404 and 500 fallbacks."""

    error: str
    message: str
    path: str | None = None
    status_code: int
    timestamp: str

"""Health check endpoint."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from status_service.api.deps import SettingsDep
from status_service.core import system
from status_service.models import (
    CpuStats,
    HealthFailure,
    HealthResponse,
    MemoryStats,
    ProcessStats,
    SystemStats,
)
from status_service.timestamps import utc_timestamp
from status_service.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": HealthFailure}},
)
def health_check(settings: SettingsDep) -> HealthResponse | JSONResponse:
    """Liveness probe with host and process metrics.

    Introspection failures are reported as an ``unhealthy`` body with the
    failure message rather than propagated to the global error handler.
    """
    try:
        host = system.collect_host_facts()
        memory = system.collect_memory_facts()
        process = system.collect_process_facts()

        return HealthResponse(
            version=settings.app_version,
            timestamp=utc_timestamp(),
            system=SystemStats(
                hostname=host.hostname,
                platform=host.platform,
                architecture=host.architecture,
                python_version=host.python_version,
                uptime_seconds=process.uptime_seconds,
                uptime_human=process.uptime_human,
                memory=MemoryStats(
                    total_mb=memory.total_mb,
                    free_mb=memory.free_mb,
                    used_percent=memory.used_percent,
                ),
                cpu=CpuStats(cores=host.cpu_cores, model=host.cpu_model),
            ),
            application=ProcessStats(
                pid=process.pid,
                memory_usage_mb=process.memory_usage_mb,
                build_date=settings.build_date,
                commit_sha=settings.short_commit_sha,
            ),
        )
    except Exception as exc:
        logger.warning(
            "health.unhealthy",
            error=str(exc),
            details=getattr(exc, "details", {}),
            exc_info=True,
        )
        failure = HealthFailure(error=str(exc), timestamp=utc_timestamp())
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure.model_dump(),
        )

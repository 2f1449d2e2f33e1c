"""Environment variables endpoint."""

from fastapi import APIRouter

from status_service.core.environment import redact_environment
from status_service.models import EnvResponse
from status_service.timestamps import utc_timestamp

router = APIRouter()


@router.api_route("/env", methods=["GET", "HEAD"], response_model=EnvResponse)
async def environment() -> EnvResponse:
    """Dump the process environment with secrets masked."""
    variables = redact_environment()
    return EnvResponse(
        environment_variables=variables,
        count=len(variables),
        timestamp=utc_timestamp(),
    )

"""Root endpoint: identity and endpoint index."""

from fastapi import APIRouter

from status_service.api.deps import SettingsDep
from status_service.core.catalog import endpoint_index
from status_service.models import RootResponse
from status_service.timestamps import utc_timestamp

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_model=RootResponse)
async def root(settings: SettingsDep) -> RootResponse:
    """Report that the service is up and list what it serves."""
    return RootResponse(
        application=settings.app_name,
        version=settings.app_version,
        message=f"{settings.app_name} is UP with version {settings.app_version}",
        timestamp=utc_timestamp(),
        endpoints=endpoint_index(),
    )

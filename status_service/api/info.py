"""Build and author metadata endpoint."""

import platform

from fastapi import APIRouter

from status_service import __description__, __title__
from status_service.api.deps import SettingsDep
from status_service.core.catalog import ENDPOINTS
from status_service.models import (
    ApplicationInfo,
    AuthorInfo,
    BuildInfo,
    EndpointInfo,
    InfoResponse,
)

DEFAULT_AUTHOR = "unknown"

router = APIRouter()


@router.api_route("/info", methods=["GET", "HEAD"], response_model=InfoResponse)
async def info(settings: SettingsDep) -> InfoResponse:
    """Describe the running build."""
    return InfoResponse(
        application=ApplicationInfo(
            name=__title__,
            description=__description__,
            version=settings.app_version,
            framework="FastAPI",
            language="Python",
            language_version=platform.python_version(),
        ),
        build=BuildInfo(
            build_date=settings.build_date,
            commit_sha=settings.commit_sha,
            docker_base_image=settings.docker_base_image,
            port=settings.port,
        ),
        author=AuthorInfo(
            name=settings.app_author or DEFAULT_AUTHOR,
            purpose=settings.app_purpose,
            repository=settings.app_repository,
        ),
        endpoints=[
            EndpointInfo(path=e.path, method=e.method, description=e.description)
            for e in ENDPOINTS
        ],
    )

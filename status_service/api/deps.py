"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from status_service.config import Settings


async def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]

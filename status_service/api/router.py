"""Main API router."""

from fastapi import APIRouter

from status_service.api import env, health, index, info

router = APIRouter()

router.include_router(index.router, tags=["status"])
router.include_router(health.router, tags=["health"])
router.include_router(info.router, tags=["status"])
router.include_router(env.router, tags=["status"])

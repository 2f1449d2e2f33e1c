"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from status_service import __description__, __version__
from status_service.api.middleware import RequestLoggingMiddleware
from status_service.api.router import router
from status_service.config import Settings, get_settings
from status_service.core.catalog import ENDPOINTS
from status_service.models import ErrorResponse
from status_service.timestamps import utc_timestamp
from status_service.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

# Unsupported methods on known paths are answered like unknown paths
NOT_FOUND_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


def error_response(
    status_code: int, error: str, message: str, path: str | None = None
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        path=path,
        status_code=status_code,
        timestamp=utc_timestamp(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def request_path(request: Request) -> str:
    """The path exactly as the client sent it, without query string."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    return request.url.path


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings

    # Startup
    configure_logging(settings)
    logger.info(
        "application.starting",
        name=settings.app_name,
        version=settings.app_version,
        build_date=settings.build_date,
        commit_sha=settings.commit_sha,
        url=f"http://{settings.host}:{settings.port}",
        endpoints=[f"{e.method} {e.path}" for e in ENDPOINTS],
    )

    yield

    # Shutdown
    logger.info("application.shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=__description__,
        version=__version__,
        docs_url="/docs" if settings.app_debug else None,
        redoc_url="/redoc" if settings.app_debug else None,
        openapi_url="/openapi.json" if settings.app_debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render routing and HTTP errors with the shared error body."""
        if exc.status_code in NOT_FOUND_STATUSES:
            return error_response(
                status.HTTP_404_NOT_FOUND,
                "Not Found",
                "The requested resource was not found",
                path=request_path(request),
            )
        return error_response(
            exc.status_code, HTTPStatus(exc.status_code).phrase, str(exc.detail)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors without leaking their detail."""
        logger.error(
            "unhandled_exception",
            error=str(exc),
            path=request.url.path,
            exc_info=exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An internal server error occurred",
        )

    app.include_router(router)

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the application until SIGINT/SIGTERM, then drain and exit."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )


if __name__ == "__main__":
    run()

"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from status_service import __version__
from status_service.timestamps import utc_timestamp

# Load .env file without clobbering the real environment
load_dotenv(override=False)


class Settings(BaseSettings):
    """Service settings, read once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Identity
    app_name: str = "Status Service"
    app_version: str = __version__
    app_author: str | None = None
    app_purpose: str = "Operational health and build reporting"
    app_repository: str | None = None
    app_debug: bool = False

    # Build metadata
    build_date: str = Field(default_factory=utc_timestamp)
    commit_sha: str = "local-dev"
    docker_base_image: str = "python:3.12-slim"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8081
    shutdown_timeout: int | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def short_commit_sha(self) -> str:
        """Commit SHA as shown by the health check."""
        return self.commit_sha[:8]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

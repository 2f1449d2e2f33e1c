"""Unit tests for settings and timestamps."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from status_service import __version__
from status_service.config import Settings
from status_service.timestamps import utc_timestamp

CONFIG_VARS = (
    "PORT",
    "HOST",
    "APP_VERSION",
    "BUILD_DATE",
    "COMMIT_SHA",
    "APP_AUTHOR",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch):
        settings = Settings(_env_file=None)

        assert settings.port == 8081
        assert settings.host == "0.0.0.0"
        assert settings.app_version == __version__
        assert settings.commit_sha == "local-dev"
        assert settings.app_author is None
        assert settings.build_date.endswith("Z")

    def test_environment_overrides(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("PORT", "9000")
        clean_env.setenv("APP_VERSION", "3.1.4")
        clean_env.setenv("BUILD_DATE", "2024-01-02T03:04:05.000Z")
        clean_env.setenv("COMMIT_SHA", "deadbeefcafe")

        settings = Settings(_env_file=None)

        assert settings.port == 9000
        assert settings.app_version == "3.1.4"
        assert settings.build_date == "2024-01-02T03:04:05.000Z"
        assert settings.commit_sha == "deadbeefcafe"

    @pytest.mark.parametrize("raw", ["info", "Warning", " debug "])
    def test_log_level_is_case_insensitive(self, clean_env: pytest.MonkeyPatch, raw: str):
        clean_env.setenv("LOG_LEVEL", raw)

        settings = Settings(_env_file=None)

        assert settings.log_level == raw.strip().upper()

    def test_short_commit_sha(self):
        assert Settings(commit_sha="0123456789").short_commit_sha == "01234567"
        assert Settings(commit_sha="abc").short_commit_sha == "abc"

    def test_settings_are_immutable(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.port = 1


class TestTimestamps:
    """Tests for utc_timestamp."""

    def test_format(self):
        moment = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(moment) == "2024-05-01T12:00:00.123Z"

    def test_converts_to_utc(self):
        moment = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert utc_timestamp(moment) == "2024-05-01T12:00:00.000Z"

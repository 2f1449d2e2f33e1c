"""Unit tests for environment redaction."""

import pytest

from status_service.core.environment import REDACTED, is_sensitive, redact_environment


class TestIsSensitive:
    """Tests for sensitive name detection."""

    @pytest.mark.parametrize(
        "name",
        [
            "AWS_SECRET_ACCESS_KEY",
            "GITHUB_TOKEN",
            "DB_PASSWORD",
            "Authorization",
            "OPENAI_API_BASE",
            "ssh_key_path",
            "rapid_mode",
        ],
    )
    def test_sensitive(self, name: str):
        assert is_sensitive(name)

    @pytest.mark.parametrize("name", ["PATH", "HOME", "PORT", "COMMIT_SHA", "LANG"])
    def test_not_sensitive(self, name: str):
        assert not is_sensitive(name)


class TestRedactEnvironment:
    """Tests for redact_environment."""

    def test_masks_only_sensitive_values(self):
        environ = {
            "DB_PASSWORD": "hunter2",
            "Service_Token": "abc",
            "APP_VERSION": "1.0.0",
            "HOME": "/home/app",
        }

        result = redact_environment(environ)

        assert result == {
            "DB_PASSWORD": REDACTED,
            "Service_Token": REDACTED,
            "APP_VERSION": "1.0.0",
            "HOME": "/home/app",
        }

    def test_does_not_mutate_input(self):
        environ = {"SECRET": "value"}
        redact_environment(environ)
        assert environ == {"SECRET": "value"}

    def test_empty_mapping(self):
        assert redact_environment({}) == {}

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STATUS_TEST_PLAIN", "visible")
        monkeypatch.setenv("STATUS_TEST_PASSWORD", "hidden")

        result = redact_environment()

        assert result["STATUS_TEST_PLAIN"] == "visible"
        assert result["STATUS_TEST_PASSWORD"] == REDACTED

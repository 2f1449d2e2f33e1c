"""Environment snapshot with secret redaction."""

import os
from collections.abc import Mapping

SENSITIVE_KEYWORDS = ("key", "secret", "token", "password", "auth", "api")
REDACTED = "***REDACTED***"


def is_sensitive(name: str) -> bool:
    """Whether an environment variable name looks like it holds a secret."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in SENSITIVE_KEYWORDS)


def redact_environment(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy ``environ`` (the process environment by default), masking secrets."""
    source = os.environ if environ is None else environ
    return {
        name: REDACTED if is_sensitive(name) else value
        for name, value in dict(source).items()
    }

"""Responder configuration from environment variables."""

from __future__ import annotations

import os

from octocatalog.errors import ConfigError


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


class Settings:
    """Responder settings, read from environment variables with defaults.

    ``SLACK_SIGNING_SECRET`` is mandatory: constructing settings without it
    raises :class:`ConfigError` so the process never serves unauthenticated.
    """

    def __init__(self) -> None:
        signing_secret = os.getenv("SLACK_SIGNING_SECRET", "")
        if not signing_secret:
            raise ConfigError("SLACK_SIGNING_SECRET environment variable is required")
        self.signing_secret: str = signing_secret
        self.config_file: str = os.getenv("CONFIG_FILE", "catalog.json")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = _int_env("PORT", "8080")
        self.signature_tolerance: int = _int_env("SIGNATURE_TOLERANCE_SECONDS", "300")
        if self.signature_tolerance < 0:
            raise ConfigError(
                "SIGNATURE_TOLERANCE_SECONDS must be >= 0, "
                f"got {self.signature_tolerance}"
            )
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.debug: bool = os.getenv("DEBUG", "").lower() in ("1", "true", "yes")

"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_XAI_MODEL = "grok-4-fast-reasoning"
DEFAULT_WEATHER_BASE_URL = "https://wttr.in"

# LOG_LEVEL names accepted from the environment
_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the planner's external settings."""

    xai_api_key: Optional[str] = None
    xai_model: str = DEFAULT_XAI_MODEL
    weather_base_url: str = DEFAULT_WEATHER_BASE_URL
    http_timeout_s: float = 10.0
    log_level: str = "info"
    sentry_dsn: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from environment variables."""

        return cls(
            xai_api_key=os.getenv("XAI_API_KEY"),
            xai_model=os.getenv("XAI_MODEL", DEFAULT_XAI_MODEL),
            weather_base_url=os.getenv("WEATHER_BASE_URL", DEFAULT_WEATHER_BASE_URL),
            http_timeout_s=float(os.getenv("HTTP_TIMEOUT_S", "10")),
            log_level=os.getenv("LOG_LEVEL", "info"),
            sentry_dsn=os.getenv("SENTRY_DSN"),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value


def resolve_log_level(name: Optional[str]) -> int:
    """Map a LOG_LEVEL string onto a ``logging`` level, defaulting to INFO."""

    return _LOG_LEVELS.get((name or "info").strip().lower(), logging.INFO)


def configure_logging(settings: ApiSettings) -> None:
    """Apply the configured verbosity to the root logger."""

    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s",
    )

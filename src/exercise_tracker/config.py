"""Application configuration."""

import logging
import os

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from exercise_tracker.app_logging import configure_logging

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    mongo_uri: str
    mongo_database: str = "exercise_tracker"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    cors_allow_origins: str = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def load_settings() -> Settings:
    """Load settings, exiting with a diagnostic when required values are missing."""
    try:
        return Settings()
    except ValidationError as exc:
        configure_logging()
        missing = sorted(
            str(error["loc"][0]).upper()
            for error in exc.errors()
            if error["type"] == "missing"
        )
        if missing:
            logger.error("Missing required configuration: %s", ", ".join(missing))
        else:
            logger.error("Invalid configuration: %s", exc)
        raise SystemExit(1) from exc


def parse_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]

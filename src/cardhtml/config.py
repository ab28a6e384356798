"""Centralised rendering configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/cardhtml/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class RenderConfig(BaseModel):
    """Markup composition settings."""

    front_side_marker: str = "{{FrontSide}}"
    mathjax_script_base: str = "/assets/mathjax"
    card_template_path: Path | None = None

    @field_validator("front_side_marker")
    @classmethod
    def marker_not_empty(cls, value: str) -> str:
        if not value:
            msg = "RENDER__FRONT_SIDE_MARKER must not be empty"
            raise ValueError(msg)
        return value


class AppearanceConfig(BaseModel):
    """Viewer appearance: zoom levels in percent and night mode."""

    card_zoom: int = Field(default=100, ge=1, le=500)
    image_zoom: int = Field(default=100, ge=1, le=500)
    night_mode: bool = False


class PlaybackConfig(BaseModel):
    """Audio playback scheduling."""

    replay_question: bool = True


class AppConfig(BaseModel):
    """Application runtime configuration."""

    log_dir: Path = Path("logs")
    log_level: LogLevel = "INFO"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``RENDER__FRONT_SIDE_MARKER``, ``APPEARANCE__NIGHT_MODE``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    render: RenderConfig = RenderConfig()
    appearance: AppearanceConfig = AppearanceConfig()
    playback: PlaybackConfig = PlaybackConfig()
    app: AppConfig = AppConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()


def log_settings_source(settings: Settings) -> None:
    """Log where *settings* were loaded from.

    Called once logging is configured, so the message reaches its handlers.
    """
    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

"""Tests for cardhtml.config -- Settings and sub-models.

Every test constructs Settings(_env_file=None, ...) to avoid reading real .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from cardhtml.config import (
    AppConfig,
    AppearanceConfig,
    PlaybackConfig,
    RenderConfig,
    Settings,
    get_settings,
    log_settings_source,
)


class TestDefaults:
    """Defaults match the stock card viewer."""

    def test_default_values(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.render.front_side_marker == "{{FrontSide}}"
        assert s.render.mathjax_script_base == "/assets/mathjax"
        assert s.render.card_template_path is None
        assert s.appearance.card_zoom == 100
        assert s.appearance.image_zoom == 100
        assert s.appearance.night_mode is False
        assert s.playback.replay_question is True
        assert s.app.log_dir == Path("logs")
        assert s.app.log_level == "INFO"


class TestValidation:
    """Pydantic validation of configuration values."""

    def test_empty_marker_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            RenderConfig(front_side_marker="")

    @pytest.mark.parametrize("zoom", [0, -5, 501])
    def test_zoom_out_of_range(self, zoom: int) -> None:
        with pytest.raises(ValidationError):
            AppearanceConfig(card_zoom=zoom)

    def test_int_coercion_from_string(self) -> None:
        cfg = AppearanceConfig(image_zoom="150")  # type: ignore[arg-type]
        assert cfg.image_zoom == 150

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("0", False)])
    def test_bool_coercion(self, raw: str, expected: bool) -> None:
        cfg = PlaybackConfig(replay_question=raw)  # type: ignore[arg-type]
        assert cfg.replay_question is expected

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(log_level="LOUD")  # type: ignore[arg-type]


class TestEnvironment:
    """Environment variables use the double-underscore nesting delimiter."""

    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER__FRONT_SIDE_MARKER", "{{Front}}")
        monkeypatch.setenv("APPEARANCE__NIGHT_MODE", "true")
        monkeypatch.setenv("PLAYBACK__REPLAY_QUESTION", "false")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.render.front_side_marker == "{{Front}}"
        assert s.appearance.night_mode is True
        assert s.playback.replay_question is False

    def test_unknown_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOMETHING__ELSE", "x")
        Settings(_env_file=None)  # type: ignore[call-arg]

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APPEARANCE__CARD_ZOOM=130\n", encoding="utf-8")

        s = Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert s.appearance.card_zoom == 130


class TestGetSettings:
    """get_settings() caches a single instance."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear(self) -> None:
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


def _settings_reading(env_file: Path) -> Settings:
    class EnvFileSettings(Settings):
        model_config = SettingsConfigDict(env_file=env_file)

    return EnvFileSettings()


class TestLogSettingsSource:
    """log_settings_source() reports whether a .env file was used."""

    def test_env_file_found(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APPEARANCE__CARD_ZOOM=120\n")

        with caplog.at_level(logging.INFO, logger="cardhtml.config"):
            log_settings_source(_settings_reading(env_file))

        assert f"Settings loaded .env from: {env_file}" in caplog.text

    def test_no_env_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="cardhtml.config"):
            log_settings_source(_settings_reading(tmp_path / "missing.env"))

        assert "no .env file found" in caplog.text

    def test_get_settings_does_not_log(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Loading is silent; the caller logs once its handlers exist."""
        with caplog.at_level(logging.INFO, logger="cardhtml.config"):
            get_settings()

        assert caplog.text == ""

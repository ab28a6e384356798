"""Tests for cardhtml.setup_logging()."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

from cardhtml import setup_logging
from cardhtml.config import AppConfig, Settings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger restored to its original handlers and level afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_adds_file_and_console_handlers(
        self, tmp_path: Path, root_logger: logging.Logger
    ) -> None:
        log_dir = tmp_path / "nested" / "logs"
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            app=AppConfig(log_dir=log_dir, log_level="WARNING"),
        )
        before = set(root_logger.handlers)

        setup_logging(settings)

        added = [h for h in root_logger.handlers if h not in before]
        file_handlers = [h for h in added if isinstance(h, RotatingFileHandler)]
        console_handlers = [h for h in added if h not in file_handlers]

        assert log_dir.is_dir()
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING
        assert root_logger.level == logging.DEBUG

    def test_writes_to_log_file(
        self, tmp_path: Path, root_logger: logging.Logger
    ) -> None:
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            app=AppConfig(log_dir=tmp_path),
        )
        setup_logging(settings)

        logging.getLogger("cardhtml.test").debug("hello from test")
        for handler in root_logger.handlers:
            handler.flush()

        [log_file] = tmp_path.glob("cardhtml.*.log")
        assert "hello from test" in log_file.read_text(encoding="utf-8")

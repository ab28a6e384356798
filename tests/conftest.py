"""Shared pytest fixtures for cardhtml tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cardhtml.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Each test sees a fresh ``get_settings()`` instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

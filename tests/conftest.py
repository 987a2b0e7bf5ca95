"""Shared test fixtures for the docmeta test suite.

Provides settings isolated from the process environment and makes sure
the cached settings instance never leaks between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from docmeta.core.config import Settings, get_settings


@pytest.fixture
def test_settings() -> Settings:
    """Default settings that ignore environment variables and .env files."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def strict_settings() -> Settings:
    """Settings with strict timestamp handling enabled."""
    return Settings(strict_timestamps=True, _env_file=None)  # type: ignore[call-arg]


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""Pytest configuration for the content model test suite.

Every test starts from built-in configuration: the environment toggles read by
``genai_content.config`` are cleared and the cached config file is dropped.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from genai_content.config import reset_config_cache
from genai_content.config.defaults import (
    ENV_CONFIG_FILE,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    ENV_STRICT_BLOBS,
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ambient GENAI_CONTENT_* variables and config files."""

    for name in (ENV_CONFIG_FILE, ENV_LOG_JSON, ENV_LOG_LEVEL, ENV_STRICT_BLOBS):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def lenient_blobs(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Disable strict blob decoding via environment toggle for the duration of a test."""

    monkeypatch.setenv(ENV_STRICT_BLOBS, "0")
    yield

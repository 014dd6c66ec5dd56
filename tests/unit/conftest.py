"""
Shared fixtures for unit tests.

Provides test isolation fixtures to ensure clean state between tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from dummy_file_creator.config import CONFIG_ENV_VAR, clear_settings_cache
from dummy_file_creator.logging import LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


VALID_CONFIG_YAML = """
service:
  name: dummy-file-creator
  version: 0.1.0

generation:
  default_size: "10KB"
  default_buffer_size: "4KB"
  fill_with_zeros: false

progress:
  completion_delay_seconds: 0.0

logging:
  level: "WARNING"
  format: "json"
"""


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """
    Ensure settings cache is cleared before and after each test.

    This prevents test pollution where one test's configuration
    affects another test's behavior.
    """
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a valid config file and point the environment at it."""
    path = tmp_path / "config.yaml"
    path.write_text(VALID_CONFIG_YAML)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handlers installed by setup_logging so streams never leak between tests."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate

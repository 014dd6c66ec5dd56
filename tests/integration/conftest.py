"""
Shared fixtures for integration tests.

Integration tests write real files through the public create() coroutine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory receiving generated files."""
    path = tmp_path / "generated"
    path.mkdir()
    return path

"""Shared fixtures for integration tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    """Write a file, creating parent directories."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def call_log(tmp_path: Path) -> Path:
    """File that descriptor bootstraps append their tag to."""
    return tmp_path / "calls.log"

"""Shared pytest fixtures for the loader test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from descriptor_templates import PLAIN_DESCRIPTOR


@pytest.fixture
def modules_dir(tmp_path: Path) -> Path:
    """A modules dir with py, json and yaml descriptors plus non-matching files."""
    root = tmp_path / "modules"
    root.mkdir()

    (root / "alpha.auto.py").write_text(PLAIN_DESCRIPTOR.format(module_id="alpha", lazy=False))
    (root / "settings.auto.json").write_text('{"id": "settings", "port": 8080}')
    (root / "helper.py").write_text("x = 1\n")
    (root / "README.md").write_text("not a module\n")

    sub = root / "sub"
    sub.mkdir()
    (sub / "beta.auto.yaml").write_text("id: beta\nlevel: 2\n")

    return root

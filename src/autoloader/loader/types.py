"""Loader types: DiscoveredFile."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["DiscoveredFile"]


@dataclass
class DiscoveredFile:
    """Intermediate representation of a discovered descriptor file."""

    file_path: Path
    root: Path
    name: str

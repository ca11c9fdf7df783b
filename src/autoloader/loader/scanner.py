"""Directory scanner for discovering module descriptor files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from autoloader.errors import ConfigNotFoundError
from autoloader.loader.types import DiscoveredFile

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_EXTENSIONS", "DEFAULT_MARKER", "match_descriptor_name", "scan_directory"]

DEFAULT_MARKER = "auto"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".py", ".json", ".yaml", ".yml")

_SKIP_DIR_NAMES = {"__pycache__", "node_modules"}


def match_descriptor_name(
    file_name: str,
    marker: str = DEFAULT_MARKER,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> str | None:
    """Return the base name of a descriptor file, or None if it does not match.

    ``"db.auto.py"`` -> ``"db"``; ``"db.py"`` -> ``None``.
    """
    for ext in extensions:
        suffix = f".{marker}{ext}"
        if file_name.endswith(suffix) and len(file_name) > len(suffix):
            return file_name[: -len(suffix)]
    return None


def scan_directory(
    root: Path,
    marker: str = DEFAULT_MARKER,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    max_depth: int = 8,
    follow_symlinks: bool = False,
) -> list[DiscoveredFile]:
    """Recursively scan a root directory for descriptor files.

    Entries are visited in name order so results are deterministic.

    Raises:
        ConfigNotFoundError: If the root does not exist or is not a directory.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise ConfigNotFoundError(config_path=str(root))

    visited_real_paths: set[Path] = {root}
    results: list[DiscoveredFile] = []

    def _scan_dir(dir_path: Path, depth: int) -> None:
        if depth > max_depth:
            logger.info("Max depth %d exceeded at %s, skipping", max_depth, dir_path)
            return

        try:
            entries = sorted(os.scandir(dir_path), key=lambda e: e.name)
        except PermissionError as e:
            logger.error("Permission denied scanning %s: %s", dir_path, e)
            return
        except OSError as e:
            logger.error("OS error scanning %s: %s", dir_path, e)
            return

        for entry in entries:
            name = entry.name
            if name.startswith(".") or name in _SKIP_DIR_NAMES:
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file(follow_symlinks=follow_symlinks)
                is_symlink = entry.is_symlink()
            except OSError as e:
                logger.error("OS error accessing %s: %s", entry.path, e)
                continue

            entry_path = Path(entry.path)

            if is_dir:
                if is_symlink:
                    if not follow_symlinks:
                        continue
                    real = entry_path.resolve()
                    if real in visited_real_paths:
                        logger.warning(
                            "Symlink cycle detected at %s -> %s, skipping",
                            entry_path,
                            real,
                        )
                        continue
                    visited_real_paths.add(real)
                _scan_dir(entry_path, depth + 1)
            elif is_file:
                base = match_descriptor_name(name, marker=marker, extensions=extensions)
                if base is None:
                    continue
                rel_parent = entry_path.parent.relative_to(root)
                parts = [*rel_parent.parts, base]
                results.append(
                    DiscoveredFile(
                        file_path=entry_path,
                        root=root,
                        name=".".join(parts),
                    )
                )

    _scan_dir(root, depth=1)
    return results

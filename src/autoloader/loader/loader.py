"""Loader: turns root directories into module descriptors."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterable

from autoloader.errors import ConfigError, ConfigNotFoundError, InvalidInputError
from autoloader.loader.entry_point import load_descriptor
from autoloader.loader.scanner import DEFAULT_EXTENSIONS, DEFAULT_MARKER, scan_directory

if TYPE_CHECKING:
    from autoloader.config import Config

logger = logging.getLogger(__name__)

__all__ = ["Loader"]


class Loader:
    """Discovers descriptor files beneath a set of root directories."""

    def __init__(
        self,
        dirs: Iterable[str | os.PathLike[str] | None] | None = None,
        config: Config | None = None,
        load_file: Callable[[Path], Any] | None = None,
    ) -> None:
        """Initialize the Loader.

        Args:
            dirs: Absolute root directories. Empty entries are dropped and
                duplicates collapse onto their first occurrence.
            config: Optional Config read for ``loader.*`` scan settings.
            load_file: Callable turning a file path into a descriptor.
                Defaults to :func:`load_descriptor`.

        Raises:
            InvalidInputError: If a directory path is not absolute.
            ConfigError: If ``loader.extensions`` is not a list of strings.
        """
        self._dirs: list[str] = []
        self._load_file = load_file if load_file is not None else load_descriptor

        self._marker: str = DEFAULT_MARKER
        self._extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
        self._max_depth = 8
        self._follow_symlinks = False
        if config is not None:
            self._marker = config.get("loader.marker", DEFAULT_MARKER)
            extensions = config.get("loader.extensions", DEFAULT_EXTENSIONS)
            if not isinstance(extensions, (list, tuple)) or not all(isinstance(e, str) for e in extensions):
                raise ConfigError(message=f"loader.extensions must be a list of strings, got {extensions!r}")
            self._extensions = tuple(extensions)
            self._max_depth = config.get("loader.max_depth", 8)
            self._follow_symlinks = config.get("loader.follow_symlinks", False)

        for d in dirs or []:
            if d:
                self.add_dir(d)

    @property
    def dirs(self) -> list[str]:
        """Root directories in registration order."""
        return list(self._dirs)

    def add_dir(self, path: str | os.PathLike[str]) -> None:
        """Add a root directory to scan. Already-known directories are ignored.

        Raises:
            InvalidInputError: If the path is empty or not absolute.
        """
        path_str = os.fspath(path)
        if not path_str:
            raise InvalidInputError(message="Root directory path must be a non-empty string")
        if not os.path.isabs(path_str):
            raise InvalidInputError(message=f"Root directory path must be absolute: '{path_str}'")
        if path_str in self._dirs:
            return
        self._dirs.append(path_str)

    def discover(self) -> list[Any]:
        """Scan every root directory and load each descriptor file found.

        Missing directories contribute nothing.

        Raises:
            ModuleLoadError: If a matching file cannot be loaded.
        """
        descriptors: list[Any] = []
        for root in self._dirs:
            try:
                found = scan_directory(
                    Path(root),
                    marker=self._marker,
                    extensions=self._extensions,
                    max_depth=self._max_depth,
                    follow_symlinks=self._follow_symlinks,
                )
            except ConfigNotFoundError:
                logger.warning("Root directory %s does not exist, skipping", root)
                continue

            for df in found:
                logger.debug("Loading descriptor '%s' from %s (root %s)", df.name, df.file_path, df.root)
                descriptors.append(self._load_file(df.file_path))

        logger.info("Discovered %d descriptor(s) in %d root(s)", len(descriptors), len(self._dirs))
        return descriptors

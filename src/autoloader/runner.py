"""Entry point wiring a Loader into a Context."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterable

from autoloader.context import Context
from autoloader.loader import Loader

if TYPE_CHECKING:
    from autoloader.config import Config

__all__ = ["run"]


def run(
    dirs: Iterable[str | os.PathLike[str]],
    config: Config | None = None,
) -> Context:
    """Discover descriptors under ``dirs`` and return a bootstrapped Context."""
    return Context(Loader(dirs=dirs, config=config))

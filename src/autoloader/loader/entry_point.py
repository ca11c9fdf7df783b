"""Descriptor loading for discovered files."""

from __future__ import annotations

import importlib.util
import json
import re
from pathlib import Path
from typing import Any

import yaml

from autoloader.errors import ModuleLoadError
from autoloader.module import Module

__all__ = ["load_descriptor"]


def _synthetic_module_name(file_path: Path) -> str:
    """Build an importable, collision-free module name for a descriptor file."""
    return "autoloader_ext_" + re.sub(r"\W", "_", str(file_path))


def _import_module_from_file(file_path: Path) -> Any:
    """Dynamically import a Python file and return the loaded module object."""
    spec = importlib.util.spec_from_file_location(_synthetic_module_name(file_path), str(file_path))
    if spec is None or spec.loader is None:
        raise ModuleLoadError(
            file_path=str(file_path),
            reason=f"Cannot create import spec for {file_path}",
        )

    mod = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        raise ModuleLoadError(
            file_path=str(file_path), reason=f"Failed to import module: {exc}", cause=exc
        ) from exc
    return mod


def _load_python(file_path: Path) -> Any:
    loaded = _import_module_from_file(file_path)

    candidates: list[Module] = []
    for value in vars(loaded).values():
        if not isinstance(value, Module) or value.source_module != loaded.__name__:
            continue
        if not any(value is c for c in candidates):
            candidates.append(value)

    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) > 1:
        raise ModuleLoadError(
            file_path=str(file_path),
            reason="Ambiguous descriptor: multiple Module instances found",
        )
    # The imported module object itself, via its top-level id/bootstrap/lazy
    return loaded


def _load_mapping(file_path: Path, parse: Any, error_types: tuple[type[Exception], ...]) -> dict[str, Any]:
    try:
        parsed = parse(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, *error_types) as exc:
        raise ModuleLoadError(file_path=str(file_path), reason=f"Parse error: {exc}", cause=exc) from exc

    if not isinstance(parsed, dict):
        raise ModuleLoadError(file_path=str(file_path), reason="Descriptor file must contain a mapping")
    return parsed


def load_descriptor(file_path: Path) -> Any:
    """Load a descriptor file into an in-memory descriptor.

    ``.py`` files are imported; a single :class:`Module` instance defined in
    the file wins, instances it only imports are ignored. Otherwise the
    imported module object is the descriptor. ``.json`` and
    ``.yaml``/``.yml`` files yield their top-level mapping.

    Raises:
        ModuleLoadError: If the file cannot be imported or parsed.
    """
    file_path = Path(file_path)
    suffix = file_path.suffix

    if suffix == ".py":
        return _load_python(file_path)
    if suffix == ".json":
        return _load_mapping(file_path, json.loads, (json.JSONDecodeError,))
    if suffix in (".yaml", ".yml"):
        return _load_mapping(file_path, yaml.safe_load, (yaml.YAMLError,))

    raise ModuleLoadError(file_path=str(file_path), reason=f"Unsupported descriptor extension '{suffix}'")

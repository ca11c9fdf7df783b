"""autoloader - Module discovery and lazy bootstrap runtime."""

from __future__ import annotations

# Core
from autoloader.context import Context
from autoloader.loader import Loader
from autoloader.module import Module, module
from autoloader.runner import run

# Config
from autoloader.config import Config

# Errors
from autoloader.errors import (
    AutoloaderError,
    CircularDependencyError,
    ConfigError,
    ConfigNotFoundError,
    ContextNotFoundError,
    ErrorCodes,
    InvalidDescriptorError,
    InvalidInputError,
    ModuleLoadError,
    ModuleNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Context",
    "Loader",
    "Module",
    "module",
    "run",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "AutoloaderError",
    "CircularDependencyError",
    "ConfigError",
    "ConfigNotFoundError",
    "ContextNotFoundError",
    "InvalidDescriptorError",
    "InvalidInputError",
    "ModuleLoadError",
    "ModuleNotFoundError",
]

"""Error hierarchy for the autoloader runtime."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "AutoloaderError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "InvalidDescriptorError",
    "ModuleNotFoundError",
    "ContextNotFoundError",
    "CircularDependencyError",
    "ModuleLoadError",
    "ErrorCodes",
]


class AutoloaderError(Exception):
    """Base error for all autoloader errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(AutoloaderError):
    """Raised when a configuration file or scan root cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration path not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(AutoloaderError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(AutoloaderError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class InvalidDescriptorError(AutoloaderError):
    """Raised when a discovered descriptor cannot be registered."""

    def __init__(self, reason: str, descriptor: Any = None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_DESCRIPTOR",
            message=f"Invalid module descriptor: {reason}",
            details={"reason": reason, "descriptor": repr(descriptor)},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        """Why the descriptor was rejected."""
        return self.details["reason"]


class ModuleNotFoundError(AutoloaderError):
    """Raised when a module id is not registered in a Context."""

    def __init__(self, module_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_NOT_FOUND",
            message=f"Module not registered: {module_id!r}",
            details={"module_id": module_id},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The module ID that was looked up."""
        return self.details["module_id"]


class ContextNotFoundError(AutoloaderError):
    """Raised when no context is attached under a name."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONTEXT_NOT_FOUND",
            message=f"No context attached under name {name!r}",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The context name that was looked up."""
        return self.details["name"]


class CircularDependencyError(AutoloaderError):
    """Raised when a module is requested while its own bootstrap is running."""

    def __init__(self, cycle_path: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CIRCULAR_DEPENDENCY",
            message=f"Circular dependency detected: {' -> '.join(cycle_path)}",
            details={"cycle_path": cycle_path},
            **kwargs,
        )

    @property
    def cycle_path(self) -> list[str]:
        """Module IDs forming the cycle, first and last entries equal."""
        return self.details["cycle_path"]


class ModuleLoadError(AutoloaderError):
    """Raised when a descriptor file cannot be loaded."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_LOAD_ERROR",
            message=f"Failed to load descriptor '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All autoloader error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_NOT_FOUND:
            handle_not_found()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"
    MODULE_NOT_FOUND = "MODULE_NOT_FOUND"
    CONTEXT_NOT_FOUND = "CONTEXT_NOT_FOUND"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
    MODULE_LOAD_ERROR = "MODULE_LOAD_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

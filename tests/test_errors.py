"""Tests for the autoloader error hierarchy."""

from __future__ import annotations

import pytest

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


class TestAutoloaderError:
    def test_str_includes_code(self) -> None:
        """String form is '[CODE] message'."""
        err = AutoloaderError(code="X", message="boom")
        assert str(err) == "[X] boom"

    def test_details_default_empty(self) -> None:
        """details defaults to an empty dict."""
        assert AutoloaderError(code="X", message="m").details == {}

    def test_cause_kept(self) -> None:
        """The cause keyword is stored."""
        cause = ValueError("root")
        err = ConfigError(message="bad", cause=cause)
        assert err.cause is cause

    def test_timestamp_set(self) -> None:
        """Errors carry an ISO timestamp."""
        assert "T" in AutoloaderError(code="X", message="m").timestamp


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigNotFoundError(config_path="/x"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError(message="m"), ErrorCodes.CONFIG_INVALID),
            (InvalidInputError(), ErrorCodes.GENERAL_INVALID_INPUT),
            (InvalidDescriptorError(reason="r"), ErrorCodes.INVALID_DESCRIPTOR),
            (ModuleNotFoundError(module_id="m"), ErrorCodes.MODULE_NOT_FOUND),
            (ContextNotFoundError(name="n"), ErrorCodes.CONTEXT_NOT_FOUND),
            (CircularDependencyError(cycle_path=["a", "a"]), ErrorCodes.CIRCULAR_DEPENDENCY),
            (ModuleLoadError(file_path="/f", reason="r"), ErrorCodes.MODULE_LOAD_ERROR),
        ],
    )
    def test_codes_match(self, error: AutoloaderError, code: str) -> None:
        """Each error uses its ErrorCodes constant and extends AutoloaderError."""
        assert error.code == code
        assert isinstance(error, AutoloaderError)

    def test_error_codes_immutable(self) -> None:
        """ErrorCodes instances reject attribute assignment."""
        with pytest.raises(AttributeError):
            ErrorCodes().MODULE_NOT_FOUND = "other"


class TestSpecificErrors:
    def test_module_not_found_names_id(self) -> None:
        """ModuleNotFoundError message and property carry the id."""
        err = ModuleNotFoundError(module_id="db")
        assert err.module_id == "db"
        assert "'db'" in str(err)

    def test_context_not_found_names_context(self) -> None:
        """ContextNotFoundError carries the missing name."""
        err = ContextNotFoundError(name="host")
        assert err.name == "host"
        assert "'host'" in err.message

    def test_cycle_path_in_message(self) -> None:
        """CircularDependencyError renders the path with arrows."""
        err = CircularDependencyError(cycle_path=["a", "b", "a"])
        assert err.cycle_path == ["a", "b", "a"]
        assert "a -> b -> a" in str(err)

    def test_invalid_descriptor_reason(self) -> None:
        """InvalidDescriptorError exposes its reason and the descriptor repr."""
        err = InvalidDescriptorError(reason="missing id", descriptor={"x": 1})
        assert err.reason == "missing id"
        assert err.details["descriptor"] == "{'x': 1}"

    def test_module_load_error_details(self) -> None:
        """ModuleLoadError records file path and reason."""
        err = ModuleLoadError(file_path="/m/a.auto.py", reason="syntax")
        assert err.details == {"file_path": "/m/a.auto.py", "reason": "syntax"}

"""Shared test fixtures for the context test suite."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable

import pytest

from autoloader.context import Context
from autoloader.module import Module


# === Descriptor helpers ===


class CountingModule(Module):
    """Module that records how many times its bootstrap ran."""

    def __init__(
        self,
        id: str,  # noqa: A002
        bootstrap: Callable[[Context], Any],
        lazy: bool = False,
    ) -> None:
        super().__init__(id=id, bootstrap=self._counted, lazy=lazy)
        self.calls = 0
        self._inner = bootstrap

    def _counted(self, context: Context) -> Any:
        self.calls += 1
        return self._inner(context)


class ListLoader:
    """In-memory stand-in for a Loader."""

    def __init__(self, descriptors: list[Any]) -> None:
        self.descriptors = descriptors
        self.discover_calls = 0

    def discover(self) -> list[Any]:
        self.discover_calls += 1
        return list(self.descriptors)


# === Fixtures ===


@pytest.fixture
def counting_module() -> Callable[..., CountingModule]:
    """Factory for CountingModule descriptors."""

    def factory(id: str, bootstrap: Callable[[Context], Any] | None = None, lazy: bool = False) -> CountingModule:  # noqa: A002
        return CountingModule(id=id, bootstrap=bootstrap or (lambda ctx: object()), lazy=lazy)

    return factory


@pytest.fixture
def static_module() -> SimpleNamespace:
    """A descriptor without bootstrap: its own exported value."""
    return SimpleNamespace(id="config", value={"debug": True})


@pytest.fixture
def list_loader() -> type[ListLoader]:
    """The in-memory loader class, called with a descriptor list."""
    return ListLoader

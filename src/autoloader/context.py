"""Context: module registry, lazy bootstrap and result cache."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol

from autoloader.errors import CircularDependencyError, ContextNotFoundError, ModuleNotFoundError
from autoloader.loader.validation import DescriptorHeader, descriptor_field, validate_descriptor

logger = logging.getLogger(__name__)

__all__ = ["Context", "DescriptorSource"]


class DescriptorSource(Protocol):
    """Anything that can produce the descriptors a Context registers."""

    def discover(self) -> Iterable[Any]: ...


class _StaticSource:
    def __init__(self, descriptors: Iterable[Any]) -> None:
        self._descriptors = list(descriptors)

    def discover(self) -> list[Any]:
        return list(self._descriptors)


class Context:
    """Resolves module exports by id, bootstrapping each module at most once.

    Descriptors without a ``bootstrap`` are their own exported value and are
    cached at construction. Descriptors with one stay pending until looked
    up; non-lazy ones are looked up before the constructor returns.
    Bootstrap functions receive this Context and may call :meth:`get_module`
    for their own dependencies.
    """

    def __init__(self, loader: DescriptorSource) -> None:
        """Build the registry from ``loader.discover()`` and run eager bootstraps.

        Raises:
            InvalidDescriptorError: If any descriptor lacks a usable id. No
                module is registered in that case.
            CircularDependencyError: If an eager bootstrap closes a cycle.
        """
        self._pending: dict[str, Any] = {}
        self._lazy: dict[str, bool] = {}
        self._cache: dict[str, Any] = {}
        self._resolving: list[str] = []
        self._contexts: dict[str, Any] = {}

        descriptors = list(loader.discover())
        headers = [validate_descriptor(d) for d in descriptors]

        for descriptor, header in zip(descriptors, headers):
            self._register(descriptor, header)

        logger.info(
            "Context registered %d module(s): %d static, %d pending",
            len(self._cache) + len(self._pending),
            len(self._cache),
            len(self._pending),
        )
        self._bootstrap_eager()

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[Any]) -> Context:
        """Build a Context directly from in-memory descriptors."""
        return cls(_StaticSource(descriptors))

    # ----- Registration -----

    def _register(self, descriptor: Any, header: DescriptorHeader) -> None:
        module_id = header.id
        if module_id in self._cache or module_id in self._pending:
            logger.warning("Duplicate module id '%s', later descriptor replaces earlier one", module_id)
            self._cache.pop(module_id, None)
            self._pending.pop(module_id, None)
            self._lazy.pop(module_id, None)

        if descriptor_field(descriptor, "bootstrap") is None:
            self._cache[module_id] = descriptor
        else:
            self._pending[module_id] = descriptor
            self._lazy[module_id] = header.lazy

    def _bootstrap_eager(self) -> None:
        for module_id in list(self._pending):
            # Already resolved inline by an earlier bootstrap
            if module_id not in self._pending:
                continue
            if not self._lazy[module_id]:
                self.get_module(module_id)

    # ----- Lookup -----

    def get_module(self, module_id: str) -> Any:
        """Return the exported value of a module, bootstrapping it if pending.

        Raises:
            ModuleNotFoundError: If the id was never registered.
            CircularDependencyError: If the module is requested while its own
                bootstrap is still running.
        """
        if module_id in self._cache:
            return self._cache[module_id]

        if module_id in self._resolving:
            idx = self._resolving.index(module_id)
            raise CircularDependencyError(cycle_path=[*self._resolving[idx:], module_id])

        if module_id not in self._pending:
            raise ModuleNotFoundError(module_id=module_id)

        descriptor = self._pending[module_id]
        self._resolving.append(module_id)
        logger.debug("Bootstrapping module '%s'", module_id)
        try:
            result = descriptor_field(descriptor, "bootstrap")(self)
        finally:
            self._resolving.pop()

        self._cache[module_id] = result
        del self._pending[module_id]
        del self._lazy[module_id]
        logger.debug("Module '%s' bootstrapped", module_id)
        return result

    def has_module(self, module_id: str) -> bool:
        """Check whether a module is registered, resolved or not."""
        return module_id in self._cache or module_id in self._pending

    def is_resolved(self, module_id: str) -> bool:
        """Check whether a module's exported value is cached."""
        return module_id in self._cache

    @property
    def module_ids(self) -> list[str]:
        """Sorted list of registered module IDs."""
        return sorted([*self._cache, *self._pending])

    # ----- Attached contexts -----

    def put_context(self, name: str, context: Any) -> None:
        """Attach another lookup context under a name, replacing any previous one."""
        if name in self._contexts:
            logger.warning("Context '%s' already attached, replacing it", name)
        self._contexts[name] = context

    def get_context(self, name: str) -> Any:
        """Return the context attached under ``name``.

        Raises:
            ContextNotFoundError: If nothing is attached under that name.
        """
        if name not in self._contexts:
            raise ContextNotFoundError(name=name)
        return self._contexts[name]

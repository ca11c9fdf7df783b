"""Module descriptor class and the ``@module`` decorator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from autoloader.context import Context

__all__ = ["Module", "module"]


class Module:
    """Concrete descriptor wrapping a user-defined bootstrap function.

    Attributes:
        id: Identifier the module is registered under.
        lazy: Whether bootstrap waits for the first lookup.
    """

    def __init__(
        self,
        id: str,  # noqa: A002
        bootstrap: Callable[[Context], Any],
        lazy: bool = False,
    ) -> None:
        self.id = id
        self.lazy = lazy
        self._bootstrap = bootstrap

    @property
    def source_module(self) -> str | None:
        """Name of the Python module the bootstrap function was defined in."""
        return getattr(self._bootstrap, "__module__", None)

    def bootstrap(self, context: Context) -> Any:
        """Run the wrapped bootstrap function and return its exports."""
        return self._bootstrap(context)

    def __repr__(self) -> str:
        return f"Module(id={self.id!r}, lazy={self.lazy!r})"


def module(
    func_or_none: Callable | None = None,
    /,
    *,
    id: str | None = None,  # noqa: A002
    lazy: bool = False,
) -> Any:
    """Turn a bootstrap function into a :class:`Module`.

    Works bare (``@module``, id taken from the function name) and with
    arguments (``@module(id="db", lazy=True)``). The decorated name is bound
    to the ``Module`` instance, so a descriptor file can simply decorate its
    bootstrap function.
    """

    def _wrap(func: Callable) -> Module:
        return Module(id=id if id is not None else func.__name__, bootstrap=func, lazy=lazy)

    if func_or_none is not None and callable(func_or_none):
        return _wrap(func_or_none)

    return _wrap

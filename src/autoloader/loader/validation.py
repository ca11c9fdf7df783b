"""Descriptor validation before registration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from autoloader.errors import InvalidDescriptorError

__all__ = ["DescriptorHeader", "descriptor_field", "validate_descriptor"]


class DescriptorHeader(BaseModel):
    """Registration fields every descriptor must carry."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    lazy: bool = False


def descriptor_field(descriptor: Any, name: str) -> Any:
    """Read a descriptor field by key for mappings, by attribute otherwise."""
    if isinstance(descriptor, Mapping):
        return descriptor.get(name)
    return getattr(descriptor, name, None)


def validate_descriptor(descriptor: Any) -> DescriptorHeader:
    """Validate a descriptor and return its parsed header.

    Raises:
        InvalidDescriptorError: On a missing, empty or non-string id, a
            non-boolean lazy flag, or a bootstrap that is not callable.
    """
    raw: dict[str, Any] = {"id": descriptor_field(descriptor, "id")}
    lazy = descriptor_field(descriptor, "lazy")
    if lazy is not None:
        raw["lazy"] = lazy

    try:
        header = DescriptorHeader.model_validate(raw)
    except ValidationError as e:
        problems = "; ".join(f"'{'.'.join(str(p) for p in err['loc'])}': {err['msg']}" for err in e.errors())
        raise InvalidDescriptorError(
            reason=f"invalid field {problems}",
            descriptor=descriptor,
            cause=e,
        ) from e

    bootstrap = descriptor_field(descriptor, "bootstrap")
    if bootstrap is not None and not callable(bootstrap):
        raise InvalidDescriptorError(
            reason=f"'bootstrap' of module '{header.id}' is not callable",
            descriptor=descriptor,
        )
    return header

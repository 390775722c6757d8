"""
Scope descriptors — requests for a collection-level (filtering) decision.

Two shapes are recognised::

    ScopeDescriptor("puppies", Puppy, params={"hungry": True})
    {"from": ("puppies", Puppy)}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from aegis.core.constants import SCOPE_FROM_KEY


@dataclass(frozen=True)
class ScopeDescriptor:
    """A named source of ``resource_type`` records, plus caller-defined params."""

    label: str
    resource_type: type
    params: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @property
    def source(self) -> tuple[str, type]:
        return (self.label, self.resource_type)

    def as_mapping(self) -> dict[str, Any]:
        return {**self.params, SCOPE_FROM_KEY: self.source}

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> ScopeDescriptor:
        """Build a descriptor from the ``{"from": (label, Type)}`` form."""
        resource_type = scope_type(value)
        if resource_type is None:
            raise ValueError(
                f"Scope mapping must carry a (label, type) pair under {SCOPE_FROM_KEY!r}"
            )
        label = value[SCOPE_FROM_KEY][0]
        params = {k: v for k, v in value.items() if k != SCOPE_FROM_KEY}
        return cls(label=label, resource_type=resource_type, params=params)


def scope_type(value: Any) -> type | None:
    """
    Return the type reference embedded in a scope descriptor.

    Returns None when ``value`` is not a scope descriptor of either shape.
    """
    if isinstance(value, ScopeDescriptor):
        return value.resource_type
    if not isinstance(value, Mapping):
        return None
    source = value.get(SCOPE_FROM_KEY)
    if isinstance(source, tuple) and len(source) == 2 and isinstance(source[1], type):
        return source[1]
    return None

"""
Policy finder — maps a resource descriptor to its registered policy.

Resolution order:

    None                      → NotFound(None)
    scope descriptor          → the type embedded under "from"
    type reference (a class)  → the class itself
    anything else             → type(resource)

The type's canonical identifier (``<module>.<qualname>.Policy``) is then
looked up in the registry.  Nothing is cached; every call reads the registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from aegis.policy.base import is_policy, policy_identifier
from aegis.policy.registry import PolicyRegistry, default_registry
from aegis.policy.scope import scope_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    policy: Any
    identifier: str

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    identifier: str | None  # None: there was no object to find a policy for

    @property
    def found(self) -> bool:
        return False


PolicyResolution = Found | NotFound


def resource_type(descriptor: Any) -> type:
    """Return the type whose policy governs ``descriptor``."""
    embedded = scope_type(descriptor)
    if embedded is not None:
        return embedded
    if isinstance(descriptor, type):
        return descriptor
    return type(descriptor)


class PolicyFinder:
    """Resolves descriptors against a :class:`PolicyRegistry`."""

    def __init__(self, registry: PolicyRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry

    @property
    def registry(self) -> PolicyRegistry:
        return self._registry

    def resolve(self, descriptor: Any) -> PolicyResolution:
        if descriptor is None:
            logger.debug("No policy target: descriptor is None")
            return NotFound(None)

        identifier = policy_identifier(resource_type(descriptor))
        policy = self._registry.get(identifier)
        if policy is None or not is_policy(policy):
            logger.debug("No policy registered under %s", identifier)
            return NotFound(identifier)

        logger.debug("Resolved %s", identifier)
        return Found(policy=policy, identifier=identifier)


def resolve(descriptor: Any) -> PolicyResolution:
    """Resolve ``descriptor`` against the default registry."""
    return PolicyFinder().resolve(descriptor)

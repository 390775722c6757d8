"""
Policy registry — the explicit identifier → policy table built at startup.

Policies register themselves with a decorator when their module is imported::

    @policy_for(Puppy)
    class PuppyPolicy(Policy):
        ...

    default_registry.get("myapp.models.Puppy.Policy")   # -> PuppyPolicy instance

Registration happens while the host process loads its policy modules; after
that the table is only read, so lookups take no lock.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from aegis.core.exceptions import PolicyModuleError, PolicyRegistrationError
from aegis.policy.base import is_policy, policy_identifier

logger = logging.getLogger(__name__)

P = TypeVar("P")


class PolicyRegistry:
    """Maps canonical policy identifiers to policy instances."""

    def __init__(self) -> None:
        self._policies: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, resource_type: type, policy: Any, replace: bool = False) -> Any:
        """
        Register ``policy`` for ``resource_type`` and return the stored instance.

        ``policy`` may be a class (instantiated once, with no arguments) or an
        instance.  Raises PolicyRegistrationError when it does not provide
        ``authorize`` and ``scope``, or when the type already has a policy and
        ``replace`` is false.
        """
        if not isinstance(resource_type, type):
            raise PolicyRegistrationError(
                f"Policies are registered for types, got {resource_type!r}"
            )

        if isinstance(policy, type):
            try:
                instance = policy()
            except TypeError as exc:
                raise PolicyRegistrationError(
                    f"Cannot instantiate policy {_describe(policy)}: {exc}"
                ) from exc
        else:
            instance = policy
        if not is_policy(instance):
            raise PolicyRegistrationError(
                f"{_describe(policy)} must define callable 'authorize' and 'scope'"
            )

        identifier = policy_identifier(resource_type)
        existing = self._policies.get(identifier)
        if existing is not None and not replace:
            raise PolicyRegistrationError(
                f"{identifier} is already registered to {_describe(existing)}"
            )

        self._policies[identifier] = instance
        logger.debug("Registered %s -> %s", identifier, _describe(instance))
        return instance

    def policy_for(self, resource_type: type, replace: bool = False) -> Callable[[P], P]:
        """
        Decorator form of :meth:`register`.

        Returns the decorated class unchanged so it stays importable by name.
        """

        def decorator(policy: P) -> P:
            self.register(resource_type, policy, replace=replace)
            return policy

        return decorator

    def unregister(self, resource_type: type) -> None:
        """Remove the policy for ``resource_type``. Missing entries are ignored."""
        self._policies.pop(policy_identifier(resource_type), None)

    def clear(self) -> None:
        self._policies.clear()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, identifier: str) -> Any | None:
        return self._policies.get(identifier)

    def identifiers(self) -> list[str]:
        return sorted(self._policies)

    def items(self) -> list[tuple[str, Any]]:
        return sorted(self._policies.items())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._policies

    def __len__(self) -> int:
        return len(self._policies)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())

    # ------------------------------------------------------------------
    # Bootstrap
    # ------------------------------------------------------------------

    @staticmethod
    def load_modules(modules: Iterable[str]) -> list[str]:
        """
        Import policy modules so their ``@policy_for`` decorators run.

        Modules already imported are not re-executed.  Returns the names
        imported, in order.
        """
        loaded: list[str] = []
        for name in modules:
            try:
                importlib.import_module(name)
            except Exception as exc:
                raise PolicyModuleError(name, exc) from exc
            loaded.append(name)
            logger.info("Loaded policy module %s", name)
        return loaded


def _describe(obj: Any) -> str:
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


default_registry = PolicyRegistry()


def policy_for(resource_type: type, replace: bool = False) -> Callable[[P], P]:
    """Register the decorated policy class for ``resource_type`` in the default registry."""
    return default_registry.policy_for(resource_type, replace=replace)


__all__ = ["PolicyRegistry", "default_registry", "policy_for"]

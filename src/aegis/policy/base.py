"""
Policy capability set and the type → identifier naming convention.

A policy implements both operations for one resource type::

    class PuppyPolicy(Policy):
        def authorize(self, user, action, puppy):
            return action == "index"

        def scope(self, user, scope, action):
            return {"owner_id": user.id}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from aegis.core.constants import BUILTINS_MODULE, IDENTIFIER_SEPARATOR, POLICY_SUFFIX


class Policy(ABC):
    """Authorization and scoping rules for a single resource type."""

    @abstractmethod
    def authorize(self, user: Any, action: Any, resource: Any) -> bool:
        """Return whether ``user`` may perform ``action`` on ``resource``."""
        ...

    @abstractmethod
    def scope(self, user: Any, scope: Any, action: Any) -> Any:
        """Return an opaque scoping value (e.g. a query filter) for ``action``."""
        ...


def is_policy(obj: Any) -> bool:
    """True when ``obj`` exposes callable ``authorize`` and ``scope``."""
    return callable(getattr(obj, "authorize", None)) and callable(getattr(obj, "scope", None))


def type_name(resource_type: type) -> str:
    """Fully qualified name of a type; builtins are left unprefixed."""
    module = getattr(resource_type, "__module__", None)
    qualname = getattr(resource_type, "__qualname__", resource_type.__name__)
    if not module or module == BUILTINS_MODULE:
        return qualname
    return f"{module}.{qualname}"


def policy_identifier(resource_type: type) -> str:
    """
    Canonical policy identifier for ``resource_type``.

    ``myapp.models.Puppy`` → ``myapp.models.Puppy.Policy``
    """
    return f"{type_name(resource_type)}{IDENTIFIER_SEPARATOR}{POLICY_SUFFIX}"

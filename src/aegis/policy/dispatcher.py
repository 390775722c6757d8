"""
Authorization dispatcher — resolve the policy, then delegate to it.

Usage::

    dispatcher = Dispatcher(registry)

    dispatcher.authorized(user, "show", puppy)
    dispatcher.auth_scope(user, {"from": ("puppies", Puppy)}, "index")

    # Callers that already hold the policy skip resolution:
    policy = dispatcher.fetch_policy(Puppy)
    dispatcher.authorize_with_policy(policy, user, "show", puppy)

Policy results are returned unchanged and exceptions raised by a policy
propagate untouched.  A missing policy is always an error, never a deny.
"""

from __future__ import annotations

import logging
from typing import Any

from aegis.core.exceptions import NoPolicyTargetError, PolicyNotFoundError
from aegis.policy.finder import Found, PolicyFinder
from aegis.policy.registry import PolicyRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Entry points for authorization and scoping checks."""

    def __init__(self, registry: PolicyRegistry | None = None) -> None:
        self._finder = PolicyFinder(registry)

    @property
    def finder(self) -> PolicyFinder:
        return self._finder

    def fetch_policy(self, resource: Any) -> Any:
        """
        Return the policy for ``resource``.

        Raises NoPolicyTargetError for ``None`` and PolicyNotFoundError when the
        resource's type has no registered policy.
        """
        result = self._finder.resolve(resource)
        if isinstance(result, Found):
            return result.policy
        if result.identifier is None:
            raise NoPolicyTargetError()
        logger.debug("Policy not found: %s", result.identifier)
        raise PolicyNotFoundError(result.identifier)

    def authorized(self, user: Any, action: Any, resource: Any) -> bool:
        """Whether ``user`` may perform ``action`` on ``resource``, per its policy."""
        policy = self.fetch_policy(resource)
        return self.authorize_with_policy(policy, user, action, resource)

    def authorize_with_policy(self, policy: Any, user: Any, action: Any, resource: Any) -> bool:
        return policy.authorize(user, action, resource)

    def auth_scope(self, user: Any, scope: Any, action: Any) -> Any:
        """The policy-defined scope of ``scope``'s resource type for ``action``."""
        policy = self.fetch_policy(scope)
        return self.scope_with_policy(policy, user, scope, action)

    def scope_with_policy(self, policy: Any, user: Any, scope: Any, action: Any) -> Any:
        return policy.scope(user, scope, action)


default_dispatcher = Dispatcher()


def fetch_policy(resource: Any) -> Any:
    return default_dispatcher.fetch_policy(resource)


def authorized(user: Any, action: Any, resource: Any) -> bool:
    return default_dispatcher.authorized(user, action, resource)


def authorize_with_policy(policy: Any, user: Any, action: Any, resource: Any) -> bool:
    return default_dispatcher.authorize_with_policy(policy, user, action, resource)


def auth_scope(user: Any, scope: Any, action: Any) -> Any:
    return default_dispatcher.auth_scope(user, scope, action)


def scope_with_policy(policy: Any, user: Any, scope: Any, action: Any) -> Any:
    return default_dispatcher.scope_with_policy(policy, user, scope, action)

"""
Aegis policies — convention-based policy resolution and dispatch.

Public API::

    from aegis.policy import Policy, policy_for, authorized, auth_scope

    @policy_for(Puppy)
    class PuppyPolicy(Policy):
        def authorize(self, user, action, puppy):
            return action == "index"

        def scope(self, user, scope, action):
            return f"{action}_scope"

    authorized(user, "index", Puppy)                       # True
    auth_scope(user, {"from": ("puppies", Puppy)}, "show")   # "show_scope"
"""

from aegis.policy.base import Policy, policy_identifier
from aegis.policy.dispatcher import (
    Dispatcher,
    auth_scope,
    authorize_with_policy,
    authorized,
    default_dispatcher,
    fetch_policy,
    scope_with_policy,
)
from aegis.policy.finder import Found, NotFound, PolicyFinder, resolve
from aegis.policy.registry import PolicyRegistry, default_registry, policy_for
from aegis.policy.scope import ScopeDescriptor

__all__ = [
    "Dispatcher",
    "Found",
    "NotFound",
    "Policy",
    "PolicyFinder",
    "PolicyRegistry",
    "ScopeDescriptor",
    "auth_scope",
    "authorize_with_policy",
    "authorized",
    "default_dispatcher",
    "default_registry",
    "fetch_policy",
    "policy_for",
    "policy_identifier",
    "resolve",
    "scope_with_policy",
]

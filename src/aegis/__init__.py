"""
Aegis — lightweight, convention-based authorization.

Each resource type gets one policy, registered under the type's canonical
identifier (``myapp.models.Puppy`` → ``myapp.models.Puppy.Policy``).  Aegis
finds the policy for an instance, a class, or a scope descriptor and hands the
decision to it.

Package layout (src/aegis/):
  policy/     — Policy base class, registry, finder, dispatcher
  core/       — config, constants, exceptions, logging
  cli/        — Click CLI for inspecting registered policies
"""

from aegis.core.exceptions import (
    AegisError,
    NoPolicyTargetError,
    PolicyError,
    PolicyNotFoundError,
    PolicyRegistrationError,
)
from aegis.policy import (
    Dispatcher,
    Policy,
    PolicyFinder,
    PolicyRegistry,
    ScopeDescriptor,
    auth_scope,
    authorize_with_policy,
    authorized,
    default_registry,
    fetch_policy,
    policy_for,
    resolve,
    scope_with_policy,
)

__version__ = "0.3.0"
__all__ = [
    "AegisError",
    "Dispatcher",
    "NoPolicyTargetError",
    "Policy",
    "PolicyError",
    "PolicyFinder",
    "PolicyNotFoundError",
    "PolicyRegistrationError",
    "PolicyRegistry",
    "ScopeDescriptor",
    "__version__",
    "auth_scope",
    "authorize_with_policy",
    "authorized",
    "default_registry",
    "fetch_policy",
    "policy_for",
    "resolve",
    "scope_with_policy",
]

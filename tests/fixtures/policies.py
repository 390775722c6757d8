"""Policies registered in the default registry on import."""

from __future__ import annotations

from aegis import Policy, policy_for
from tests.fixtures.models import Kennel, Puppy


@policy_for(Puppy)
class PuppyPolicy(Policy):
    def authorize(self, user, action, puppy):
        return action == "index"

    def scope(self, user, scope, action):
        if action == "index":
            return "index_scope"
        if action == "show":
            return "show_scope"
        return None


@policy_for(Kennel.Crate)
class CratePolicy(Policy):
    def authorize(self, user, action, crate):
        return True

    def scope(self, user, scope, action):
        return []

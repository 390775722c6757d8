"""Tests for the type → canonical policy identifier convention."""

from __future__ import annotations

from aegis.policy.base import Policy, is_policy, policy_identifier, type_name
from tests.fixtures.models import Kennel, Puppy


class TestPolicyIdentifier:
    def test_module_qualified(self) -> None:
        assert policy_identifier(Puppy) == "tests.fixtures.models.Puppy.Policy"

    def test_nested_class(self) -> None:
        assert policy_identifier(Kennel.Crate) == "tests.fixtures.models.Kennel.Crate.Policy"

    def test_builtins_are_unprefixed(self) -> None:
        assert policy_identifier(int) == "int.Policy"
        assert policy_identifier(dict) == "dict.Policy"

    def test_deterministic(self) -> None:
        assert policy_identifier(Puppy) == policy_identifier(Puppy)

    def test_type_name(self) -> None:
        assert type_name(Puppy) == "tests.fixtures.models.Puppy"
        assert type_name(str) == "str"


class TestIsPolicy:
    def test_policy_subclass_instance(self) -> None:
        class P(Policy):
            def authorize(self, user, action, resource):
                return True

            def scope(self, user, scope, action):
                return None

        assert is_policy(P())

    def test_attributes_must_be_callable(self) -> None:
        class NotCallable:
            authorize = True
            scope = None

        assert not is_policy(NotCallable())

    def test_plain_object(self) -> None:
        assert not is_policy(object())

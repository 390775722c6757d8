"""Tests for aegis.policy.scope — scope descriptor shapes."""

from __future__ import annotations

import pytest

from aegis import ScopeDescriptor
from aegis.policy.scope import scope_type
from tests.fixtures.models import Puppy


class TestScopeType:
    def test_descriptor(self) -> None:
        assert scope_type(ScopeDescriptor("puppies", Puppy)) is Puppy

    def test_mapping(self) -> None:
        assert scope_type({"from": ("puppies", Puppy)}) is Puppy

    def test_not_a_scope(self) -> None:
        assert scope_type(Puppy) is None
        assert scope_type(Puppy()) is None
        assert scope_type({"where": {}}) is None
        assert scope_type({"from": ["puppies", Puppy]}) is None
        assert scope_type({"from": ("puppies", Puppy, "extra")}) is None


class TestScopeDescriptor:
    def test_source(self) -> None:
        assert ScopeDescriptor("puppies", Puppy).source == ("puppies", Puppy)

    def test_as_mapping(self) -> None:
        scope = ScopeDescriptor("puppies", Puppy, params={"hungry": True})
        assert scope.as_mapping() == {"from": ("puppies", Puppy), "hungry": True}

    def test_as_mapping_keeps_source_over_params(self) -> None:
        scope = ScopeDescriptor("puppies", Puppy, params={"from": ("kittens", object)})
        assert scope.as_mapping()["from"] == ("puppies", Puppy)

    def test_hashable_with_params(self) -> None:
        plain = ScopeDescriptor("puppies", Puppy)
        filtered = ScopeDescriptor("puppies", Puppy, params={"hungry": True})
        assert hash(plain) == hash(filtered)
        assert len({plain, ScopeDescriptor("puppies", Puppy)}) == 1

    def test_from_mapping(self) -> None:
        scope = ScopeDescriptor.from_mapping({"from": ("puppies", Puppy), "limit": 10})
        assert scope.label == "puppies"
        assert scope.resource_type is Puppy
        assert scope.params == {"limit": 10}

    def test_from_mapping_rejects_malformed(self) -> None:
        with pytest.raises(ValueError, match="'from'"):
            ScopeDescriptor.from_mapping({"from": "puppies"})

    def test_frozen(self) -> None:
        scope = ScopeDescriptor("puppies", Puppy)
        with pytest.raises(AttributeError):
            scope.label = "kittens"  # type: ignore[misc]

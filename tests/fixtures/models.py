"""Resource types used across the test suite."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Puppy:
    id: int | None = None
    user_id: int | None = None
    hungry: bool = False


@dataclass
class Kitten:
    id: int | None = None
    user_id: int | None = None
    hungry: bool = False


class Kennel:
    class Crate:
        """Nested type: its policy lives at ...Kennel.Crate.Policy."""

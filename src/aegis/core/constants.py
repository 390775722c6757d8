"""Aegis constants: naming convention, exit codes, and filesystem layout."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    POLICY_NOT_FOUND = 6


# ---------------------------------------------------------------------------
# Policy naming convention
# ---------------------------------------------------------------------------

POLICY_SUFFIX = "Policy"  # Widget -> Widget.Policy
IDENTIFIER_SEPARATOR = "."
SCOPE_FROM_KEY = "from"  # {"from": ("puppies", Puppy)}
BUILTINS_MODULE = "builtins"  # omitted from identifiers: int.Policy

# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

AEGIS_DIR_NAME = ".aegis"
CONFIG_FILENAME = "config.toml"

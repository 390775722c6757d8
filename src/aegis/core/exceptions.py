"""Aegis exception hierarchy."""

from __future__ import annotations


class AegisError(Exception):
    """Base exception for all Aegis errors."""


class ConfigError(AegisError):
    """Raised when the configuration is invalid or cannot be read."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class PolicyError(AegisError):
    """Raised when a policy cannot be resolved for a resource."""


class NoPolicyTargetError(PolicyError):
    """Raised when resolution is attempted on ``None``."""

    def __init__(self) -> None:
        super().__init__("No Policy for nil object")


class PolicyNotFoundError(PolicyError):
    """Raised when no policy is registered under the canonical identifier."""

    def __init__(self, identifier: str | None) -> None:
        self.identifier = identifier
        super().__init__(f"Policy not found: {identifier or 'nil'}")


class PolicyRegistrationError(AegisError, TypeError):
    """Raised when a policy is invalid or clashes with an existing registration."""


class PolicyModuleError(AegisError):
    """Raised when a configured policy module cannot be imported."""

    def __init__(self, module: str, cause: BaseException) -> None:
        self.module = module
        super().__init__(f"Cannot import policy module {module!r}: {cause}")

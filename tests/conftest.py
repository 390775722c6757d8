from __future__ import annotations

import logging

import pytest

import tests.fixtures.policies  # noqa: F401  (registers PuppyPolicy, CratePolicy)
from aegis.policy.registry import default_registry


@pytest.fixture(autouse=True)
def _restore_default_registry():
    """Undo registrations a test makes in the process-wide registry."""
    snapshot = dict(default_registry._policies)
    yield
    default_registry._policies.clear()
    default_registry._policies.update(snapshot)


@pytest.fixture(autouse=True)
def _detach_aegis_log_handler():
    """CLI runs attach a handler bound to CliRunner's captured stderr."""
    yield
    logger = logging.getLogger("aegis")
    for handler in list(logger.handlers):
        if handler.get_name() == "aegis":
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Point AEGIS_CONFIG at a per-test path so ~/.aegis is never read."""
    monkeypatch.setenv("AEGIS_CONFIG", str(tmp_path / "config.toml"))
    for var in ("AEGIS_POLICY_MODULES", "AEGIS_LOG_LEVEL", "AEGIS_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)

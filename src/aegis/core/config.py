"""Aegis configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from aegis.core.constants import AEGIS_DIR_NAME, CONFIG_FILENAME
from aegis.core.exceptions import ConfigError, ConfigNotFoundError


def aegis_dir() -> Path:
    """Return the Aegis config directory (~/.aegis). Not created here."""
    return Path.home() / AEGIS_DIR_NAME


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class PoliciesConfig(BaseModel):
    # Dotted module paths imported at startup so their @policy_for decorators run
    modules: list[str] = Field(default_factory=list)

    @field_validator("modules", mode="before")
    @classmethod
    def parse_modules(cls, v: Any) -> Any:
        """Accept both list and comma-separated string."""
        if isinstance(v, str):
            return [m.strip() for m in v.split(",") if m.strip()]
        return v

    @field_validator("modules")
    @classmethod
    def validate_module_names(cls, v: list[str]) -> list[str]:
        for name in v:
            if not all(part.isidentifier() for part in name.split(".")):
                raise ValueError(f"Invalid policy module name: {name!r}")
        return v


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "text"  # "text" | "json"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class AegisConfig(BaseModel):
    """Root Aegis configuration model."""

    policies: PoliciesConfig = Field(default_factory=PoliciesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _config_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        return self._config_path


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def config_file_path() -> Path:
    if env_path := os.environ.get("AEGIS_CONFIG"):
        return Path(env_path)
    return aegis_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None, required: bool = False) -> AegisConfig:
    """
    Load AegisConfig from TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (AEGIS_*)
      2. Config file (~/.aegis/config.toml)
      3. Built-in defaults (when the file is missing and not required)
    """
    import tomllib

    cfg_path = path or config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc
    elif required:
        raise ConfigNotFoundError(
            f"Aegis is not configured. Run 'aegis init' first.\n"
            f"(Config file not found: {cfg_path})"
        )

    _apply_env_overrides(data)

    try:
        config = AegisConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc

    if cfg_path.exists():
        config._config_path = cfg_path
    return config


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay AEGIS_* environment variables onto the parsed TOML data."""
    if modules := os.environ.get("AEGIS_POLICY_MODULES"):
        data.setdefault("policies", {})["modules"] = modules
    if level := os.environ.get("AEGIS_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level
    if fmt := os.environ.get("AEGIS_LOG_FORMAT"):
        data.setdefault("logging", {})["format"] = fmt


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to TOML file."""
    import tomli_w

    cfg_path = path or config_file_path()
    cfg_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.replace(cfg_path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    return cfg_path

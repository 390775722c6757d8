"""aegis policies list / resolve — inspect the policy registry."""

from __future__ import annotations

import importlib
import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape

from aegis.core.config import load_config
from aegis.core.constants import ExitCode
from aegis.core.exceptions import AegisError
from aegis.core.logging import configure_logging
from aegis.policy.finder import Found, PolicyFinder
from aegis.policy.registry import PolicyRegistry, default_registry


def _bootstrap(modules: list[str], console: Console) -> PolicyRegistry:
    """Load config, set up logging, and import configured + extra policy modules."""
    try:
        config = load_config()
        configure_logging(config.logging)
        PolicyRegistry.load_modules([*config.policies.modules, *modules])
    except AegisError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)
    return default_registry


def _class_path(obj: Any) -> str:
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


def import_target(target: str) -> Any:
    """
    Import ``pkg.module:Qual.Name`` or ``pkg.module.Name``.

    Raises ValueError when the target cannot be found.
    """
    if ":" in target:
        module_name, _, qualname = target.partition(":")
    else:
        module_name, _, qualname = target.rpartition(".")
    if not module_name or not qualname:
        raise ValueError(f"Target must be 'pkg.module:Type' or 'pkg.module.Type', got {target!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except Exception as exc:
        raise ValueError(f"Cannot import {module_name!r}: {exc}") from exc
    for attr in qualname.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise ValueError(f"{target!r} not found: {exc}") from exc
    return obj


def cmd_list(modules: list[str], as_json: bool, console: Console) -> None:
    registry = _bootstrap(modules, console)
    rows = [
        {"identifier": identifier, "policy": _class_path(policy)}
        for identifier, policy in registry.items()
    ]

    if as_json:
        print(json.dumps(rows, indent=2))
        return

    if not rows:
        console.print("No policies registered.")
        return

    console.print(f"[bold]Registered policies[/bold] ({len(rows)})\n")
    for row in rows:
        console.print(
            f"  {row['identifier']}  →  {row['policy']}", soft_wrap=True, highlight=False
        )


def cmd_resolve(target: str, modules: list[str], as_json: bool, console: Console) -> None:
    registry = _bootstrap(modules, console)
    try:
        resource = import_target(target)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        sys.exit(ExitCode.ERROR)

    result = PolicyFinder(registry).resolve(resource)
    found = isinstance(result, Found)
    row = {
        "target": target,
        "identifier": result.identifier,
        "found": found,
        "policy": _class_path(result.policy) if found else None,
    }

    if as_json:
        print(json.dumps(row, indent=2))
    elif found:
        console.print(
            f"[green]FOUND[/green]  {row['identifier']}  →  {row['policy']}",
            soft_wrap=True,
            highlight=False,
        )
    else:
        console.print(
            f"[red]MISSING[/red]  Policy not found: {row['identifier']}",
            soft_wrap=True,
            highlight=False,
        )

    if not found:
        sys.exit(ExitCode.POLICY_NOT_FOUND)

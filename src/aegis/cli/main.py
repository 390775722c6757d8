"""
Aegis CLI entry point.

Commands:
  aegis init [--force]                 — write a default config file
  aegis policies list [--json]         — show registered policies
  aegis policies resolve <target>      — show the policy a type resolves to
  aegis version                        — show version
"""

from __future__ import annotations

import click
from rich.console import Console

from aegis import __version__

console = Console()


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", "-V", message="aegis %(version)s")
def cli() -> None:
    """Aegis — convention-based authorization policies."""


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file")
@click.option(
    "--module", "modules", multiple=True, help="Policy module to load at startup (repeatable)"
)
def init(force: bool, modules: tuple[str, ...]) -> None:
    """Write a default configuration file."""
    from aegis.cli._init import cmd_init

    cmd_init(force=force, modules=list(modules), console=console)


# ---------------------------------------------------------------------------
# policies
# ---------------------------------------------------------------------------


@cli.group()
def policies() -> None:
    """Inspect registered policies."""


@policies.command("list")
@click.option("--module", "modules", multiple=True, help="Extra policy module to load")
@click.option("--json", "as_json", is_flag=True, default=False)
def policies_list(modules: tuple[str, ...], as_json: bool) -> None:
    """List registered policies."""
    from aegis.cli._policies import cmd_list

    cmd_list(modules=list(modules), as_json=as_json, console=console)


@policies.command("resolve")
@click.argument("target")
@click.option("--module", "modules", multiple=True, help="Extra policy module to load")
@click.option("--json", "as_json", is_flag=True, default=False)
def policies_resolve(target: str, modules: tuple[str, ...], as_json: bool) -> None:
    """Resolve TARGET (pkg.module:Type or pkg.module.Type) to its policy."""
    from aegis.cli._policies import cmd_resolve

    cmd_resolve(target=target, modules=list(modules), as_json=as_json, console=console)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command()
def version() -> None:
    """Show version."""
    console.print(f"aegis {__version__}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

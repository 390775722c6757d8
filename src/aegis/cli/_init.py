"""aegis init — write a default configuration file."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from aegis.core.config import AegisConfig, config_file_path, save_config
from aegis.core.constants import ExitCode
from aegis.core.exceptions import ConfigError


def cmd_init(force: bool, modules: list[str], console: Console) -> None:
    cfg_path = config_file_path()
    if cfg_path.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {cfg_path}\nUse --force to overwrite.",
            soft_wrap=True,
        )
        sys.exit(ExitCode.ERROR)

    try:
        config = AegisConfig.model_validate({"policies": {"modules": modules}})
        save_config(config.model_dump(), cfg_path)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)
    except ValueError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    console.print(f"[green]Wrote[/green] {cfg_path}", soft_wrap=True)

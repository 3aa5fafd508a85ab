# Copyright (c) Syntropy Systems
"""snakecheck init command."""

from pathlib import Path

import typer
from rich.console import Console

from snakecheck.config import CONFIG_FILENAME, SnakecheckConfig, write_default_config

console = Console()


def init(
    path: Path = typer.Argument(
        Path(),
        help="Directory to write snakecheck.yaml into (default: current directory)",
    ),
) -> None:
    """Write a snakecheck.yaml with the default settings."""
    target = path.resolve()
    config_path = target / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]Already initialized:[/yellow] {config_path}")
        return

    target.mkdir(parents=True, exist_ok=True)
    write_default_config(config_path)

    defaults = SnakecheckConfig()
    console.print(f"[green]Wrote config:[/green] {config_path}")
    console.print(f"  [dim]url:[/dim] {defaults.url}{defaults.move_path}")
    console.print(f"  [dim]fixtures:[/dim] {defaults.fixtures_dir}")

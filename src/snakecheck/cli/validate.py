# Copyright (c) Syntropy Systems
"""snakecheck validate command."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from snakecheck.cli.common import configure_logging
from snakecheck.config import ConfigError, load_config
from snakecheck.fixtures import (
    FixturesDirectoryError,
    MalformedFixture,
    discover_fixtures,
    load_fixture,
)

console = Console()


def validate(
    fixtures_dir: Optional[Path] = typer.Argument(
        None,
        help="Directory of fixture files (default: fixtures_dir from config, else ./tests)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        envvar="SNAKECHECK_CONFIG",
        help="Config file to use instead of the nearest snakecheck.yaml",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """
    Check fixture files without contacting an agent.

    Exits with status 1 if any fixture is malformed.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path)
        directory = fixtures_dir or Path(config.fixtures_dir)
        paths = discover_fixtures(directory)
    except (ConfigError, FixturesDirectoryError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not paths:
        console.print(f"[yellow]Warning:[/yellow] No fixtures found in {escape(str(directory))}")
        return

    problems: list[MalformedFixture] = []
    for path in paths:
        try:
            _ = load_fixture(path)
        except MalformedFixture as e:
            problems.append(e)

    valid = len(paths) - len(problems)
    style = "green" if not problems else "red"
    console.print(f"[{style}]{valid} of {len(paths)} fixture(s) valid[/{style}]")

    for problem in problems:
        console.print(f"  [red]✗[/red] {escape(problem.path.name)}: {escape(problem.reason)}")

    if problems:
        raise typer.Exit(1)

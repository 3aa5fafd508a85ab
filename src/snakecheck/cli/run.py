# Copyright (c) Syntropy Systems
"""snakecheck run command."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from snakecheck.cli.common import configure_logging
from snakecheck.client import AgentClient
from snakecheck.config import ConfigError, load_config
from snakecheck.fixtures import FixturesDirectoryError, discover_fixtures
from snakecheck.report import print_summary, write_json_report
from snakecheck.runner import FixtureRunner

console = Console()


def run(  # noqa: PLR0913
    fixtures_dir: Optional[Path] = typer.Argument(
        None,
        help="Directory of fixture files (default: fixtures_dir from config, else ./tests)",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url", "-u",
        envvar="SNAKECHECK_URL",
        help="Base URL of the agent (default: http://localhost:8000)",
    ),
    move_path: Optional[str] = typer.Option(
        None,
        "--move-path",
        envvar="SNAKECHECK_MOVE_PATH",
        help="Move endpoint path appended to the URL (default: /move)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout", "-t",
        envvar="SNAKECHECK_TIMEOUT",
        help="Seconds to wait for each move (default: 5)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers", "-w",
        envvar="SNAKECHECK_WORKERS",
        min=1,
        help="Fixtures to evaluate concurrently (default: 1)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        envvar="SNAKECHECK_CONFIG",
        help="Config file to use instead of the nearest snakecheck.yaml",
    ),
    json_output: Optional[Path] = typer.Option(
        None,
        "--json",
        help="Also write the results to this JSON file",
    ),
    fail_on_empty: Optional[bool] = typer.Option(
        None,
        "--fail-on-empty/--allow-empty",
        help="Exit with status 1 when no fixtures are found",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show every verdict and debug logs"),
) -> None:
    """
    Run every fixture against a live agent.

    Each fixture's board state is POSTed to the agent's move endpoint and
    the returned move is checked against the fixture's expected moves.
    Exits with status 0 only if every fixture passed.

    Examples:

        # Agent on the default http://localhost:8000, fixtures in ./tests
        snakecheck run

        # Another agent and fixtures directory, four requests at a time
        snakecheck run fixtures/ --url http://localhost:8080/my-snake --workers 4
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    timeout = config.timeout if timeout is None else timeout
    if timeout <= 0:
        console.print(f"[red]Error:[/red] Timeout must be positive, got {timeout}")
        raise typer.Exit(1)

    directory = fixtures_dir or Path(config.fixtures_dir)
    try:
        paths = discover_fixtures(directory)
    except FixturesDirectoryError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not paths:
        console.print(
            f"[yellow]Warning:[/yellow] No fixtures found in {escape(str(directory))}, "
            "nothing was tested"
        )

    with AgentClient(
        base_url=url or config.url,
        move_path=move_path or config.move_path,
        timeout=timeout,
    ) as client:
        if paths:
            console.print(
                f"[dim]Running {len(paths)} fixture(s) against {escape(client.move_url)}[/dim]"
            )
        runner = FixtureRunner(client, workers=workers or config.workers)
        summary = runner.run_fixtures(paths)

    print_summary(summary, console, verbose=verbose)

    if json_output is not None:
        write_json_report(summary, json_output)
        console.print(f"[dim]Wrote results to {escape(str(json_output))}[/dim]")

    if not paths:
        if config.fail_on_empty if fail_on_empty is None else fail_on_empty:
            raise typer.Exit(1)
        return

    if not summary.all_passed:
        raise typer.Exit(1)

# Copyright (c) Syntropy Systems
"""Rendering run summaries to the terminal and to JSON."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from snakecheck.models.result import RunSummary, Verdict


def format_expected(expected: tuple[str, ...]) -> str:
    """Format expected moves for humans: '"up"' or 'one of "up", "down"'."""
    quoted = ", ".join(f'"{m}"' for m in expected)
    if len(expected) == 1:
        return quoted
    return f"one of {quoted}"


def failure_reason(verdict: Verdict) -> str:
    """Explain why a verdict failed."""
    if verdict.error_kind is not None:
        return f"{verdict.error_kind.value}: {verdict.error}"
    return (
        "Moved in the wrong direction: should have moved "
        f'{format_expected(verdict.expected)} but moved "{verdict.move}"'
    )


def _verdict_table(summary: RunSummary) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Fixture")
    table.add_column("Result")
    table.add_column("Move")
    table.add_column("Expected", style="dim")
    table.add_column("Shout", style="dim")

    for verdict in summary.verdicts:
        if verdict.passed:
            result = "[green]pass[/green]"
        elif verdict.error_kind is not None:
            result = f"[red]{verdict.error_kind.value}[/red]"
        else:
            result = "[red]fail[/red]"
        table.add_row(
            escape(verdict.fixture_id),
            result,
            verdict.move or "-",
            ", ".join(verdict.expected) or "-",
            escape(verdict.shout) if verdict.shout else "",
        )
    return table


def print_summary(summary: RunSummary, console: Console, verbose: bool = False) -> None:
    """Print the headline, optional verdict table, then each failure."""
    style = "green" if summary.all_passed else "red"
    console.print(
        f"[{style}]{summary.passed} out of {summary.total} tests passed![/{style}]"
    )

    if verbose and summary.verdicts:
        console.print()
        console.print(_verdict_table(summary))

    for verdict in summary.failures:
        console.print()
        console.print(f"[bold]Failure on test:[/bold] {escape(verdict.path)}")
        console.print(f"  [dim]reason:[/dim] {escape(failure_reason(verdict))}")


def write_json_report(summary: RunSummary, path: Path) -> None:
    """Write the summary, counts and verdicts included, as JSON."""
    _ = path.write_text(summary.model_dump_json(indent=2) + "\n", encoding="utf-8")

# Copyright (c) Syntropy Systems
"""Main CLI entry point for snakecheck."""

import typer

from snakecheck.cli.init_cmd import init
from snakecheck.cli.run import run
from snakecheck.cli.validate import validate

app = typer.Typer(
    name="snakecheck",
    help=(
        "Move fixtures for Battlesnake agents. Feed board states to a live "
        "snake and check the moves it makes."
    ),
    no_args_is_help=True,
    add_completion=False,
)

# Register commands
_ = app.command()(run)
_ = app.command()(validate)
_ = app.command()(init)


if __name__ == "__main__":
    app()

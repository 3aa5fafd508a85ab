# Copyright (c) Syntropy Systems
"""Loading move fixtures from disk."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from snakecheck.models.base import describe_validation_error
from snakecheck.models.fixture import Fixture
from snakecheck.models.result import ErrorKind

logger = logging.getLogger(__name__)

FIXTURE_SUFFIX = ".json"


class MalformedFixture(Exception):
    """A fixture file could not be turned into a Fixture."""

    kind = ErrorKind.MALFORMED_FIXTURE

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FixturesDirectoryError(Exception):
    """The fixtures directory cannot be listed."""


def fixture_id(path: Path) -> str:
    """Identifier used in reports: the file name without its suffix."""
    return path.stem


def load_fixture(path: Path) -> Fixture:
    """Read and validate a single fixture file.

    Args:
        path: Path to a JSON fixture with top-level ``state`` and ``expected``

    Returns:
        The parsed Fixture

    Raises:
        MalformedFixture: If the file is unreadable, not JSON, or does not
            match the fixture schema

    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedFixture(path, f"cannot read file: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedFixture(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        msg = f"expected a JSON object, got {type(data).__name__}"
        raise MalformedFixture(path, msg)

    try:
        fixture = Fixture.model_validate(
            {**data, "id": fixture_id(path), "path": path},
        )
    except ValidationError as e:
        raise MalformedFixture(path, describe_validation_error(e)) from e

    logger.debug("Loaded fixture %s (expected: %s)", fixture.id, fixture.expected)
    return fixture


def discover_fixtures(directory: Path) -> list[Path]:
    """List fixture files directly inside directory, sorted by file name.

    Raises:
        FixturesDirectoryError: If directory is missing or cannot be listed

    """
    if not directory.exists():
        msg = f"Fixtures directory not found: {directory}"
        raise FixturesDirectoryError(msg)
    if not directory.is_dir():
        msg = f"Not a directory: {directory}"
        raise FixturesDirectoryError(msg)

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        msg = f"Cannot read fixtures directory {directory}: {e}"
        raise FixturesDirectoryError(msg) from e

    paths = [
        p for p in entries if p.suffix.lower() == FIXTURE_SUFFIX and p.is_file()
    ]
    return sorted(paths, key=lambda p: p.name)

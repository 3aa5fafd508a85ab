# Copyright (c) Syntropy Systems
"""Judging agent moves against fixture expectations."""
from __future__ import annotations

from typing import TYPE_CHECKING

from snakecheck.models.result import Verdict

if TYPE_CHECKING:
    from collections.abc import Collection

    from snakecheck.models.fixture import Fixture, MoveResponse


def verify(move: str, expected: Collection[str]) -> bool:
    """Return True iff move is exactly one of the expected moves."""
    return move in expected


def judge(fixture: Fixture, response: MoveResponse) -> Verdict:
    """Build the verdict for an agent response to fixture."""
    return Verdict(
        fixture_id=fixture.id,
        path=str(fixture.path),
        expected=fixture.expected,
        move=response.move,
        shout=response.shout,
        passed=verify(response.move, fixture.expected),
    )

# Copyright (c) Syntropy Systems
"""Pydantic models for verdicts and run summaries."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, computed_field

from .base import FrozenModel, Move, SnakecheckBaseModel


class ErrorKind(str, Enum):
    """Why a fixture failed without a move to judge."""

    MALFORMED_FIXTURE = "malformed_fixture"
    UNREACHABLE_ENDPOINT = "unreachable_endpoint"
    TIMEOUT = "timeout"
    INVALID_RESPONSE = "invalid_response"


class Verdict(FrozenModel):
    """Pass/fail judgment for a single fixture."""

    fixture_id: str
    path: str
    expected: tuple[Move, ...] = ()
    move: Move | None = None
    shout: str | None = None
    passed: bool
    error_kind: ErrorKind | None = None
    error: str | None = None


class RunSummary(SnakecheckBaseModel):
    """Aggregate of all verdicts from one invocation, in fixture order."""

    verdicts: list[Verdict] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.verdicts)

    @computed_field
    @property
    def passed(self) -> int:
        return sum(1 for v in self.verdicts if v.passed)

    @computed_field
    @property
    def failed(self) -> int:
        return self.total - self.passed

    @computed_field
    @property
    def errored(self) -> int:
        return sum(1 for v in self.verdicts if v.error_kind is not None)

    @computed_field
    @property
    def all_passed(self) -> bool:
        """True when no fixture failed. Vacuously true for an empty run."""
        return self.failed == 0

    @property
    def failures(self) -> list[Verdict]:
        return [v for v in self.verdicts if not v.passed]

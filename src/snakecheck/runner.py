# Copyright (c) Syntropy Systems
"""Fixture runner: load, ask the agent, judge, aggregate."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from snakecheck.client import AgentClientError
from snakecheck.fixtures import MalformedFixture, discover_fixtures, fixture_id, load_fixture
from snakecheck.models.result import RunSummary, Verdict
from snakecheck.verifier import judge

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from snakecheck.client import AgentClient

logger = logging.getLogger(__name__)


class FixtureRunner:
    """Runs every fixture in a directory against one agent.

    Each fixture goes through load -> request -> judge independently.
    A failure in any step becomes a failed verdict for that fixture only.
    With workers > 1 the requests run on a bounded thread pool; the summary
    is always assembled on the calling thread, in fixture order.
    """

    client: AgentClient
    workers: int

    def __init__(self, client: AgentClient, workers: int = 1) -> None:
        """Initialize a runner.

        Args:
            client: Agent client shared by all fixtures
            workers: Maximum number of fixtures evaluated at once

        """
        if workers < 1:
            msg = f"workers must be at least 1, got {workers}"
            raise ValueError(msg)
        self.client = client
        self.workers = workers

    def run(self, directory: Path) -> RunSummary:
        """Run all fixtures found in directory.

        Raises:
            FixturesDirectoryError: If the directory cannot be listed

        """
        paths = discover_fixtures(directory)
        if not paths:
            logger.warning("No fixtures found in %s", directory)
        return self.run_fixtures(paths)

    def run_fixtures(self, paths: Sequence[Path]) -> RunSummary:
        """Run the given fixture files, in order."""
        if self.workers == 1 or len(paths) <= 1:
            verdicts = [self.run_one(p) for p in paths]
        else:
            with ThreadPoolExecutor(max_workers=min(self.workers, len(paths))) as ex:
                verdicts = list(ex.map(self.run_one, paths))

        summary = RunSummary(verdicts=verdicts)
        logger.info(
            "Run finished: %d passed, %d failed (%d errored) of %d",
            summary.passed,
            summary.failed,
            summary.errored,
            summary.total,
        )
        return summary

    def run_one(self, path: Path) -> Verdict:
        """Evaluate a single fixture file. Never raises for fixture errors."""
        try:
            fixture = load_fixture(path)
        except MalformedFixture as e:
            logger.warning("Fixture %s failed: %s (%s)", fixture_id(path), e.kind.value, e.reason)
            return Verdict(
                fixture_id=fixture_id(path),
                path=str(path),
                passed=False,
                error_kind=e.kind,
                error=e.reason,
            )

        try:
            response = self.client.request_move(fixture.state)
        except AgentClientError as e:
            logger.warning("Fixture %s failed: %s (%s)", fixture.id, e.kind.value, e)
            return Verdict(
                fixture_id=fixture.id,
                path=str(path),
                expected=fixture.expected,
                passed=False,
                error_kind=e.kind,
                error=str(e),
            )

        verdict = judge(fixture, response)
        if verdict.passed:
            logger.debug("Fixture %s passed with %s", fixture.id, verdict.move)
        else:
            logger.warning(
                "Fixture %s failed: moved %s, expected one of %s",
                fixture.id,
                verdict.move,
                ", ".join(fixture.expected),
            )
        return verdict

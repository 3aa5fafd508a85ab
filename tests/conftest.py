# Copyright (c) Syntropy Systems
"""Pytest fixtures for snakecheck tests."""

import json
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from snakecheck.client import AgentClient

AgentHandler = Callable[[httpx.Request], httpx.Response]
FixtureWriter = Callable[..., Path]

ENV_VARS = (
    "SNAKECHECK_URL",
    "SNAKECHECK_MOVE_PATH",
    "SNAKECHECK_TIMEOUT",
    "SNAKECHECK_WORKERS",
    "SNAKECHECK_CONFIG",
)


def _write_fixture_file(
    directory: Path,
    name: str,
    expected: object,
    state: object = None,
    answer: str | None = None,
) -> Path:
    """Write a fixture file; answer is what the scripted agent will reply."""
    if state is None:
        state = {"turn": 3, "board": {"height": 11, "width": 11}}
        if answer is not None:
            state["answer"] = answer
    path = directory / name
    path.write_text(json.dumps({"state": state, "expected": expected}))
    return path


def _scripted_agent_reply(request: httpx.Request) -> httpx.Response:
    """Mock agent that moves wherever the state's "answer" field says.

    Without an answer it responds with HTTP 500.
    """
    state = json.loads(request.content)
    answer = state.get("answer")
    if answer is None:
        return httpx.Response(500, json={"detail": "no answer scripted"})
    return httpx.Response(200, json={"move": answer, "shout": "hiss"})


@pytest.fixture
def write_fixture() -> FixtureWriter:
    """Writer for fixture files: (directory, name, expected, state=None, answer=None)."""
    return _write_fixture_file


@pytest.fixture
def scripted_agent() -> AgentHandler:
    """Handler for a mock agent that moves wherever the state's "answer" says."""
    return _scripted_agent_reply


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run each test in an empty working directory with no user config."""
    home = temp_dir / "home"
    home.mkdir()
    work = temp_dir / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(work)
    yield work


@pytest.fixture
def fixtures_dir(isolated_env: Path) -> Path:
    """Empty directory to write fixture files into."""
    directory = isolated_env / "fixtures"
    directory.mkdir()
    return directory


@pytest.fixture
def make_client() -> Generator[Callable[..., AgentClient], None, None]:
    """Factory for AgentClients backed by a mock transport."""
    clients: list[AgentClient] = []

    def factory(
        handler: AgentHandler = _scripted_agent_reply,
        **kwargs: object,
    ) -> AgentClient:
        client = AgentClient(transport=httpx.MockTransport(handler), **kwargs)  # type: ignore[arg-type]
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()

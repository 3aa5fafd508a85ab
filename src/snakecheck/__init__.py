# Copyright (c) Syntropy Systems
"""
snakecheck - Move fixtures for Battlesnake agents.

Point it at a running snake, feed it board states, check the moves.
"""

from snakecheck.client import AgentClient
from snakecheck.fixtures import load_fixture
from snakecheck.runner import FixtureRunner
from snakecheck.verifier import verify

__version__ = "0.1.0"
__all__ = ["AgentClient", "FixtureRunner", "__version__", "load_fixture", "verify"]

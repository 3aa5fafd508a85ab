# Copyright (c) Syntropy Systems
"""Configuration management for snakecheck."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import cast

import yaml

from snakecheck.client import DEFAULT_MOVE_PATH, DEFAULT_TIMEOUT, DEFAULT_URL

CONFIG_FILENAME = "snakecheck.yaml"


class ConfigError(Exception):
    """A config file was requested but could not be loaded."""


@dataclass
class SnakecheckConfig:
    """Configuration for snakecheck."""

    # Base URL of the agent under test
    url: str = DEFAULT_URL

    # Path of the move endpoint, appended to url
    move_path: str = DEFAULT_MOVE_PATH

    # Per-request timeout (seconds)
    timeout: float = DEFAULT_TIMEOUT

    # Fixtures evaluated at once
    workers: int = 1

    # Directory holding the fixture files
    fixtures_dir: str = "tests"

    # Treat a run with no fixtures as a failure
    fail_on_empty: bool = False

    def to_dict(self) -> dict[str, object]:
        """Convert to a plain dictionary for YAML output."""
        return asdict(self)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the nearest snakecheck.yaml by walking up from start_path.

    Returns None if no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        current = current.parent

    # Check root
    candidate = current / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    return None


def get_global_config_dir() -> Path:
    """Get the global snakecheck config directory (~/.snakecheck)."""
    return Path.home() / ".snakecheck"


def _read_yaml(path: Path) -> dict[str, object]:
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot load config file {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping"
        raise ConfigError(msg)
    return cast("dict[str, object]", data)


def load_config(config_path: Path | None = None) -> SnakecheckConfig:
    """Load configuration from a snakecheck.yaml or defaults.

    Looks for config in:
    1. Provided config_path (must exist)
    2. Nearest snakecheck.yaml walking up from the working directory
    3. ~/.snakecheck/config.yaml
    4. Defaults

    Raises:
        ConfigError: If config_path is given but cannot be loaded, or a
            discovered file is not valid YAML

    """
    config = SnakecheckConfig()

    if config_path is not None:
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)
    else:
        config_path = find_config_file()
        if config_path is None:
            global_config = get_global_config_dir() / "config.yaml"
            if global_config.is_file():
                config_path = global_config

    if config_path is None:
        return config

    data = _read_yaml(config_path)

    url = data.get("url")
    if isinstance(url, str) and url:
        config.url = url
    move_path = data.get("move_path")
    if isinstance(move_path, str) and move_path:
        config.move_path = move_path
    timeout = data.get("timeout")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        config.timeout = float(timeout)
    workers = data.get("workers")
    if isinstance(workers, int) and not isinstance(workers, bool) and workers >= 1:
        config.workers = workers
    fixtures_dir = data.get("fixtures_dir")
    if isinstance(fixtures_dir, str) and fixtures_dir:
        config.fixtures_dir = fixtures_dir
    fail_on_empty = data.get("fail_on_empty")
    if isinstance(fail_on_empty, bool):
        config.fail_on_empty = fail_on_empty

    return config


def write_default_config(path: Path) -> None:
    """Write a config file holding the default settings."""
    with path.open("w") as f:
        yaml.safe_dump(SnakecheckConfig().to_dict(), f, default_flow_style=False, sort_keys=False)

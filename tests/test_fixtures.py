# Copyright (c) Syntropy Systems
"""Tests for fixture loading and discovery."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from snakecheck.fixtures import (
    FixturesDirectoryError,
    MalformedFixture,
    discover_fixtures,
    load_fixture,
)
from snakecheck.models.result import ErrorKind

FixtureWriter = Callable[..., Path]



class TestLoadFixture:
    """Tests for load_fixture."""

    def test_load_valid_fixture(self, fixtures_dir: Path, write_fixture: FixtureWriter) -> None:
        """Test a well-formed fixture is parsed."""
        path = write_fixture(fixtures_dir, "001.json", ["up", "down"])

        fixture = load_fixture(path)

        assert fixture.id == "001"
        assert fixture.path == path
        assert fixture.expected == ("up", "down")
        assert fixture.state["turn"] == 3

    def test_state_passed_through_verbatim(
        self, fixtures_dir: Path, write_fixture: FixtureWriter
    ) -> None:
        """Test nested state is kept exactly as written."""
        state = {
            "game": {"id": "abc", "ruleset": {"name": "standard"}},
            "you": {"body": [{"x": 1, "y": 2}, {"x": 1, "y": 1}], "health": 87},
        }
        path = write_fixture(fixtures_dir, "002.json", ["left"], state=state)

        assert load_fixture(path).state == state

    def test_extra_fields_ignored(self, fixtures_dir: Path) -> None:
        """Test unknown top-level fields do not break loading."""
        path = fixtures_dir / "003.json"
        path.write_text(
            json.dumps({"state": {}, "expected": ["right"], "note": "corner trap"})
        )

        assert load_fixture(path).expected == ("right",)

    def test_fixture_is_immutable(self, fixtures_dir: Path, write_fixture: FixtureWriter) -> None:
        """Test a loaded fixture cannot be modified."""
        fixture = load_fixture(write_fixture(fixtures_dir, "004.json", ["up"]))

        with pytest.raises(ValidationError):
            fixture.expected = ("down",)  # type: ignore[misc]

    @pytest.mark.parametrize(
        "expected",
        [
            [],
            ["up", "sideways"],
            ["UP"],
            "up",
            ["up", "down", "left", "right", "up"],
            None,
        ],
    )
    def test_bad_expected_rejected(
        self, fixtures_dir: Path, expected: object, write_fixture: FixtureWriter
    ) -> None:
        """Test empty, oversized, or non-enumeration expected lists fail."""
        path = write_fixture(fixtures_dir, "005.json", expected)

        with pytest.raises(MalformedFixture, match="expected"):
            _ = load_fixture(path)

    def test_missing_state_rejected(self, fixtures_dir: Path) -> None:
        """Test a fixture without state fails."""
        path = fixtures_dir / "006.json"
        path.write_text(json.dumps({"expected": ["up"]}))

        with pytest.raises(MalformedFixture, match="state"):
            _ = load_fixture(path)

    def test_non_object_state_rejected(
        self, fixtures_dir: Path, write_fixture: FixtureWriter
    ) -> None:
        """Test state must be a JSON object."""
        path = write_fixture(fixtures_dir, "007.json", ["up"], state=[1, 2, 3])

        with pytest.raises(MalformedFixture, match="state"):
            _ = load_fixture(path)

    def test_invalid_json_rejected(self, fixtures_dir: Path) -> None:
        """Test a file that is not JSON fails."""
        path = fixtures_dir / "008.json"
        path.write_text("{ state: nope")

        with pytest.raises(MalformedFixture, match="invalid JSON") as exc_info:
            _ = load_fixture(path)

        assert exc_info.value.kind is ErrorKind.MALFORMED_FIXTURE
        assert exc_info.value.path == path

    def test_top_level_array_rejected(self, fixtures_dir: Path) -> None:
        """Test a JSON document that is not an object fails."""
        path = fixtures_dir / "009.json"
        path.write_text(json.dumps([{"state": {}, "expected": ["up"]}]))

        with pytest.raises(MalformedFixture, match="JSON object"):
            _ = load_fixture(path)

    def test_missing_file_rejected(self, fixtures_dir: Path) -> None:
        """Test an unreadable file is reported as malformed."""
        with pytest.raises(MalformedFixture, match="cannot read"):
            _ = load_fixture(fixtures_dir / "missing.json")


class TestDiscoverFixtures:
    """Tests for discover_fixtures."""

    def test_sorted_by_file_name(self, fixtures_dir: Path, write_fixture: FixtureWriter) -> None:
        """Test fixtures come back in lexicographic file name order."""
        for name in ["10.json", "02.json", "1.json", "003.json"]:
            _ = write_fixture(fixtures_dir, name, ["up"])

        names = [p.name for p in discover_fixtures(fixtures_dir)]

        assert names == ["003.json", "02.json", "1.json", "10.json"]

    def test_ignores_other_files_and_subdirectories(
        self, fixtures_dir: Path, write_fixture: FixtureWriter
    ) -> None:
        """Test only JSON files directly inside the directory are listed."""
        _ = write_fixture(fixtures_dir, "001.json", ["up"])
        (fixtures_dir / "README.md").write_text("fixtures")
        nested = fixtures_dir / "old"
        nested.mkdir()
        _ = write_fixture(nested, "002.json", ["down"])

        assert [p.name for p in discover_fixtures(fixtures_dir)] == ["001.json"]

    def test_empty_directory(self, fixtures_dir: Path) -> None:
        """Test an empty directory yields no fixtures."""
        assert discover_fixtures(fixtures_dir) == []

    def test_missing_directory(self, fixtures_dir: Path) -> None:
        """Test a missing directory is fatal."""
        with pytest.raises(FixturesDirectoryError, match="not found"):
            _ = discover_fixtures(fixtures_dir / "nope")

    def test_file_instead_of_directory(
        self, fixtures_dir: Path, write_fixture: FixtureWriter
    ) -> None:
        """Test a regular file is not accepted as a fixtures directory."""
        path = write_fixture(fixtures_dir, "001.json", ["up"])

        with pytest.raises(FixturesDirectoryError, match="Not a directory"):
            _ = discover_fixtures(path)


def test_sample_fixtures_are_valid() -> None:
    """Test the fixtures shipped with the repository load."""
    sample_dir = Path(__file__).resolve().parent.parent / "sample_fixtures"

    fixtures = [load_fixture(p) for p in discover_fixtures(sample_dir)]

    assert [f.id for f in fixtures] == ["001", "002"]
    assert fixtures[0].expected == ("down",)

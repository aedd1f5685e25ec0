"""Integration tests for the command line entry point."""

import logging
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from amazing_adventure.__main__ import main

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop the handlers each invocation adds to the root logger."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def worlds_dir(tmp_path) -> Path:
    """A worlds directory with one two-area map: start 1, north to end 2."""
    world_path = tmp_path / "worlds" / "hallway"
    world_path.mkdir(parents=True)
    world = {
        "name": "Hallway",
        "description": "Walk north.",
        "start_area": 1,
        "end_area": 2,
        "start_message": "A quiet hallway.",
        "death_message": "The hallway got you.",
    }
    areas = {
        1: {"description": "The south end of the hallway.", "exits": {"north": 2}},
        2: {"description": "You made it out of the hallway!"},
    }
    (world_path / "world.yaml").write_text(yaml.safe_dump(world))
    (world_path / "areas.yaml").write_text(yaml.safe_dump(areas))
    return world_path.parent


def invoke(runner: CliRunner, tmp_path: Path, *args: str, input: str | None = None):
    return runner.invoke(main, ["--log-dir", str(tmp_path / "logs"), *args], input=input)


def test_list_worlds(runner, tmp_path) -> None:
    result = invoke(runner, tmp_path, "--list-worlds")

    assert result.exit_code == 0
    assert "squirrel_city: Squirrel City" in result.output


def test_validate_bundled_map(runner, tmp_path) -> None:
    result = invoke(runner, tmp_path, "--validate-only")

    assert result.exit_code == 0
    assert "Map validation: squirrel_city" in result.output
    assert "ERROR" not in result.output


def test_validate_broken_map(runner, tmp_path, worlds_dir) -> None:
    world_file = worlds_dir / "hallway" / "world.yaml"
    world = yaml.safe_load(world_file.read_text())
    world["end_area"] = 7
    world_file.write_text(yaml.safe_dump(world))

    result = invoke(
        runner, tmp_path, "--worlds-dir", str(worlds_dir), "--world", "hallway", "--validate-only"
    )

    assert result.exit_code == 1
    assert "ERROR: End area 7 is not defined" in result.output


def test_malformed_map_is_a_clean_error(runner, tmp_path, worlds_dir) -> None:
    (worlds_dir / "hallway" / "areas.yaml").write_text("1: just a string\n")

    result = invoke(runner, tmp_path, "--worlds-dir", str(worlds_dir), "--world", "hallway")

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "must be a mapping" in result.output


def test_missing_world(runner, tmp_path) -> None:
    result = invoke(runner, tmp_path, "--world", "atlantis")

    assert result.exit_code == 1
    assert "atlantis" in result.output


def test_writes_log_file(runner, tmp_path) -> None:
    invoke(runner, tmp_path, "--list-worlds")

    assert list((tmp_path / "logs").glob("adventure_*.log"))


def test_script_quit(runner, tmp_path) -> None:
    script = tmp_path / "quit.txt"
    script.write_text("\nquit\n")

    result = invoke(runner, tmp_path, "--seed", "7", "--script", str(script))

    assert result.exit_code == 0
    assert "PLAYER COMMANDS:" in result.output
    assert "Exiting game..." in result.output


def test_script_win(runner, tmp_path, worlds_dir) -> None:
    script = tmp_path / "win.txt"
    script.write_text("\ngo north\n")

    result = invoke(
        runner,
        tmp_path,
        "--worlds-dir",
        str(worlds_dir),
        "--world",
        "hallway",
        "--script",
        str(script),
    )

    assert result.exit_code == 0
    assert "You successfully moved to a new area!" in result.output
    assert result.output.rstrip().endswith("You made it out of the hallway!")


def test_terminal_input(runner, tmp_path, worlds_dir) -> None:
    """Without --script the game reads stdin."""
    result = invoke(
        runner,
        tmp_path,
        "--worlds-dir",
        str(worlds_dir),
        "--world",
        "hallway",
        input="\ngo south\ngo north\n",
    )

    assert result.exit_code == 0
    assert "squirrel roadblock" in result.output
    assert "You made it out of the hallway!" in result.output


def test_end_of_input_quits_cleanly(runner, tmp_path, worlds_dir) -> None:
    result = invoke(
        runner, tmp_path, "--worlds-dir", str(worlds_dir), "--world", "hallway", input="\n"
    )

    assert result.exit_code == 0
    assert "The hallway got you." not in result.output

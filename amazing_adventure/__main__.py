#!/usr/bin/env python3
"""
Amazing Adventure
Play a map in the terminal: survive the squirrels and reach the end area.
"""
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

import click
from dotenv import load_dotenv

from amazing_adventure.engine.console import ScriptedConsole, TerminalConsole
from amazing_adventure.engine.processor import TurnEngine
from amazing_adventure.engine.state import SessionStateManager
from amazing_adventure.engine.validator import validate_map
from amazing_adventure.engine.world import MapLoader
from amazing_adventure.models.outcome import GameStatus

# Load environment variables
load_dotenv()

DEFAULT_WORLD = "squirrel_city"


def setup_logging(log_dir: Path | None = None, debug: bool = False) -> Path:
    """Configure logging to a session file, keeping the console for game text.

    Returns:
        Path to the log file
    """
    logs_dir = Path(log_dir) if log_dir else Path.cwd() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"adventure_{timestamp}.log"

    # File handler - verbose only in debug mode
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - only errors, so log lines never mix with the game
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


def _print_validation(world_id: str, loader: MapLoader) -> bool:
    """Print validator findings for a map; return whether it is valid."""
    map_layout = loader.load_map(world_id, validate=False)
    result = validate_map(map_layout, world_id)

    click.echo(f"Map validation: {world_id}")
    for error in result.errors:
        click.echo(f"  ERROR: {error}")
    for warning in result.warnings:
        click.echo(f"  WARNING: {warning}")

    if result.is_valid:
        suffix = f" ({len(result.warnings)} warning(s))" if result.warnings else ""
        click.echo(f"Map is valid{suffix}")
    else:
        click.echo(f"Map has {len(result.errors)} error(s)")
    return result.is_valid


@click.command()
@click.option('--world', 'world_id', default=DEFAULT_WORLD, show_default=True,
              envvar='AMAZING_ADVENTURE_WORLD', help='Map to play (folder name in the worlds directory)')
@click.option('--worlds-dir', type=click.Path(exists=True, file_okay=False),
              default=None, envvar='AMAZING_ADVENTURE_WORLDS_DIR', help='Path to worlds directory')
@click.option('--seed', type=int, default=None, envvar='AMAZING_ADVENTURE_SEED',
              help='Seed for the hazard rolls')
@click.option('--log-dir', type=click.Path(file_okay=False), default=None,
              envvar='AMAZING_ADVENTURE_LOG_DIR', help='Directory for session log files')
@click.option('--script', type=click.File('r'), default=None,
              help='Play the lines of this file instead of reading the terminal')
@click.option('--list-worlds', is_flag=True, help='List available maps and exit')
@click.option('--validate-only', is_flag=True, help='Validate the map and exit')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def main(ctx: click.Context, world_id: str, worlds_dir: str | None, seed: int | None,
         log_dir: str | None, script, list_worlds: bool, validate_only: bool, debug: bool):
    """Play Amazing Adventure in the terminal."""
    log_file = setup_logging(log_dir=log_dir, debug=debug)

    logger = logging.getLogger(__name__)
    logger.info("Amazing Adventure starting")
    logger.info(f"World: {world_id} | Worlds dir: {worlds_dir or 'default'} | Seed: {seed}")
    logger.info(f"Log file: {log_file}")

    loader = MapLoader(worlds_dir)

    if list_worlds:
        for world in loader.list_worlds():
            click.echo(f"{world['id']}: {world['name']}")
        return

    try:
        if validate_only:
            valid = _print_validation(world_id, loader)
            ctx.exit(0 if valid else 1)
        map_layout = loader.load_map(world_id)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load world '{world_id}': {e}")
        raise click.ClickException(str(e)) from e

    if script is not None:
        console = ScriptedConsole(script.read().splitlines(), echo=True)
    else:
        console = TerminalConsole()

    state_manager = SessionStateManager(map_layout)
    engine = TurnEngine(state_manager, console, rng=random.Random(seed))

    try:
        status = engine.play()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Amazing Adventure shutdown")

    if status == GameStatus.QUIT:
        ctx.exit(0)


if __name__ == "__main__":
    main()

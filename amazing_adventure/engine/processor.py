"""
Turn engine processor.

This module implements the main orchestrator for a playthrough,
coordinating parsing, the hazard roll, command dispatch, the area
refresh and the termination check.

Turn sequence:
    1. Parse: CommandParser splits the input line
    2. Hazard: HazardRoller may add one injury
    3. Dispatch: The CommandType's handler resolves the command
    4. Refresh: Threat/ground item reloaded on movement, threat +1 otherwise
    5. Check: Win (end area) before loss (death threshold)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from amazing_adventure.engine.handlers import build_default_handlers
from amazing_adventure.engine.hazard import HazardRoller
from amazing_adventure.engine.parser import CommandParser
from amazing_adventure.models.command import CommandType
from amazing_adventure.models.outcome import GameStatus, TurnOutcome

if TYPE_CHECKING:
    from amazing_adventure.engine.protocols import (
        CommandHandler,
        GameConsole,
        RandomSource,
    )
    from amazing_adventure.engine.state import SessionStateManager

logger = logging.getLogger(__name__)

COMMAND_HELP = (
    "exit, quit, take <item>, drop <item>, go <direction>, use <item>"
)


class TurnEngine:
    """Turn-based game loop for one session.

    process() runs a single turn and returns a TurnOutcome without any
    I/O; play() drives the whole game through a GameConsole.

    Example:
        >>> manager = SessionStateManager(map_layout)
        >>> engine = TurnEngine(manager, console, rng=random.Random(42))
        >>> status = engine.play()
    """

    def __init__(
        self,
        state_manager: "SessionStateManager",
        console: "GameConsole | None" = None,
        rng: "RandomSource | None" = None,
        handlers: "dict[CommandType, CommandHandler] | None" = None,
    ):
        """Initialize the turn engine.

        Args:
            state_manager: The SessionStateManager for this session
            console: Text channel used by play(); not needed for process()
            rng: Random source for hazard rolls (default: random.Random())
            handlers: Override the handler for any CommandType
        """
        self.state_manager = state_manager
        self.console = console
        self.parser = CommandParser()
        self.hazard_roller = HazardRoller(rng)
        self.handlers = build_default_handlers()
        if handlers:
            self.handlers.update(handlers)

    def process(self, raw_input: str) -> TurnOutcome:
        """Run one full turn for a line of player input.

        Args:
            raw_input: The raw line the player entered

        Returns:
            TurnOutcome with the hazard and command results and the
            status after the turn. A quit command returns status QUIT
            immediately, without the area refresh or termination check.

        Raises:
            AreaNotFoundError: If the map and session disagree about areas
        """
        manager = self.state_manager
        map_layout = manager.map_layout
        rules = manager.rules

        command = self.parser.parse(raw_input)
        turn = manager.get_state().turn_count + 1
        logger.debug(f"Turn {turn}: command={command.command!r} argument={command.argument!r}")

        hazard = self.hazard_roller.roll(manager.get_state(), rules)
        manager.apply_changes(hazard.changes)

        handler = self.handlers[command.command_type]
        action = handler.handle(command, manager.get_state(), map_layout, rules)

        if action.quit:
            manager.mark_quit()
            logger.info(f"Player quit on turn {turn}")
            return TurnOutcome(
                turn=turn,
                command=command,
                hazard=hazard,
                action=action,
                status=GameStatus.QUIT,
            )

        manager.apply_changes(action.changes)
        manager.refresh_area(action.has_moved)
        manager.increment_turn()
        status = manager.check_game_over()

        state = manager.get_state()
        logger.debug(
            f"Turn {turn} done: area={state.current_area_id} "
            f"threat={state.current_threat_level} injury={state.current_injury_level} "
            f"inventory={state.inventory_item.value} status={status.value}"
        )

        return TurnOutcome(
            turn=turn,
            command=command,
            hazard=hazard,
            action=action,
            status=status,
        )

    def describe_situation(self) -> list[str]:
        """Lines shown before each turn's prompt."""
        manager = self.state_manager
        state = manager.get_state()
        map_layout = manager.map_layout
        return [
            manager.get_current_area().description,
            f"Current Injury Sustained: {state.current_injury_level} "
            f"(death at {manager.rules.death_threshold})",
            f"Threat Level: {state.current_threat_level}",
            f"Item on ground: {map_layout.describe_item(state.current_item_on_ground)}",
            f"Inventory: {map_layout.describe_item(state.inventory_item)}",
        ]

    def play(self) -> GameStatus:
        """Play the game from the start screen until it ends.

        Returns:
            WON, LOST or QUIT. End of input counts as QUIT.
        """
        if self.console is None:
            raise RuntimeError("TurnEngine.play() needs a console")

        console = self.console
        manager = self.state_manager
        logger.info(
            f"Session {manager.session_id} started on map '{manager.map_layout.name}'"
        )

        try:
            self._show_start_screen()
            while True:
                for line in self.describe_situation():
                    console.write(line)
                console.prompt("> ")
                outcome = self.process(console.read_line())
                for message in outcome.messages:
                    console.write(message)
                if outcome.game_complete:
                    break
        except EOFError:
            logger.info("Input closed, treating as quit")
            manager.mark_quit()
            return GameStatus.QUIT

        status = manager.get_state().status
        if status != GameStatus.QUIT:
            console.write(manager.game_over_message())

        logger.info(
            f"Session {manager.session_id} ended: {status.value} "
            f"after {manager.get_state().turn_count} turn(s)"
        )
        return status

    def _show_start_screen(self) -> None:
        """Print the start message and command list, then wait for enter."""
        console = self.console
        console.write(self.state_manager.map_layout.start_message)
        console.write("PLAYER COMMANDS:")
        console.write(COMMAND_HELP + "\n")
        console.write("Press enter to start game!")
        console.prompt("> ")
        console.read_line()

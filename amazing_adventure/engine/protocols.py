"""
Protocol definitions for the turn engine.

This module defines the interfaces the engine depends on but does not
own. Using protocols enables:

- Deterministic hazard rolls in tests (RandomSource)
- Swapping the terminal for scripted input (GameConsole)
- One handler per command type (CommandHandler)

Component Flow:
    GameConsole.read_line -> CommandParser -> ParsedCommand
                                                  |
                          HazardRoller(RandomSource) -> ActionOutcome
                                                  |
                                CommandHandler -> ActionOutcome
                                                  |
                      SessionStateManager (apply, refresh, game over)
                                                  |
                                  GameConsole.write(narrative)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from amazing_adventure.models.command import ParsedCommand
    from amazing_adventure.models.map import MapLayout
    from amazing_adventure.models.outcome import ActionOutcome
    from amazing_adventure.models.rules import GameRules
    from amazing_adventure.models.session import SessionState


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer generator used for hazard rolls.

    random.Random satisfies this protocol; tests pass a stub that
    returns a fixed sequence.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that a <= N <= b."""
        ...


@runtime_checkable
class GameConsole(Protocol):
    """Line-oriented text channel the engine talks through."""

    def write(self, text: str) -> None:
        """Show one line of text to the player."""
        ...

    def prompt(self, text: str) -> None:
        """Show a prompt without a trailing newline."""
        ...

    def read_line(self) -> str:
        """Block until the player enters one line and return it.

        Raises:
            EOFError: When the input channel is exhausted
        """
        ...


@runtime_checkable
class CommandHandler(Protocol):
    """Resolves one CommandType into an ActionOutcome.

    Handlers never mutate the state they are given; the returned
    StateChanges are applied by the SessionStateManager.
    """

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> "ActionOutcome":
        """Resolve the command against the current state.

        Args:
            command: The parsed player input
            state: Session state after this turn's hazard roll
            map_layout: The immutable map
            rules: Game constants

        Returns:
            ActionOutcome with events and the state delta
        """
        ...

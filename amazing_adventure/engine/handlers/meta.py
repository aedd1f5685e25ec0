"""
Meta command handlers: quit/exit and anything unrecognized.

Neither changes the session state. Quit only raises the quit signal;
the run loop decides what stopping means.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from amazing_adventure.models.outcome import ActionOutcome, Event, EventType

if TYPE_CHECKING:
    from amazing_adventure.models.command import ParsedCommand
    from amazing_adventure.models.map import MapLayout
    from amazing_adventure.models.rules import GameRules
    from amazing_adventure.models.session import SessionState


class QuitHandler:
    """Handles QUIT commands ("quit" and "exit")."""

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> ActionOutcome:
        return ActionOutcome(
            events=[Event(type=EventType.QUIT_REQUESTED, message="Exiting game...")],
            quit=True,
        )


class UnknownCommandHandler:
    """Echoes back a command word the engine does not know."""

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> ActionOutcome:
        return ActionOutcome(
            events=[
                Event(
                    type=EventType.UNKNOWN_COMMAND,
                    message=f"You ponder what it means to '{command.command}'.",
                    context={"command": command.command},
                )
            ],
        )

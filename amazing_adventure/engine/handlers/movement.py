"""
Movement handler for the turn engine.

Resolves "go <direction>" against the current area's exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from amazing_adventure.models.outcome import (
    ActionOutcome,
    Event,
    EventType,
    StateChanges,
)

if TYPE_CHECKING:
    from amazing_adventure.models.command import ParsedCommand
    from amazing_adventure.models.map import MapLayout
    from amazing_adventure.models.rules import GameRules
    from amazing_adventure.models.session import SessionState


class MovementHandler:
    """Handles GO commands.

    A direction that resolves moves the player and sets has_moved, so the
    new area's threat and ground item are loaded at the end of the turn.
    An unknown direction is a normal outcome, not an error.

    Example:
        >>> handler = MovementHandler()
        >>> outcome = handler.handle(command, state, map_layout, rules)
        >>> if outcome.has_moved:
        ...     destination = outcome.changes.current_area_id
    """

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> ActionOutcome:
        direction = command.argument
        area = map_layout.find_area(state.current_area_id)
        destination = area.resolve_direction(direction)

        if destination is None:
            return ActionOutcome(
                events=[
                    Event(
                        type=EventType.MOVE_BLOCKED,
                        message=(
                            "You did not go in a valid direction and ran into "
                            "a squirrel roadblock!"
                        ),
                        context={"direction": direction},
                    )
                ],
            )

        return ActionOutcome(
            events=[
                Event(
                    type=EventType.MOVED,
                    message="You successfully moved to a new area!",
                    context={
                        "direction": direction,
                        "from_area": state.current_area_id,
                        "destination": destination,
                    },
                )
            ],
            changes=StateChanges(current_area_id=destination),
            has_moved=True,
        )

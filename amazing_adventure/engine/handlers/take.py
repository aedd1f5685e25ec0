"""
Take handler for the turn engine.

"take" and "drop" both land here and do the same thing: the held item is
replaced by whatever the map places on the ground of the current area.
Nothing is ever put down, and the ground item is never removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from amazing_adventure.models.map import ItemKind
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


class TakeHandler:
    """Handles TAKE_OR_DROP commands. The argument is ignored."""

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> ActionOutcome:
        # Read from the map, not the session mirror, which lags after a bus ride
        item = map_layout.find_area(state.current_area_id).item
        changes = StateChanges(inventory_item=item)

        if item == ItemKind.NONE:
            return ActionOutcome(
                events=[
                    Event(
                        type=EventType.NOTHING_TO_TAKE,
                        message="There is nothing new to pick up here!",
                    )
                ],
                changes=changes,
            )

        return ActionOutcome(
            events=[
                Event(
                    type=EventType.ITEM_TAKEN,
                    message=f"You pick up a {map_layout.describe_item(item)}",
                    context={"item": item.value, "replaced": state.inventory_item.value},
                )
            ],
            changes=changes,
        )

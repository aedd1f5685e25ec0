"""
Use handler for the turn engine.

Applies the effect of the held item. Whatever happens, the item is used
up: the inventory is always empty afterwards, even when the item had no
effect here.
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


class UseHandler:
    """Handles USE commands. The argument is ignored; the held item is used.

    Effects:
        BUS_KEY: at the bus entrance, ride straight to the bus exit
        MEDKIT: injury back to zero
        BASEBALL_BAT: threat lowered by the bat's effectiveness, floored at zero
        NONE: nothing

    A bus ride does not count as movement: has_moved stays False, so the
    threat keeps escalating and the ground item is not refreshed.
    """

    def handle(
        self,
        command: "ParsedCommand",
        state: "SessionState",
        map_layout: "MapLayout",
        rules: "GameRules",
    ) -> ActionOutcome:
        item = state.inventory_item
        if item == ItemKind.BUS_KEY:
            event, changes = self._use_bus_key(state, rules)
        elif item == ItemKind.MEDKIT:
            event, changes = self._use_medkit()
        elif item == ItemKind.BASEBALL_BAT:
            event, changes = self._use_baseball_bat(state, rules)
        else:
            event, changes = self._use_nothing()

        event.context["item"] = item.value
        changes.inventory_item = ItemKind.NONE
        return ActionOutcome(events=[event], changes=changes, has_moved=False)

    def _use_bus_key(
        self, state: "SessionState", rules: "GameRules"
    ) -> tuple[Event, StateChanges]:
        if state.current_area_id == rules.bus_entrance_id:
            return (
                Event(
                    type=EventType.BUS_RIDDEN,
                    message="You use the bus key and drive on.",
                    context={"destination": rules.bus_exit_id},
                ),
                StateChanges(current_area_id=rules.bus_exit_id),
            )
        return (
            Event(
                type=EventType.ITEM_UNUSABLE,
                message="I cannot use this item here.",
            ),
            StateChanges(),
        )

    def _use_medkit(self) -> tuple[Event, StateChanges]:
        return (
            Event(type=EventType.HEALED, message="You use the MedKit on your wounds."),
            StateChanges(current_injury_level=0),
        )

    def _use_baseball_bat(
        self, state: "SessionState", rules: "GameRules"
    ) -> tuple[Event, StateChanges]:
        threat = max(0, state.current_threat_level - rules.baseball_bat_effectiveness)
        return (
            Event(
                type=EventType.THREAT_REDUCED,
                message="You use the baseball bat and pummel some squirrels.",
                context={"threat_before": state.current_threat_level, "threat_after": threat},
            ),
            StateChanges(current_threat_level=threat),
        )

    def _use_nothing(self) -> tuple[Event, StateChanges]:
        return (
            Event(
                type=EventType.NOTHING_TO_USE,
                message=(
                    "You scramble to find a useful item in your backpack "
                    "but find nothing."
                ),
            ),
            StateChanges(),
        )

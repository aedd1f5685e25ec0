"""
Hazard roll for the turn engine.

Once per turn, before the player's command is resolved, the squirrels
get a chance to attack. A uniform draw strictly below the current threat
level costs the player one injury point.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from amazing_adventure.models.outcome import (
    ActionOutcome,
    Event,
    EventType,
    StateChanges,
)

if TYPE_CHECKING:
    from amazing_adventure.engine.protocols import RandomSource
    from amazing_adventure.models.rules import GameRules
    from amazing_adventure.models.session import SessionState

logger = logging.getLogger(__name__)

HAZARD_STRUCK_MESSAGE = "You get mauled by a squirrel!"
HAZARD_AVOIDED_MESSAGE = "You managed to avoid the squirrels, for now."


class HazardRoller:
    """Rolls the per-turn squirrel attack.

    Attributes:
        rng: Source of uniform integers; anything with randint(a, b)

    Example:
        >>> roller = HazardRoller(random.Random(7))
        >>> outcome = roller.roll(state, rules)
        >>> outcome.events[0].type in (EventType.HAZARD_STRUCK, EventType.HAZARD_AVOIDED)
        True
    """

    def __init__(self, rng: "RandomSource | None" = None):
        self.rng = rng if rng is not None else random.Random()

    def roll(self, state: "SessionState", rules: "GameRules") -> ActionOutcome:
        """Draw once and compare against the current threat level.

        Args:
            state: Current session state (read only)
            rules: Supplies the inclusive roll range

        Returns:
            ActionOutcome with a single hazard event; on a hit the changes
            raise the injury level by one
        """
        draw = self.rng.randint(rules.hazard_roll_min, rules.hazard_roll_max)
        context = {"roll": draw, "threat_level": state.current_threat_level}
        logger.debug(
            f"Hazard roll {draw} against threat {state.current_threat_level}"
        )

        if draw < state.current_threat_level:
            return ActionOutcome(
                events=[
                    Event(
                        type=EventType.HAZARD_STRUCK,
                        message=HAZARD_STRUCK_MESSAGE,
                        context=context,
                    )
                ],
                changes=StateChanges(
                    current_injury_level=state.current_injury_level + 1
                ),
            )

        return ActionOutcome(
            events=[
                Event(
                    type=EventType.HAZARD_AVOIDED,
                    message=HAZARD_AVOIDED_MESSAGE,
                    context=context,
                )
            ]
        )

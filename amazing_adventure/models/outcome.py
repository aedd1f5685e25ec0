"""
Outcome models for the turn engine.

Every step of a turn (the hazard roll and the dispatched command) returns
an ActionOutcome instead of mutating the session directly. The outcome
carries the events to show the player and a StateChanges delta that the
SessionStateManager applies.

Key concepts:
    - Event: Something that happened, with its narrative text
    - StateChanges: Fields to overwrite on the session state
    - ActionOutcome: Events + changes + movement/quit signals for one step
    - TurnOutcome: Everything that happened during one full turn

Example:
    >>> outcome = ActionOutcome(
    ...     events=[Event(type=EventType.HEALED, message="You use the MedKit.")],
    ...     changes=StateChanges(current_injury_level=0),
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from amazing_adventure.models.command import ParsedCommand
from amazing_adventure.models.map import ItemKind


class EventType(str, Enum):
    """Types of events that can occur during a turn.

    Categories:
        Hazard: HAZARD_STRUCK, HAZARD_AVOIDED
        Movement: MOVED, MOVE_BLOCKED, BUS_RIDDEN
        Items: ITEM_TAKEN, NOTHING_TO_TAKE, HEALED, THREAT_REDUCED,
               ITEM_UNUSABLE, NOTHING_TO_USE
        Meta: UNKNOWN_COMMAND, QUIT_REQUESTED
    """

    # Hazard
    HAZARD_STRUCK = "hazard_struck"
    HAZARD_AVOIDED = "hazard_avoided"

    # Movement
    MOVED = "moved"
    MOVE_BLOCKED = "move_blocked"
    BUS_RIDDEN = "bus_ridden"

    # Items
    ITEM_TAKEN = "item_taken"
    NOTHING_TO_TAKE = "nothing_to_take"
    HEALED = "healed"
    THREAT_REDUCED = "threat_reduced"
    ITEM_UNUSABLE = "item_unusable"
    NOTHING_TO_USE = "nothing_to_use"

    # Meta
    UNKNOWN_COMMAND = "unknown_command"
    QUIT_REQUESTED = "quit_requested"


class Event(BaseModel):
    """Represents something that happened in the game world.

    Attributes:
        type: The type of event that occurred
        message: Narrative line shown to the player
        context: Extra details (roll, direction, destination, ...)
    """

    type: EventType
    message: str
    context: dict[str, object] = Field(default_factory=dict)


class StateChanges(BaseModel):
    """Session fields to overwrite; None means unchanged"""

    current_area_id: int | None = None
    inventory_item: ItemKind | None = None
    current_threat_level: int | None = None
    current_injury_level: int | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class ActionOutcome(BaseModel):
    """Result of one step of a turn.

    Attributes:
        events: Events produced by the step, in display order
        changes: Delta to apply to the session state
        has_moved: Whether the player moved to a new area via an exit
        quit: Whether the player asked to leave the game
    """

    events: list[Event] = Field(default_factory=list)
    changes: StateChanges = Field(default_factory=StateChanges)
    has_moved: bool = False
    quit: bool = False

    @property
    def messages(self) -> list[str]:
        return [event.message for event in self.events]


class GameStatus(str, Enum):
    """Where the playthrough stands after a turn"""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class TurnOutcome(BaseModel):
    """Everything that happened during one turn"""

    turn: int
    command: ParsedCommand
    hazard: ActionOutcome
    action: ActionOutcome
    status: GameStatus = GameStatus.PLAYING

    @property
    def messages(self) -> list[str]:
        """Narrative lines for the turn: hazard first, then the command."""
        return self.hazard.messages + self.action.messages

    @property
    def game_complete(self) -> bool:
        return self.status != GameStatus.PLAYING

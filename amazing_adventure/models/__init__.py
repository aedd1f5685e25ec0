"""Pydantic models for Amazing Adventure"""

from amazing_adventure.models.map import (
    Area,
    AreaNotFoundError,
    ItemKind,
    MapLayout,
)
from amazing_adventure.models.rules import GameRules
from amazing_adventure.models.command import CommandType, ParsedCommand
from amazing_adventure.models.outcome import (
    ActionOutcome,
    Event,
    EventType,
    GameStatus,
    StateChanges,
    TurnOutcome,
)
from amazing_adventure.models.session import SessionState

__all__ = [
    # Map models
    "Area",
    "AreaNotFoundError",
    "ItemKind",
    "MapLayout",
    "GameRules",
    # Command models
    "CommandType",
    "ParsedCommand",
    # Outcome models
    "ActionOutcome",
    "Event",
    "EventType",
    "GameStatus",
    "StateChanges",
    "TurnOutcome",
    # Session models
    "SessionState",
]

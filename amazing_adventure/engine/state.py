"""
Session state management for the turn engine.

Owns the single SessionState of a playthrough and every mutation of it:
applying outcome deltas, refreshing area-derived fields and deciding
whether the game is over.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from amazing_adventure.models.map import Area, MapLayout
from amazing_adventure.models.outcome import GameStatus, StateChanges
from amazing_adventure.models.rules import GameRules
from amazing_adventure.models.session import SessionState

logger = logging.getLogger(__name__)


class SessionStateManager:
    """Manages game state for a single session"""

    def __init__(self, map_layout: MapLayout, rules: GameRules | None = None):
        """Initialize a new session at the map's start area"""
        self.session_id = str(uuid.uuid4())
        self.created_at = datetime.now()
        self.map_layout = map_layout
        self.rules = rules if rules is not None else map_layout.rules
        if rules is not None and rules != map_layout.rules:
            self._check_rules_override()

        start = map_layout.find_area(map_layout.start_area_id)
        self._state = SessionState(
            session_id=self.session_id,
            current_area_id=start.id,
            current_threat_level=start.initial_threat_level,
            current_item_on_ground=start.item,
        )

    def _check_rules_override(self) -> None:
        """Re-validate the map against rules that differ from its own"""
        from amazing_adventure.engine.validator import validate_map
        result = validate_map(self.map_layout, self.map_layout.name, self.rules)
        for message in result.errors + result.warnings:
            logger.warning(f"Session rules override: {message}")

    def get_state(self) -> SessionState:
        """Get current session state"""
        return self._state

    def get_current_area(self) -> Area:
        """Get the area the player is standing in"""
        return self.map_layout.find_area(self._state.current_area_id)

    def apply_changes(self, changes: StateChanges) -> None:
        """Apply a delta produced by the hazard roll or a command"""
        if changes.is_empty():
            return
        logger.debug(f"Applying changes: {changes.model_dump(exclude_none=True)}")
        self._state.apply_changes(changes)

    def refresh_area(self, has_moved: bool) -> None:
        """Update area-derived fields at the end of a turn.

        Moving loads the new area's initial threat and ground item, which
        discards any reduction from a baseball bat. Staying put escalates
        the threat by one.
        """
        if has_moved:
            area = self.get_current_area()
            self._state.current_threat_level = area.initial_threat_level
            self._state.current_item_on_ground = area.item
        else:
            self._state.current_threat_level += 1

    def increment_turn(self) -> None:
        self._state.turn_count += 1

    def is_at_end(self) -> bool:
        """Check if the player has reached the end area"""
        return self._state.current_area_id == self.map_layout.end_area_id

    def is_player_dead(self) -> bool:
        """Check if the injury level has reached the death threshold"""
        return self._state.current_injury_level >= self.rules.death_threshold

    def check_game_over(self) -> GameStatus:
        """Evaluate the end-of-turn termination predicates and record the status"""
        if self.is_at_end():
            self._state.status = GameStatus.WON
        elif self.is_player_dead():
            self._state.status = GameStatus.LOST
        else:
            self._state.status = GameStatus.PLAYING
        return self._state.status

    def mark_quit(self) -> None:
        self._state.status = GameStatus.QUIT

    def game_over_message(self) -> str:
        """Final text for a finished game: the end area on a win, else the death message"""
        if self.is_at_end():
            return self.get_current_area().description
        if self.is_player_dead():
            return self.map_layout.death_message
        return ""

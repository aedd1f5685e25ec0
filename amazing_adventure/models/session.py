"""
Session state models - Pydantic models for one playthrough
"""

from pydantic import BaseModel, Field

from amazing_adventure.models.map import ItemKind
from amazing_adventure.models.outcome import GameStatus, StateChanges


class SessionState(BaseModel):
    """Current player/session state"""
    session_id: str
    current_area_id: int
    inventory_item: ItemKind = ItemKind.NONE
    current_item_on_ground: ItemKind = ItemKind.NONE  # Mirrors the area, refreshed on movement
    current_threat_level: int = Field(default=0, ge=0)
    current_injury_level: int = Field(default=0, ge=0)
    turn_count: int = 0
    status: GameStatus = GameStatus.PLAYING

    def apply_changes(self, changes: StateChanges) -> None:
        """Apply a state delta from a hazard roll or command"""
        if changes.current_area_id is not None:
            self.current_area_id = changes.current_area_id

        if changes.inventory_item is not None:
            self.inventory_item = changes.inventory_item

        if changes.current_threat_level is not None:
            self.current_threat_level = changes.current_threat_level

        if changes.current_injury_level is not None:
            self.current_injury_level = changes.current_injury_level

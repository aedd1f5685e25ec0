"""
Game rules - tunable constants for the turn engine
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GameRules(BaseModel):
    """Constants that drive hazards, items and the bus shortcut.

    Every map ships with these defaults; a map can override any of them
    in the ``rules`` block of its world.yaml.
    """

    model_config = ConfigDict(frozen=True)

    death_threshold: int = Field(default=3, gt=0)
    baseball_bat_effectiveness: int = Field(default=5, ge=0)

    # Area ids controlling where the bus shortcut is
    bus_entrance_id: int = 8
    bus_exit_id: int = 15

    # Inclusive bounds of the per-turn hazard draw
    hazard_roll_min: int = 0
    hazard_roll_max: int = 10

    @model_validator(mode="after")
    def check_roll_bounds(self) -> "GameRules":
        """Ensure the hazard range is not empty."""
        if self.hazard_roll_min > self.hazard_roll_max:
            raise ValueError("hazard_roll_min must not exceed hazard_roll_max")
        return self

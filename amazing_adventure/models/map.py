"""
Map models - Pydantic models for YAML map definitions
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from amazing_adventure.models.rules import GameRules


class ItemKind(str, Enum):
    """The closed set of items that can lie on the ground or be carried"""
    NONE = "none"
    BASEBALL_BAT = "baseball_bat"
    MEDKIT = "medkit"
    BUS_KEY = "bus_key"


DEFAULT_ITEM_DESCRIPTIONS: dict[ItemKind, str] = {
    ItemKind.NONE: "Nothing",
    ItemKind.BASEBALL_BAT: "Baseball Bat",
    ItemKind.MEDKIT: "MedKit",
    ItemKind.BUS_KEY: "Bus Key",
}


class AreaNotFoundError(LookupError):
    """Raised when an area id is not part of the map"""

    def __init__(self, area_id: int):
        super().__init__(f"Area {area_id} does not exist in this map")
        self.area_id = area_id


class Area(BaseModel):
    """Area definition from areas.yaml"""
    model_config = ConfigDict(frozen=True)

    id: int
    description: str
    initial_threat_level: int = Field(default=0, ge=0)
    item: ItemKind = ItemKind.NONE
    exits: dict[str, int] = Field(default_factory=dict)  # direction name -> area id

    def resolve_direction(self, direction: str) -> int | None:
        """Get the destination for a direction (exact, case-sensitive match)"""
        return self.exits.get(direction)


class MapLayout(BaseModel):
    """Complete loaded map: the area graph plus global metadata"""
    model_config = ConfigDict(frozen=True)

    name: str = "Unnamed Map"
    start_area_id: int
    end_area_id: int
    start_message: str = ""
    death_message: str = ""
    areas: dict[int, Area]
    item_descriptions: dict[ItemKind, str] = Field(
        default_factory=lambda: dict(DEFAULT_ITEM_DESCRIPTIONS)
    )
    rules: GameRules = Field(default_factory=GameRules)

    def get_area(self, area_id: int) -> Area | None:
        """Get an area by ID"""
        return self.areas.get(area_id)

    def find_area(self, area_id: int) -> Area:
        """Get an area by ID, failing loudly if it does not exist"""
        area = self.areas.get(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)
        return area

    def describe_item(self, kind: ItemKind) -> str:
        """Get the display text for an item kind"""
        return self.item_descriptions.get(kind, DEFAULT_ITEM_DESCRIPTIONS[kind])

"""
Map Validator - Validates consistency of YAML map definitions

Checks:
- Start and end areas exist
- Exit references: dangling exits are reported (fatal only if taken)
- Bus shortcut: entrance and exit areas exist
- Reachability: the end area can be reached from the start area
"""

from collections import deque
from dataclasses import dataclass, field

from amazing_adventure.models.map import ItemKind, MapLayout
from amazing_adventure.models.rules import GameRules


@dataclass
class ValidationResult:
    """Result of map validation"""

    world_id: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Map is valid if there are no errors (warnings are OK)"""
        return len(self.errors) == 0

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)


class MapValidator:
    """Validates map definition consistency"""

    def __init__(self, map_layout: MapLayout, world_id: str, rules: GameRules | None = None):
        """Check map_layout against rules (default: the map's own rules)"""
        self.map_layout = map_layout
        self.world_id = world_id
        self.rules = rules if rules is not None else map_layout.rules
        self.result = ValidationResult(world_id=world_id)

    def validate(self) -> ValidationResult:
        """Run all validation checks"""
        if not self.map_layout.areas:
            self.result.add_error("Map defines no areas")
            return self.result

        self._validate_endpoints()
        self._validate_exit_references()
        self._validate_bus_shortcut()
        if self.result.is_valid:
            self._validate_reachability()

        return self.result

    def _validate_endpoints(self):
        """Check that the start and end areas exist"""
        areas = self.map_layout.areas
        if self.map_layout.start_area_id not in areas:
            self.result.add_error(
                f"Start area {self.map_layout.start_area_id} is not defined"
            )
        if self.map_layout.end_area_id not in areas:
            self.result.add_error(
                f"End area {self.map_layout.end_area_id} is not defined"
            )

    def _validate_exit_references(self):
        """Report exits that point to undefined areas"""
        areas = self.map_layout.areas
        for area_id, area in areas.items():
            for direction, dest_id in area.exits.items():
                if dest_id not in areas:
                    self.result.add_warning(
                        f"Area {area_id} exit '{direction}' points to undefined area {dest_id}"
                    )

    def _validate_bus_shortcut(self):
        """Check the bus entrance/exit areas when a bus key is placed"""
        areas = self.map_layout.areas
        rules = self.rules
        has_bus_key = any(area.item == ItemKind.BUS_KEY for area in areas.values())
        if not has_bus_key:
            return

        if rules.bus_entrance_id not in areas:
            self.result.add_warning(
                f"Bus key is placed but bus entrance area {rules.bus_entrance_id} is not defined"
            )
        if rules.bus_exit_id not in areas:
            self.result.add_warning(
                f"Bus key is placed but bus exit area {rules.bus_exit_id} is not defined"
            )

    def _validate_reachability(self):
        """Warn when the end area cannot be reached from the start"""
        areas = self.map_layout.areas
        rules = self.rules
        start = self.map_layout.start_area_id
        end = self.map_layout.end_area_id

        seen = {start}
        queue = deque([start])
        while queue:
            area = areas.get(queue.popleft())
            if area is None:
                continue
            neighbours = list(area.exits.values())
            if area.id == rules.bus_entrance_id:
                neighbours.append(rules.bus_exit_id)
            for dest_id in neighbours:
                if dest_id not in seen:
                    seen.add(dest_id)
                    queue.append(dest_id)

        if end not in seen:
            self.result.add_warning(
                f"End area {end} cannot be reached from start area {start}"
            )


def validate_map(
    map_layout: MapLayout, world_id: str, rules: GameRules | None = None
) -> ValidationResult:
    """
    Validate a loaded map for consistency.

    Args:
        map_layout: The map to check
        world_id: The map identifier, used in messages
        rules: Rules the map will be played with (default: map_layout.rules)

    Returns:
        ValidationResult with errors and warnings
    """
    return MapValidator(map_layout, world_id, rules).validate()

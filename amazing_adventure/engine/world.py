"""
Map loader - Load and validate YAML map files
"""

import logging
from pathlib import Path

import yaml

from amazing_adventure.models.map import (
    DEFAULT_ITEM_DESCRIPTIONS,
    Area,
    ItemKind,
    MapLayout,
)
from amazing_adventure.models.rules import GameRules

logger = logging.getLogger(__name__)

DEFAULT_WORLDS_DIR = Path(__file__).parent.parent / "worlds"


class MapLoader:
    """Loads game maps from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        if worlds_dir is None:
            worlds_dir = DEFAULT_WORLDS_DIR
        self.worlds_dir = Path(worlds_dir)

    def list_worlds(self) -> list[dict]:
        """List available maps with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if not world_path.is_dir() or not world_yaml.exists():
                continue
            try:
                with open(world_yaml) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning(f"Skipping unreadable world '{world_path.name}': {e}")
                continue
            worlds.append({
                "id": world_path.name,
                "name": data.get("name", world_path.name),
                "description": data.get("description", ""),
            })

        return worlds

    def load_map(self, world_id: str, validate: bool = True) -> MapLayout:
        """
        Load a complete map from YAML files.

        Args:
            world_id: The map identifier (folder name in worlds/)
            validate: Whether to validate the map on load (default True)

        Returns:
            MapLayout with all areas and metadata

        Raises:
            FileNotFoundError: If the map doesn't exist
            ValueError: If the YAML doesn't fit the models, or validation
                fails and validate=True
        """
        world_path = self.worlds_dir / world_id

        if not world_path.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_path}")

        logger.info(f"Loading map '{world_id}' from {world_path}")

        world = self._read_yaml(world_path / "world.yaml", required=True)
        areas = self._load_areas_yaml(world_path / "areas.yaml")
        item_descriptions = self._load_items_yaml(world_path / "items.yaml")

        map_layout = MapLayout(
            name=world.get("name", world_id),
            start_area_id=world.get("start_area", 0),
            end_area_id=world.get("end_area", 0),
            start_message=world.get("start_message", ""),
            death_message=world.get("death_message", ""),
            areas=areas,
            item_descriptions=item_descriptions,
            rules=self._load_rules(world.get("rules"), world_path / "world.yaml"),
        )

        if validate:
            from amazing_adventure.engine.validator import MapValidator
            validator = MapValidator(map_layout, world_id)
            result = validator.validate()

            for warning in result.warnings:
                logger.warning(f"World '{world_id}': {warning}")

            if not result.is_valid:
                error_list = "\n  - ".join(result.errors)
                raise ValueError(
                    f"World '{world_id}' validation failed with {len(result.errors)} error(s):\n  - {error_list}"
                )

        logger.info(f"Loaded map '{map_layout.name}' with {len(map_layout.areas)} area(s)")
        return map_layout

    def _read_yaml(self, path: Path, required: bool = False) -> dict:
        """Read a YAML mapping, tolerating empty or missing optional files"""
        if not path.exists():
            if required:
                raise FileNotFoundError(f"Missing map file: {path}")
            return {}

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{path.name} must contain a mapping at the top level")
        return data

    def _load_areas_yaml(self, path: Path) -> dict[int, Area]:
        """Load areas.yaml"""
        data = self._read_yaml(path, required=True)

        areas = {}
        for area_id, area_data in data.items():
            area_data = area_data or {}
            if not isinstance(area_data, dict):
                raise ValueError(f"Area {area_id} in {path.name} must be a mapping")
            area = Area(
                id=area_id,
                description=area_data.get("description", ""),
                initial_threat_level=area_data.get("threat", 0),
                item=area_data.get("item") or ItemKind.NONE,
                exits=area_data.get("exits") or {},
            )
            areas[area.id] = area

        return areas

    def _load_rules(self, data, path: Path) -> GameRules:
        """Build GameRules from the optional rules block of world.yaml"""
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"rules in {path.name} must be a mapping")
        return GameRules.model_validate(data)

    def _load_items_yaml(self, path: Path) -> dict[ItemKind, str]:
        """Load items.yaml, filling in defaults for kinds it leaves out"""
        descriptions = dict(DEFAULT_ITEM_DESCRIPTIONS)
        for kind, description in self._read_yaml(path).items():
            descriptions[ItemKind(kind)] = str(description)
        return descriptions

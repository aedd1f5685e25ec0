"""
Shared pytest fixtures for Amazing Adventure tests.

This module provides:
- sample_map_layout: Small map with the bus shortcut and a dangling exit
- state_manager: Fresh SessionStateManager on that map
- make_engine: Factory for TurnEngine with a scripted random source
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from amazing_adventure.engine.processor import TurnEngine  # noqa: E402
from amazing_adventure.engine.state import SessionStateManager  # noqa: E402
from amazing_adventure.models.map import Area, ItemKind, MapLayout  # noqa: E402
from amazing_adventure.models.rules import GameRules  # noqa: E402
from tests.mocks.rng import SequenceRandom  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# Map Fixtures
# =============================================================================


@pytest.fixture
def sample_rules() -> GameRules:
    """Default rules: death at 3, bat removes 5, bus 8 -> 15."""
    return GameRules()


@pytest.fixture
def sample_areas() -> dict[int, Area]:
    """Create a small area graph for testing.

    Layout:
        [3 end] <--north-- [2 bat] <--north/south--> [1 start]
           ^                                            |
           |                                          east (one-way)
         north                                          v
        [15 bus exit, medkit]  <==bus==  [8 bus entrance, bus key] --down--> (99, missing)
    """
    return {
        1: Area(
            id=1,
            description="Start area.",
            initial_threat_level=0,
            exits={"north": 2, "east": 8},
        ),
        2: Area(
            id=2,
            description="Bat area.",
            initial_threat_level=2,
            item=ItemKind.BASEBALL_BAT,
            exits={"south": 1, "north": 3},
        ),
        3: Area(
            id=3,
            description="End area. You win!",
            initial_threat_level=0,
        ),
        8: Area(
            id=8,
            description="Bus entrance.",
            initial_threat_level=4,
            item=ItemKind.BUS_KEY,
            exits={"down": 99},
        ),
        15: Area(
            id=15,
            description="Bus exit.",
            initial_threat_level=1,
            item=ItemKind.MEDKIT,
            exits={"north": 3},
        ),
    }


@pytest.fixture
def sample_map_layout(sample_areas: dict[int, Area], sample_rules: GameRules) -> MapLayout:
    """Create complete MapLayout for testing."""
    return MapLayout(
        name="Test Map",
        start_area_id=1,
        end_area_id=3,
        start_message="Welcome to the test map.",
        death_message="You died in the test map.",
        areas=sample_areas,
        rules=sample_rules,
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def state_manager(sample_map_layout: MapLayout) -> SessionStateManager:
    """Create a session at the start area."""
    return SessionStateManager(sample_map_layout)


@pytest.fixture
def make_engine(sample_map_layout: MapLayout) -> Callable[..., TurnEngine]:
    """Factory fixture for a TurnEngine with scripted hazard rolls.

    Usage:
        def test_something(make_engine):
            engine = make_engine(rolls=[10])  # 10 never beats threat <= 10
    """

    def _factory(rolls=(10,), console=None) -> TurnEngine:
        manager = SessionStateManager(sample_map_layout)
        return TurnEngine(manager, console, rng=SequenceRandom(rolls))

    return _factory

"""Unit tests for MapValidator.

Tests cover:
- A consistent map has no errors or warnings
- Missing start/end areas are errors
- Dangling exits, missing bus areas and unreachable ends are warnings
"""

from amazing_adventure.engine.validator import MapValidator, validate_map
from amazing_adventure.models.map import Area, ItemKind, MapLayout
from amazing_adventure.models.rules import GameRules


def make_layout(areas: dict[int, Area], start: int = 1, end: int = 2) -> MapLayout:
    return MapLayout(start_area_id=start, end_area_id=end, areas=areas)


def test_consistent_map_is_clean() -> None:
    layout = make_layout({
        1: Area(id=1, description="a", exits={"north": 2}),
        2: Area(id=2, description="b"),
    })

    result = MapValidator(layout, "clean").validate()

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_empty_map_is_an_error() -> None:
    result = validate_map(make_layout({}), "empty")

    assert not result.is_valid
    assert result.errors == ["Map defines no areas"]


def test_missing_start_and_end_are_errors() -> None:
    layout = make_layout({1: Area(id=1, description="a")}, start=5, end=6)

    result = validate_map(layout, "broken")

    assert not result.is_valid
    assert "Start area 5 is not defined" in result.errors
    assert "End area 6 is not defined" in result.errors


def test_dangling_exit_is_a_warning() -> None:
    layout = make_layout({
        1: Area(id=1, description="a", exits={"north": 2, "west": 42}),
        2: Area(id=2, description="b"),
    })

    result = validate_map(layout, "dangling")

    assert result.is_valid
    assert any("'west'" in warning and "42" in warning for warning in result.warnings)


def test_missing_bus_areas_warn_when_key_is_placed() -> None:
    layout = make_layout({
        1: Area(id=1, description="a", item=ItemKind.BUS_KEY, exits={"north": 2}),
        2: Area(id=2, description="b"),
    })

    result = validate_map(layout, "no-bus")

    assert result.is_valid
    assert any("bus entrance area 8" in warning for warning in result.warnings)
    assert any("bus exit area 15" in warning for warning in result.warnings)


def test_missing_bus_areas_ignored_without_key() -> None:
    layout = make_layout({
        1: Area(id=1, description="a", exits={"north": 2}),
        2: Area(id=2, description="b"),
    })

    assert validate_map(layout, "no-key").warnings == []


def test_bus_checks_use_given_rules() -> None:
    """A map checked against other rules is judged by those rules' bus areas."""
    layout = make_layout({
        1: Area(id=1, description="a", item=ItemKind.BUS_KEY, exits={"north": 2}),
        2: Area(id=2, description="b"),
    })
    rules = GameRules(bus_entrance_id=1, bus_exit_id=2)

    assert validate_map(layout, "own-rules").warnings != []
    assert validate_map(layout, "session-rules", rules).warnings == []
    assert MapValidator(layout, "session-rules", rules).rules is rules


def test_reachability_uses_given_bus_route() -> None:
    layout = make_layout({
        1: Area(id=1, description="a", item=ItemKind.BUS_KEY),
        2: Area(id=2, description="b"),
    })

    result = validate_map(layout, "bus", GameRules(bus_entrance_id=1, bus_exit_id=2))

    assert result.warnings == []


def test_unreachable_end_is_a_warning() -> None:
    layout = make_layout({
        1: Area(id=1, description="a"),
        2: Area(id=2, description="b", exits={"south": 1}),
    })

    result = validate_map(layout, "one-way")

    assert result.is_valid
    assert "End area 2 cannot be reached from start area 1" in result.warnings


def test_bus_shortcut_counts_for_reachability() -> None:
    """The only route to the end is the bus ride from 8 to 15."""
    layout = make_layout(
        {
            1: Area(id=1, description="a", exits={"east": 8}),
            8: Area(id=8, description="bus", item=ItemKind.BUS_KEY),
            15: Area(id=15, description="exit", exits={"north": 2}),
            2: Area(id=2, description="end"),
        }
    )

    result = validate_map(layout, "bus-only")

    assert result.warnings == []

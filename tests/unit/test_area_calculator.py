"""Unit tests for room area derivation."""

import pytest

from paintquote.domain import (
    AdjustmentKind,
    AreaAdjustment,
    CalculationCache,
    PaintTypeCategory,
    Room,
    RoomDimensions,
)
from paintquote.domain.services import (
    AreaCalculator,
    aggregate_room_areas,
    calculate_room_areas,
    total_paintable_area,
)


class TestCalculateRoomAreas:
    def test_basic_room(self) -> None:
        result = calculate_room_areas(12, 10, 10)

        assert result.floor_area == 120.0
        assert result.ceiling_area == 120.0
        assert result.wall_area == 440.0
        assert result.adjusted_wall_area == 440.0

    def test_openings_and_extra_surfaces(self) -> None:
        result = calculate_room_areas(
            12, 10, 10, openings=[21, 15], extra_surfaces=[10]
        )

        assert result.total_opening_area == 36.0
        assert result.total_extra_surface == 10.0
        assert result.adjusted_wall_area == 414.0

    def test_zero_height_uses_floor_area_for_walls(self) -> None:
        result = calculate_room_areas(30, 10, 0)

        assert result.wall_area == result.floor_area == 300.0

    def test_fractional_dimensions_are_exact(self) -> None:
        result = calculate_room_areas(10.5, 12.3, 0)

        assert result.floor_area == 129.15

    def test_door_window_grill_reported_separately(self) -> None:
        result = calculate_room_areas(12, 10, 10, door_window_grills=[20])

        assert result.total_door_window_grill_area == 20.0
        assert result.adjusted_wall_area == 440.0

    def test_door_window_grill_added_when_requested(self) -> None:
        result = calculate_room_areas(
            12, 10, 10, door_window_grills=[20], include_door_window_grill=True
        )

        assert result.adjusted_wall_area == 460.0

    def test_adjustment_shapes(self) -> None:
        """Adjustments may be numbers, mappings or objects with an area."""
        result = calculate_room_areas(
            12,
            10,
            10,
            openings=[5, {"area": 6}, AreaAdjustment(7)],
        )

        assert result.total_opening_area == 18.0

    def test_invalid_numbers_count_as_zero(self) -> None:
        result = calculate_room_areas("abc", 10, None, openings=[None, "x"])

        assert result.floor_area == 0.0
        assert result.total_opening_area == 0.0


class TestTotalPaintableArea:
    def test_default_selection_is_floor_and_wall(self) -> None:
        areas = calculate_room_areas(12, 10, 10, openings=[21, 15])

        assert total_paintable_area(areas) == pytest.approx(120 + 404)

    def test_custom_selection(self) -> None:
        areas = calculate_room_areas(12, 10, 10)

        assert total_paintable_area(areas, {"ceiling": True}) == 120.0
        assert total_paintable_area(areas, {}) == 0.0


class TestAreaCalculator:
    def test_calculate_room(self, rooms: list[Room]) -> None:
        result = AreaCalculator().calculate(rooms[0])

        assert result.adjusted_wall_area == 404.0
        assert result.total_door_window_grill_area == 20.0

    def test_cache_reuses_results(self) -> None:
        cache = CalculationCache()
        calculator = AreaCalculator(cache=cache)
        room = Room("Hall", RoomDimensions(12, 10, 10))

        first = calculator.calculate(room)
        second = calculator.calculate(Room("Other", RoomDimensions(12, 10, 10)))

        assert first is second
        assert len(cache) == 1

    def test_cache_key_includes_adjustments(self) -> None:
        calculator = AreaCalculator(cache=CalculationCache())
        plain = Room("A", RoomDimensions(12, 10, 10))
        with_door = Room("B", RoomDimensions(12, 10, 10))
        with_door.add_adjustment(AreaAdjustment(21, AdjustmentKind.OPENING))

        assert calculator.calculate(plain).adjusted_wall_area == 440.0
        assert calculator.calculate(with_door).adjusted_wall_area == 419.0

    def test_aggregate_by_category(self, rooms: list[Room]) -> None:
        totals = AreaCalculator().aggregate(rooms, PaintTypeCategory.INTERIOR)

        assert totals.wall == 804.0
        assert totals.ceiling == 100.0
        assert totals.floor == 120.0
        assert totals.enamel == 20.0


class TestAggregateRoomAreas:
    def test_all_categories(self, rooms: list[Room]) -> None:
        calculator = AreaCalculator()
        pairs = [(room, calculator.calculate(room)) for room in rooms]

        totals = aggregate_room_areas(pairs)

        assert totals.wall == 1104.0
        assert totals.floor == 420.0

    def test_exterior_only(self, rooms: list[Room]) -> None:
        calculator = AreaCalculator()
        pairs = [(room, calculator.calculate(room)) for room in rooms]

        totals = aggregate_room_areas(pairs, "Exterior")

        assert totals.wall == 300.0
        assert totals.ceiling == 0.0
        assert totals.enamel == 0.0

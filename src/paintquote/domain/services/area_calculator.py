"""Room area derivation.

Dimensions are converted to hundredths of a foot and areas to ten-thousandths
of a square foot so that all intermediate arithmetic is integral. Results are
converted back to sq.ft and rounded to 2 decimals.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from ..numeric import round2, safe_number
from ..value_objects import AreaTotals, PaintTypeCategory, RoomAreaResult

if TYPE_CHECKING:
    from ..cache import CalculationCache
    from ..entities import Room

__all__ = [
    "DEFAULT_SELECTED_AREAS",
    "AreaCalculator",
    "aggregate_room_areas",
    "calculate_room_areas",
    "total_paintable_area",
]

logger = logging.getLogger(__name__)

_LENGTH_SCALE = 100
_AREA_SCALE = _LENGTH_SCALE * _LENGTH_SCALE

# Rooms saved without an explicit selection paint floor and walls only.
DEFAULT_SELECTED_AREAS: Mapping[str, bool] = {
    "floor": True,
    "wall": True,
    "ceiling": False,
}


def _adjustment_area(item: Any) -> float:
    if isinstance(item, Mapping):
        return safe_number(item.get("area"))
    if isinstance(item, (int, float, str)):
        return safe_number(item)
    return safe_number(getattr(item, "area", 0))


def _scaled_total(adjustments: Iterable[Any] | None) -> int:
    if not adjustments:
        return 0
    return sum(round(_adjustment_area(a) * _AREA_SCALE) for a in adjustments)


def calculate_room_areas(
    length: float,
    width: float,
    height: float,
    openings: Iterable[Any] | None = None,
    extra_surfaces: Iterable[Any] | None = None,
    door_window_grills: Iterable[Any] | None = None,
    include_door_window_grill: bool = False,
) -> RoomAreaResult:
    """Derive floor, wall, ceiling and adjusted wall areas for a room.

    A room with zero (unspecified) height reports its floor area as wall
    area. Door/window/grill area is reported on its own for enamel work and
    only added into the adjusted wall area when ``include_door_window_grill``
    is set.

    Args:
        length: Room length in feet.
        width: Room width in feet.
        height: Room height in feet; 0 when unknown.
        openings: Adjustments deducted from wall area.
        extra_surfaces: Adjustments added to wall area.
        door_window_grills: Enamel surfaces tracked separately.
        include_door_window_grill: Add door/window/grill area to the
            adjusted wall area.

    Returns:
        RoomAreaResult with every value rounded to 2 decimals.
    """
    l = round(safe_number(length) * _LENGTH_SCALE)
    w = round(safe_number(width) * _LENGTH_SCALE)
    h = round(safe_number(height) * _LENGTH_SCALE)

    floor = l * w
    wall = 2 * (l + w) * h if h > 0 else floor
    ceiling = floor

    openings_total = _scaled_total(openings)
    extra_total = _scaled_total(extra_surfaces)
    grill_total = _scaled_total(door_window_grills)

    adjusted_wall = wall - openings_total + extra_total
    if include_door_window_grill:
        adjusted_wall += grill_total

    return RoomAreaResult(
        floor_area=round2(floor / _AREA_SCALE),
        wall_area=round2(wall / _AREA_SCALE),
        ceiling_area=round2(ceiling / _AREA_SCALE),
        adjusted_wall_area=round2(adjusted_wall / _AREA_SCALE),
        total_opening_area=round2(openings_total / _AREA_SCALE),
        total_extra_surface=round2(extra_total / _AREA_SCALE),
        total_door_window_grill_area=round2(grill_total / _AREA_SCALE),
    )


def total_paintable_area(
    areas: RoomAreaResult, selected_areas: Mapping[str, bool] | None = None
) -> float:
    """Sum the surfaces selected for painting in a room."""
    selected = DEFAULT_SELECTED_AREAS if selected_areas is None else selected_areas
    total = 0.0
    if selected.get("floor"):
        total += areas.floor_area
    if selected.get("wall"):
        total += areas.adjusted_wall_area
    if selected.get("ceiling"):
        total += areas.ceiling_area
    return round2(total)


class AreaCalculator:
    """Computes room areas, memoizing per room shape when given a cache."""

    def __init__(
        self,
        cache: CalculationCache | None = None,
        include_door_window_grill: bool = False,
    ) -> None:
        self.cache = cache
        self.include_door_window_grill = include_door_window_grill

    def calculate(self, room: Room) -> RoomAreaResult:
        """Calculate areas for a room entity."""
        if self.cache is None:
            return self._compute(room)

        dims = room.dimensions
        key = (
            "room_areas",
            dims.length,
            dims.width,
            dims.height,
            tuple(_adjustment_area(a) for a in room.openings),
            tuple(_adjustment_area(a) for a in room.extra_surfaces),
            tuple(_adjustment_area(a) for a in room.door_window_grills),
            self.include_door_window_grill,
        )
        return self.cache.get_or_compute(key, lambda: self._compute(room))

    def _compute(self, room: Room) -> RoomAreaResult:
        dims = room.dimensions
        result = calculate_room_areas(
            dims.length,
            dims.width,
            dims.height,
            room.openings,
            room.extra_surfaces,
            room.door_window_grills,
            include_door_window_grill=self.include_door_window_grill,
        )
        logger.debug(
            f"Room '{room.name}': wall={result.wall_area} "
            f"adjusted={result.adjusted_wall_area} floor={result.floor_area}"
        )
        return result

    def aggregate(
        self,
        rooms: Iterable[Room],
        paint_type_category: PaintTypeCategory | str | None = None,
    ) -> AreaTotals:
        """Sum selected surface areas across rooms of one paint category."""
        return aggregate_room_areas(
            ((room, self.calculate(room)) for room in rooms), paint_type_category
        )


def aggregate_room_areas(
    rooms_with_areas: Iterable[tuple[Room, RoomAreaResult]],
    paint_type_category: PaintTypeCategory | str | None = None,
) -> AreaTotals:
    """Total wall, ceiling, floor and enamel area across rooms.

    Only rooms whose project type matches ``paint_type_category`` are
    counted (all rooms when it is None). Wall totals use the adjusted wall
    area; enamel totals use door/window/grill area.
    """
    wanted = getattr(paint_type_category, "value", paint_type_category)
    wall = ceiling = floor = enamel = 0.0
    for room, areas in rooms_with_areas:
        project_type = getattr(room.project_type, "value", room.project_type)
        if wanted is not None and project_type != wanted:
            continue
        selected = (
            DEFAULT_SELECTED_AREAS if room.selected_areas is None else room.selected_areas
        )
        if selected.get("wall"):
            wall += areas.adjusted_wall_area
        if selected.get("ceiling"):
            ceiling += areas.ceiling_area
        if selected.get("floor"):
            floor += areas.floor_area
        enamel += areas.total_door_window_grill_area
    return AreaTotals(
        wall=round2(wall),
        ceiling=round2(ceiling),
        floor=round2(floor),
        enamel=round2(enamel),
    )

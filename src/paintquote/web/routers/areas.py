"""Room area endpoints."""

from fastapi import APIRouter

from paintquote.domain.services import calculate_room_areas
from paintquote.web.schemas.requests import RoomAreasRequest
from paintquote.web.schemas.responses import RoomAreasSchema

router = APIRouter(prefix="/areas", tags=["areas"])


@router.post("", response_model=RoomAreasSchema)
async def room_areas(request: RoomAreasRequest) -> RoomAreasSchema:
    """Calculate floor, wall, ceiling and adjusted wall area for a room."""
    result = calculate_room_areas(
        request.length,
        request.width,
        request.height,
        openings=request.openings,
        extra_surfaces=request.extra_surfaces,
        door_window_grills=request.door_window_grills,
        include_door_window_grill=request.include_door_window_grill,
    )
    return RoomAreasSchema(
        floor_area=result.floor_area,
        wall_area=result.wall_area,
        ceiling_area=result.ceiling_area,
        adjusted_wall_area=result.adjusted_wall_area,
        total_opening_area=result.total_opening_area,
        total_extra_surface=result.total_extra_surface,
        total_door_window_grill_area=result.total_door_window_grill_area,
    )

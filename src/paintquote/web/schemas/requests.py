"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class RoomAreasRequest(BaseModel):
    """Request for calculating the areas of one room."""

    length: float = Field(..., ge=0, le=1000, description="Room length in feet")
    width: float = Field(..., ge=0, le=1000, description="Room width in feet")
    height: float = Field(default=0.0, ge=0, le=100, description="Room height in feet")
    openings: list[float] = Field(
        default_factory=list, max_length=50, description="Opening areas in sq.ft"
    )
    extra_surfaces: list[float] = Field(
        default_factory=list, max_length=50, description="Extra surface areas in sq.ft"
    )
    door_window_grills: list[float] = Field(
        default_factory=list, max_length=50, description="Door/window/grill areas in sq.ft"
    )
    include_door_window_grill: bool = Field(
        default=False, description="Add door/window/grill area to the adjusted wall"
    )


class EstimateRequest(BaseModel):
    """Request for a full quotation from an estimate document."""

    config: dict[str, Any] = Field(..., description="Full estimate JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating an estimate document."""

    config: dict[str, Any] = Field(..., description="Estimate JSON")

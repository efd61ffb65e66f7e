"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class RoomAreasSchema(BaseModel):
    """Derived areas of a room, in sq.ft."""

    floor_area: float = Field(..., description="Floor area")
    wall_area: float = Field(..., description="Gross wall area")
    ceiling_area: float = Field(..., description="Ceiling area")
    adjusted_wall_area: float = Field(
        ..., description="Wall area minus openings plus extra surfaces"
    )
    total_opening_area: float = Field(..., description="Sum of openings")
    total_extra_surface: float = Field(..., description="Sum of extra surfaces")
    total_door_window_grill_area: float = Field(
        ..., description="Sum of door/window/grill surfaces"
    )


class TotalsSchema(BaseModel):
    """Quotation totals."""

    company_project_cost: float = Field(..., description="Sum of area x rate")
    material_cost: float = Field(..., description="Material purchase cost")
    labour_cost: float = Field(..., description="Labour cost")
    margin_cost: float = Field(..., description="Dealer margin")
    actual_total_cost: float = Field(..., description="Material + labour + margin")


class EstimateResponseSchema(BaseModel):
    """Response for a full quotation."""

    is_valid: bool = Field(..., description="Whether the estimate was produced")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(default_factory=list, description="Degraded lines")
    labour_days: int = Field(default=0, description="Labour days quoted")
    totals: TotalsSchema | None = Field(default=None, description="Quotation totals")
    summary: dict[str, Any] = Field(
        default_factory=dict,
        description="Rooms, ordered configurations, materials and labour",
    )


class ValidationResultSchema(BaseModel):
    """Response for estimate validation."""

    is_valid: bool = Field(..., description="Whether the estimate is usable")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )

"""Pydantic schemas for the REST API."""

from paintquote.web.schemas.requests import (
    ConfigValidateRequest,
    EstimateRequest,
    RoomAreasRequest,
)
from paintquote.web.schemas.responses import (
    ErrorResponseSchema,
    EstimateResponseSchema,
    RoomAreasSchema,
    TotalsSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "EstimateRequest",
    "RoomAreasRequest",
    # Responses
    "ErrorResponseSchema",
    "EstimateResponseSchema",
    "RoomAreasSchema",
    "TotalsSchema",
    "ValidationResultSchema",
]

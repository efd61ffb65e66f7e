"""Estimate validation endpoints."""

from fastapi import APIRouter

from paintquote.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from paintquote.web.schemas.requests import ConfigValidateRequest
from paintquote.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_estimate(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate an estimate document without pricing it.

    Schema failures are reported in the response body rather than as an
    error status, so clients can show them next to the form fields.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path", ""), "message": d.get("message", "")}
                for d in e.details
            ],
        )

    result = validate_config(config)
    data = result.to_dict()
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=data["errors"],
        warnings=data["warnings"],
    )

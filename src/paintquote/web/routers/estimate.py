"""Quotation endpoints."""

from fastapi import APIRouter

from paintquote.application.config import load_config_from_dict
from paintquote.web.dependencies import ServiceFactoryDep
from paintquote.web.exceptions import EstimateGenerationError
from paintquote.web.schemas.requests import EstimateRequest
from paintquote.web.schemas.responses import EstimateResponseSchema, TotalsSchema

router = APIRouter(prefix="/estimate", tags=["estimate"])


@router.post("", response_model=EstimateResponseSchema)
async def estimate(
    request: EstimateRequest, factory: ServiceFactoryDep
) -> EstimateResponseSchema:
    """Produce a full quotation from an estimate document.

    Raises:
        ConfigError: If the document fails schema validation (422).
        CatalogIntegrityError: If the catalog is inconsistent (409).
        EstimateGenerationError: If labour settings are unusable (422).
    """
    config = load_config_from_dict(request.config)
    command = factory.create_summary_command(config.include_door_window_grill)
    result = command.execute_config(config)
    if not result.is_valid:
        raise EstimateGenerationError(result.errors)

    summary = factory.get_json_exporter().to_dict(result)
    totals = summary.pop("totals")
    return EstimateResponseSchema(
        is_valid=True,
        warnings=result.warnings,
        labour_days=result.labour_days,
        totals=TotalsSchema(**totals),
        summary=summary,
    )

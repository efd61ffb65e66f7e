"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paintquote.application import CatalogIntegrityError
from paintquote.application.config import ConfigError


class EstimateGenerationError(Exception):
    """Raised when a quotation cannot be produced."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Estimate failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CatalogIntegrityError)
    async def catalog_integrity_handler(
        request: Request, exc: CatalogIntegrityError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": exc.message,
                "error_type": "catalog_integrity",
                "details": {"product": exc.product, "references": exc.references},
            },
        )

    @app.exception_handler(EstimateGenerationError)
    async def estimate_error_handler(
        request: Request, exc: EstimateGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Estimate generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

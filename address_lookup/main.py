"""Address Lookup — FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from address_lookup.config import settings
from address_lookup.domain.exceptions import (
    GeocoderError,
    InvalidArgument,
    UnsupportedOperation,
    ZeroResults,
)
from address_lookup.infrastructure.api.routes_geocode import router as geocode_router
from address_lookup.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[GeocoderError], int] = {
    InvalidArgument: 400,
    ZeroResults: 404,
    UnsupportedOperation: 422,
}


async def geocoder_error_handler(request: Request, exc: GeocoderError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.info("%s %s → %d (%s)", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    app = FastAPI(
        title="Address Lookup",
        description="Forward and reverse geocoding backed by ArcGIS Online",
        version="0.1.0",
    )

    app.add_exception_handler(GeocoderError, geocoder_error_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")

    return app


app = create_app()

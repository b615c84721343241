"""Health check endpoint."""

from fastapi import APIRouter, Depends

from address_lookup.application.ports.geocoder_port import GeocoderPort
from address_lookup.infrastructure.api.dependencies import get_geocoder

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(geocoder: GeocoderPort = Depends(get_geocoder)):
    """Report service liveness and the configured provider."""
    return {
        "status": "ok",
        "provider": geocoder.name,
    }

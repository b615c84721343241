"""Geocoding endpoints — forward and reverse lookup."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from address_lookup.application.use_cases.lookup_address import (
    GeocodeAddressUseCase,
    ReverseGeocodeUseCase,
)
from address_lookup.domain.entities.address import AddressCollection
from address_lookup.infrastructure.api.dependencies import (
    get_geocode_uc,
    get_max_locations,
    get_reverse_geocode_uc,
)

router = APIRouter(prefix="/geocode", tags=["geocode"])


# ── Response schemas ────────────────────────────────────────────────

class AdminLevelItem(BaseModel):
    level: int
    name: str
    code: str | None = None


class AddressItem(BaseModel):
    latitude: float
    longitude: float
    street_number: str | None = None
    street_name: str | None = None
    postal_code: str | None = None
    locality: str | None = None
    sub_locality: str | None = None
    admin_levels: list[AdminLevelItem] = []
    country_code: str | None = None
    country_name: str | None = None
    bounds: tuple[float, float, float, float] | None = None
    timezone: str | None = None
    provided_by: str


class AddressListResponse(BaseModel):
    total: int
    results: list[AddressItem]


def _serialize(results: AddressCollection) -> dict[str, Any]:
    return {
        "total": len(results),
        "results": [address.as_dict for address in results],
    }


# ── Endpoints ───────────────────────────────────────────────────────

@router.get("", response_model=AddressListResponse)
async def geocode_address(
    address: str = Query(..., description="Free-text street address"),
    limit: int | None = Query(None, ge=1, description="Max number of candidates"),
    use_case: GeocodeAddressUseCase = Depends(get_geocode_uc),
    default_limit: int = Depends(get_max_locations),
):
    """Resolve an address into coordinates and structured address fields."""
    results = await use_case.execute(address, limit=limit or default_limit)
    return _serialize(results)


@router.get("/reverse", response_model=AddressListResponse)
async def reverse_geocode(
    latitude: float = Query(..., description="Latitude in decimal degrees"),
    longitude: float = Query(..., description="Longitude in decimal degrees"),
    use_case: ReverseGeocodeUseCase = Depends(get_reverse_geocode_uc),
):
    """Resolve a coordinate pair into the address found there."""
    results = await use_case.execute(latitude, longitude)
    return _serialize(results)

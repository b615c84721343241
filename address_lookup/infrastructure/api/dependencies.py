"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from address_lookup.adapters.geocoder.arcgis_online_adapter import (
    ArcGISOnlineAdapter,
    ArcGISOnlineOptions,
)
from address_lookup.adapters.http.httpx_transport import HttpxTransport
from address_lookup.application.ports.geocoder_port import GeocoderPort
from address_lookup.application.use_cases.lookup_address import (
    GeocodeAddressUseCase,
    ReverseGeocodeUseCase,
)
from address_lookup.config import settings

# Singleton adapters (stateless)
_transport = HttpxTransport(
    user_agent=settings.geocoder_user_agent,
    timeout=settings.http_timeout,
)
_geocoder_adapter = ArcGISOnlineAdapter(
    _transport,
    ArcGISOnlineOptions(
        source_country=settings.arcgis_source_country,
        use_ssl=settings.arcgis_use_ssl,
    ),
)


def get_geocoder() -> GeocoderPort:
    return _geocoder_adapter


def get_max_locations() -> int:
    return settings.arcgis_max_locations


def get_geocode_uc() -> GeocodeAddressUseCase:
    return GeocodeAddressUseCase(geocoder=get_geocoder())


def get_reverse_geocode_uc() -> ReverseGeocodeUseCase:
    return ReverseGeocodeUseCase(geocoder=get_geocoder())

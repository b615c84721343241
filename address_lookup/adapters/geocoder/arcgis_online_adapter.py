"""ArcGIS Online geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from pydantic import ValidationError

from address_lookup.adapters.geocoder.arcgis_payloads import (
    ArcGISLocation,
    Candidate,
    FindCandidatesResponse,
    ReverseGeocodeResponse,
)
from address_lookup.application.ports.geocoder_port import GeocoderPort
from address_lookup.application.ports.http_transport_port import HttpTransportPort
from address_lookup.domain.entities.address import (
    Address,
    AddressCollection,
    AdminLevelCollection,
    Country,
)
from address_lookup.domain.exceptions import (
    InvalidArgument,
    UnsupportedOperation,
    ZeroResults,
)
from address_lookup.domain.policies.ip_address import is_ip_address
from address_lookup.domain.value_objects.geo_point import GeoPoint
from address_lookup.domain.value_objects.queries import GeocodeQuery, ReverseQuery

logger = logging.getLogger(__name__)

ARCGIS_HOST = "geocode.arcgis.com"
GEOCODE_PATH = "/arcgis/rest/services/World/GeocodeServer/findAddressCandidates"
REVERSE_PATH = "/arcgis/rest/services/World/GeocodeServer/reverseGeocode"

IP_NOT_SUPPORTED = (
    "The ArcGISOnline provider does not support IP addresses, only street addresses."
)


@dataclass(frozen=True)
class ArcGISOnlineOptions:
    """Adapter configuration.

    source_country: restrict candidates to one country (ArcGIS
        ``sourceCountry``); None means no filter.
    use_ssl: query the HTTPS endpoint instead of plain HTTP.
    """

    source_country: str | None = None
    use_ssl: bool = False


class ArcGISOnlineAdapter(GeocoderPort):
    """ArcGIS Online World GeocodeServer implementation of GeocoderPort."""

    def __init__(
        self,
        transport: HttpTransportPort,
        options: ArcGISOnlineOptions | None = None,
    ):
        self._transport = transport
        self._options = options or ArcGISOnlineOptions()

    @property
    def name(self) -> str:
        return "arcgis_online"

    @property
    def options(self) -> ArcGISOnlineOptions:
        return self._options

    async def geocode(self, text: str, limit: int | None = None) -> AddressCollection:
        """Geocode a street address.

        IP literals are rejected before the empty check and before any
        request goes out.
        """
        if is_ip_address(text):
            raise UnsupportedOperation(IP_NOT_SUPPORTED)

        query = GeocodeQuery(text=text) if limit is None else GeocodeQuery(text=text, limit=limit)
        url = self.build_geocode_url(query)
        body = await self._fetch(url)

        try:
            payload = FindCandidatesResponse.model_validate_json(body)
        except ValidationError as e:
            logger.warning("ArcGIS returned an unreadable body for '%s': %s", query.text, e)
            raise ZeroResults(f"Could not execute query \"{url}\".") from e

        if payload.error is not None:
            logger.warning("ArcGIS error for '%s': %s", query.text, payload.error.message)
            raise ZeroResults(f"Could not execute query \"{url}\".")
        if not payload.candidates:
            logger.info("ArcGIS returned no candidates for '%s'", query.text)
            raise ZeroResults(f"No results for query \"{url}\".")

        addresses = []
        for candidate in payload.candidates:
            address = self._map_candidate(candidate)
            if address is None:
                logger.warning("Skipping ArcGIS candidate without usable location: %r", candidate.address)
                continue
            addresses.append(address)

        if not addresses:
            raise ZeroResults(f"No results for query \"{url}\".")

        logger.info("ArcGIS resolved '%s' → %d candidate(s)", query.text, len(addresses))
        return AddressCollection(addresses)

    async def reverse(self, latitude: float, longitude: float) -> AddressCollection:
        """Reverse geocode a coordinate pair into exactly one address."""
        query = ReverseQuery.from_coordinates(latitude, longitude)
        url = self.build_reverse_url(query)
        body = await self._fetch(url)

        try:
            payload = ReverseGeocodeResponse.model_validate_json(body)
        except ValidationError as e:
            logger.warning("ArcGIS returned an unreadable reverse body for %s: %s", query.coordinates, e)
            raise ZeroResults(f"Could not execute query \"{url}\".") from e

        if payload.error is not None or payload.address is None:
            logger.info("ArcGIS found no address at %s", query.coordinates)
            raise ZeroResults(f"No results for query \"{url}\".")

        coordinates = _to_point(payload.location) or query.coordinates

        data = payload.address
        address = Address(
            coordinates=coordinates,
            provided_by=self.name,
            street_name=data.address,
            postal_code=data.postal,
            locality=data.city,
            country=Country(code=data.country_code) if data.country_code else None,
        )
        logger.info("ArcGIS reverse resolved %s → '%s'", query.coordinates, data.address)
        return AddressCollection([address])

    # ── URL building ────────────────────────────────────────────────

    def build_geocode_url(self, query: GeocodeQuery) -> str:
        params: list[tuple[str, str | int]] = [("SingleLine", query.text)]
        if self._options.source_country:
            params.append(("sourceCountry", self._options.source_country))
        params += [("maxLocations", query.limit), ("f", "json"), ("outFields", "*")]
        return self._endpoint(GEOCODE_PATH, params)

    def build_reverse_url(self, query: ReverseQuery) -> str:
        point = query.coordinates
        # ArcGIS expects x (longitude) first
        params: list[tuple[str, str | int]] = [
            ("location", f"{point.longitude!r},{point.latitude!r}"),
            ("f", "json"),
        ]
        if self._options.source_country:
            params.append(("sourceCountry", self._options.source_country))
        return self._endpoint(REVERSE_PATH, params)

    def _endpoint(self, path: str, params: list[tuple[str, str | int]]) -> str:
        scheme = "https" if self._options.use_ssl else "http"
        return f"{scheme}://{ARCGIS_HOST}{path}?{urlencode(params)}"

    # ── Helpers ─────────────────────────────────────────────────────

    async def _fetch(self, url: str) -> str:
        logger.debug("ArcGIS request: %s", url)
        try:
            body = await self._transport.get(url)
        except Exception as e:
            logger.exception("ArcGIS transport error for %s", url)
            raise ZeroResults(f"Could not execute query \"{url}\".") from e
        if not body or not body.strip():
            raise ZeroResults(f"Could not execute query \"{url}\".")
        return body

    def _map_candidate(self, candidate: Candidate) -> Address | None:
        coordinates = _to_point(candidate.location)
        if coordinates is None:
            return None

        attributes = candidate.attributes
        if attributes is None:
            return Address(
                coordinates=coordinates,
                provided_by=self.name,
                street_name=candidate.address,
            )

        return Address(
            coordinates=coordinates,
            provided_by=self.name,
            street_number=attributes.add_num,
            street_name=candidate.address,
            postal_code=attributes.postal,
            locality=attributes.city,
            admin_levels=AdminLevelCollection.from_names([attributes.region, attributes.subregion]),
            country=Country(code=attributes.country) if attributes.country else None,
        )


def _to_point(location: ArcGISLocation | None) -> GeoPoint | None:
    """WGS84 point from an ArcGIS location, None if missing or out of range."""
    if location is None or location.x is None or location.y is None:
        return None
    try:
        return GeoPoint(latitude=location.y, longitude=location.x)
    except InvalidArgument:
        logger.warning("ArcGIS location outside WGS84 range: x=%s y=%s", location.x, location.y)
        return None

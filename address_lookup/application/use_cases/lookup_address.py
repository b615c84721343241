"""Address lookup use cases — forward and reverse geocoding through a port."""

from __future__ import annotations

import logging

from address_lookup.application.ports.geocoder_port import GeocoderPort
from address_lookup.domain.entities.address import AddressCollection
from address_lookup.domain.exceptions import ZeroResults

logger = logging.getLogger(__name__)


class GeocodeAddressUseCase:
    """Resolves a free-text address into candidate addresses."""

    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    async def execute(self, text: str, limit: int | None = None) -> AddressCollection:
        """Geocode *text*.

        Args:
            text: free-text street address.
            limit: max number of candidates; provider default when None.

        Returns:
            AddressCollection in provider order.

        Raises:
            InvalidArgument, UnsupportedOperation or ZeroResults from the port.
        """
        try:
            results = await self._geocoder.geocode(text, limit=limit)
        except ZeroResults:
            logger.info("%s: no match for '%s'", self._geocoder.name, text)
            raise
        logger.info("%s: '%s' → %d result(s)", self._geocoder.name, text, len(results))
        return results


class ReverseGeocodeUseCase:
    """Resolves a coordinate pair into an address."""

    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    async def execute(self, latitude: float, longitude: float) -> AddressCollection:
        try:
            results = await self._geocoder.reverse(latitude, longitude)
        except ZeroResults:
            logger.info("%s: no address at (%s, %s)", self._geocoder.name, latitude, longitude)
            raise
        logger.info(
            "%s: (%s, %s) → %d result(s)", self._geocoder.name, latitude, longitude, len(results)
        )
        return results

"""Port interface for forward and reverse geocoding."""

from abc import ABC, abstractmethod

from address_lookup.domain.entities.address import AddressCollection


class GeocoderPort(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Stable provider identifier, e.g. "arcgis_online"."""
        ...

    @abstractmethod
    async def geocode(self, text: str, limit: int | None = None) -> AddressCollection:
        """Convert a free-text street address into matching addresses.

        Raises InvalidArgument, UnsupportedOperation or ZeroResults.
        """
        ...

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float) -> AddressCollection:
        """Convert a coordinate pair into the address found there.

        Raises InvalidArgument or ZeroResults.
        """
        ...

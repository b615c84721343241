"""Query value objects for forward and reverse geocoding."""

from __future__ import annotations

from dataclasses import dataclass

from address_lookup.domain.exceptions import InvalidArgument
from address_lookup.domain.value_objects.geo_point import GeoPoint

DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class GeocodeQuery:
    text: str
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise InvalidArgument("Address cannot be empty.")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise InvalidArgument(f"Limit must be a positive integer, got {self.limit!r}")


@dataclass(frozen=True)
class ReverseQuery:
    """Reverse lookups always resolve to a single address, so no limit."""

    coordinates: GeoPoint

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(coordinates=GeoPoint(latitude=latitude, longitude=longitude))

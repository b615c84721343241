"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass

from address_lookup.domain.exceptions import InvalidArgument


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        try:
            latitude = float(self.latitude)
            longitude = float(self.longitude)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Coordinates must be numeric: {e}") from e

        if not -90.0 <= latitude <= 90.0:
            raise InvalidArgument(f"Latitude {latitude} is outside [-90, 90]")
        if not -180.0 <= longitude <= 180.0:
            raise InvalidArgument(f"Longitude {longitude} is outside [-180, 180]")

        # Normalize ints / numeric strings to float on a frozen instance
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

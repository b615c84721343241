"""Address entities — normalized result of a geocoding lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from address_lookup.domain.value_objects.geo_point import GeoPoint

MAX_ADMIN_LEVEL_DEPTH = 5


@dataclass(frozen=True)
class AdminLevel:
    level: int
    name: str
    code: str | None = None


class AdminLevelCollection:
    """Admin levels keyed by a 1-based level number, ascending and unique."""

    def __init__(self, levels: Iterable[AdminLevel] = ()):
        items = tuple(levels)
        seen: set[int] = set()
        previous = 0
        for admin_level in items:
            if not 1 <= admin_level.level <= MAX_ADMIN_LEVEL_DEPTH:
                raise ValueError(
                    f"Admin level must be between 1 and {MAX_ADMIN_LEVEL_DEPTH}, "
                    f"got {admin_level.level}"
                )
            if admin_level.level in seen:
                raise ValueError(f"Admin level {admin_level.level} is defined twice")
            if admin_level.level < previous:
                raise ValueError("Admin levels must be ordered by ascending level")
            seen.add(admin_level.level)
            previous = admin_level.level
        self._items = items

    @classmethod
    def from_names(cls, names: Iterable[str | None]) -> AdminLevelCollection:
        """Number the non-empty names 1, 2, ... in the order given."""
        levels = []
        for name in names:
            if name and name.strip():
                levels.append(AdminLevel(level=len(levels) + 1, name=name.strip()))
        return cls(levels)

    def get(self, level: int) -> AdminLevel:
        for admin_level in self._items:
            if admin_level.level == level:
                return admin_level
        raise KeyError(f"Admin level {level} is not set")

    def has(self, level: int) -> bool:
        return any(a.level == level for a in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[AdminLevel]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdminLevelCollection):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"AdminLevelCollection({list(self._items)!r})"


@dataclass(frozen=True)
class Country:
    code: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class Address:
    coordinates: GeoPoint
    provided_by: str
    street_number: str | None = None
    street_name: str | None = None
    postal_code: str | None = None
    locality: str | None = None
    sub_locality: str | None = None
    admin_levels: AdminLevelCollection = field(default_factory=AdminLevelCollection)
    country: Country | None = None
    bounds: tuple[float, float, float, float] | None = None
    timezone: str | None = None

    @property
    def as_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "latitude": self.coordinates.latitude,
            "longitude": self.coordinates.longitude,
            "street_number": self.street_number,
            "street_name": self.street_name,
            "postal_code": self.postal_code,
            "locality": self.locality,
            "sub_locality": self.sub_locality,
            "admin_levels": [
                {"level": a.level, "name": a.name, "code": a.code}
                for a in self.admin_levels
            ],
            "country_code": self.country.code if self.country else None,
            "country_name": self.country.name if self.country else None,
            "bounds": self.bounds,
            "timezone": self.timezone,
            "provided_by": self.provided_by,
        }


class AddressCollection:
    """Immutable, ordered sequence of addresses in provider response order."""

    def __init__(self, addresses: Iterable[Address] = ()):
        self._items = tuple(addresses)

    def first(self) -> Address:
        if not self._items:
            raise IndexError("Address collection is empty")
        return self._items[0]

    def get(self, index: int) -> Address:
        if not 0 <= index < len(self._items):
            raise IndexError(f"No address at index {index}")
        return self._items[index]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Address]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"AddressCollection({len(self._items)} addresses)"

"""Tests for address lookup use cases with in-memory fakes."""

from __future__ import annotations

import logging

import pytest

from address_lookup.application.ports.geocoder_port import GeocoderPort
from address_lookup.application.use_cases.lookup_address import (
    GeocodeAddressUseCase,
    ReverseGeocodeUseCase,
)
from address_lookup.domain.entities.address import Address, AddressCollection, Country
from address_lookup.domain.exceptions import UnsupportedOperation, ZeroResults
from address_lookup.domain.value_objects.geo_point import GeoPoint

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    def __init__(self, result: AddressCollection | None = None, error: Exception | None = None):
        self._result = result
        self._error = error
        self.calls: list[tuple] = []

    @property
    def name(self):
        return "fake"

    async def geocode(self, text, limit=None):
        self.calls.append(("geocode", text, limit))
        if self._error:
            raise self._error
        return self._result

    async def reverse(self, latitude, longitude):
        self.calls.append(("reverse", latitude, longitude))
        if self._error:
            raise self._error
        return self._result


def _collection() -> AddressCollection:
    return AddressCollection([
        Address(
            coordinates=GeoPoint(latitude=48.8633, longitude=2.389),
            provided_by="fake",
            locality="Paris",
            country=Country(code="FRA"),
        )
    ])


# ─── GeocodeAddressUseCase ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_geocode_delegates_to_port():
    geocoder = FakeGeocoder(result=_collection())
    results = await GeocodeAddressUseCase(geocoder).execute("Paris", limit=3)
    assert len(results) == 1
    assert geocoder.calls == [("geocode", "Paris", 3)]


@pytest.mark.asyncio
async def test_geocode_propagates_zero_results():
    use_case = GeocodeAddressUseCase(FakeGeocoder(error=ZeroResults("nothing")))
    with pytest.raises(ZeroResults):
        await use_case.execute("loremipsum")


@pytest.mark.asyncio
async def test_geocode_propagates_unsupported_operation():
    use_case = GeocodeAddressUseCase(FakeGeocoder(error=UnsupportedOperation("no IPs")))
    with pytest.raises(UnsupportedOperation, match="no IPs"):
        await use_case.execute("127.0.0.1")


# ─── ReverseGeocodeUseCase ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_reverse_delegates_to_port():
    geocoder = FakeGeocoder(result=_collection())
    results = await ReverseGeocodeUseCase(geocoder).execute(48.8633, 2.389)
    assert results.first().locality == "Paris"
    assert geocoder.calls == [("reverse", 48.8633, 2.389)]


@pytest.mark.asyncio
async def test_reverse_propagates_zero_results():
    use_case = ReverseGeocodeUseCase(FakeGeocoder(error=ZeroResults("nothing")))
    with pytest.raises(ZeroResults):
        await use_case.execute(1, 2)


@pytest.mark.asyncio
async def test_reverse_logs_outcome(caplog):
    use_case = ReverseGeocodeUseCase(FakeGeocoder(result=_collection()))
    with caplog.at_level(logging.INFO, logger="address_lookup.application.use_cases.lookup_address"):
        await use_case.execute(48.8633, 2.389)
    assert "fake: (48.8633, 2.389) → 1 result(s)" in caplog.text

"""Tests for the geocoding HTTP endpoints — adapter wired to a fake transport."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from address_lookup.adapters.geocoder.arcgis_online_adapter import ArcGISOnlineAdapter
from address_lookup.application.ports.http_transport_port import HttpTransportPort
from address_lookup.application.use_cases.lookup_address import (
    GeocodeAddressUseCase,
    ReverseGeocodeUseCase,
)
from address_lookup.infrastructure.api.dependencies import (
    get_geocode_uc,
    get_geocoder,
    get_reverse_geocode_uc,
)
from address_lookup.main import create_app


class FakeTransport(HttpTransportPort):
    def __init__(self, body: str | None):
        self._body = body
        self.urls: list[str] = []

    async def get(self, url):
        self.urls.append(url)
        return self._body


def _client(body: str | None) -> tuple[TestClient, FakeTransport]:
    transport = FakeTransport(body)
    adapter = ArcGISOnlineAdapter(transport)
    app = create_app()
    app.dependency_overrides[get_geocoder] = lambda: adapter
    app.dependency_overrides[get_geocode_uc] = lambda: GeocodeAddressUseCase(adapter)
    app.dependency_overrides[get_reverse_geocode_uc] = lambda: ReverseGeocodeUseCase(adapter)
    return TestClient(app), transport


def test_health():
    client, _ = _client(None)
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "provider": "arcgis_online"}


def test_geocode_ok(paris_body):
    client, transport = _client(paris_body)
    response = client.get("/api/geocode", params={"address": "10 avenue Gambetta, Paris, France"})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    first = data["results"][0]
    assert first["latitude"] == pytest.approx(48.8633, abs=0.0001)
    assert first["street_number"] == "10"
    assert first["postal_code"] == "75020"
    assert first["country_code"] == "FRA"
    assert [a["name"] for a in first["admin_levels"]] == ["Île-de-France", "Paris"]
    assert "maxLocations=5" in transport.urls[0]


def test_geocode_passes_limit(paris_body):
    client, transport = _client(paris_body)
    client.get("/api/geocode", params={"address": "Paris", "limit": 2})
    assert "maxLocations=2" in transport.urls[0]


def test_geocode_empty_address_is_400():
    client, transport = _client(None)
    response = client.get("/api/geocode", params={"address": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidArgument"
    assert transport.urls == []


def test_geocode_ip_is_422():
    client, transport = _client(None)
    response = client.get("/api/geocode", params={"address": "127.0.0.1"})
    assert response.status_code == 422
    assert response.json()["error"] == "UnsupportedOperation"
    assert "does not support IP addresses" in response.json()["detail"]
    assert transport.urls == []


def test_geocode_no_body_is_404():
    client, _ = _client(None)
    response = client.get("/api/geocode", params={"address": "loremipsum"})
    assert response.status_code == 404
    assert response.json()["error"] == "ZeroResults"


def test_reverse_ok(reverse_body):
    client, _ = _client(reverse_body)
    response = client.get(
        "/api/geocode/reverse", params={"latitude": 48.8633, "longitude": 2.389}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    result = data["results"][0]
    assert result["street_name"] == "3 Avenue Gambetta"
    assert result["street_number"] is None
    assert result["admin_levels"] == []


def test_reverse_out_of_range_is_400():
    client, _ = _client(None)
    response = client.get("/api/geocode/reverse", params={"latitude": 95, "longitude": 0})
    assert response.status_code == 400

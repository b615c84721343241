"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "arcgis_online"


def _load(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def paris_body():
    """findAddressCandidates body for '10 avenue Gambetta, Paris, France'."""
    return _load("geocode_paris.json")


@pytest.fixture
def hannover_body():
    return _load("geocode_hannover.json")


@pytest.fixture
def reverse_body():
    """reverseGeocode body for (48.8633, 2.3890)."""
    return _load("reverse_paris.json")


@pytest.fixture
def no_candidates_body():
    return _load("geocode_no_candidates.json")


@pytest.fixture
def reverse_error_body():
    return _load("reverse_error.json")

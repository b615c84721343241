"""Pydantic models for the ArcGIS Online GeocodeServer JSON payloads.

Only the fields the adapter maps are declared; everything else in the
response is ignored. Absent or null fields stay None so callers can tell
"not returned" apart from a zero value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def blank_to_none(value) -> str | None:
    """Stringify, strip and return None for empty values."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


class _AttributeBlock(_Payload):
    """Flat string attributes; blank values become None."""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # The service sends "" for unknown attributes and numbers for AddNum
        return blank_to_none(value)


class ArcGISLocation(_Payload):
    x: float | None = None
    y: float | None = None


class CandidateAttributes(_AttributeBlock):
    add_num: str | None = Field(default=None, alias="AddNum")
    postal: str | None = Field(default=None, alias="Postal")
    city: str | None = Field(default=None, alias="City")
    region: str | None = Field(default=None, alias="Region")
    subregion: str | None = Field(default=None, alias="Subregion")
    country: str | None = Field(default=None, alias="Country")


class Candidate(_Payload):
    address: str | None = None
    location: ArcGISLocation | None = None
    attributes: CandidateAttributes | None = None

    @field_validator("address", mode="before")
    @classmethod
    def _blank_address(cls, value):
        return blank_to_none(value)


class ArcGISError(_Payload):
    code: int | None = None
    message: str | None = None


class FindCandidatesResponse(_Payload):
    candidates: list[Candidate] | None = None
    error: ArcGISError | None = None


class ReverseAddress(_AttributeBlock):
    address: str | None = Field(default=None, alias="Address")
    postal: str | None = Field(default=None, alias="Postal")
    city: str | None = Field(default=None, alias="City")
    country_code: str | None = Field(default=None, alias="CountryCode")


class ReverseGeocodeResponse(_Payload):
    address: ReverseAddress | None = None
    location: ArcGISLocation | None = None
    error: ArcGISError | None = None

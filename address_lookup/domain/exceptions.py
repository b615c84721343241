"""Domain errors raised by geocoder adapters."""


class GeocoderError(Exception):
    """Base class for every expected geocoding failure."""


class InvalidArgument(GeocoderError):
    """The caller supplied malformed input (empty address, bad coordinates)."""


class UnsupportedOperation(GeocoderError):
    """The input is well-formed but outside what the provider can geocode."""


class ZeroResults(GeocoderError):
    """The request was valid but the upstream service returned no data."""

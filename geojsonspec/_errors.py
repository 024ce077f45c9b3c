__all__ = ("GeoJSONError", "DecodeError", "InvalidObjectError", "EncodeError")


class GeoJSONError(Exception):
    """The base class for all geojsonspec exceptions."""


class DecodeError(GeoJSONError, ValueError):
    """Raised when a message cannot be parsed as JSON."""


class InvalidObjectError(DecodeError):
    """Raised when a value is not a valid GeoJSON object.

    This is the only validation error. It doesn't distinguish which member
    was invalid or how deeply it was nested; an object is either valid or it
    isn't.
    """


class EncodeError(GeoJSONError):
    """Raised when encoding a `GeoJSON` that holds no valid object."""

import math
from typing import Annotated, Any, Optional, Tuple

from msgspec import Meta

from ._base import (
    GeoJSONType,
    _check_array,
    _convert,
    _encode_number,
    _Sequence,
)
from ._errors import InvalidObjectError

__all__ = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
)


Position = Annotated[Tuple[float, ...], Meta(min_length=2)]


class Point(_Sequence):
    """A single position.

    Parameters
    ----------
    coordinates : tuple of float
        At least two numbers: easting/longitude, northing/latitude, and an
        optional altitude. Integers are converted to floats.

    Raises
    ------
    InvalidObjectError
        If there are fewer than two coordinates, or any of them isn't a
        finite number.
    """

    coordinates: Tuple[float, ...]

    geojson_type = GeoJSONType.POINT

    def __post_init__(self):
        _Sequence.__post_init__(self)
        if len(self.coordinates) < 2:
            raise InvalidObjectError(
                f"Expected at least 2 coordinates, got {len(self.coordinates)}"
            )

    def _check_item(self, item):
        value = _convert(item, float)
        if not math.isfinite(value):
            raise InvalidObjectError(f"Coordinates must be finite, got {value!r}")
        return value

    @classmethod
    def decode(cls, obj: Any) -> "Point":
        return cls(_convert(_check_array(obj), Position))

    def _encode_item(self, item):
        return _encode_number(item)

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

    easting = longitude
    northing = latitude

    @property
    def altitude(self) -> Optional[float]:
        """The third coordinate, or None for a 2D position."""
        if len(self.coordinates) > 2:
            return self.coordinates[2]
        return None


class MultiPoint(_Sequence):
    points: Tuple[Point, ...]

    geojson_type = GeoJSONType.MULTI_POINT
    item_type = Point


class LineString(_Sequence):
    """An ordered sequence of points. It may be empty.

    Parameters
    ----------
    points : tuple of Point
    """

    points: Tuple[Point, ...]

    geojson_type = GeoJSONType.LINE_STRING
    item_type = Point

    def is_linear_ring(self) -> bool:
        """Whether this is a closed ring of at least 4 points."""
        return len(self.points) >= 4 and self.points[0] == self.points[-1]


class MultiLineString(_Sequence):
    line_strings: Tuple[LineString, ...]

    geojson_type = GeoJSONType.MULTI_LINE_STRING
    item_type = LineString


class Polygon(_Sequence):
    """A polygon made of zero or more linear rings.

    Parameters
    ----------
    linear_rings : tuple of LineString
        Every ring must satisfy `LineString.is_linear_ring`. By convention
        the first ring is the exterior and any others are holes.

    Raises
    ------
    InvalidObjectError
        If any ring isn't a linear ring.
    """

    linear_rings: Tuple[LineString, ...]

    geojson_type = GeoJSONType.POLYGON
    item_type = LineString

    def _check_item(self, item):
        ring = _Sequence._check_item(self, item)
        if not ring.is_linear_ring():
            raise InvalidObjectError(
                "Polygon rings must be closed and have at least 4 positions"
            )
        return ring


class MultiPolygon(_Sequence):
    polygons: Tuple[Polygon, ...]

    geojson_type = GeoJSONType.MULTI_POLYGON
    item_type = Polygon

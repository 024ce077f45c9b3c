from ._errors import DecodeError, EncodeError, GeoJSONError, InvalidObjectError
from ._base import GEOMETRY_TYPES, GeoJSONType
from ._geometry import (
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from ._core import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GeometryCollection,
    decode,
    encode,
)

from . import inspect
from . import json

__version__ = "0.1.0"

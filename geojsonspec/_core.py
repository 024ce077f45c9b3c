import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Optional, Tuple

import msgspec
from msgspec.structs import force_setattr

from ._base import GEOMETRY_TYPES, GeoJSONType, _copy_json, _Sequence
from ._errors import EncodeError, InvalidObjectError
from ._geometry import (
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = (
    "GeoJSON",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
    "decode",
    "encode",
)

logger = logging.getLogger(__name__)


class GeoJSON(msgspec.Struct, frozen=True):
    """Any GeoJSON object.

    A ``GeoJSON`` holds either a valid object in ``payload`` or the reason
    decoding failed in ``error``, never both. Use `GeoJSON.decode` to build
    one from untyped data, or pass an already constructed object (``Point``,
    ``Feature``, ...) directly.

    Parameters
    ----------
    payload : object, optional
        The GeoJSON object, or None if decoding failed.
    type : GeoJSONType, optional
        The kind of ``payload``. Inferred when a payload is given.
    tag : str, optional
        The ``type`` member as it appeared in the input, if it was a string.
    error : InvalidObjectError, optional
        Why decoding failed.
    """

    payload: Any = None
    type: GeoJSONType = GeoJSONType.UNKNOWN
    tag: Optional[str] = None
    error: Optional[InvalidObjectError] = None

    def __post_init__(self):
        if self.payload is None:
            if self.error is None:
                force_setattr(self, "error", InvalidObjectError("No GeoJSON object"))
            return
        if self.error is not None:
            raise ValueError("`payload` and `error` are mutually exclusive")
        kind = getattr(self.payload, "geojson_type", None)
        if _VARIANTS.get(getattr(kind, "value", None)) is not type(self.payload):
            raise InvalidObjectError(
                f"Expected a GeoJSON object, got `{type(self.payload).__name__}`"
            )
        force_setattr(self, "type", kind)
        force_setattr(self, "tag", kind.value)

    @classmethod
    def decode(cls, obj: Any) -> "GeoJSON":
        """Decode an untyped value, dispatching on its ``type`` member.

        This never raises for invalid input. Check ``error`` on the result,
        or use `geojsonspec.decode` to have it raised. Nesting is bounded
        only by the interpreter's recursion limit; extremely deep input
        raises ``RecursionError``, so limit input size before decoding
        untrusted data.

        Parameters
        ----------
        obj : Any
            A mapping as produced by a JSON parser, or an object exposing
            ``__geo_interface__``.

        Returns
        -------
        GeoJSON
        """
        if isinstance(obj, GeoJSON):
            return obj
        if not isinstance(obj, Mapping) and hasattr(obj, "__geo_interface__"):
            obj = obj.__geo_interface__
        if not isinstance(obj, Mapping):
            return cls._reject(
                None,
                GeoJSONType.UNKNOWN,
                InvalidObjectError(f"Expected `object`, got `{type(obj).__name__}`"),
            )

        tag = obj.get("type")
        if not isinstance(tag, str):
            return cls._reject(
                None,
                GeoJSONType.UNKNOWN,
                InvalidObjectError("Object missing required field `type`"),
            )
        variant = _VARIANTS.get(tag)
        if variant is None:
            return cls._reject(
                tag,
                GeoJSONType.UNKNOWN,
                InvalidObjectError(f"Invalid GeoJSON type {tag!r}"),
            )

        try:
            if variant.prefix:
                if variant.prefix not in obj:
                    raise InvalidObjectError(
                        f"Object missing required field `{variant.prefix}`"
                    )
                payload = variant.decode(obj[variant.prefix])
            else:
                payload = variant.decode(obj)
        except InvalidObjectError as exc:
            return cls._reject(tag, variant.geojson_type, exc)
        return cls(payload)

    @classmethod
    def _reject(cls, tag, kind, error):
        logger.debug("Rejected GeoJSON object (type=%r): %s", tag, error)
        return cls(type=kind, tag=tag, error=error)

    def encode(self) -> dict:
        """Encode as an untyped mapping, with the ``type`` member first.

        Raises
        ------
        EncodeError
            If this holds no valid object.
        """
        if self.payload is None:
            raise EncodeError(f"Cannot encode an invalid GeoJSON object: {self.error}")
        out = {"type": self.tag}
        encoded = self.payload.encode()
        if self.payload.prefix:
            out[self.payload.prefix] = encoded
        else:
            out.update(encoded)
        return out

    @property
    def __geo_interface__(self) -> dict:
        return self.encode()

    def is_geometry(self) -> bool:
        """Whether this holds one of the seven geometry types."""
        return self.payload is not None and self.type in GEOMETRY_TYPES

    def _payload_as(self, kind):
        if self.payload is not None and self.type is kind:
            return self.payload
        return None

    @property
    def point(self) -> Optional[Point]:
        return self._payload_as(GeoJSONType.POINT)

    @property
    def multi_point(self) -> Optional[MultiPoint]:
        return self._payload_as(GeoJSONType.MULTI_POINT)

    @property
    def line_string(self) -> Optional[LineString]:
        return self._payload_as(GeoJSONType.LINE_STRING)

    @property
    def multi_line_string(self) -> Optional[MultiLineString]:
        return self._payload_as(GeoJSONType.MULTI_LINE_STRING)

    @property
    def polygon(self) -> Optional[Polygon]:
        return self._payload_as(GeoJSONType.POLYGON)

    @property
    def multi_polygon(self) -> Optional[MultiPolygon]:
        return self._payload_as(GeoJSONType.MULTI_POLYGON)

    @property
    def geometry_collection(self) -> Optional["GeometryCollection"]:
        return self._payload_as(GeoJSONType.GEOMETRY_COLLECTION)

    @property
    def feature(self) -> Optional["Feature"]:
        return self._payload_as(GeoJSONType.FEATURE)

    @property
    def feature_collection(self) -> Optional["FeatureCollection"]:
        return self._payload_as(GeoJSONType.FEATURE_COLLECTION)


def _as_geometry(obj) -> GeoJSON:
    if not isinstance(obj, GeoJSON):
        obj = GeoJSON(obj)
    if not obj.is_geometry():
        raise InvalidObjectError(f"Expected a geometry, got `{obj.type.value}`")
    return obj


def _decode_geometry(obj) -> GeoJSON:
    geometry = GeoJSON.decode(obj)
    if geometry.error is not None:
        raise geometry.error
    return _as_geometry(geometry)


class GeometryCollection(_Sequence):
    """A heterogeneous collection of geometries.

    Parameters
    ----------
    geometries : tuple of GeoJSON
        Geometry objects; bare ``Point``, ``Polygon``, ... instances are
        wrapped in a `GeoJSON`. Features and feature collections aren't
        allowed.
    """

    geometries: Tuple[GeoJSON, ...]

    geojson_type = GeoJSONType.GEOMETRY_COLLECTION
    prefix = "geometries"
    item_type = GeoJSON

    def _check_item(self, item):
        return _as_geometry(item)

    @classmethod
    def _decode_item(cls, obj):
        return _decode_geometry(obj)


class Feature(msgspec.Struct, frozen=True):
    """A spatially bounded thing.

    Parameters
    ----------
    geometry : GeoJSON, optional
        A geometry, or None for an unlocated feature. Bare geometry objects
        are wrapped in a `GeoJSON`.
    properties : Any, optional
        Arbitrary JSON data, with finite numbers only. It's copied on the way
        in and out, so the input and the output of `encode` are never
        shared. The ``properties`` attribute itself is the feature's own
        copy: mutating it skips validation, and `encode` raises
        `InvalidObjectError` if it no longer holds JSON data.
    id : str, optional
        An identifier for the feature.
    """

    geometry: Optional[GeoJSON] = None
    properties: Any = None
    id: Optional[str] = None

    geojson_type: ClassVar[GeoJSONType] = GeoJSONType.FEATURE
    prefix: ClassVar[str] = ""

    def __post_init__(self):
        if self.geometry is not None:
            force_setattr(self, "geometry", _as_geometry(self.geometry))
        force_setattr(self, "properties", _copy_json(self.properties))
        if self.id is not None and not isinstance(self.id, str):
            raise InvalidObjectError(
                f"Expected `str` for `id`, got `{type(self.id).__name__}`"
            )

    @classmethod
    def decode(cls, obj: Any) -> "Feature":
        """Build a feature from its untyped mapping.

        Both ``geometry`` and ``properties`` must be present, though either
        may be null. A non-string ``id`` is ignored.
        """
        if not isinstance(obj, Mapping):
            raise InvalidObjectError(f"Expected `object`, got `{type(obj).__name__}`")
        if obj.get("type", "Feature") != "Feature":
            raise InvalidObjectError(f"Expected a Feature, got {obj['type']!r}")
        for name in ("geometry", "properties"):
            if name not in obj:
                raise InvalidObjectError(f"Object missing required field `{name}`")

        geometry = obj["geometry"]
        if geometry is not None:
            geometry = _decode_geometry(geometry)
        id = obj.get("id")
        if not isinstance(id, str):
            id = None
        return cls(geometry, obj["properties"], id)

    def encode(self) -> dict:
        out = {
            "type": self.geojson_type.value,
            "geometry": None if self.geometry is None else self.geometry.encode(),
            "properties": _copy_json(self.properties),
        }
        if self.id is not None:
            out["id"] = self.id
        return out

    @property
    def __geo_interface__(self) -> dict:
        return self.encode()


class FeatureCollection(_Sequence):
    features: Tuple[Feature, ...]

    geojson_type = GeoJSONType.FEATURE_COLLECTION
    prefix = "features"
    item_type = Feature


_VARIANTS = {
    cls.geojson_type.value: cls
    for cls in [
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
        Feature,
        FeatureCollection,
    ]
}


def decode(obj: Any) -> GeoJSON:
    """Decode an untyped value into a `GeoJSON`.

    Parameters
    ----------
    obj : Any
        The untyped value, typically the output of a JSON parser.

    Returns
    -------
    GeoJSON

    Raises
    ------
    InvalidObjectError
        If ``obj`` or anything nested in it isn't valid GeoJSON.

    See Also
    --------
    GeoJSON.decode
    """
    out = GeoJSON.decode(obj)
    if out.error is not None:
        raise out.error
    return out


def encode(obj: Any) -> dict:
    """Encode a `GeoJSON`, or any GeoJSON object, as an untyped mapping.

    See Also
    --------
    GeoJSON.encode
    """
    if not isinstance(obj, GeoJSON):
        obj = GeoJSON(obj)
    return obj.encode()

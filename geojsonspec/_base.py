import enum
import math
from collections.abc import Mapping
from typing import Any, ClassVar

import msgspec
from msgspec.structs import force_setattr

from ._errors import InvalidObjectError

__all__ = ("GeoJSONType", "GEOMETRY_TYPES")


# Integral floats beyond this can't round-trip through an `int` exactly.
_MAX_SAFE_INTEGER = 2**53


class GeoJSONType(enum.Enum):
    """The value of a GeoJSON object's ``type`` member.

    ``UNKNOWN`` marks an object whose ``type`` didn't match any of the nine
    GeoJSON types. It never describes a valid object.
    """

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"
    UNKNOWN = "Unknown"


GEOMETRY_TYPES = frozenset(
    [
        GeoJSONType.POINT,
        GeoJSONType.MULTI_POINT,
        GeoJSONType.LINE_STRING,
        GeoJSONType.MULTI_LINE_STRING,
        GeoJSONType.POLYGON,
        GeoJSONType.MULTI_POLYGON,
        GeoJSONType.GEOMETRY_COLLECTION,
    ]
)


def _convert(obj, type):
    """`msgspec.convert`, reporting failures as `InvalidObjectError`"""
    try:
        return msgspec.convert(obj, type)
    except msgspec.ValidationError as exc:
        raise InvalidObjectError(str(exc)) from exc


def _check_array(obj):
    # msgspec also accepts sets as arrays, but their order is arbitrary
    if not isinstance(obj, (list, tuple)):
        raise InvalidObjectError(f"Expected `array`, got `{type(obj).__name__}`")
    return obj


def _encode_number(value: float):
    if value.is_integer() and abs(value) <= _MAX_SAFE_INTEGER:
        return int(value)
    return value


def _copy_json(obj: Any) -> Any:
    """Deep copy a JSON-compatible value, rejecting anything else."""
    if isinstance(obj, float) and not math.isfinite(obj):
        raise InvalidObjectError(f"JSON numbers must be finite, got {obj!r}")
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return obj
    if isinstance(obj, Mapping):
        out = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise InvalidObjectError(
                    f"Expected `str` keys, got `{type(key).__name__}`"
                )
            out[key] = _copy_json(value)
        return out
    if isinstance(obj, (list, tuple)):
        return [_copy_json(value) for value in obj]
    raise InvalidObjectError(f"Unsupported JSON value of type `{type(obj).__name__}`")


class _Sequence(msgspec.Struct, frozen=True):
    """A GeoJSON object wrapping a single ordered sequence.

    Subclasses declare exactly one field holding the items. Any list or
    tuple passed in is checked item by item and stored as a tuple.
    """

    geojson_type: ClassVar[GeoJSONType]
    prefix: ClassVar[str] = "coordinates"
    item_type: ClassVar[type]

    def __post_init__(self):
        name = self.__struct_fields__[0]
        items = getattr(self, name)
        if not isinstance(items, (list, tuple)):
            raise InvalidObjectError(
                f"Expected `array` for `{name}`, got `{type(items).__name__}`"
            )
        force_setattr(self, name, tuple(self._check_item(item) for item in items))

    def _check_item(self, item):
        if not isinstance(item, self.item_type):
            raise InvalidObjectError(
                f"Expected `{self.item_type.__name__}`, got `{type(item).__name__}`"
            )
        return item

    @classmethod
    def _decode_item(cls, obj):
        return cls.item_type.decode(obj)

    @classmethod
    def decode(cls, obj: Any):
        """Build an instance from its untyped ``prefix`` member.

        Raises
        ------
        InvalidObjectError
            If ``obj`` isn't an array, or any of its items is invalid.
        """
        items = _convert(_check_array(obj), list)
        return cls(tuple(cls._decode_item(item) for item in items))

    def _encode_item(self, item):
        return item.encode()

    def encode(self) -> list:
        """Encode the items as a list of untyped values, in order."""
        return [self._encode_item(item) for item in self._items]

    @property
    def __geo_interface__(self) -> dict:
        return {"type": self.geojson_type.value, self.prefix: self.encode()}

    @property
    def _items(self) -> tuple:
        return getattr(self, self.__struct_fields__[0])

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self):
        return iter(self._items)

    def replace(self, index: int, value):
        """Return a copy with the item at ``index`` replaced by ``value``.

        The copy is validated like any newly constructed object; the
        original is left untouched.

        Raises
        ------
        IndexError
            If ``index`` is out of range.
        InvalidObjectError
            If the resulting object would be invalid.
        """
        items = list(self._items)
        items[index] = value
        return type(self)(items)

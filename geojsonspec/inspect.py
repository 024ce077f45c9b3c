from typing import Tuple, Type, Union

import msgspec

from ._base import GEOMETRY_TYPES, GeoJSONType
from ._core import _VARIANTS

__all__ = ("info", "variants", "VariantInfo")


def __dir__():
    return __all__


class VariantInfo(msgspec.Struct):
    """A record describing one of the nine GeoJSON object types.

    Parameters
    ----------
    cls: type
        The class implementing the type (e.g. ``Polygon``).
    type: GeoJSONType
        The value of the ``type`` member.
    prefix: str
        The member holding the encoded object (``"coordinates"``,
        ``"geometries"`` or ``"features"``). Empty for ``Feature``, whose
        members sit next to ``type``.
    geometry: bool
        Whether this is one of the seven geometry types.
    item_type: type, optional
        For types wrapping a sequence, the type of the items.
    """

    cls: type
    type: GeoJSONType
    prefix: str
    geometry: bool
    item_type: Union[type, None] = None


def info(type: Union[Type, GeoJSONType, str]) -> VariantInfo:
    """Get information about a GeoJSON type.

    Parameters
    ----------
    type: type, GeoJSONType, or str
        The class, enum member, or ``type`` member value to look up.

    Returns
    -------
    info: VariantInfo

    Raises
    ------
    ValueError
        If ``type`` isn't one of the nine GeoJSON types.
    """
    if isinstance(type, GeoJSONType):
        name = type.value
    elif isinstance(type, str):
        name = type
    else:
        name = getattr(getattr(type, "geojson_type", None), "value", None)

    cls = _VARIANTS.get(name)
    if cls is None or (not isinstance(type, (GeoJSONType, str)) and cls is not type):
        raise ValueError(f"{type!r} is not a GeoJSON type")

    return VariantInfo(
        cls=cls,
        type=cls.geojson_type,
        prefix=cls.prefix,
        geometry=cls.geojson_type in GEOMETRY_TYPES,
        item_type=getattr(cls, "item_type", None),
    )


def variants() -> Tuple[VariantInfo, ...]:
    """Information about all nine GeoJSON types, geometries first."""
    return tuple(info(name) for name in _VARIANTS)

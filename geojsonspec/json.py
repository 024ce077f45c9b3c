from typing import Any, Iterable, List, Literal, Optional, Union

import msgspec

from ._core import GeoJSON, decode as _decode, encode as _encode
from ._errors import DecodeError

__all__ = ("Encoder", "Decoder", "encode", "decode")


def __dir__():
    return __all__


class Encoder:
    """A JSON encoder for GeoJSON objects.

    Parameters
    ----------
    order : {None, 'deterministic', 'sorted'}, optional
        How to order object members in the output, passed through to
        `msgspec.json.Encoder`. The default keeps the canonical order, with
        ``type`` first.
    """

    def __init__(
        self, *, order: Literal[None, "deterministic", "sorted"] = None
    ) -> None:
        self.order = order
        self._encoder = msgspec.json.Encoder(order=order)

    def encode(self, obj: Any) -> bytes:
        """Serialize a `GeoJSON` (or any GeoJSON object) as compact JSON.

        Raises
        ------
        EncodeError
            If ``obj`` is a `GeoJSON` holding no valid object.
        """
        return self._encoder.encode(_encode(obj))

    def encode_lines(self, items: Iterable[Any]) -> bytes:
        """Serialize an iterable of objects as newline-delimited JSON."""
        return self._encoder.encode_lines([_encode(item) for item in items])


class Decoder:
    """A JSON decoder for GeoJSON objects."""

    def __init__(self) -> None:
        self._decoder = msgspec.json.Decoder()

    def _parse(self, method, buf):
        try:
            return method(buf)
        except msgspec.DecodeError as exc:
            raise DecodeError(str(exc)) from None

    def decode(self, buf: Union[bytes, str]) -> GeoJSON:
        """Deserialize a GeoJSON document.

        Raises
        ------
        DecodeError
            If ``buf`` isn't valid JSON.
        InvalidObjectError
            If ``buf`` is valid JSON, but not a valid GeoJSON object.
        """
        return _decode(self._parse(self._decoder.decode, buf))

    def decode_lines(self, buf: Union[bytes, str]) -> List[GeoJSON]:
        """Deserialize newline-delimited GeoJSON, one object per line.

        Any invalid line fails the whole message.
        """
        return [_decode(obj) for obj in self._parse(self._decoder.decode_lines, buf)]


_encoder = Encoder()
_decoder = Decoder()


def encode(
    obj: Any, *, order: Optional[Literal["deterministic", "sorted"]] = None
) -> bytes:
    """Serialize a `GeoJSON` (or any GeoJSON object) as JSON.

    See Also
    --------
    Encoder.encode
    """
    encoder = _encoder if order is None else Encoder(order=order)
    return encoder.encode(obj)


def decode(buf: Union[bytes, str]) -> GeoJSON:
    """Deserialize a GeoJSON document.

    See Also
    --------
    Decoder.decode
    """
    return _decoder.decode(buf)

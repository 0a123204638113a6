from __future__ import annotations

from typing import Any, Callable, Optional

from ._decode import DEFAULT_MAX_DEPTH, decode_tree
from ._encode import encode_tree
from ._errors import UnsupportedSourceType
from ._geometry import Geometry


class Decoder:
    """A geometry decoder for one wire format.

    Subclasses set ``_backend_decoder`` to a factory for the msgspec decoder
    that turns bytes into a generic tree.

    Parameters
    ----------
    max_depth : int, optional
        The maximum number of nested ``GeometryCollection`` levels allowed.
    """

    _backend_decoder: Callable[[], Any]

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        self._decoder = self._backend_decoder()

    def __repr__(self):
        return f"{type(self).__module__}.Decoder(max_depth={self.max_depth})"

    def decode(self, buf: Any) -> Geometry:
        """Deserialize a geometry.

        Parameters
        ----------
        buf : bytes-like
            The message to decode.

        Returns
        -------
        geometry : Geometry
            The decoded geometry.

        Raises
        ------
        msgspec.DecodeError
            If ``buf`` isn't a well formed message.
        GeometryError
            If the message doesn't describe a geometry.
        """
        return decode_tree(self._decoder.decode(buf), max_depth=self.max_depth)


class Encoder:
    """A geometry encoder for one wire format.

    Parameters
    ----------
    enc_hook : callable, optional
        A callable to call for objects that aren't supported msgspec types
        (these may only appear inside a ``crs`` mapping). Takes the
        unsupported object and should return a supported object, or raise a
        ``TypeError``.
    """

    _backend_encoder: Callable[..., Any]

    def __init__(self, *, enc_hook: Optional[Callable[[Any], Any]] = None):
        self.enc_hook = enc_hook
        self._encoder = self._backend_encoder(enc_hook=enc_hook)

    def __repr__(self):
        return f"{type(self).__module__}.Encoder()"

    def encode(self, geometry: Geometry) -> bytes:
        """Serialize a geometry.

        Parameters
        ----------
        geometry : Geometry
            The geometry to serialize.

        Returns
        -------
        data : bytes
            The serialized geometry.
        """
        return self._encoder.encode(encode_tree(geometry))


def scan(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Geometry:
    """Decode a geometry read back from a storage column.

    The column must hold a GeoJSON geometry as text or bytes. When using
    PostGIS a spatial column needs to be wrapped in ``ST_AsGeoJSON``.

    Parameters
    ----------
    value : str or bytes-like
        The column value.
    max_depth : int, optional
        The maximum number of nested ``GeometryCollection`` levels allowed.

    Returns
    -------
    geometry : Geometry

    Raises
    ------
    UnsupportedSourceType
        If ``value`` is neither text nor bytes.
    """
    from . import json

    if not isinstance(value, (str, bytes, bytearray, memoryview)):
        raise UnsupportedSourceType(value)
    return json.decode(value, max_depth=max_depth)

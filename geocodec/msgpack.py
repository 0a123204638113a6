"""Encode and decode geometries as MessagePack documents."""
from __future__ import annotations

from typing import Any, Callable, Optional

import msgspec

from . import _core
from ._decode import DEFAULT_MAX_DEPTH
from ._geometry import Geometry

__all__ = ("Decoder", "Encoder", "decode", "encode")


def __dir__():
    return __all__


class Decoder(_core.Decoder):
    __doc__ = _core.Decoder.__doc__
    _backend_decoder = msgspec.msgpack.Decoder


class Encoder(_core.Encoder):
    __doc__ = _core.Encoder.__doc__
    _backend_encoder = msgspec.msgpack.Encoder


def decode(buf: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Geometry:
    """Deserialize a geometry from MessagePack.

    Parameters
    ----------
    buf : bytes-like
        The message to decode.
    max_depth : int, optional
        The maximum number of nested ``GeometryCollection`` levels allowed.

    Returns
    -------
    geometry : Geometry

    See Also
    --------
    encode
    """
    return _core.decode_tree(msgspec.msgpack.decode(buf), max_depth=max_depth)


def encode(
    geometry: Geometry, *, enc_hook: Optional[Callable[[Any], Any]] = None
) -> bytes:
    """Serialize a geometry as MessagePack.

    Parameters
    ----------
    geometry : Geometry
        The geometry to serialize.
    enc_hook : callable, optional
        A callable to call for objects inside ``crs`` that aren't supported
        msgspec types.

    Returns
    -------
    data : bytes

    See Also
    --------
    decode
    """
    return msgspec.msgpack.encode(_core.encode_tree(geometry), enc_hook=enc_hook)

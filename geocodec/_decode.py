from __future__ import annotations

import logging
import numbers
from typing import Any, List, Optional, Tuple

from ._errors import MissingField, NestingTooDeep, ShapeMismatch, TypeMismatch
from ._geometry import (
    COORDINATE_DEPTHS,
    GEOMETRY_TYPES,
    Geometry,
    GeometryCollection,
    UnknownGeometry,
)
from ._normalize import as_builtin, normalize_node

__all__ = ("decode_tree", "DEFAULT_MAX_DEPTH")

logger = logging.getLogger(__name__)

# The default limit on how deeply GeometryCollections may nest
DEFAULT_MAX_DEPTH = 32


def _as_float(obj: Any, path: Tuple) -> float:
    # bool is an int subclass, but never a valid coordinate
    if isinstance(obj, numbers.Real) and not isinstance(obj, bool):
        return float(obj)
    if isinstance(obj, list):
        raise ShapeMismatch(0, obj, path)
    raise TypeMismatch(obj, path)


def _decode_coordinates(obj: Any, depth: int, path: Tuple, normalize: bool) -> list:
    """Decode an array nested ``depth`` levels deep, with numbers at the
    innermost level"""
    if normalize:
        obj = as_builtin(obj)
    if not isinstance(obj, list):
        raise ShapeMismatch(depth, obj, path)
    if depth == 1:
        if normalize:
            obj = [as_builtin(x) for x in obj]
        return [_as_float(x, (*path, i)) for i, x in enumerate(obj)]
    return [
        _decode_coordinates(x, depth - 1, (*path, i), normalize)
        for i, x in enumerate(obj)
    ]


def _decode_bbox(obj: Any, path: Tuple, normalize: bool) -> Optional[List[float]]:
    if normalize:
        obj = as_builtin(obj)
    # Absent, null, and zero-valued boxes all mean "no bounding box"
    if obj is None or (not obj and isinstance(obj, (list, str, int, float))):
        return None
    if not isinstance(obj, list):
        raise ShapeMismatch(1, obj, path)
    out = []
    for i, x in enumerate(obj):
        if isinstance(x, bool) or not isinstance(x, numbers.Real):
            raise ShapeMismatch(0, x, (*path, i))
        out.append(float(x))
    return out


def _decode_crs(
    obj: Any, path: Tuple, normalize: bool, max_depth: int
) -> Optional[dict]:
    if obj is None:
        return None
    if normalize:
        obj = normalize_node(obj, max_depth, path)
    if not isinstance(obj, dict):
        raise ShapeMismatch(None, obj, path)
    return obj or None


def _decode_geometry(
    obj: Any, path: Tuple, depth: int, max_depth: int, normalize: bool
) -> Geometry:
    if normalize:
        obj = as_builtin(obj)
    if not isinstance(obj, dict):
        raise ShapeMismatch(None, obj, path)

    kind = obj.get("type")
    if not isinstance(kind, str):
        raise MissingField("type", path)

    bbox = _decode_bbox(obj.get("bbox"), (*path, "bbox"), normalize)
    crs = _decode_crs(obj.get("crs"), (*path, "crs"), normalize, max_depth)

    cls = GEOMETRY_TYPES.get(kind)
    if cls is None:
        logger.debug("Decoding geometry with unknown type %r", kind)
        return UnknownGeometry(kind, bbox=bbox, crs=crs)

    if cls is GeometryCollection:
        if "geometries" not in obj:
            raise MissingField("geometries", path)
        children = obj["geometries"]
        if normalize:
            children = as_builtin(children)
        child_path = (*path, "geometries")
        if not isinstance(children, list):
            raise ShapeMismatch(None, children, child_path)
        if children and depth >= max_depth:
            raise NestingTooDeep(max_depth, child_path)
        geometries = [
            _decode_geometry(child, (*child_path, i), depth + 1, max_depth, normalize)
            for i, child in enumerate(children)
        ]
        return GeometryCollection(geometries, bbox=bbox, crs=crs)

    if "coordinates" not in obj:
        raise MissingField("coordinates", path)
    coordinates = _decode_coordinates(
        obj["coordinates"], COORDINATE_DEPTHS[kind], (*path, "coordinates"), normalize
    )
    return cls(coordinates, bbox=bbox, crs=crs)


def decode_tree(
    obj: Any, *, max_depth: int = DEFAULT_MAX_DEPTH, normalize: bool = False
) -> Geometry:
    """Decode a geometry from a generic tree.

    This is the entry point to use when a geometry is embedded in a larger
    document that has already been decoded into builtin types (for example
    the ``geometry`` member of a GeoJSON Feature).

    Parameters
    ----------
    obj : dict
        A geometry object, as produced by decoding a document with the
        default (untyped) JSON or MessagePack types.
    max_depth : int, optional
        The maximum number of nested ``GeometryCollection`` levels allowed.
        Deeper inputs raise ``NestingTooDeep``.
    normalize : bool, optional
        Whether to accept foreign sequence and mapping types in ``obj``,
        converting them to ``list`` and ``dict`` as they are decoded. Only
        needed when ``obj`` wasn't produced by a decoder that already uses
        builtin containers. A ``crs`` object is normalized too, and may nest
        at most ``max_depth`` containers deep.

    Returns
    -------
    geometry : Geometry
        The decoded geometry. Unrecognized ``type`` tags decode to an
        ``UnknownGeometry``.

    Raises
    ------
    GeometryError
        If ``obj`` doesn't have the structure of a geometry. The error's
        ``path`` locates the offending node.

    See Also
    --------
    encode_tree
    """
    return _decode_geometry(obj, (), 0, max_depth, normalize)

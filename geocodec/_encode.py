from __future__ import annotations

from typing import Any, Dict

from ._geometry import Geometry, GeometryCollection, UnknownGeometry

__all__ = ("encode_tree",)


def _copy(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _copy(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_copy(v) for v in obj]
    return obj


def encode_tree(geometry: Geometry) -> Dict[str, Any]:
    """Convert a geometry into a generic tree.

    The returned ``dict`` always orders its keys ``type``, ``bbox``,
    ``coordinates`` or ``geometries``, then ``crs``. ``bbox`` and ``crs`` are
    left out when unset or empty. The tree shares no containers with
    ``geometry``, so it may be modified freely.

    Parameters
    ----------
    geometry : Geometry
        The geometry to convert.

    Returns
    -------
    obj : dict
        A tree of builtin types, ready to be serialized by any JSON or
        MessagePack encoder.

    See Also
    --------
    decode_tree
    """
    out = {"type": geometry.kind}
    if geometry.bbox:
        out["bbox"] = _copy(geometry.bbox)
    if isinstance(geometry, GeometryCollection):
        out["geometries"] = [encode_tree(g) for g in geometry.geometries]
    elif not isinstance(geometry, UnknownGeometry):
        out["coordinates"] = _copy(geometry.coordinates)
    if geometry.crs:
        out["crs"] = _copy(geometry.crs)
    return out

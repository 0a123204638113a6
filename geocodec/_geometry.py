from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional

import msgspec

__all__ = (
    "GeometryKind",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "UnknownGeometry",
    "Position",
    "Path",
    "COORDINATE_DEPTHS",
)


Position = List[float]
Path = List[Position]


class GeometryKind(str, enum.Enum):
    """The geometry types defined by GeoJSON"""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


# Number of array levels making up `coordinates` for each kind.
COORDINATE_DEPTHS = {
    GeometryKind.POINT.value: 1,
    GeometryKind.MULTI_POINT.value: 2,
    GeometryKind.LINE_STRING.value: 2,
    GeometryKind.MULTI_LINE_STRING.value: 3,
    GeometryKind.POLYGON.value: 3,
    GeometryKind.MULTI_POLYGON.value: 4,
}


class Geometry(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """The base of all geometry types.

    Parameters
    ----------
    bbox: list of float, optional
        The coordinate extent of the geometry, as a flat list of numbers.
    crs: dict, optional
        A Coordinate Reference System object. This is carried through encoding
        and decoding unmodified and never interpreted.
    """

    bbox: Optional[List[float]] = None
    crs: Optional[Dict[str, Any]] = None

    @property
    def kind(self) -> str:
        """The GeoJSON type tag of this geometry"""
        return self.__struct_config__.tag

    @property
    def is_point(self) -> bool:
        return self.kind == GeometryKind.POINT

    @property
    def is_multi_point(self) -> bool:
        return self.kind == GeometryKind.MULTI_POINT

    @property
    def is_line_string(self) -> bool:
        return self.kind == GeometryKind.LINE_STRING

    @property
    def is_multi_line_string(self) -> bool:
        return self.kind == GeometryKind.MULTI_LINE_STRING

    @property
    def is_polygon(self) -> bool:
        return self.kind == GeometryKind.POLYGON

    @property
    def is_multi_polygon(self) -> bool:
        return self.kind == GeometryKind.MULTI_POLYGON

    @property
    def is_collection(self) -> bool:
        return self.kind == GeometryKind.GEOMETRY_COLLECTION


# Each concrete type sets `tag`, which is the value of its `type` field on
# the wire.
class Point(Geometry, tag="Point"):
    coordinates: Position


class MultiPoint(Geometry, tag="MultiPoint"):
    coordinates: List[Position]


class LineString(Geometry, tag="LineString"):
    coordinates: List[Position]


class MultiLineString(Geometry, tag="MultiLineString"):
    coordinates: List[Path]


class Polygon(Geometry, tag="Polygon"):
    coordinates: List[Path]


class MultiPolygon(Geometry, tag="MultiPolygon"):
    coordinates: List[List[Path]]


class GeometryCollection(Geometry, tag="GeometryCollection"):
    geometries: List[Geometry]


class UnknownGeometry(Geometry):
    """A geometry with a type tag outside of the GeoJSON geometry types.

    Decoding accepts these rather than erroring, keeping only the tag along
    with any ``bbox`` and ``crs``. All of the kind predicates are ``False``,
    and constructing one with a GeoJSON geometry type raises a ``ValueError``.
    """

    type: str

    def __post_init__(self):
        if self.type in GEOMETRY_TYPES:
            raise ValueError(
                f"`{self.type}` is a GeoJSON geometry type, use "
                f"`{GEOMETRY_TYPES[self.type].__name__}` instead"
            )

    @property
    def kind(self) -> str:
        return self.type


# Maps a type tag to the Geometry type decoded for it
GEOMETRY_TYPES = {
    cls.__struct_config__.tag: cls
    for cls in [
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    ]
}

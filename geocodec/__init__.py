from ._errors import (
    GeometryError,
    MissingField,
    NestingTooDeep,
    ShapeMismatch,
    TypeMismatch,
    UnsupportedSourceType,
)
from ._geometry import (
    COORDINATE_DEPTHS,
    Geometry,
    GeometryCollection,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Path,
    Point,
    Polygon,
    Position,
    UnknownGeometry,
)
from ._decode import DEFAULT_MAX_DEPTH, decode_tree
from ._encode import encode_tree
from ._normalize import normalize
from ._core import scan

from . import json, msgpack
from ._version import __version__

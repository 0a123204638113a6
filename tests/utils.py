import inspect
import sys
from contextlib import contextmanager

from geocodec import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnknownGeometry,
)

CRS = {"type": "name", "properties": {"name": "EPSG:4326"}}
RING = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]

# One or more geometries of every kind, used for round-trip tests
GEOMETRIES = [
    Point([1.0, 2.0]),
    Point([1.0, 2.0, 3.0], bbox=[1.0, 2.0, 1.0, 2.0], crs=CRS),
    MultiPoint([[1.0, 2.0], [3.0, 4.0]]),
    LineString([[1.0, 2.0], [3.0, 4.0]], bbox=[1.0, 2.0, 3.0, 4.0]),
    MultiLineString([[[1.0, 2.0], [3.0, 4.0]], [[5.0, 6.0], [7.0, 8.0]]]),
    Polygon([RING, RING], crs=CRS),
    MultiPolygon([[RING], [RING, RING]]),
    GeometryCollection([]),
    GeometryCollection(
        [Point([1.0, 2.0]), GeometryCollection([LineString([[0.0, 0.0], [1.0, 1.0]])])],
        bbox=[0.0, 0.0, 1.0, 2.0],
    ),
    UnknownGeometry("Circle"),
    UnknownGeometry("Circle", bbox=[0.0, 0.0, 1.0, 1.0], crs=CRS),
]


@contextmanager
def max_call_depth(n):
    cur_depth = len(inspect.stack(0))
    orig = sys.getrecursionlimit()
    try:
        # Our measure of the current stack depth can be off by a bit. Trying to
        # set a recursionlimit < the current depth will raise a RecursionError.
        # We just try again with a slightly higher limit, bailing after an
        # unreasonable amount of adjustments.
        for i in range(64):
            try:
                sys.setrecursionlimit(cur_depth + i + n)
                break
            except RecursionError:
                pass
        else:
            raise ValueError("Failed to set low recursion limit, something is wrong here")
        yield
    finally:
        sys.setrecursionlimit(orig)


def nested_collection(depth):
    """A GeometryCollection tree with ``depth`` levels of nested collections"""
    obj = {"type": "Point", "coordinates": [1, 2]}
    for _ in range(depth):
        obj = {"type": "GeometryCollection", "geometries": [obj]}
    return obj

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import msgspec

__all__ = (
    "GeometryError",
    "MissingField",
    "TypeMismatch",
    "ShapeMismatch",
    "NestingTooDeep",
    "UnsupportedSourceType",
)

PathItem = Union[str, int]


def _format_path(path: Tuple[PathItem, ...]) -> str:
    """Render a path the way msgspec reports error locations (``$.a[0]``)"""
    parts = ["$"]
    for item in path:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}")
    return "".join(parts)


def type_name(obj: Any) -> str:
    """The generic-tree name of a node, used in error messages"""
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if isinstance(obj, int):
        return "int"
    if isinstance(obj, float):
        return "float"
    if isinstance(obj, str):
        return "str"
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return "bytes"
    if isinstance(obj, list):
        return "array"
    if isinstance(obj, dict):
        return "object"
    return type(obj).__name__


class GeometryError(msgspec.ValidationError):
    """Base class for errors raised while decoding a geometry.

    Parameters
    ----------
    message : str
        A description of what went wrong.
    path : tuple, optional
        The keys and indices leading from the root document to the offending
        node.
    """

    def __init__(self, message: str, path: Tuple[PathItem, ...] = ()):
        self.path = tuple(path)
        self.message = message
        super().__init__(f"{message} - at `{_format_path(self.path)}`")


class MissingField(GeometryError):
    """A required key is absent from a geometry object"""

    def __init__(self, field: str, path: Tuple[PathItem, ...] = ()):
        self.field = field
        super().__init__(f"Object missing required field `{field}`", path)


class TypeMismatch(GeometryError):
    """A number was required but the node is some other scalar or container"""

    def __init__(self, got: Any, path: Tuple[PathItem, ...] = ()):
        self.got = got
        super().__init__(f"Expected `number`, got `{type_name(got)}`", path)


class ShapeMismatch(GeometryError):
    """A node doesn't have the nesting expected at its position.

    ``expected_depth`` is the number of array levels that should start at the
    node (``0`` for a number), or ``None`` if an object was expected.
    """

    def __init__(
        self,
        expected_depth: Optional[int],
        got: Any,
        path: Tuple[PathItem, ...] = (),
    ):
        self.expected_depth = expected_depth
        self.got = got
        if expected_depth is None:
            expected = "object"
        elif expected_depth == 0:
            expected = "number"
        elif expected_depth == 1:
            expected = "array of numbers"
        else:
            expected = f"array nested {expected_depth} levels deep"
        super().__init__(f"Expected `{expected}`, got `{type_name(got)}`", path)


class NestingTooDeep(GeometryError):
    """Geometry collections (or normalized containers) are nested deeper than
    the configured limit"""

    def __init__(self, max_depth: int, path: Tuple[PathItem, ...] = ()):
        self.max_depth = max_depth
        super().__init__(
            f"Nesting exceeds the maximum depth of {max_depth}",
            path,
        )


class UnsupportedSourceType(GeometryError):
    """A stored value was neither text nor bytes"""

    def __init__(self, got: Any):
        self.got = got
        super().__init__(
            f"Expected `str` or `bytes` to scan a geometry from, got `{type_name(got)}`"
        )

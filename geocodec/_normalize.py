from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple

from ._errors import NestingTooDeep

__all__ = ("normalize",)

logger = logging.getLogger(__name__)

_SCALAR_SEQUENCES = (str, bytes, bytearray, memoryview)


def as_builtin(obj: Any) -> Any:
    """Convert a single foreign mapping or sequence node to ``dict`` or
    ``list``, leaving its children untouched"""
    if isinstance(obj, (dict, list)):
        return obj
    if isinstance(obj, Mapping):
        logger.debug("Converting %s to dict", type(obj).__name__)
        return dict(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, _SCALAR_SEQUENCES):
        logger.debug("Converting %s to list", type(obj).__name__)
        return list(obj)
    return obj


def normalize_node(
    obj: Any, max_depth: Optional[int], path: Tuple = (), level: int = 0
) -> Any:
    obj = as_builtin(obj)
    if not isinstance(obj, (dict, list)):
        return obj
    if max_depth is not None and level >= max_depth:
        raise NestingTooDeep(max_depth, path)
    if isinstance(obj, dict):
        return {
            k: normalize_node(v, max_depth, (*path, k), level + 1)
            for k, v in obj.items()
        }
    return [
        normalize_node(v, max_depth, (*path, i), level + 1) for i, v in enumerate(obj)
    ]


def normalize(obj: Any, *, max_depth: Optional[int] = None) -> Any:
    """Rewrite a generic tree so that it only contains builtin containers.

    Some document producers (database drivers in particular) hand back their
    own array or mapping types. Every non-``list`` sequence (other than
    ``str``/``bytes``) is converted to a ``list``, and every non-``dict``
    mapping to a ``dict``, recursively. Scalars are returned unchanged.

    Parameters
    ----------
    obj : Any
        The tree to normalize. It is not modified.
    max_depth : int, optional
        The maximum number of nested containers allowed. Deeper inputs raise
        ``NestingTooDeep``. Unlimited by default.

    Returns
    -------
    obj : Any
        A new tree composed of ``dict``, ``list`` and scalar nodes.
    """
    return normalize_node(obj, max_depth)

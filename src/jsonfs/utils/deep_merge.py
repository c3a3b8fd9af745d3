"""Structural merge of plain JSON trees."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Mapping


class NodeKind(Enum):
    """Kinds of value that can appear in a decoded JSON tree."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"
    NULL = "null"


def node_kind(value: Any) -> NodeKind:
    """Classify ``value`` as one of the :class:`NodeKind` members."""

    if value is None:
        return NodeKind.NULL
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    return NodeKind.SCALAR


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new tree with ``patch`` merged on top of ``base``.

    Parameters
    ----------
    base : Mapping[str, Any]
        Tree providing the starting values. Keys missing from ``patch`` are
        kept unchanged.
    patch : Mapping[str, Any]
        Tree whose values take precedence.

    Returns
    -------
    dict[str, Any]
        The merged tree. Neither input is modified and the result shares no
        mutable containers with them.

    Notes
    -----
    Objects are merged key by key. Arrays, scalars and ``None`` in ``patch``
    replace the value in ``base`` wholesale. When ``patch`` holds an object
    and ``base`` holds anything else at the same key, the patch object
    replaces it.
    """

    result = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in patch.items():
        current = result.get(key)
        if (
            node_kind(value) is NodeKind.OBJECT
            and key in result
            and node_kind(current) is NodeKind.OBJECT
        ):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result

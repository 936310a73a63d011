"""
Nested-property accessor for dict/list data trees.

``get_nested(obj, "a.b[0]")`` walks mappings by key and sequences by index.
Absence is reported with the ``MISSING`` sentinel so that a stored ``None``
still counts as a present value.
"""
from collections.abc import Mapping, Sequence
from typing import Any

from validation_report.models.field_path import FieldPath, Segment


class _Missing:
    """Sentinel for 'no value at this path'."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _step(node: Any, segment: Segment) -> Any:
    if isinstance(node, Mapping):
        if segment in node:
            return node[segment]
        # JSON objects key indices as strings
        if isinstance(segment, int) and str(segment) in node:
            return node[str(segment)]
        return MISSING
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if isinstance(segment, int) and 0 <= segment < len(node):
            return node[segment]
        return MISSING
    return MISSING


def get_nested(obj: Any, path: Any) -> Any:
    """
    Return the value at *path* inside *obj*, or ``MISSING``.

    A mapping key equal to the whole path string wins over splitting it, so
    ``get_nested({"a.b": 1}, "a.b")`` returns 1.

    A path naming no segment (``""``, ``"#"``, ``"/"``) is a lookup of that
    literal key, never the object itself.
    """
    if isinstance(path, str) and isinstance(obj, Mapping) and path in obj:
        return obj[path]

    segments = FieldPath.parse(path).segments
    if not segments:
        return MISSING

    node = obj
    for segment in segments:
        node = _step(node, segment)
        if node is MISSING:
            return MISSING
    return node

"""
FieldPath — a location in a validated data tree as a sequence of segments.

Paths arrive as strings in two notations:

* dotted/bracket — ``address.lines[0].text``, ``meta["a.b"]``
* JSON pointer  — ``#/properties/address``, ``/address/lines/0``

Both parse to the same segment tuple, so ``address.lines[0]`` and
``#/address/lines/0`` denote the same location.  Ancestry is decided on
segments, never on raw string prefixes: ``ab`` is not an ancestor of ``abc``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Union

from validation_report.config.constants import POINTER_PREFIXES

Segment = Union[str, int]

# [ "quoted" ] | [ 'quoted' ] | [ bare ] | plain-name
_DOTTED_SEGMENT_RE = re.compile(
    r"""\[\s*"((?:[^"\\]|\\.)*)"\s*\]"""
    r"""|\[\s*'((?:[^'\\]|\\.)*)'\s*\]"""
    r"""|\[([^\]]*)\]"""
    r"""|([^.\[\]]+)"""
)
_PLAIN_NAME_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def _coerce(raw: str) -> Segment:
    """Canonical non-negative integers are indices, everything else is a key."""
    if raw.isdecimal() and raw == str(int(raw)):
        return int(raw)
    return raw


def _parse_pointer(text: str) -> Tuple[Segment, ...]:
    body = text[1:] if text.startswith("#") else text
    segments = []
    for part in body.split("/"):
        if part == "":
            continue
        segments.append(_coerce(part.replace("~1", "/").replace("~0", "~")))
    return tuple(segments)


def _parse_dotted(text: str) -> Tuple[Segment, ...]:
    segments = []
    for match in _DOTTED_SEGMENT_RE.finditer(text):
        double_q, single_q, bare, plain = match.groups()
        if double_q is not None:
            segments.append(double_q.replace('\\"', '"'))
        elif single_q is not None:
            segments.append(single_q.replace("\\'", "'"))
        elif bare is not None:
            segments.append(_coerce(bare.strip()))
        else:
            segments.append(_coerce(plain))
    return tuple(segments)


@lru_cache(maxsize=4096)
def _parse(text: str) -> Tuple[Segment, ...]:
    if text in ("", "#"):
        return ()
    if any(text.startswith(prefix) for prefix in POINTER_PREFIXES):
        return _parse_pointer(text)
    return _parse_dotted(text)


@dataclass(frozen=True)
class FieldPath:
    """Immutable segment sequence; the empty tuple is the tree root."""

    segments: Tuple[Segment, ...] = ()

    @classmethod
    def parse(cls, path: Union[str, "FieldPath", Tuple[Segment, ...]]) -> "FieldPath":
        if isinstance(path, FieldPath):
            return path
        if isinstance(path, tuple):
            return cls(path)
        return cls(_parse(path))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> "FieldPath":
        return FieldPath(self.segments[:-1])

    def child(self, segment: Segment) -> "FieldPath":
        return FieldPath(self.segments + (segment,))

    def is_ancestor_of(self, other: "FieldPath") -> bool:
        """True when *other* is this path or lies beneath it."""
        return other.segments[: len(self.segments)] == self.segments

    def is_related_to(self, other: "FieldPath") -> bool:
        """Ancestry in either direction."""
        return self.is_ancestor_of(other) or other.is_ancestor_of(self)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        rendered = ""
        for segment in self.segments:
            if isinstance(segment, int):
                rendered += f"[{segment}]"
            elif _PLAIN_NAME_RE.match(segment):
                rendered += f".{segment}" if rendered else segment
            else:
                escaped = segment.replace('"', '\\"')
                rendered += f'["{escaped}"]'
        return rendered

    def __repr__(self) -> str:
        return f"FieldPath({str(self)!r})"

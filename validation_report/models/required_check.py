"""
RequiredAttributeCheck — one presence/allowed-value check to run on a document.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from validation_report.models.field_path import FieldPath


@dataclass(frozen=True)
class RequiredAttributeCheck:
    """Attribute *attribute* must exist on the object found at *path*."""

    attribute: str
    path: str = ""                                  # "" is the document root
    possible_values: Optional[Tuple[Any, ...]] = None

    @property
    def location(self) -> str:
        """Path of the attribute itself, where its failures are reported."""
        segments = FieldPath.parse(self.path).segments + FieldPath.parse(self.attribute).segments
        return str(FieldPath(segments))

    @classmethod
    def from_dict(cls, data: dict) -> "RequiredAttributeCheck":
        possible = data.get("possibleValues")
        return cls(
            attribute=data["attribute"],
            path=data.get("path", ""),
            possible_values=tuple(possible) if possible is not None else None,
        )

    def to_dict(self) -> dict:
        data: dict = {"path": self.path, "attribute": self.attribute}
        if self.possible_values is not None:
            data["possibleValues"] = list(self.possible_values)
        return data

    def __repr__(self) -> str:
        return f"RequiredAttributeCheck({self.path or '<root>'}:{self.attribute})"

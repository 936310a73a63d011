"""
ValidationResult — errors and warnings produced by one check or by aggregation.

Required errors are a tagged variant (``RequiredError``) rather than a flag,
so the aggregator's branching is a type check.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from validation_report.models.field_path import FieldPath


@dataclass(frozen=True)
class ValidationError:
    """One failed check at *path*."""

    path: str
    message: str

    @property
    def field_path(self) -> FieldPath:
        return FieldPath.parse(self.path)

    @property
    def is_required_error(self) -> bool:
        return False


@dataclass(frozen=True)
class RequiredError(ValidationError):
    """Missing or disallowed attribute value; deduplicated by path ancestry."""

    @property
    def is_required_error(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationWarning:
    """Non-blocking observation. Path is not enforced."""

    path: Optional[str]
    message: str


@dataclass
class ValidationResult:
    """Result of one validation check, or of aggregating many."""

    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationWarning] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def required_errors(self) -> List[ValidationError]:
        return [e for e in self.errors if isinstance(e, RequiredError)]

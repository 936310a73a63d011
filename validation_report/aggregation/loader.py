"""
Wire-format loading — dict/JSON results from external tree walkers.

External walkers report results as ``{"errors": [...], "warnings": [...]}``
with an optional ``isRequiredError`` flag on each error.  The flag maps to the
RequiredError variant on the way in and back again on the way out.
"""
import logging
from typing import Any, Dict, List

from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate

from validation_report.config.schemas import VALIDATION_RESULT_SCHEMA
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)


class ResultFormatError(ValueError):
    """Raised when a wire-format result does not match VALIDATION_RESULT_SCHEMA."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed validation result: {reason}")


def result_from_dict(data: Dict[str, Any]) -> ValidationResult:
    """
    Build a ValidationResult from its wire form.

    Raises:
        ResultFormatError: If *data* violates VALIDATION_RESULT_SCHEMA.
    """
    try:
        validate(instance=data, schema=VALIDATION_RESULT_SCHEMA)
    except SchemaValidationError as e:
        raise ResultFormatError(e.message) from e

    errors: List[ValidationError] = []
    for raw in data.get("errors") or []:
        cls = RequiredError if raw.get("isRequiredError") else ValidationError
        errors.append(cls(raw["path"], raw["message"]))

    warnings = [
        ValidationWarning(raw.get("path"), raw["message"])
        for raw in data.get("warnings") or []
    ]

    return ValidationResult(errors=errors, warnings=warnings)


def results_from_dicts(items: List[Dict[str, Any]]) -> List[ValidationResult]:
    return [result_from_dict(item) for item in items]


def result_to_dict(result: ValidationResult) -> Dict[str, Any]:
    """Wire form of *result*; only required errors carry ``isRequiredError``."""
    errors = []
    for error in result.errors:
        item: Dict[str, Any] = {"path": error.path, "message": error.message}
        if isinstance(error, RequiredError):
            item["isRequiredError"] = True
        errors.append(item)

    return {
        "errors": errors,
        "warnings": [{"path": w.path, "message": w.message} for w in result.warnings],
    }

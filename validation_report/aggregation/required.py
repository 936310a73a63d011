"""
Required-attribute validation — presence and allowed-value membership.

Produces plain ValidationErrors; the caller decides whether they take part
in required-error deduplication by tagging them with ``as_required``.
"""
import json
import logging
from typing import Any, Optional, Sequence

from validation_report.aggregation.accessor import MISSING, get_nested
from validation_report.config.constants import (
    INVALID_VALUE_MESSAGE,
    MISSING_ATTRIBUTE_MESSAGE,
    VALID_OPTIONS_MESSAGE,
)
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def _display_value(value: Any) -> str:
    """Render a scalar the way it appears in JSON text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)


def _encode_options(possible_values: Sequence[Any]) -> str:
    return json.dumps(list(possible_values), separators=(",", ":"), ensure_ascii=False, default=str)


def _is_member(value: Any, possible_values: Sequence[Any]) -> bool:
    # True == 1 in Python; JSON keeps booleans and numbers apart
    for option in possible_values:
        if isinstance(option, bool) != isinstance(value, bool):
            continue
        if option == value:
            return True
    return False


def validate_required_attribute(
    obj: Any,
    path: str,
    attribute: str,
    possible_values: Optional[Sequence[Any]] = None,
) -> ValidationResult:
    """
    Validate a given required attribute on *obj*.

    Args:
        obj: The object holding the attribute.
        path: Path to *obj* in the validated tree; used as the error path.
        attribute: Name (or nested dotted/bracket path) of the attribute.
        possible_values: Allowed values. ``None`` means any present value.

    Returns:
        ValidationResult with at most one error and never any warnings.
    """
    errors = []

    value = get_nested(obj, attribute)

    if value is MISSING:
        errors.append(
            ValidationError(path, MISSING_ATTRIBUTE_MESSAGE.format(attribute=attribute))
        )
    elif possible_values is not None and not _is_member(value, possible_values):
        message = INVALID_VALUE_MESSAGE.format(value=_display_value(value), attribute=attribute)
        message += VALID_OPTIONS_MESSAGE.format(options=_encode_options(possible_values))
        errors.append(ValidationError(path, message))

    if errors:
        logger.debug("Required attribute %r failed at %r: %s", attribute, path, errors[0].message)

    return ValidationResult(errors=errors, warnings=[])


def as_required(result: ValidationResult, path: Optional[str] = None) -> ValidationResult:
    """
    Return a copy of *result* whose errors are tagged as RequiredErrors.

    With *path*, every error is reported there instead; pass the attribute's
    own location so that failures on sibling attributes stay distinct.
    """
    return ValidationResult(
        errors=[
            RequiredError(e.path if path is None else path, e.message)
            for e in result.errors
        ],
        warnings=list(result.warnings),
    )

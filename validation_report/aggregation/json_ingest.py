"""
JSON Ingestion — normalise raw JSON text into a parsed object.

The length comparison in ``validate_json_string`` is a heuristic: parsing
silently keeps the last of duplicate keys, so the re-serialised text comes
out shorter (or otherwise different) than what was entered.  A mismatch is a
warning, never an error.
"""
import json
import logging
from typing import Any, Optional, Tuple

from validation_report.aggregation.metrics import record_json_ingestion
from validation_report.config.constants import (
    INGESTION_INVALID,
    INGESTION_MISMATCH,
    INGESTION_OBJECT,
    INGESTION_PARSED,
    INVALID_JSON_MESSAGE,
    JSON_MISMATCH_MESSAGE,
    JSON_REPARSE_INDENT,
    JSON_TAB_REPLACEMENT,
    ROOT_PATH,
)
from validation_report.models.validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def validate_json_string(json_str: str, json_obj: Any) -> ValidationResult:
    """
    Validate the JSON string vs. the parsed JSON object.

    Detects things like duplicate keys which would otherwise go unnoticed.

    Args:
        json_str: The raw JSON text as entered.
        json_obj: The object parsed from *json_str*.

    Returns:
        ValidationResult with one root-level warning on mismatch.
    """
    result = ValidationResult(errors=[], warnings=[])

    entered = json_str.replace("\t", JSON_TAB_REPLACEMENT)
    stringified = json.dumps(json_obj, indent=JSON_REPARSE_INDENT, ensure_ascii=False)
    if len(entered) != len(stringified):
        logger.debug(
            "Entered JSON length %d != re-serialised length %d",
            len(entered),
            len(stringified),
        )
        result.warnings.append(ValidationWarning(ROOT_PATH, JSON_MISMATCH_MESSAGE))

    return result


def ensure_json_object(json_value: Any) -> Tuple[Any, Optional[ValidationResult]]:
    """
    Make sure *json_value* is a parsed JSON object, and validate it if not.

    Returns:
        ``(obj, None)`` for already-parsed input,
        ``(parsed, fidelity_result)`` for parseable text,
        ``(None, invalid_json_result)`` for unparseable text.
    """
    if not isinstance(json_value, str):
        record_json_ingestion(INGESTION_OBJECT)
        return json_value, None

    try:
        parsed = json.loads(json_value, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        logger.warning("Invalid JSON: %s", e)
        record_json_ingestion(INGESTION_INVALID)
        return None, ValidationResult(
            errors=[ValidationError(ROOT_PATH, INVALID_JSON_MESSAGE)],
            warnings=[],
        )

    str_result = validate_json_string(json_value, parsed)
    record_json_ingestion(INGESTION_MISMATCH if str_result.warnings else INGESTION_PARSED)
    return parsed, str_result

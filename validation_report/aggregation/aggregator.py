"""
Result Aggregator — fold many ValidationResults into one report.

Implements:
- Order-preserving concatenation of warnings and general errors
- Required-error deduplication by path ancestry
- Partitioned output: general errors first, required errors last

Required errors describe the same failure at different granularities along a
tree branch (``address`` missing vs ``address.city`` missing).  Only the most
specific location is reported, once.
"""
import dataclasses
import logging
from typing import Iterable, List

from validation_report.aggregation.metrics import (
    record_aggregated_errors,
    record_required_collapsed,
    record_results_aggregated,
)
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)


def add_required_to_errors(error: ValidationError, unique_errors: List[ValidationError]) -> None:
    """
    Merge required *error* into *unique_errors*.

    *unique_errors* holds no two entries on the same tree branch, so at most
    one entry can be related to *error*:

    * related entry is an ancestor (or equal): it takes over ``error.path``
      and keeps its own message;
    * related entry is a descendant: it is already more specific, nothing
      changes;
    * no related entry: *error* is appended.

    Entries are replaced, never mutated, so callers' error objects stay intact.
    """
    error_path = error.field_path

    for index, unique in enumerate(unique_errors):
        unique_path = unique.field_path
        if not unique_path.is_related_to(error_path):
            continue

        if unique_path.is_ancestor_of(error_path):
            # replace ancestor with descendant
            unique_errors[index] = dataclasses.replace(unique, path=error.path)
            logger.debug("Required error at %r narrowed to %r", unique.path, error.path)
        else:
            logger.debug("Required error at %r absorbed by %r", error.path, unique.path)
        record_required_collapsed()
        return

    unique_errors.append(error)


def aggregate_results(results: Iterable[ValidationResult]) -> ValidationResult:
    """
    Aggregate individual results into a single one.

    Args:
        results: Results in the order their checks ran.

    Returns:
        ValidationResult whose errors are ``general + required`` (each
        partition in input order) and whose warnings keep input order.
    """
    non_required_errors: List[ValidationError] = []
    required_errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []

    count = 0
    for result in results:
        count += 1
        warnings.extend(result.warnings or [])

        for error in result.errors or []:
            if isinstance(error, RequiredError):
                add_required_to_errors(error, required_errors)
            else:
                non_required_errors.append(error)

    record_results_aggregated(count)
    record_aggregated_errors(len(non_required_errors), len(required_errors))
    logger.debug(
        "Aggregated %d results: %d errors (%d required), %d warnings",
        count,
        len(non_required_errors) + len(required_errors),
        len(required_errors),
        len(warnings),
    )

    return ValidationResult(
        errors=non_required_errors + required_errors,
        warnings=warnings,
    )

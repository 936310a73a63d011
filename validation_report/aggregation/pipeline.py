"""
Validation Orchestrator — main entry point for validating one document.

Executes the 4-stage flow:
    1. JSON Ingestion (parse + fidelity check)
    2. Required-attribute checks, tagged as required errors
    3. Aggregation with required-error deduplication
    4. Report building
"""
import logging
import time
from typing import Any, Iterable, List, Optional

from validation_report.aggregation.accessor import get_nested
from validation_report.aggregation.builders import ResultCollector
from validation_report.aggregation.json_ingest import ensure_json_object
from validation_report.aggregation.metrics import timed_aggregation
from validation_report.aggregation.report_builder import build_report
from validation_report.aggregation.required import as_required, validate_required_attribute
from validation_report.models.field_path import FieldPath
from validation_report.models.report_io import ValidationReport
from validation_report.models.required_check import RequiredAttributeCheck
from validation_report.models.validation import ValidationResult

logger = logging.getLogger(__name__)


def run_required_checks(obj: Any, checks: Iterable[RequiredAttributeCheck]) -> List[ValidationResult]:
    """
    Run each check against the object found at its path inside *obj*.

    Failures are reported at the attribute's own location (``check.location``),
    so only checks lying on one tree branch collapse during aggregation.  A
    check whose target object is itself missing still runs and reports a
    missing attribute.
    """
    results = []
    for check in checks:
        target = obj if FieldPath.parse(check.path).is_root else get_nested(obj, check.path)
        result = validate_required_attribute(
            target,
            check.path,
            check.attribute,
            check.possible_values,
        )
        results.append(as_required(result, path=check.location))
    return results


def validate_document(
    json_value: Any,
    checks: Iterable[RequiredAttributeCheck],
    extra_results: Optional[Iterable[ValidationResult]] = None,
) -> ValidationReport:
    """
    Validate one document and return the aggregated report.

    Args:
        json_value: Raw JSON text or an already-parsed object.
        checks: Required-attribute checks to run.
        extra_results: Results from other walkers to merge in (after checks).

    Returns:
        ValidationReport. Unparseable JSON short-circuits with the parse error.
    """
    start_time = time.monotonic()

    # ==================================================================
    # Stage 1: JSON Ingestion
    # ==================================================================
    obj, parse_result = ensure_json_object(json_value)
    if parse_result is not None and not parse_result.valid:
        logger.info("Document rejected: %s", parse_result.errors[0].message)
        return build_report(parse_result)

    collector = ResultCollector()
    collector.add(parse_result)

    # ==================================================================
    # Stage 2: Required-attribute checks
    # ==================================================================
    collector.extend(run_required_checks(obj, checks))
    collector.extend(extra_results or [])

    # ==================================================================
    # Stage 3: Aggregation
    # ==================================================================
    with timed_aggregation():
        aggregated = collector.aggregate()

    # ==================================================================
    # Stage 4: Report
    # ==================================================================
    report = build_report(aggregated)

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    logger.info(
        "Validated document in %d ms: %d results → %d errors (%d required), %d warnings",
        elapsed_ms,
        len(collector),
        report.error_count,
        report.required_error_count,
        report.warning_count,
    )
    return report

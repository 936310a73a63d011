"""
Report building — aggregated ValidationResult → ValidationReport.
"""
from typing import Optional

from validation_report.config.settings import REPORT_MAX_MESSAGE_CHARS
from validation_report.models.report_io import ReportIssue, ValidationReport
from validation_report.models.validation import RequiredError, ValidationResult


def _truncate(message: str, max_chars: int) -> str:
    if max_chars <= 0 or len(message) <= max_chars:
        return message
    return message[: max(max_chars - 3, 0)] + "..."


def build_report(result: ValidationResult, max_message_chars: Optional[int] = None) -> ValidationReport:
    """
    Build the renderer-facing report for an aggregated result.

    Args:
        result: Output of ``aggregate_results`` (errors already partitioned).
        max_message_chars: Message length cap; defaults to
                           ``REPORT_MAX_MESSAGE_CHARS``. 0 disables it.
    """
    if max_message_chars is None:
        max_message_chars = REPORT_MAX_MESSAGE_CHARS

    errors = [
        ReportIssue(
            path=e.path,
            message=_truncate(e.message, max_message_chars),
            required=isinstance(e, RequiredError),
        )
        for e in result.errors
    ]
    warnings = [
        ReportIssue(path=w.path, message=_truncate(w.message, max_message_chars))
        for w in result.warnings
    ]

    return ValidationReport(
        valid=result.valid,
        errors=errors,
        warnings=warnings,
        error_count=len(errors),
        warning_count=len(warnings),
        required_error_count=sum(1 for e in errors if e.required),
    )

"""
Result Builders — append single-issue results while walking a tree.

``add_error_result`` / ``add_warning_result`` mutate a caller-owned list.
``ResultCollector`` owns its list and exposes the same operations as methods.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from validation_report.aggregation.aggregator import aggregate_results
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)


class MissingPathError(ValueError):
    """Raised when an error result is built without a path."""

    def __init__(self, message: str) -> None:
        self.error_message = message
        super().__init__(f"path is required (error message: {message!r})")


def add_error_result(results: List[ValidationResult], path: Optional[str], message: str) -> None:
    """
    Append a result holding exactly one error to *results*.

    Raises:
        MissingPathError: If *path* is None; deduplication keys on it.
    """
    if path is None:
        raise MissingPathError(message)
    results.append(ValidationResult(errors=[ValidationError(path, message)], warnings=[]))


def add_warning_result(results: List[ValidationResult], path: Optional[str], message: str) -> None:
    """Append a result holding exactly one warning to *results*."""
    results.append(ValidationResult(errors=[], warnings=[ValidationWarning(path, message)]))


class ResultCollector:
    """
    Collect results node-by-node during a tree walk, then aggregate them.

    Usage::

        collector = ResultCollector()
        collector.add_required_error("address", 'Missing required attribute "city"')
        collector.add_warning("", "Unknown property")
        report = collector.aggregate()
    """

    def __init__(self, results: Optional[Iterable[ValidationResult]] = None) -> None:
        self._results: List[ValidationResult] = list(results or [])

    def add_error(self, path: Optional[str], message: str) -> "ResultCollector":
        add_error_result(self._results, path, message)
        return self

    def add_required_error(self, path: Optional[str], message: str) -> "ResultCollector":
        if path is None:
            raise MissingPathError(message)
        self._results.append(ValidationResult(errors=[RequiredError(path, message)], warnings=[]))
        return self

    def add_warning(self, path: Optional[str], message: str) -> "ResultCollector":
        add_warning_result(self._results, path, message)
        return self

    def add(self, result: Optional[ValidationResult]) -> "ResultCollector":
        """Add a whole result; ``None`` (e.g. from ensure_json_object) is ignored."""
        if result is not None:
            self._results.append(result)
        return self

    def extend(self, results: Iterable[Optional[ValidationResult]]) -> "ResultCollector":
        for result in results:
            self.add(result)
        return self

    @property
    def results(self) -> List[ValidationResult]:
        """Snapshot of the collected results."""
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def aggregate(self) -> ValidationResult:
        return aggregate_results(self._results)

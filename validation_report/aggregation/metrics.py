"""
Prometheus Metrics — aggregation observability.

Exposes counters and a histogram for:
- Results folded by the aggregator
- Aggregated errors per kind (general / required)
- Required errors collapsed by path ancestry
- JSON ingestion outcomes
- Aggregation latency

Usage
-----
    from validation_report.aggregation.metrics import timed_aggregation

    with timed_aggregation():
        result = aggregate_results(results)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from validation_report.config.constants import (
    ERROR_KIND_GENERAL,
    ERROR_KIND_REQUIRED,
    ERROR_KINDS,
    INGESTION_OUTCOMES,
)
from validation_report.config.settings import METRICS_NAMESPACE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Individual results folded into an aggregate.
RESULTS_AGGREGATED: Counter = Counter(
    "results_aggregated_total",
    "Individual validation results folded by the aggregator",
    namespace=METRICS_NAMESPACE,
)

# Errors emitted by the aggregator, labelled by kind.
AGGREGATED_ERRORS: Counter = Counter(
    "aggregated_errors_total",
    "Errors in aggregated results by kind (general / required)",
    ["kind"],
    namespace=METRICS_NAMESPACE,
)

# Required errors absorbed by an ancestor/descendant already reported.
REQUIRED_COLLAPSED: Counter = Counter(
    "required_errors_collapsed_total",
    "Required errors merged into an existing error on the same tree branch",
    namespace=METRICS_NAMESPACE,
)

# JSON ingestion outcomes.
JSON_INGESTION: Counter = Counter(
    "json_ingestion_total",
    "JSON ingestion outcomes (object / parsed / mismatch / invalid)",
    ["outcome"],
    namespace=METRICS_NAMESPACE,
)

# Aggregation latency (seconds).
AGGREGATION_LATENCY: Histogram = Histogram(
    "aggregation_seconds",
    "Time spent aggregating validation results in seconds",
    namespace=METRICS_NAMESPACE,
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

# Expose every label combination from the first scrape
for _kind in ERROR_KINDS:
    AGGREGATED_ERRORS.labels(kind=_kind)
for _outcome in INGESTION_OUTCOMES:
    JSON_INGESTION.labels(outcome=_outcome)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_results_aggregated(count: int) -> None:
    """Increment the aggregated-results counter by *count*."""
    RESULTS_AGGREGATED.inc(count)


def record_aggregated_errors(general: int, required: int) -> None:
    """Add the error counts of one aggregate."""
    AGGREGATED_ERRORS.labels(kind=ERROR_KIND_GENERAL).inc(general)
    AGGREGATED_ERRORS.labels(kind=ERROR_KIND_REQUIRED).inc(required)


def record_required_collapsed() -> None:
    REQUIRED_COLLAPSED.inc()


def record_json_ingestion(outcome: str) -> None:
    """Increment the JSON ingestion counter for *outcome*."""
    if outcome not in INGESTION_OUTCOMES:
        raise ValueError(f"Unknown ingestion outcome: {outcome!r}")
    JSON_INGESTION.labels(outcome=outcome).inc()


@contextmanager
def timed_aggregation() -> Generator[None, None, None]:
    """
    Context manager that records aggregation latency.

    Usage::

        with timed_aggregation():
            result = aggregate_results(results)
    """
    with AGGREGATION_LATENCY.time():
        yield

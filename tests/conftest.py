"""
Shared test fixtures for the validation-report test suite.
"""
import json

import pytest

from validation_report.models.required_check import RequiredAttributeCheck
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)


# ==========================================================================
# Documents
# ==========================================================================

@pytest.fixture
def customer_document():
    return {
        "name": "Mario Rossi",
        "type": "business",
        "active": True,
        "address": {
            "city": "Milano",
            "lines": [
                {"text": "Via Roma 1"},
            ],
        },
        "contacts": [
            {"kind": "email", "value": "mario.rossi@example.it"},
        ],
        "notes": None,
    }


@pytest.fixture
def customer_document_json(customer_document):
    return json.dumps(customer_document, indent=4, ensure_ascii=False)


# ==========================================================================
# Required checks
# ==========================================================================

@pytest.fixture
def customer_checks():
    return [
        RequiredAttributeCheck(attribute="name"),
        RequiredAttributeCheck(
            attribute="type",
            possible_values=("business", "private"),
        ),
        RequiredAttributeCheck(path="address", attribute="city"),
        RequiredAttributeCheck(path="address.lines[0]", attribute="text"),
    ]


# ==========================================================================
# Result factories
# ==========================================================================

@pytest.fixture
def error_result():
    def _make(path, message="boom"):
        return ValidationResult(errors=[ValidationError(path, message)], warnings=[])
    return _make


@pytest.fixture
def required_result():
    def _make(path, message="missing"):
        return ValidationResult(errors=[RequiredError(path, message)], warnings=[])
    return _make


@pytest.fixture
def warning_result():
    def _make(path, message="careful"):
        return ValidationResult(errors=[], warnings=[ValidationWarning(path, message)])
    return _make

"""
Unit tests for required-attribute validation.
Tests: validate_required_attribute, as_required.
"""
import pytest

from validation_report.aggregation.required import as_required, validate_required_attribute
from validation_report.models.validation import (
    RequiredError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)


class TestValidateRequiredAttribute:
    """Presence and allowed-value checks."""

    def test_present_attribute_passes(self, customer_document):
        result = validate_required_attribute(customer_document, "", "name")
        assert result.errors == []
        assert result.warnings == []
        assert result.valid is True

    def test_missing_attribute(self, customer_document):
        result = validate_required_attribute(customer_document, "customer", "vat")
        assert result.errors == [
            ValidationError("customer", 'Missing required attribute "vat"'),
        ]
        assert result.warnings == []

    def test_missing_error_is_not_tagged_required(self, customer_document):
        result = validate_required_attribute(customer_document, "", "vat")
        assert not isinstance(result.errors[0], RequiredError)
        assert result.errors[0].is_required_error is False

    def test_nested_attribute_lookup(self, customer_document):
        assert validate_required_attribute(customer_document, "", "address.city").valid
        result = validate_required_attribute(customer_document, "", "address.zip")
        assert result.errors[0].message == 'Missing required attribute "address.zip"'

    def test_none_counts_as_present(self, customer_document):
        assert validate_required_attribute(customer_document, "", "notes").valid

    def test_value_in_possible_values(self, customer_document):
        result = validate_required_attribute(
            customer_document, "", "type", ["business", "private"]
        )
        assert result.valid

    def test_value_not_in_possible_values(self, customer_document):
        result = validate_required_attribute(
            customer_document, "customer", "type", ["private", "public"]
        )
        assert len(result.errors) == 1
        assert result.errors[0].path == "customer"
        assert result.errors[0].message == (
            'Invalid value "business" for "type" Valid options are ["private","public"]'
        )
        assert result.warnings == []

    def test_boolean_value_rendered_as_json(self, customer_document):
        result = validate_required_attribute(customer_document, "", "active", [False])
        assert result.errors[0].message == (
            'Invalid value "true" for "active" Valid options are [false]'
        )

    def test_boolean_is_not_equal_to_one(self):
        result = validate_required_attribute({"flag": True}, "", "flag", [1, 2])
        assert not result.valid

    def test_numeric_options(self):
        assert validate_required_attribute({"n": 2}, "", "n", [1, 2, 3]).valid
        result = validate_required_attribute({"n": 7}, "x", "n", [1, 2, 3])
        assert result.errors[0].message == 'Invalid value "7" for "n" Valid options are [1,2,3]'

    def test_empty_possible_values_rejects_everything(self):
        result = validate_required_attribute({"a": "x"}, "", "a", [])
        assert result.errors[0].message == 'Invalid value "x" for "a" Valid options are []'

    def test_missing_takes_precedence_over_options(self):
        result = validate_required_attribute({}, "", "a", ["x"])
        assert result.errors[0].message == 'Missing required attribute "a"'

    @pytest.mark.parametrize("obj", [None, "text", 42, []])
    def test_non_mapping_object_reports_missing(self, obj):
        result = validate_required_attribute(obj, "p", "a")
        assert len(result.errors) == 1
        assert result.errors[0].message == 'Missing required attribute "a"'

    def test_input_not_mutated(self, customer_document):
        before = repr(customer_document)
        validate_required_attribute(customer_document, "", "type", ["x"])
        assert repr(customer_document) == before


class TestAsRequired:
    def test_tags_errors(self):
        result = ValidationResult(errors=[ValidationError("a", "m")], warnings=[])
        tagged = as_required(result)
        assert tagged.errors == [RequiredError("a", "m")]
        assert tagged.errors[0].is_required_error is True

    def test_input_result_untouched(self):
        result = ValidationResult(errors=[ValidationError("a", "m")], warnings=[])
        as_required(result)
        assert type(result.errors[0]) is ValidationError

    def test_keeps_warnings_and_existing_required(self):
        result = ValidationResult(
            errors=[RequiredError("a", "m")],
            warnings=[ValidationWarning("", "w")],
        )
        tagged = as_required(result)
        assert tagged.errors == [RequiredError("a", "m")]
        assert tagged.warnings == [ValidationWarning("", "w")]


class TestAttributeNameEdgeCases:
    @pytest.mark.parametrize("attribute", ["", "#", "/"])
    def test_segmentless_attribute_is_missing(self, attribute):
        result = validate_required_attribute({}, "p", attribute)
        assert result.errors == [
            ValidationError("p", f'Missing required attribute "{attribute}"'),
        ]

    def test_empty_string_key_present(self):
        assert validate_required_attribute({"": 0}, "p", "").valid


class TestInvalidValueDisplay:
    def test_whole_float_rendered_as_integer(self):
        result = validate_required_attribute({"n": 1.0}, "", "n", [2])
        assert result.errors[0].message == 'Invalid value "1" for "n" Valid options are [2]'

    def test_fractional_float_kept(self):
        result = validate_required_attribute({"n": 1.5}, "", "n", [2])
        assert result.errors[0].message.startswith('Invalid value "1.5"')

    def test_null_rendered_as_json(self):
        result = validate_required_attribute({"n": None}, "", "n", ["x"])
        assert result.errors[0].message.startswith('Invalid value "null"')

    def test_container_rendered_as_compact_json(self):
        result = validate_required_attribute({"n": {"a": [1, "b"]}}, "", "n", ["x"])
        assert result.errors[0].message.startswith('Invalid value "{"a":[1,"b"]}"')


class TestAsRequiredRelocation:
    def test_path_overrides_error_path(self):
        result = ValidationResult(errors=[ValidationError("address", "m")], warnings=[])
        assert as_required(result, path="address.city").errors == [
            RequiredError("address.city", "m"),
        ]

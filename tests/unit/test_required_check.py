"""
Unit tests for the RequiredAttributeCheck model.
"""
import pytest

from validation_report.models.required_check import RequiredAttributeCheck


class TestRequiredAttributeCheck:
    def test_defaults(self):
        check = RequiredAttributeCheck(attribute="name")
        assert check.path == ""
        assert check.possible_values is None

    def test_from_dict(self):
        check = RequiredAttributeCheck.from_dict(
            {"path": "address", "attribute": "country", "possibleValues": ["IT", "FR"]}
        )
        assert check == RequiredAttributeCheck(
            attribute="country", path="address", possible_values=("IT", "FR")
        )

    def test_to_dict_omits_unconstrained_values(self):
        assert RequiredAttributeCheck(attribute="a").to_dict() == {"path": "", "attribute": "a"}

    def test_frozen(self):
        check = RequiredAttributeCheck(attribute="a")
        with pytest.raises(AttributeError):
            check.attribute = "b"

    def test_repr(self):
        assert repr(RequiredAttributeCheck(attribute="a")) == "RequiredAttributeCheck(<root>:a)"

    @pytest.mark.parametrize("path, attribute, location", [
        ("", "name", "name"),
        ("address", "city", "address.city"),
        ("#/address/lines/0", "text", "address.lines[0].text"),
        ("", "address.city", "address.city"),
    ])
    def test_location(self, path, attribute, location):
        assert RequiredAttributeCheck(attribute=attribute, path=path).location == location

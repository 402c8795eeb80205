"""
Unit tests for type reference classification.
"""

from dataclasses import FrozenInstanceError

import pytest
from gql_validators.schema import ScalarType, TypeDescriptor, classify_type, map_scalar


class TestClassifyType:
    """Test normalizing printed GraphQL types."""

    def test_plain_nullable_type(self):
        """Test a bare type name."""
        descriptor = classify_type("String")

        assert descriptor == TypeDescriptor(base_type="string")
        assert descriptor.scalar is ScalarType.STRING

    def test_required_type(self):
        """Test a trailing '!' marks the field required."""
        descriptor = classify_type("String!")

        assert descriptor.is_required is True
        assert descriptor.is_array is False
        assert descriptor.base_type == "string"

    def test_required_list_of_required(self):
        """Test both markers around a list."""
        descriptor = classify_type("[String!]!")

        assert descriptor.is_required is True
        assert descriptor.is_array is True
        assert descriptor.is_item_required is True
        assert descriptor.base_type == "string"

    def test_nullable_list_of_nullable(self):
        """Test a list without markers."""
        descriptor = classify_type("[Custom]")

        assert descriptor.is_array is True
        assert descriptor.is_required is False
        assert descriptor.is_item_required is False
        assert descriptor.is_unknown_type is True
        assert descriptor.base_type == "Custom"

    def test_unknown_type_has_no_scalar(self):
        """Test user types are passed through unchanged."""
        descriptor = classify_type("Custom!")

        assert descriptor.is_unknown_type is True
        assert descriptor.scalar is None
        assert descriptor.base_type == "Custom"

    def test_nested_list(self):
        """Test a list of lists keeps the element list as base_type."""
        descriptor = classify_type("[[Int!]]!")

        assert descriptor.is_array is True
        assert descriptor.is_required is True
        assert descriptor.is_item_required is False
        assert descriptor.is_nested_array is True
        assert descriptor.base_type == "[Int!]"
        assert classify_type("[Int]").is_nested_array is False

    @pytest.mark.parametrize("type_ref", ["", None])
    def test_empty_input(self, type_ref):
        """Test empty input yields no descriptor."""
        assert classify_type(type_ref) is None

    def test_descriptor_is_immutable(self):
        """Test descriptors are frozen."""
        descriptor = classify_type("Int")

        with pytest.raises(FrozenInstanceError):
            descriptor.is_required = True


class TestMapScalar:
    """Test scalar name mapping."""

    @pytest.mark.parametrize("name", ["Int", "Float"])
    def test_numeric_scalars(self, name):
        """Test Int and Float both map to number."""
        assert map_scalar(name) is ScalarType.NUMBER

    @pytest.mark.parametrize("name", ["Date", "DateTime"])
    def test_date_scalars(self, name):
        """Test Date and DateTime map to Date."""
        assert map_scalar(name) is ScalarType.DATE
        assert classify_type(name).base_type == "Date"

    def test_id_maps_to_string(self):
        """Test the built-in ID scalar is a string."""
        assert map_scalar("ID") is ScalarType.STRING

    @pytest.mark.parametrize("name,expected", [
        ("String", ScalarType.STRING),
        ("Boolean", ScalarType.BOOLEAN),
        ("Number", ScalarType.NUMBER),
        ("boolean", ScalarType.BOOLEAN),
        ("STRING", ScalarType.STRING),
    ])
    def test_primitives_any_case(self, name, expected):
        """Test primitive names match case-insensitively and are lower-cased."""
        assert map_scalar(name) is expected
        assert classify_type(name).base_type == expected.value

    @pytest.mark.parametrize("name", ["Custom", "JSON", "Integer"])
    def test_unknown_names(self, name):
        """Test anything else is not a scalar."""
        assert map_scalar(name) is None

"""
Unit tests for entity validation and error formatting.
"""

import pytest

from gql_validators import EntityKind, FieldError, GQLCompiler, ValidationError
from gql_validators.validation import format_path, format_validation_errors


class TestFormatPath:
    """Test error path rendering."""

    @pytest.mark.parametrize("path,expected", [
        ([], ""),
        (["name"], "name"),
        (["orders", 0, "total"], "orders[0].total"),
        (["tags", 1], "tags[1]"),
        ([0, "name"], "[0].name"),
        (["a", "b", "c"], "a.b.c"),
    ])
    def test_paths(self, path, expected):
        """Test property names are dotted and indices bracketed."""
        assert format_path(path) == expected


class TestEntity:
    """Test the Entity wrapper."""

    @pytest.fixture
    def person(self):
        compiler = GQLCompiler("type Person { name: String! age: Int tags: [String!] }")
        return compiler.get_entity("Person")

    def test_validate_returns_value(self, person):
        """Test valid values come back unchanged."""
        value = {"name": "Alice", "age": 30}

        assert person.validate(value) is value
        assert person.is_valid(value)

    def test_validation_error_fields(self, person):
        """Test the raised error carries every FieldError."""
        with pytest.raises(ValidationError) as exc_info:
            person.validate({"age": "old", "tags": ["a", None]})

        error = exc_info.value
        assert error.message == "name is a required field"
        assert error.path == "name"
        assert error.errors == [
            FieldError(path="name", message="name is a required field", validator="required", actual="MISSING"),
            FieldError(
                path="age",
                message="age must be a `number` type, but the final value was: `'old'`",
                validator="type",
                actual="old",
            ),
            FieldError(path="tags[1]", message="tags[1] is a required field", validator="requiredItems", actual=None),
        ]

    def test_null_required_field_actual(self, person):
        """Test a present but null field reports None, not MISSING."""
        errors = list(person.iter_errors({"name": None}))

        assert len(errors) == 1
        assert errors[0].actual is None

    def test_root_error_path(self, person):
        """Test errors on the value itself have an empty path."""
        errors = list(person.iter_errors("Alice"))

        assert errors[0].path == ""
        assert errors[0].message == "this must be a `object` type, but the final value was: `'Alice'`"

    def test_iter_errors_empty_for_valid(self, person):
        """Test no errors for a valid value."""
        assert list(person.iter_errors({"name": "Alice"})) == []

    def test_schema_and_repr(self, person):
        """Test the rendered schema and repr."""
        assert person.schema["required"] == ["name"]
        assert person.kind is EntityKind.OBJECT
        assert repr(person) == "Entity(name='Person', kind='object')"


class TestFormatValidationErrors:
    """Test human-readable error listings."""

    def test_no_errors(self):
        """Test an empty list."""
        assert format_validation_errors([]) == "No validation errors"

    def test_numbered_listing(self):
        """Test each error is numbered with its path and value."""
        errors = [
            FieldError(path="name", message="name is a required field", validator="required", actual="MISSING"),
            FieldError(path="", message="Was not one of A, B", validator="oneOfEntities", actual=None),
        ]

        text = format_validation_errors(errors)

        assert text.startswith("Validation failed with 2 error(s):")
        assert "1. At name: name is a required field" in text
        assert "Got: 'MISSING'" in text
        assert "2. At root: Was not one of A, B" in text
        assert "Got: None" in text

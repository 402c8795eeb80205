"""
Unit tests for JSON Schema export.
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft7Validator

from gql_validators import GQLCompiler, UnknownEntityError
from gql_validators.schema.json_schema import JSON_SCHEMA_DRAFT7, compile_to_json_schema, dump_json_schema


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="module")
def library():
    return GQLCompiler(FIXTURES_DIR / "schemas" / "library.graphql")


class TestNodeExport:
    """Test how each kind of type is written out."""

    def test_object(self):
        """Test fields, requiredness and nullability."""
        doc = GQLCompiler("type Person { name: String! age: Int }").to_json_schema()

        assert doc["definitions"]["Person"] == {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "age": {"type": ["number", "null"]},
            },
            "required": ["name"],
        }

    def test_no_required_key_when_all_nullable(self):
        """Test 'required' is omitted when empty."""
        doc = GQLCompiler("type Loose { a: String }").to_json_schema()

        assert "required" not in doc["definitions"]["Loose"]

    def test_arrays_and_refs(self):
        """Test lists and references to other entities."""
        doc = GQLCompiler("type Item { id: ID! } type Box { items: [Item!]! owner: Item }").to_json_schema()
        box = doc["definitions"]["Box"]["properties"]

        assert box["items"] == {"type": "array", "items": {"$ref": "#/definitions/Item"}}
        assert box["owner"] == {"anyOf": [{"$ref": "#/definitions/Item"}, {"type": "null"}]}

    def test_reference_to_custom_scalar(self):
        """Test names with no entity export as an unconstrained schema."""
        doc = GQLCompiler("scalar JSON type Blob { data: JSON many: [JSON!] }").to_json_schema(root="Blob")
        blob = doc["definitions"]["Blob"]["properties"]

        assert blob["data"] == {}
        assert blob["many"] == {"type": ["array", "null"], "items": {}}
        assert "JSON" not in doc["definitions"]

        validator = Draft7Validator(doc)
        assert validator.is_valid({"data": {"a": 1}, "many": [1, "x"]})
        assert not validator.is_valid({"many": "x"})

    def test_node_without_defined_names(self):
        """Test a node rendered alone keeps its $ref."""
        compiler = GQLCompiler("scalar JSON type Blob { data: JSON! }")

        rendered = compiler.get_entity("Blob").node.to_json_schema()

        assert rendered["properties"]["data"] == {"$ref": "#/definitions/JSON"}

    def test_dates(self):
        """Test dates are strings with a date-time format."""
        doc = GQLCompiler("scalar DateTime type Event { at: DateTime! }").to_json_schema()

        assert doc["definitions"]["Event"]["properties"]["at"] == {"type": "string", "format": "date-time"}

    def test_union_and_enum(self, library):
        """Test unions as anyOf and enums as string enums."""
        definitions = library.to_json_schema()["definitions"]

        assert definitions["SearchResult"] == {
            "anyOf": [{"$ref": "#/definitions/Book"}, {"$ref": "#/definitions/Magazine"}]
        }
        assert definitions["Genre"] == {"type": "string", "enum": ["FICTION", "HISTORY", "SCIENCE"]}


class TestDocument:
    """Test the exported document as a whole."""

    def test_every_entity_is_defined(self, library):
        """Test one definition per compiled entity."""
        doc = library.to_json_schema()

        assert doc["$schema"] == JSON_SCHEMA_DRAFT7
        assert "$ref" not in doc
        assert set(doc["definitions"]) == set(library.entities)

    def test_document_is_valid_draft7(self, library):
        """Test the export is itself a valid Draft 7 schema."""
        Draft7Validator.check_schema(library.to_json_schema(root="Author"))

    def test_root_validates_documents(self, library):
        """Test a rooted export accepts and rejects like the live validator."""
        validator = Draft7Validator(library.to_json_schema(root="Author"))

        with open(FIXTURES_DIR / "data" / "author_valid.json") as f:
            assert validator.is_valid(json.load(f))
        with open(FIXTURES_DIR / "data" / "author_invalid.json") as f:
            assert not validator.is_valid(json.load(f))

    def test_unknown_root(self, library):
        """Test rooting at a missing entity."""
        with pytest.raises(UnknownEntityError):
            compile_to_json_schema(library.entities, root="Nope")

    def test_dump(self, library):
        """Test serialization round-trips through json."""
        doc = library.to_json_schema(root="Book")
        text = dump_json_schema(doc)

        assert json.loads(text) == doc
        assert text.startswith("{\n  ")

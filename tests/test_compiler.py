"""
Unit tests for the JSON-Schema compiler.

Test coverage:
- Leaf nodes for every schema kind
- Required set and skipped members
- Nested declarations
- Compile errors (None member, unsupported shape)
- Rendering settings (indent, dialect)
"""

import json
from dataclasses import dataclass

import pytest

from fluentschema import (
    Array,
    ArraySchema,
    Bool,
    BoolSchema,
    CompileError,
    ErrorKind,
    Float,
    FloatSchema,
    Int,
    IntSchema,
    String,
    StringSchema,
    compile_document,
    compile_schema,
    schema_field,
    settings,
)


@dataclass
class WithLengths:
    name: StringSchema = schema_field("name", factory=lambda: String().min(5).max(10))


@dataclass
class Address:
    city: StringSchema = schema_field("city", factory=lambda: String().min(3))
    zip_code: StringSchema = schema_field("zip", factory=lambda: String().optional())


@dataclass
class Profile:
    name: StringSchema = schema_field("name", factory=lambda: String().description("Full name"))
    nickname: StringSchema = schema_field("nickname", factory=lambda: String().optional())
    age: IntSchema = schema_field("age", factory=Int)
    score: FloatSchema = schema_field("score", factory=lambda: Float().optional())
    active: BoolSchema = schema_field("active", factory=Bool)
    tags: ArraySchema = schema_field("tags", factory=lambda: Array(String()).min_items(1))
    address: Address = schema_field("address", factory=Address)
    secret: StringSchema = schema_field("-", factory=String)
    cache: StringSchema = schema_field(factory=String)


@dataclass
class Broken:
    name: StringSchema | None = schema_field("name")


@dataclass
class Unsupported:
    count: int = schema_field("count", default=3)


@dataclass
class NeedsArguments:
    limit: int
    name: StringSchema = schema_field("name", factory=String)


class TestDocument:
    """Tests for document structure."""

    def test_lengths_and_required(self):
        assert compile_document(WithLengths()).to_dict() == {
            "type": "object",
            "properties": {"name": {"type": "string", "minLength": 5, "maxLength": 10}},
            "required": ["name"],
        }

    def test_title_and_description(self):
        document = compile_document(WithLengths(), title="Person", description="A person").to_dict()
        assert (document["title"], document["description"]) == ("Person", "A person")

    def test_empty_title_omitted(self):
        assert "title" not in compile_document(WithLengths()).to_dict()

    def test_properties_in_declaration_order(self):
        document = compile_document(Profile())
        assert list(document.properties) == ["name", "nickname", "age", "score", "active", "tags", "address"]

    def test_required_set(self):
        assert compile_document(Profile()).required == ["name", "age", "active", "tags", "address"]

    def test_leaf_nodes(self):
        properties = compile_document(Profile()).to_dict()["properties"]
        assert properties["name"] == {"type": "string", "description": "Full name"}
        assert properties["age"] == {"type": "integer"}
        assert properties["score"] == {"type": "number"}
        assert properties["active"] == {"type": "boolean"}
        assert properties["tags"] == {"type": "array", "items": {"type": "string"}, "minItems": 1}

    def test_nested_object(self):
        properties = compile_document(Profile()).to_dict()["properties"]
        assert properties["address"] == {
            "type": "object",
            "properties": {"city": {"type": "string", "minLength": 3}, "zip": {"type": "string"}},
            "required": ["city"],
        }

    def test_declaration_class_is_instantiated(self):
        assert compile_document(WithLengths).to_dict() == compile_document(WithLengths()).to_dict()

    def test_values_do_not_affect_output(self):
        filled = WithLengths()
        filled.name.set("abc")
        assert compile_document(filled).to_dict() == compile_document(WithLengths()).to_dict()


class TestCompileErrors:
    """Tests for compile failures."""

    def test_none_member(self):
        with pytest.raises(CompileError) as info:
            compile_schema(Broken())
        assert info.value.kind is ErrorKind.NIL_SCHEMA_REFERENCE
        assert str(info.value) == "found nil schema interface with JSON tag: name"

    def test_unsupported_member(self):
        with pytest.raises(CompileError) as info:
            compile_schema(Unsupported())
        assert info.value.kind is ErrorKind.UNSUPPORTED_FIELD_SHAPE
        assert str(info.value) == "unsupported schema type for field count"

    def test_not_a_declaration(self):
        with pytest.raises(CompileError):
            compile_schema(object())

    def test_declaration_class_without_defaults(self):
        with pytest.raises(CompileError) as info:
            compile_document(NeedsArguments)
        assert info.value.kind is ErrorKind.UNSUPPORTED_FIELD_SHAPE
        assert str(info.value) == "unsupported schema type for field NeedsArguments"
        assert isinstance(info.value.__cause__, TypeError)

    def test_declaration_instance_with_arguments(self):
        assert compile_document(NeedsArguments(limit=3)).required == ["name"]


class TestRendering:
    """Tests for JSON text output."""

    def test_output_is_json(self):
        parsed = json.loads(compile_schema(WithLengths(), title="T"))
        assert parsed["title"] == "T"
        assert parsed["required"] == ["name"]

    def test_default_indent(self):
        assert '\n  "type": "object"' in compile_schema(WithLengths())

    def test_explicit_indent(self):
        assert '\n    "type": "object"' in compile_schema(WithLengths(), indent=4)

    def test_indent_setting(self, monkeypatch):
        monkeypatch.setattr(settings, "SCHEMA_INDENT", 3)
        assert '\n   "type": "object"' in compile_schema(WithLengths())

    def test_dialect_setting(self, monkeypatch):
        monkeypatch.setattr(settings, "JSON_SCHEMA_DIALECT", "https://json-schema.org/draft/2020-12/schema")
        document = json.loads(compile_schema(WithLengths()))
        assert document["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_no_dialect_by_default(self):
        assert "$schema" not in json.loads(compile_schema(WithLengths()))

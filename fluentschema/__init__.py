"""fluentschema: fluent, composable value schemas

Declare constraints with chained builders, validate whole object graphs with
dotted error paths, move values across JSON and compile declarations to
JSON-Schema documents.

Usage:
    from dataclasses import dataclass
    from fluentschema import Int, String, IntSchema, StringSchema, schema_field, ensure, compile_schema

    @dataclass
    class Person:
        name: StringSchema = schema_field("name", factory=lambda: String().min(1).max(64))
        age: IntSchema = schema_field("age", factory=lambda: Int().min(0).optional())

    person = Person()
    person.name.set("Ada")
    assert not ensure(person).has_errors()
    print(compile_schema(person, title="Person"))
"""
from fluentschema.config import settings, get_settings
from fluentschema.logging import configure_logging, get_logger

from fluentschema.errors import (
    ErrorKind,
    Fault,
    Result,
    Ok,
    Err,
    SchemaError,
    DecodeError,
    EncodeError,
    CompileError,
    TypeMismatchError,
)
from fluentschema.validation import (
    ValidationErrorDetail,
    ValidationResult,
    ValidationError,
    ValidationOptions,
)
from fluentschema.schemas import (
    Schema,
    NumberSchema,
    IntSchema,
    FloatSchema,
    StringSchema,
    BoolSchema,
    ArraySchema,
    Number,
    Int,
    Float,
    String,
    Bool,
    Array,
)
from fluentschema.jsonschema import JSONSchema
from fluentschema.fields import schema_field, json_name_of, iter_members
from fluentschema.ensure import ensure
from fluentschema.compiler import compile_schema, compile_document
from fluentschema.binding import parse, safe_marshal

__version__ = "0.1.0"

__all__ = [
    # Config / logging
    "settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Errors
    "ErrorKind",
    "Fault",
    "Result",
    "Ok",
    "Err",
    "SchemaError",
    "DecodeError",
    "EncodeError",
    "CompileError",
    "TypeMismatchError",
    # Validation
    "ValidationErrorDetail",
    "ValidationResult",
    "ValidationError",
    "ValidationOptions",
    # Schemas
    "Schema",
    "NumberSchema",
    "IntSchema",
    "FloatSchema",
    "StringSchema",
    "BoolSchema",
    "ArraySchema",
    "Number",
    "Int",
    "Float",
    "String",
    "Bool",
    "Array",
    # Declarations
    "JSONSchema",
    "schema_field",
    "json_name_of",
    "iter_members",
    # Operations
    "ensure",
    "compile_schema",
    "compile_document",
    "parse",
    "safe_marshal",
]

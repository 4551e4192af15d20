"""JSON-Schema Compiler

Turns a declaration (a dataclass of schemas) into a JSON-Schema object
document. Only members tagged with a JSON name are compiled; ``"-"`` and
untagged members are skipped.

Usage:
    print(compile_schema(Person(), title="Person", description="A person"))
"""
from __future__ import annotations

import dataclasses
from typing import Any

from fluentschema.config import settings
from fluentschema.errors import CompileError, nil_schema_reference, raise_fault, unsupported_field_shape
from fluentschema.fields import SKIP, iter_members
from fluentschema.jsonschema import JSONSchema
from fluentschema.logging import compiler_logger
from fluentschema.schemas import Schema

log = compiler_logger()


def compile_document(declaration: Any, title: str = "", description: str = "") -> JSONSchema:
    """Compile ``declaration`` (instance or default-constructible dataclass) to a document.

    Raises:
        CompileError: a tagged member is None or has an unsupported shape;
            nothing is returned in that case.
    """
    if isinstance(declaration, type) and dataclasses.is_dataclass(declaration):
        declaration = _instantiate(declaration)
    if not dataclasses.is_dataclass(declaration):
        raise_fault(unsupported_field_shape(type(declaration).__name__, declaration), CompileError)

    root = JSONSchema.object(title, description)
    if settings.JSON_SCHEMA_DIALECT: root.dialect = settings.JSON_SCHEMA_DIALECT
    _compile_members(declaration, root)

    log.info("schema_compiled", declaration=type(declaration).__name__, properties=len(root.properties or {}),
        required=len(root.required or []))
    return root


def compile_schema(declaration: Any, title: str = "", description: str = "", indent: int | None = None) -> str:
    """Compile ``declaration`` and render it as JSON text.

    ``indent`` defaults to ``settings.SCHEMA_INDENT``.
    """
    document = compile_document(declaration, title, description)
    return document.to_json(indent=settings.SCHEMA_INDENT if indent is None else indent)


def _instantiate(cls: type) -> Any:
    try:
        return cls()
    except TypeError as e:
        # Declaration classes need defaults (schema_field factories) for every member.
        raise_fault(unsupported_field_shape(cls.__name__, cls).map_err(lambda f: f.chain(e)), CompileError)


def _compile_members(obj: Any, node: JSONSchema) -> None:
    for member in iter_members(obj):
        if member.json_tag is None or member.json_tag == SKIP: continue
        tag, value = member.json_tag, member.value

        if value is None:
            raise_fault(nil_schema_reference(tag), CompileError)

        if isinstance(value, Schema):
            node.add_property(tag, value.to_json_schema(), required=not value.is_optional())
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            nested = JSONSchema(type="object")
            _compile_members(value, nested)
            node.add_property(tag, nested, required=True)
        else:
            log.debug("unsupported_member", member=member.name, shape=type(value).__name__)
            raise_fault(unsupported_field_shape(member.name, value), CompileError)

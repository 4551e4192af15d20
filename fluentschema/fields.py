"""Declarations and Field Tagging

A declaration is a dataclass whose members are schemas (or nested
declarations). ``schema_field`` attaches the external JSON name to a member
the way a struct tag would; members without a name are internal and are
ignored by the compiler.

Usage:
    @dataclass
    class Person:
        name: StringSchema = schema_field("name", factory=lambda: String().min(1))
        age: IntSchema = schema_field("age", factory=lambda: Int().min(0).optional())
        notes: str = ""  # untagged, never compiled
"""
from __future__ import annotations

import dataclasses
import types
from enum import Enum
from typing import Any, Callable, Iterator, NamedTuple, Union, get_args, get_origin, get_type_hints

from fluentschema.schemas import Schema

JSON_TAG = "json"
SKIP = "-"


class Member(NamedTuple):
    """One member of a declaration, in declaration order."""
    name: str
    json_tag: str | None
    value: Any
    declared_type: Any


def schema_field(json_name: str | None = None, *, factory: Callable[[], Any] | None = None, default: Any = None) -> Any:
    """``dataclasses.field`` carrying the member's JSON name.

    Schemas are mutable, so pass them through ``factory`` to give every
    instance its own.
    """
    metadata = {JSON_TAG: json_name} if json_name is not None else {}
    if factory is not None:
        return dataclasses.field(default_factory=factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def json_name_of(field: dataclasses.Field) -> str | None:
    return field.metadata.get(JSON_TAG)


def is_record(value: Any) -> bool:
    """Dataclass instance, or plain object with instance attributes (schemas excluded)."""
    if value is None or isinstance(value, (type, types.ModuleType, types.FunctionType, Enum)): return False
    if dataclasses.is_dataclass(value): return True
    return hasattr(value, "__dict__") and not isinstance(value, Schema)


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        # Annotations referring to names local to a function cannot be resolved.
        return {}


def iter_members(obj: Any) -> Iterator[Member]:
    """Yield members of ``obj`` in declaration order.

    Dataclasses yield their fields (tag from field metadata); plain objects
    yield their public instance attributes in ``vars()`` order, untagged.
    """
    hints = _type_hints(type(obj))
    if dataclasses.is_dataclass(obj):
        for f in dataclasses.fields(obj):
            yield Member(f.name, json_name_of(f), getattr(obj, f.name), hints.get(f.name, f.type))
        return
    for name, value in vars(obj).items():
        if name.startswith("_"): continue
        yield Member(name, None, value, hints.get(name))


def concrete_type(declared: Any) -> type | None:
    """Strip ``Optional`` from a declared type; None when it is not a single class."""
    origin, args = get_origin(declared), get_args(declared)
    if origin is Union or origin is types.UnionType:
        if len(non_none := [a for a in args if a is not type(None)]) != 1: return None
        declared = non_none[0]
    return declared if isinstance(declared, type) else None


def join_path(parent: str, name: str) -> str:
    return f"{parent}.{name}" if parent else name

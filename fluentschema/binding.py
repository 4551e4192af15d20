"""Struct JSON Binding

Moves a whole declaration across JSON:

- ``parse`` decodes a JSON object member by member (each member schema
  decodes its own value) and then runs ``ensure`` so members absent from the
  payload are reported too.
- ``safe_marshal`` refuses to encode anything that does not pass ``ensure``.

Usage:
    person = Person()
    result = parse(b'{"name": "Ada", "age": 36}', person)
    if result.has_errors():
        ...
    payload = safe_marshal(person)
"""
from __future__ import annotations

import dataclasses
from typing import Any

from pydantic_core import from_json, to_json

from fluentschema.ensure import ensure
from fluentschema.errors import DecodeError, invalid_format, nil_schema_reference, raise_fault
from fluentschema.fields import SKIP, Member, concrete_type, is_record, iter_members, join_path
from fluentschema.logging import binding_logger
from fluentschema.schemas import Schema
from fluentschema.schemas.base import as_bytes
from fluentschema.validation import ValidationError, ValidationResult

log = binding_logger()


def parse(data: bytes | str, target: Any) -> ValidationResult:
    """Decode ``data`` into ``target`` and return the full validation result.

    Raises:
        DecodeError: the payload is not a JSON object, or a member's value
            could not be decoded. The message is prefixed with the member path.
    """
    try:
        payload = from_json(as_bytes(data))
    except ValueError as e:
        raise_fault(invalid_format("object", e), DecodeError)
    if not isinstance(payload, dict):
        raise_fault(invalid_format("object"), DecodeError)

    _bind(target, payload, "")
    result = ensure(target)
    log.info("parsed", target=type(target).__name__, errors=len(result))
    return result


def safe_marshal(obj: Any) -> bytes:
    """Encode ``obj`` only if it is fully valid.

    ``obj`` may be a declaration, a schema, a list/tuple/dict holding them, or
    any plain JSON-encodable value. Items of a container are validated one by
    one with their index (or key) as the path prefix.

    Raises:
        ValidationError: validation reported errors.
    """
    result = ValidationResult()
    _ensure_items(obj, "", result)
    if result.has_errors():
        log.info("marshal_rejected", target=type(obj).__name__, errors=len(result))
        raise ValidationError(result)
    return to_json(_to_payload(obj))


# ----------------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------------

def _key(member: Member) -> str:
    return member.json_tag or member.name


def _bind(obj: Any, payload: dict[str, Any], path: str) -> None:
    for member in iter_members(obj):
        if member.json_tag == SKIP or (key := _key(member)) not in payload: continue
        child, raw = join_path(path, member.name), payload[key]

        value = member.value
        if value is None:
            if raw is None: continue
            if (value := _materialize(member.declared_type)) is None:
                raise_fault(nil_schema_reference(key).map_err(lambda f: f.with_metadata(field=child)), DecodeError)
            setattr(obj, member.name, value)

        if isinstance(value, Schema):
            _decode_member(value, raw, child)
        elif is_record(value):
            if raw is None: continue
            if not isinstance(raw, dict):
                raise_fault(invalid_format("object", field=child).map_err(lambda f: f.with_prefix(f"{child}: ")),
                    DecodeError)
            _bind(value, raw, child)
        else:
            setattr(obj, member.name, raw)


def _decode_member(schema: Schema, raw: Any, path: str) -> None:
    try:
        schema.decode(to_json(raw))
    except DecodeError as e:
        log.debug("member_rejected", field=path, kind=e.kind.value)
        raise DecodeError(e.fault.with_prefix(f"{path}: ").with_metadata(field=path), result=e.result) from e


def _materialize(declared: Any) -> Any:
    """Default-construct a schema class or dataclass, None when not possible."""
    cls = concrete_type(declared)
    if cls is None or not (issubclass(cls, Schema) or dataclasses.is_dataclass(cls)):
        return None
    try:
        return cls()
    except TypeError:
        # Needs constructor arguments (e.g. ArraySchema's element template).
        return None


# ----------------------------------------------------------------------------
# Encoding
# ----------------------------------------------------------------------------

def _ensure_items(obj: Any, path: str, result: ValidationResult) -> None:
    if isinstance(obj, (list, tuple)):
        for i, item in enumerate(obj):
            _ensure_items(item, join_path(path, str(i)), result)
    elif isinstance(obj, dict):
        for key, item in obj.items():
            _ensure_items(item, join_path(path, str(key)), result)
    else:
        result.merge(ensure(obj), path=path)


def _to_payload(obj: Any) -> Any:
    """JSON-ready form of ``obj``: schemas by their encoding, records by tagged member."""
    if obj is None: return None
    if isinstance(obj, Schema) and not dataclasses.is_dataclass(obj):
        return from_json(obj.encode())
    if isinstance(obj, (list, tuple)):
        return [_to_payload(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _to_payload(item) for key, item in obj.items()}
    if not is_record(obj):
        return obj
    return {_key(member): _to_payload(member.value) for member in iter_members(obj) if member.json_tag != SKIP}

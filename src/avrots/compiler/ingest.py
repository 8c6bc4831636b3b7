# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ingestion of raw JSON schema values into the typed schema model.

The JSON form of an Avro schema is duck-typed: a type can be a string, a list
or an object. Ingestion dispatches on that shape exactly once so that the
resolver only ever sees the closed set of variants in
:mod:`avrots.model.schema`.

Shapes outside the supported subset become :class:`UnknownSchema` and are
rendered as ``any`` later. Only shapes that cannot produce a type at all (an
array without ``items``, a field without a name, ...) raise
:class:`SchemaError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from avrots.model.schema import (
    ArraySchema,
    EnumSchema,
    Field,
    MapSchema,
    NamedReference,
    PrimitiveSchema,
    PrimitiveType,
    RecordSchema,
    SchemaDocument,
    SchemaType,
    UnionSchema,
    UnknownSchema,
)

# ###############
# Public Interface
# ###############


class SchemaError(Exception):
    """Raised when a schema value cannot be turned into a type."""


def parse_schema(raw: Any) -> SchemaType:
    """Convert one raw JSON schema value into a :data:`SchemaType`.

    Args:
        raw: A value as produced by :func:`json.loads`.

    Returns:
        The typed schema variant.

    Raises:
        SchemaError: If the value has a recognised kind but is missing what
            that kind needs to be emitted.
    """
    if isinstance(raw, str):
        primitive = _PRIMITIVES.get(raw)
        if primitive is not None:
            return PrimitiveSchema(primitive=primitive)
        return NamedReference(name=raw)
    if isinstance(raw, list):
        if not raw:
            return UnknownSchema(raw=raw)
        return UnionSchema(members=[parse_schema(member) for member in raw])
    if isinstance(raw, dict):
        return _parse_object(raw)
    return UnknownSchema(raw=raw)


def load_document(source_id: str, raw: Any) -> SchemaDocument:
    """Ingest the parsed JSON of one schema file.

    Args:
        source_id: File name the JSON was read from.
        raw: The decoded JSON value.

    Returns:
        A :class:`SchemaDocument` whose declared name is the root object's
        ``name`` attribute when it is a non-empty string.
    """
    declared_name = None
    if isinstance(raw, dict) and isinstance(raw.get("name"), str) and raw["name"]:
        declared_name = raw["name"]
    return SchemaDocument(source_id=source_id, root=parse_schema(raw), declared_name=declared_name)


# ################
# Implementation
# ################

_PRIMITIVES: dict[str, PrimitiveType] = {p.value: p for p in PrimitiveType}


def _parse_object(raw: dict[str, Any]) -> SchemaType:
    """Dispatch on the ``type`` attribute of an object-form schema."""
    kind = raw.get("type")
    if not isinstance(kind, str):
        return UnknownSchema(raw=raw)
    if kind in _PRIMITIVES:
        return PrimitiveSchema(primitive=_PRIMITIVES[kind])
    if kind == "record":
        return _parse_record(raw)
    if kind == "enum":
        return _parse_enum(raw)
    if kind == "array":
        if "items" not in raw:
            raise SchemaError(f"array schema {_label(raw)} has no 'items'")
        return ArraySchema(items=parse_schema(raw["items"]))
    if kind == "map":
        if "values" not in raw:
            raise SchemaError(f"map schema {_label(raw)} has no 'values'")
        return MapSchema(values=parse_schema(raw["values"]))
    return UnknownSchema(raw=raw)


def _parse_record(raw: dict[str, Any]) -> RecordSchema:
    raw_fields = raw.get("fields") or []
    if not isinstance(raw_fields, list):
        raise SchemaError(f"record {_label(raw)}: 'fields' must be a list")
    fields = [_parse_field(entry, index, raw) for index, entry in enumerate(raw_fields)]
    return RecordSchema(name=_optional_string(raw, "name"), fields=fields, doc=_optional_string(raw, "doc"))


def _parse_field(entry: Any, index: int, record: dict[str, Any]) -> Field:
    location = f"record {_label(record)}: fields[{index}]"
    if not isinstance(entry, dict):
        raise SchemaError(f"{location} must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError(f"{location} has no 'name'")
    if "type" not in entry:
        raise SchemaError(f"{location} '{name}' has no 'type'")
    return Field(name=name, type=parse_schema(entry["type"]), doc=_optional_string(entry, "doc"))


def _parse_enum(raw: dict[str, Any]) -> EnumSchema:
    symbols = raw.get("symbols")
    if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
        raise SchemaError(f"enum {_label(raw)}: 'symbols' must be a list of strings")
    try:
        return EnumSchema(name=_optional_string(raw, "name"), symbols=symbols, doc=_optional_string(raw, "doc"))
    except ValidationError as exc:
        raise SchemaError(f"enum {_label(raw)}: {exc.errors()[0]['msg']}") from exc


def _optional_string(mapping: dict[str, Any], key: str) -> str | None:
    """Return ``mapping[key]`` if it is a non-empty string, else None."""
    value = mapping.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _label(raw: dict[str, Any]) -> str:
    """Human-readable label for an object-form schema in error messages."""
    name = raw.get("name")
    return f"'{name}'" if isinstance(name, str) and name else "<anonymous>"

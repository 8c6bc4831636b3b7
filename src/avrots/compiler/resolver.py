# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive resolution of schema types into TypeScript type expressions.

Resolution returns a type expression for the schema it is given and, as a side
effect, appends a :class:`Declaration` to the caller-owned ``decls`` list for
every record and enum it meets. Records and enums without an explicit name are
named after the position they occupy, using :func:`derive_name`:

* a record takes the naming context itself;
* an enum takes ``{context}Enum``;
* array items and map values extend the context with ``Item`` / ``Value``;
* a record field extends the record name with ``_{field}``.

Named references are passed through verbatim. Whether they resolve is not
checked here (see :mod:`avrots.validation.checks`).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from avrots.compiler.primitives import ANY_TYPE, ts_primitive
from avrots.model.schema import (
    ArraySchema,
    EnumSchema,
    Field,
    MapSchema,
    NamedReference,
    PrimitiveSchema,
    PrimitiveType,
    RecordSchema,
    SchemaType,
    UnionSchema,
)

# ###############
# Public Interface
# ###############

ITEM_SUFFIX = "Item"
VALUE_SUFFIX = "Value"
ENUM_SUFFIX = "Enum"
FIELD_SEPARATOR = "_"


class DeclarationKind(Enum):
    """Shape of an emitted top-level declaration."""

    INTERFACE = "interface"
    ENUM = "enum"
    ALIAS = "alias"


@dataclass(frozen=True)
class Declaration:
    """One top-level exported TypeScript declaration.

    Attributes:
        name: The exported type name.
        kind: Whether the text is an interface, an enum (const object plus
            literal union type) or a type alias.
        text: The rendered TypeScript source, without a trailing newline.
    """

    name: str
    kind: DeclarationKind
    text: str


def derive_name(parent: str, token: str, separator: str = "") -> str:
    """Build the implied name of a nested position from its parent's name."""
    return f"{parent}{separator}{token}"


def resolve_type(schema: SchemaType, context: str, decls: list[Declaration]) -> str:
    """Convert a schema type into a TypeScript type expression.

    Args:
        schema: The schema type to resolve.
        context: Naming context used when a record or enum has no name.
        decls: Declaration list of the document being generated. Records and
            enums append to it in the order they are resolved.

    Returns:
        The TypeScript type expression. Unsupported shapes yield ``any``.
    """
    if isinstance(schema, PrimitiveSchema):
        return ts_primitive(schema.primitive)
    if isinstance(schema, NamedReference):
        return schema.name
    if isinstance(schema, UnionSchema):
        members = [resolve_type(member, context, decls) for member in schema.members]
        return " | ".join(dict.fromkeys(members))
    if isinstance(schema, EnumSchema):
        return _resolve_enum(schema, context, decls)
    if isinstance(schema, ArraySchema):
        item = resolve_type(schema.items, derive_name(context, ITEM_SUFFIX), decls)
        return f"{item}[]"
    if isinstance(schema, MapSchema):
        value = resolve_type(schema.values, derive_name(context, VALUE_SUFFIX), decls)
        return f"Record<string, {value}>"
    if isinstance(schema, RecordSchema):
        return _resolve_record(schema, context, decls)
    return ANY_TYPE


def translate_field(field: Field, decls: list[Declaration], parent_name: str) -> str:
    """Render one record field as an interface member line.

    A field whose type is a union containing ``null`` is emitted as optional
    (``name?:``) with ``null`` removed from its type. When a single member
    remains, that member is used directly instead of a one-element union.

    Args:
        field: The record field.
        decls: Declaration list of the document being generated.
        parent_name: Name of the enclosing record.

    Returns:
        The member line, indented by two spaces, with the field's doc appended
        as a line comment when present.
    """
    schema = field.type
    optional = False
    if isinstance(schema, UnionSchema) and any(_is_null(member) for member in schema.members):
        optional = True
        remaining = [member for member in schema.members if not _is_null(member)]
        if len(remaining) == 1:
            schema = remaining[0]
        elif remaining:
            schema = UnionSchema(members=remaining)
        else:
            schema = PrimitiveSchema(primitive=PrimitiveType.NULL)

    type_expr = resolve_type(schema, derive_name(parent_name, field.name, FIELD_SEPARATOR), decls)
    marker = "?" if optional else ""
    doc = f" // {field.doc}" if field.doc else ""
    return f"  {field.name}{marker}: {type_expr};{doc}"


# ################
# Implementation
# ################


def _is_null(schema: SchemaType) -> bool:
    return isinstance(schema, PrimitiveSchema) and schema.is_null


def _resolve_enum(schema: EnumSchema, context: str, decls: list[Declaration]) -> str:
    name = schema.name or derive_name(context, ENUM_SUFFIX)
    entries = ",\n".join(f"  {symbol}: {json.dumps(symbol, ensure_ascii=False)}" for symbol in schema.symbols)
    const_block = f"export const {name} = {{\n{entries}\n}} as const;"
    type_block = f"export type {name} = typeof {name}[keyof typeof {name}];"
    decls.append(Declaration(name=name, kind=DeclarationKind.ENUM, text=f"{const_block}\n\n{type_block}"))
    return name


def _resolve_record(schema: RecordSchema, context: str, decls: list[Declaration]) -> str:
    name = schema.name or context
    # Nested records are appended while the fields resolve, so they precede
    # the enclosing interface in the output.
    members = "\n".join(translate_field(field, decls, name) for field in schema.fields)
    text = f"export interface {name} {{\n{members}\n}}"
    decls.append(Declaration(name=name, kind=DeclarationKind.INTERFACE, text=text))
    return name

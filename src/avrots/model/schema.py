# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema type representations for Avro schema documents."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

SCHEMA_SUFFIX = ".avsc"


class PrimitiveType(Enum):
    """Atomic Avro types."""

    STRING = "string"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    NULL = "null"


class PrimitiveSchema(BaseModel):
    """A primitive type, written either as ``"long"`` or ``{"type": "long"}``."""

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType

    @property
    def is_null(self) -> bool:
        return self.primitive is PrimitiveType.NULL


class NamedReference(BaseModel):
    """Reference by name to a record or enum declared elsewhere."""

    kind: Literal["named"] = "named"
    name: str


class UnionSchema(BaseModel):
    """An ordered union of member types."""

    kind: Literal["union"] = "union"
    members: list[SchemaType] = _Field(min_length=1)


class EnumSchema(BaseModel):
    """An enumeration of symbol strings."""

    kind: Literal["enum"] = "enum"
    name: str | None = None
    symbols: list[str] = _Field(default_factory=list)
    doc: str | None = None

    @field_validator("symbols")
    @classmethod
    def _symbols_unique(cls, symbols: list[str]) -> list[str]:
        seen: set[str] = set()
        for symbol in symbols:
            if symbol in seen:
                raise ValueError(f"duplicate enum symbol '{symbol}'")
            seen.add(symbol)
        return symbols


class ArraySchema(BaseModel):
    """An array of ``items``."""

    kind: Literal["array"] = "array"
    items: SchemaType


class MapSchema(BaseModel):
    """A string-keyed map of ``values``."""

    kind: Literal["map"] = "map"
    values: SchemaType


class RecordSchema(BaseModel):
    """A record with an ordered list of fields."""

    kind: Literal["record"] = "record"
    name: str | None = None
    fields: list[Field] = _Field(default_factory=list)
    doc: str | None = None


class UnknownSchema(BaseModel):
    """Any JSON shape outside the supported subset.

    The raw value is kept so diagnostics can point at it.
    """

    kind: Literal["unknown"] = "unknown"
    raw: Any = None


# A schema type: one of the primitive, container, composite or fallback types.
SchemaType = Annotated[
    PrimitiveSchema
    | NamedReference
    | UnionSchema
    | EnumSchema
    | ArraySchema
    | MapSchema
    | RecordSchema
    | UnknownSchema,
    _Field(discriminator="kind"),
]


class Field(BaseModel):
    """A named, typed member of a record."""

    name: str
    type: SchemaType
    doc: str | None = None


class SchemaDocument(BaseModel):
    """One parsed schema file.

    Attributes:
        source_id: The file name the document was read from (e.g. ``ping.avsc``).
        root: The top-level schema type.
        declared_name: The root object's ``name`` attribute, if it carries one.
    """

    source_id: str
    root: SchemaType
    declared_name: str | None = None

    @property
    def name(self) -> str:
        """The top-level export name: the declared name, else the file stem."""
        if self.declared_name:
            return self.declared_name
        return Path(self.source_id).name.removesuffix(SCHEMA_SUFFIX)


# Resolve forward references for models that use SchemaType.
UnionSchema.model_rebuild()
ArraySchema.model_rebuild()
MapSchema.model_rebuild()
RecordSchema.model_rebuild()
Field.model_rebuild()
SchemaDocument.model_rebuild()

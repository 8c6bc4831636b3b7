# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for avrots (records, enums, unions, containers, primitives)."""

from avrots.model.schema import (
    SCHEMA_SUFFIX,
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

__all__ = [
    "SCHEMA_SUFFIX",
    # Primitives
    "PrimitiveType",
    "PrimitiveSchema",
    # References and composites
    "NamedReference",
    "UnionSchema",
    "EnumSchema",
    "ArraySchema",
    "MapSchema",
    "RecordSchema",
    "UnknownSchema",
    "SchemaType",
    "Field",
    # Documents
    "SchemaDocument",
]

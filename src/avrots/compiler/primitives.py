# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping from Avro primitive types to TypeScript type names."""

from avrots.model.schema import PrimitiveType

# ###############
# Public Interface
# ###############

# TypeScript escape type for schema shapes outside the supported subset.
ANY_TYPE = "any"


def ts_primitive(primitive: PrimitiveType) -> str:
    """Return the TypeScript type name for an Avro primitive.

    All numeric Avro types collapse to ``number``; integer width and
    floating-point precision are not preserved.
    """
    return _PRIMITIVE_TYPES[primitive]


# ################
# Implementation
# ################

_PRIMITIVE_TYPES: dict[PrimitiveType, str] = {
    PrimitiveType.STRING: "string",
    PrimitiveType.BOOLEAN: "boolean",
    PrimitiveType.BYTES: "Uint8Array",
    PrimitiveType.INT: "number",
    PrimitiveType.LONG: "number",
    PrimitiveType.FLOAT: "number",
    PrimitiveType.DOUBLE: "number",
    PrimitiveType.NULL: "null",
}

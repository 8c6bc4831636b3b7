# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for Avro schemas: ingestion, resolution, generation and assembly."""

from avrots.compiler.assembler import assemble_all
from avrots.compiler.generator import build_declarations, generate
from avrots.compiler.ingest import SchemaError, load_document, parse_schema
from avrots.compiler.primitives import ANY_TYPE, ts_primitive
from avrots.compiler.resolver import Declaration, DeclarationKind, derive_name, resolve_type, translate_field

__all__ = [
    "parse_schema",
    "load_document",
    "SchemaError",
    "ts_primitive",
    "ANY_TYPE",
    "Declaration",
    "DeclarationKind",
    "derive_name",
    "resolve_type",
    "translate_field",
    "build_declarations",
    "generate",
    "assemble_all",
]

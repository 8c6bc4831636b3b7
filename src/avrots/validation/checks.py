# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks over a batch of schema documents.

Generation is permissive: dangling named references are passed through,
colliding declaration names are all emitted, and unsupported shapes become
``any``. These checks surface such cases without changing the output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from avrots.compiler.generator import build_declarations
from avrots.model.schema import (
    ArraySchema,
    MapSchema,
    NamedReference,
    RecordSchema,
    SchemaDocument,
    SchemaType,
    UnionSchema,
    UnknownSchema,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A finding that does not prevent generation.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A finding that should stop generation.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the consistency checks.

    Attributes:
        warnings: Findings reported but tolerated.
        errors: Findings that make the batch invalid.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def validate(documents: Sequence[SchemaDocument], *, strict: bool = False) -> ValidationResult:
    """Run all consistency checks on a batch of documents.

    Checks performed:

    1. **Unresolved references**: a named reference that no document in the
       batch declares as a record, enum or top-level alias.

    2. **Duplicate declarations**: a declaration name emitted more than once,
       within one document or across documents. All copies still appear in
       the output.

    3. **Unsupported shapes**: schema values outside the supported subset,
       which are emitted as ``any``.

    Args:
        documents: The documents that will be assembled together.
        strict: Report every finding as an error instead of a warning.

    Returns:
        A :class:`ValidationResult`. An empty result means the batch is clean.
    """
    declared: dict[str, list[str]] = {}
    for document in documents:
        for decl in build_declarations(document):
            declared.setdefault(decl.name, []).append(document.source_id)

    messages: list[str] = []
    messages.extend(_check_unresolved_references(documents, declared))
    messages.extend(_check_duplicate_declarations(declared))
    messages.extend(_check_unknown_shapes(documents))

    if strict:
        return ValidationResult(errors=[ValidationError(message=m) for m in messages])
    return ValidationResult(warnings=[ValidationWarning(message=m) for m in messages])


# ################
# Implementation
# ################


def _walk(schema: SchemaType) -> list[SchemaType]:
    """Return *schema* and every schema nested inside it, depth first."""
    nodes: list[SchemaType] = [schema]
    if isinstance(schema, UnionSchema):
        for member in schema.members:
            nodes.extend(_walk(member))
    elif isinstance(schema, ArraySchema):
        nodes.extend(_walk(schema.items))
    elif isinstance(schema, MapSchema):
        nodes.extend(_walk(schema.values))
    elif isinstance(schema, RecordSchema):
        for f in schema.fields:
            nodes.extend(_walk(f.type))
    return nodes


def _check_unresolved_references(
    documents: Sequence[SchemaDocument],
    declared: dict[str, list[str]],
) -> list[str]:
    messages: list[str] = []
    for document in documents:
        reported: set[str] = set()
        for node in _walk(document.root):
            if isinstance(node, NamedReference) and node.name not in declared and node.name not in reported:
                reported.add(node.name)
                messages.append(f"{document.source_id}: reference to undeclared type '{node.name}'.")
    return messages


def _check_duplicate_declarations(declared: dict[str, list[str]]) -> list[str]:
    messages: list[str] = []
    for name, sources in declared.items():
        if len(sources) > 1:
            where = ", ".join(dict.fromkeys(sources))
            messages.append(f"Type '{name}' is declared {len(sources)} times (in {where}).")
    return messages


def _check_unknown_shapes(documents: Sequence[SchemaDocument]) -> list[str]:
    messages: list[str] = []
    for document in documents:
        for node in _walk(document.root):
            if isinstance(node, UnknownSchema):
                messages.append(f"{document.source_id}: unsupported schema {_describe(node)} is emitted as 'any'.")
    return messages


def _describe(node: UnknownSchema) -> str:
    """Short label for an unsupported schema: its type and name, never the full value."""
    raw = node.raw
    if isinstance(raw, dict):
        kind = raw.get("type")
        label = f"type '{kind}'" if isinstance(kind, str) else "object"
        name = raw.get("name")
        if isinstance(name, str) and name:
            label += f" '{name}'"
        return label
    if isinstance(raw, list):
        return "empty union"
    return f"value {raw!r}"

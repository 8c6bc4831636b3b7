# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-document generation of TypeScript declarations."""

from __future__ import annotations

from avrots.compiler.resolver import Declaration, DeclarationKind, resolve_type
from avrots.model.schema import SchemaDocument

# ###############
# Public Interface
# ###############


def build_declarations(document: SchemaDocument) -> list[Declaration]:
    """Resolve a document's root type and collect its declarations.

    The root is resolved once, with the document name as naming context. If
    that produced no declaration named after the document (the root is a
    primitive, array, map, union or reference), a type alias binding the
    document name to the resolved expression is appended.

    Args:
        document: The schema document.

    Returns:
        Declarations in emission order. Duplicate names are kept as emitted.
    """
    decls: list[Declaration] = []
    name = document.name
    type_expr = resolve_type(document.root, name, decls)
    if not any(decl.name == name for decl in decls):
        decls.append(Declaration(name=name, kind=DeclarationKind.ALIAS, text=f"export type {name} = {type_expr};"))
    return decls


def generate(document: SchemaDocument) -> str:
    """Render one document as a block of TypeScript source.

    The block starts with a provenance comment naming the source file,
    followed by the declarations separated by blank lines.
    """
    decls = build_declarations(document)
    header = f"// Generated from {document.source_id}. Do not edit manually.\n"
    return header + "\n\n".join(decl.text for decl in decls) + "\n"

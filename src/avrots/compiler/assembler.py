# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of all generated documents into a single output file."""

from __future__ import annotations

from collections.abc import Iterable

from avrots.compiler.generator import generate
from avrots.model.schema import SchemaDocument

# ###############
# Public Interface
# ###############


def section_title(document: SchemaDocument) -> str:
    """Return the comment line that opens a document's section."""
    return f"// ===== {document.name} (from {document.source_id}) ====="


def banner(source_label: str, output_name: str) -> str:
    """Return the comment block that opens the output file."""
    return f"// Generated from Avro schemas in {source_label}\n// Single-file output: {output_name}\n"


def assemble_all(documents: Iterable[SchemaDocument], *, source_label: str, output_name: str) -> str:
    """Generate every document and join the results into one text blob.

    Documents are emitted in the order given; they are neither sorted nor
    deduplicated here.

    Args:
        documents: The schema documents, as supplied by the schema source.
        source_label: Schema directory named in the banner.
        output_name: Output file name named in the banner.

    Returns:
        The banner, a blank line, then one titled section per document.
    """
    sections = [f"{section_title(document)}\n{generate(document)}" for document in documents]
    return f"{banner(source_label, output_name)}\n" + "\n".join(sections)

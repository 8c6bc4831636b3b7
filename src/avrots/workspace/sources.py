# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading schema files from disk and writing the generated output."""

from __future__ import annotations

import json
from pathlib import Path

from avrots.compiler.ingest import SchemaError, load_document
from avrots.model.schema import SCHEMA_SUFFIX, SchemaDocument

# ###############
# Public Interface
# ###############


class SchemaSourceError(Exception):
    """Raised when the schema directory or one of its files cannot be loaded."""


def read_schemas(directory: Path) -> list[SchemaDocument]:
    """Load every ``.avsc`` file directly inside *directory*.

    Files are read in sorted file-name order. Subdirectories are not
    searched.

    Args:
        directory: The schema directory.

    Returns:
        One :class:`SchemaDocument` per file, identified by its file name.

    Raises:
        SchemaSourceError: If the directory cannot be listed, or any file
            cannot be read, is not valid JSON, or is not a usable schema.
    """
    try:
        paths = sorted(p for p in directory.iterdir() if p.suffix == SCHEMA_SUFFIX and p.is_file())
    except FileNotFoundError:
        raise SchemaSourceError(f"Schema directory not found: {directory}") from None
    except OSError as exc:
        raise SchemaSourceError(f"Cannot read schema directory: {exc}") from exc

    return [_read_schema(path) for path in paths]


def write_output(text: str, path: Path) -> None:
    """Write the generated text to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


# ################
# Implementation
# ################


def _read_schema(path: Path) -> SchemaDocument:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaSourceError(f"Cannot read schema file: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaSourceError(f"{path.name}: not valid UTF-8: {exc}") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaSourceError(f"{path.name}: invalid JSON: {exc}") from exc

    try:
        return load_document(path.name, raw)
    except SchemaError as exc:
        raise SchemaSourceError(f"{path.name}: {exc}") from exc

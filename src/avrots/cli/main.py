# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the avrots command-line interface."""

import argparse
import os
import sys
from pathlib import Path

from avrots.compiler.assembler import assemble_all
from avrots.validation.checks import ValidationResult, validate
from avrots.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    apply_environment,
    apply_overrides,
    load_generator_config,
)
from avrots.workspace.sources import SchemaSourceError, read_schemas, write_output

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the avrots CLI."""
    parser = argparse.ArgumentParser(
        prog="avrots",
        description="avrots: generate TypeScript types from Avro schemas",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the TypeScript declarations file",
        description="Translate every .avsc file in the schema directory into one TypeScript file.",
    )
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "--out-dir",
        help="Output directory (default: $OUT_DIR or generated/ts)",
    )
    generate_parser.add_argument(
        "--out-file",
        help="Output file name inside the output directory (default: $OUT_FILE or events.ts)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the schemas without writing output",
        description="Report unresolved references, duplicate declarations and unsupported schema shapes.",
    )
    _add_common_arguments(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        help=f"Path to a YAML config file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    parser.add_argument(
        "--schema-dir",
        help="Directory containing .avsc files (default: $SCHEMA_DIR or schemas)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat every finding as an error",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Resolve the configuration: defaults, YAML file, environment, then flags."""
    if args.config is not None:
        config = load_generator_config(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        config = load_generator_config(Path(CONFIG_FILE_NAME))
    else:
        config = GeneratorConfig()

    config = apply_environment(config, os.environ)
    return apply_overrides(
        config,
        {
            "schema_directory": args.schema_dir,
            "output_directory": getattr(args, "out_dir", None),
            "output_file": getattr(args, "out_file", None),
        },
    )


def _report(result: ValidationResult) -> None:
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        config = _load_config(args)
    except GeneratorConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    cwd = Path.cwd()
    schema_dir = config.schema_path(cwd)
    out_path = config.output_path(cwd)

    try:
        documents = read_schemas(schema_dir)
    except SchemaSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = validate(documents, strict=args.strict)
    _report(result)
    if result.has_errors:
        return 1

    text = assemble_all(documents, source_label=os.path.relpath(schema_dir), output_name=out_path.name)
    try:
        write_output(text, out_path)
    except OSError as exc:
        print(f"Error: cannot write '{out_path}': {exc}", file=sys.stderr)
        return 1

    print(f"[OK] Wrote {os.path.relpath(out_path)}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _load_config(args)
    except GeneratorConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    schema_dir = config.schema_path(Path.cwd())
    try:
        documents = read_schemas(schema_dir)
    except SchemaSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not documents:
        print("No .avsc files found in the schema directory.")
        return 0

    print(f"Checking {len(documents)} schema file(s)...")
    result = validate(documents, strict=args.strict)
    _report(result)
    if result.has_errors:
        return 1
    if not result.warnings:
        print("No issues found.")
    return 0

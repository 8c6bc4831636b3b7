# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the avrots generator configuration.

Settings are layered, lowest precedence first: built-in defaults, an optional
``.avrots.yaml`` file, the ``SCHEMA_DIR`` / ``OUT_DIR`` / ``OUT_FILE``
environment variables, and finally command-line flags.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".avrots.yaml"

DEFAULT_SCHEMA_DIRECTORY = "schemas"
DEFAULT_OUTPUT_DIRECTORY = "generated/ts"
DEFAULT_OUTPUT_FILE = "events.ts"

ENV_SCHEMA_DIR = "SCHEMA_DIR"
ENV_OUT_DIR = "OUT_DIR"
ENV_OUT_FILE = "OUT_FILE"


class GeneratorConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved generator settings.

    Attributes:
        schema_directory: Directory containing the ``.avsc`` files.
        output_directory: Directory the generated file is written to.
        output_file: Name of the generated file inside *output_directory*.
    """

    schema_directory: str = DEFAULT_SCHEMA_DIRECTORY
    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    output_file: str = DEFAULT_OUTPUT_FILE

    def schema_path(self, base: Path) -> Path:
        """Return the schema directory, relative paths taken from *base*."""
        return base / self.schema_directory

    def output_path(self, base: Path) -> Path:
        """Return the output file path, relative paths taken from *base*.

        An absolute *output_file* is used as-is.
        """
        return base / self.output_directory / self.output_file


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the ``.avrots.yaml`` file.

    Returns:
        A GeneratorConfig with defaults for every key the file omits.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


def apply_overrides(config: GeneratorConfig, overrides: Mapping[str, str | None]) -> GeneratorConfig:
    """Return *config* with every non-empty override applied.

    Args:
        config: The configuration to start from.
        overrides: Mapping from GeneratorConfig attribute names to new values.
            ``None`` and empty strings leave the attribute unchanged.
    """
    changes = {key: value for key, value in overrides.items() if value}
    return dataclasses.replace(config, **changes)


def apply_environment(config: GeneratorConfig, environ: Mapping[str, str]) -> GeneratorConfig:
    """Return *config* with the ``SCHEMA_DIR``, ``OUT_DIR`` and ``OUT_FILE`` variables applied."""
    return apply_overrides(
        config,
        {
            "schema_directory": environ.get(ENV_SCHEMA_DIR),
            "output_directory": environ.get(ENV_OUT_DIR),
            "output_file": environ.get(ENV_OUT_FILE),
        },
    )


# ################
# Implementation
# ################

_KEYS: dict[str, str] = {
    "schema-directory": "schema_directory",
    "output-directory": "output_directory",
    "output-file": "output_file",
}


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse config YAML text into a GeneratorConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        GeneratorConfigError: If the YAML is invalid, not a mapping, or holds
            unknown or non-string keys.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown config key(s): {', '.join(unknown)}")

    values: dict[str, str] = {}
    for key, attribute in _KEYS.items():
        if key in data:
            values[attribute] = _require_string(data, key, source_label)
    return GeneratorConfig(**values)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising GeneratorConfigError if it is not one."""
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value

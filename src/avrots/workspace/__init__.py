# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration and file I/O for avrots."""

from avrots.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    apply_environment,
    apply_overrides,
    load_generator_config,
)
from avrots.workspace.sources import SchemaSourceError, read_schemas, write_output

__all__ = [
    "CONFIG_FILE_NAME",
    "GeneratorConfig",
    "GeneratorConfigError",
    "SchemaSourceError",
    "apply_environment",
    "apply_overrides",
    "load_generator_config",
    "read_schemas",
    "write_output",
]

# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for schema batches (dangling refs, name collisions, etc.)."""

from avrots.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]

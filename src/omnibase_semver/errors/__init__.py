# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Errors Module.

Exports:
    ModelSemVerErrorContext: Configuration model for bundled error context
    SemVerError: Base error class
    VersionValidationError: Negative major, minor or patch component
    IdentifierError: Base class for identifier errors
    IdentifierNullError: Identifier label is None
    IdentifierPatternError: Identifier label fails the character grammar
    IdentifierLeadingZeroError: Numeric prerelease label with a leading zero

Example::

    from omnibase_semver import ModelSemVer
    from omnibase_semver.errors import VersionValidationError

    try:
        ModelSemVer(1, -2, 3)
    except VersionValidationError as e:
        e.error_code  # EnumSemVerErrorCode.NEGATIVE_COMPONENT
        e.context["target_name"]  # "minor"
"""

from omnibase_semver.errors.model_semver_error_context import (
    ModelSemVerErrorContext,
)
from omnibase_semver.errors.semver_errors import (
    IdentifierError,
    IdentifierLeadingZeroError,
    IdentifierNullError,
    IdentifierPatternError,
    SemVerError,
    VersionValidationError,
)

__all__: list[str] = [
    "IdentifierError",
    "IdentifierLeadingZeroError",
    "IdentifierNullError",
    "IdentifierPatternError",
    "ModelSemVerErrorContext",
    "SemVerError",
    "VersionValidationError",
]

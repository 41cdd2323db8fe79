# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Utilities.

Exports:
    must_pass: Generic precondition guard
    must_be_non_negative: Guard for major, minor and patch components
    IDENTIFIER_PATTERN: Allowed identifier character grammar
    NUMERIC_IDENTIFIER_PATTERN: All-digit identifier grammar
    validate_identifier: Null and grammar check for any identifier
    validate_prerelease_identifier: Identifier check plus leading-zero rule
    validate_build_identifier: Identifier check for build metadata
"""

from omnibase_semver.utils.util_semver import (
    IDENTIFIER_PATTERN,
    NUMERIC_IDENTIFIER_PATTERN,
    validate_build_identifier,
    validate_identifier,
    validate_prerelease_identifier,
)
from omnibase_semver.utils.util_validation import must_be_non_negative, must_pass

__all__: list[str] = [
    "IDENTIFIER_PATTERN",
    "NUMERIC_IDENTIFIER_PATTERN",
    "must_be_non_negative",
    "must_pass",
    "validate_build_identifier",
    "validate_identifier",
    "validate_prerelease_identifier",
]

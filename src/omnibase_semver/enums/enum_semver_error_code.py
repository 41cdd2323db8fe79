# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Error Code Enumeration.

Defines the canonical error codes attached to every error raised by
omnibase_semver. Used for error classification and structured logging.
"""

from enum import Enum


class EnumSemVerErrorCode(str, Enum):
    """Error codes for semantic version validation failures.

    Attributes:
        NEGATIVE_COMPONENT: A major, minor or patch component is negative
        NULL_IDENTIFIER: An identifier label is None
        PATTERN_MISMATCH: An identifier label contains disallowed characters
        LEADING_ZERO: A numeric prerelease label has a leading zero
    """

    NEGATIVE_COMPONENT = "SEMVER_001_NEGATIVE_COMPONENT"
    NULL_IDENTIFIER = "SEMVER_002_NULL_IDENTIFIER"
    PATTERN_MISMATCH = "SEMVER_003_PATTERN_MISMATCH"
    LEADING_ZERO = "SEMVER_004_LEADING_ZERO"


__all__ = ["EnumSemVerErrorCode"]

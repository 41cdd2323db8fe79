# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Enumerations Module.

Exports:
    EnumSemVerErrorCode: Error classification codes for validation failures
"""

from omnibase_semver.enums.enum_semver_error_code import EnumSemVerErrorCode

__all__: list[str] = [
    "EnumSemVerErrorCode",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic versioning identifier validation utilities.

Provides the identifier grammar and validators used by the prerelease and
build metadata models.

Grammar (semver.org, items 9 and 10):
    - Identifiers comprise only ASCII alphanumerics and hyphens [0-9A-Za-z-]
    - Numeric prerelease identifiers must not include leading zeroes

Patterns are matched with ``fullmatch`` so a trailing newline never slips
through the ``$`` anchor.
"""

from __future__ import annotations

import re

from omnibase_semver.errors import (
    IdentifierLeadingZeroError,
    IdentifierNullError,
    IdentifierPatternError,
    ModelSemVerErrorContext,
)

IDENTIFIER_PATTERN = re.compile(r"^[0-9A-Za-z-]*$")
NUMERIC_IDENTIFIER_PATTERN = re.compile(r"^[0-9]*$")


def validate_identifier(label: str | None, field_name: str = "identifier") -> str:
    """Validate a prerelease or build metadata identifier label.

    The empty string is accepted; it matches the grammar.

    Args:
        label: The identifier label to validate.
        field_name: Name of the identifier kind for error context.

    Returns:
        The validated label.

    Raises:
        IdentifierNullError: If label is None.
        TypeError: If label is not a string.
        IdentifierPatternError: If label contains characters outside [0-9A-Za-z-].

    Example:
        >>> validate_identifier("Al-pha01")
        'Al-pha01'
        >>> validate_identifier("Al-pha01#")  # Raises IdentifierPatternError
    """
    context = ModelSemVerErrorContext(operation="validate", target_name=field_name)
    if label is None:
        raise IdentifierNullError("Identifier must not be None", context=context)
    if not isinstance(label, str):
        raise TypeError(f"Identifier must be a string, got {type(label).__name__}")
    if IDENTIFIER_PATTERN.fullmatch(label) is None:
        raise IdentifierPatternError(
            f"Identifier '{label}' does not match with pattern "
            f"'{IDENTIFIER_PATTERN.pattern}'",
            context=context,
            label=label,
            pattern=IDENTIFIER_PATTERN.pattern,
        )
    return label


def validate_prerelease_identifier(label: str | None) -> str:
    """Validate a prerelease identifier label.

    Applies ``validate_identifier`` and then rejects numeric labels with a
    leading zero. A lone ``"0"`` is a valid numeric identifier and is accepted.

    Args:
        label: The prerelease label to validate.

    Returns:
        The validated label.

    Raises:
        IdentifierNullError: If label is None.
        TypeError: If label is not a string.
        IdentifierPatternError: If label contains characters outside [0-9A-Za-z-].
        IdentifierLeadingZeroError: If label is numeric with a leading zero.

    Example:
        >>> validate_prerelease_identifier("1000234")
        '1000234'
        >>> validate_prerelease_identifier("0")
        '0'
        >>> validate_prerelease_identifier("0001234")  # Raises IdentifierLeadingZeroError
    """
    label = validate_identifier(label, field_name="prerelease")
    if (
        NUMERIC_IDENTIFIER_PATTERN.fullmatch(label) is not None
        and len(label) > 1
        and label.startswith("0")
    ):
        raise IdentifierLeadingZeroError(
            f"Leading zeros are not allowed for numerical identifier '{label}'",
            context=ModelSemVerErrorContext(
                operation="validate", target_name="prerelease"
            ),
            label=label,
        )
    return label


def validate_build_identifier(label: str | None) -> str:
    """Validate a build metadata identifier label.

    Build metadata has no numeric restriction; ``"001"`` is valid.
    """
    return validate_identifier(label, field_name="build")


__all__ = [
    "IDENTIFIER_PATTERN",
    "NUMERIC_IDENTIFIER_PATTERN",
    "validate_build_identifier",
    "validate_identifier",
    "validate_prerelease_identifier",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic precondition helpers.

Small guard functions shared by the semver models. Each helper either returns
the validated value unchanged or raises a structured SemVerError.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from omnibase_semver.errors import ModelSemVerErrorContext, VersionValidationError

T = TypeVar("T")


def must_pass(
    value: T,
    condition: Callable[[T], bool],
    error: Callable[[], Exception],
) -> T:
    """Return ``value`` if ``condition`` holds, otherwise raise ``error()``.

    The error factory is only called on failure, so message formatting costs
    nothing on the success path.

    Args:
        value: The value to check.
        condition: Predicate applied to ``value``.
        error: Factory producing the exception to raise.

    Returns:
        The unchanged value.

    Example:
        >>> must_pass(3, lambda v: v > 0, lambda: ValueError("not positive"))
        3
    """
    if not condition(value):
        raise error()
    return value


def must_be_non_negative(value: int, component: str | None = None) -> int:
    """Validate that a version component is zero or greater.

    Args:
        value: The version component value to validate.
        component: Name of the component (major, minor, patch) for error context.

    Returns:
        The validated value.

    Raises:
        VersionValidationError: If value is negative.

    Example:
        >>> must_be_non_negative(0)
        0
        >>> must_be_non_negative(-1)  # Raises VersionValidationError
    """
    return must_pass(
        value,
        lambda v: v >= 0,
        lambda: VersionValidationError(
            f"Number {value} must be positive",
            context=ModelSemVerErrorContext(target_name=component),
            value=value,
        ),
    )


__all__ = [
    "must_be_non_negative",
    "must_pass",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Error Context Model.

Bundles the structured fields shared by all semver errors so that error
constructors keep a short, strongly-typed signature.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelSemVerErrorContext(BaseModel):
    """Structured context for semantic version errors.

    Attributes:
        operation: Operation being performed (construct, with_prerelease, etc.)
        target_name: Name of the value being validated (major, prerelease, etc.)

    Example:
        >>> context = ModelSemVerErrorContext(
        ...     operation="construct",
        ...     target_name="minor",
        ... )
        >>> raise VersionValidationError("Number -1 must be positive", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (construct, with_prerelease, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Name of the validated value (major, minor, patch, prerelease, build)",
    )


__all__ = ["ModelSemVerErrorContext"]

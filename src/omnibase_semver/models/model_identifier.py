# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prerelease and build metadata identifier models.

An identifier is a single validated label of a version suffix: ``alpha`` and
``1`` in ``1.2.3-alpha.1``, or ``001`` in ``1.2.3+001``. Identifiers are
immutable and can only exist in a valid state; validation runs before the
label is stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_semver.utils.util_semver import (
    validate_build_identifier,
    validate_prerelease_identifier,
)


class ModelIdentifier(BaseModel, ABC):
    """Base model for a validated version identifier label.

    Subclasses supply the grammar through ``validate_label``.

    Attributes:
        label: The identifier text, matching ``^[0-9A-Za-z-]*$``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    label: str = Field(..., description="Identifier text")

    def __init__(self, label: str | None = None, **data: Any) -> None:
        super().__init__(label=label, **data)

    @field_validator("label", mode="before")
    @classmethod
    def check_label(cls, value: Any) -> str:
        return cls.validate_label(value)

    @classmethod
    @abstractmethod
    def validate_label(cls, label: str | None) -> str:
        """Validate ``label`` for this identifier kind and return it."""

    def __str__(self) -> str:
        return self.label


class ModelPrereleaseIdentifier(ModelIdentifier):
    """Prerelease identifier (the ``alpha`` in ``1.0.0-alpha``).

    Numeric labels must not have leading zeros; ``"0"`` itself is valid.

    Example:
        >>> ModelPrereleaseIdentifier("rc1").label
        'rc1'
        >>> ModelPrereleaseIdentifier("01")  # Raises IdentifierLeadingZeroError
    """

    @classmethod
    def validate_label(cls, label: str | None) -> str:
        return validate_prerelease_identifier(label)


class ModelBuildMetadataIdentifier(ModelIdentifier):
    """Build metadata identifier (the ``001`` in ``1.0.0+001``)."""

    @classmethod
    def validate_label(cls, label: str | None) -> str:
        return validate_build_identifier(label)


def prerelease(label: str | None) -> ModelPrereleaseIdentifier:
    """Create a validated prerelease identifier.

    Example:
        >>> ModelSemVer(1, 2, 3).with_prerelease(prerelease("alpha")).to_string()
        '1.2.3-alpha'
    """
    return ModelPrereleaseIdentifier(label)


def build(label: str | None) -> ModelBuildMetadataIdentifier:
    """Create a validated build metadata identifier."""
    return ModelBuildMetadataIdentifier(label)


__all__ = [
    "ModelBuildMetadataIdentifier",
    "ModelIdentifier",
    "ModelPrereleaseIdentifier",
    "build",
    "prerelease",
]

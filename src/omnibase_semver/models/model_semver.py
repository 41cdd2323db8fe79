# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version model.

Provides a strongly-typed, immutable Pydantic model for building and
rendering Semantic Version 2.0.0 values (https://semver.org/).

Every operation that changes a version returns a new ModelSemVer; the
receiver is never modified. Chained calls read like a builder:

    >>> version = (
    ...     ModelSemVer(1, 2, 3)
    ...     .with_prerelease(prerelease("alpha"))
    ...     .with_prerelease(prerelease("1"))
    ...     .with_build(build("001"))
    ... )
    >>> str(version)
    '1.2.3-alpha.1+001'
    >>> str(version.increment_minor())
    '1.3.0'

Precedence ordering and parsing version strings are not provided.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from omnibase_semver.models.model_identifier import (
    ModelBuildMetadataIdentifier,
    ModelIdentifier,
    ModelPrereleaseIdentifier,
)
from omnibase_semver.utils.util_validation import must_be_non_negative

logger = logging.getLogger(__name__)


class ModelSemVer(BaseModel):
    """Semantic version model following the semver.org specification.

    Core components are validated in signature order (major, minor, patch);
    the first negative one is reported.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (backwards-compatible features)
        patch: Patch version number (backwards-compatible bug fixes)
        prerelease: Ordered prerelease identifiers (e.g., alpha, 1)
        build: Ordered build metadata identifiers (e.g., 20231215, abc123)

    Example:
        >>> version = ModelSemVer(1, 2, 3)
        >>> str(version)
        '1.2.3'
        >>> ModelSemVer().to_string()
        '0.0.0'
        >>> ModelSemVer(1, -2, 3)  # Raises VersionValidationError
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    major: int = Field(default=0, description="Major version number")
    minor: int = Field(default=0, description="Minor version number")
    patch: int = Field(default=0, description="Patch version number")
    prerelease: tuple[ModelPrereleaseIdentifier, ...] = Field(
        default=(), description="Prerelease identifiers in order"
    )
    build: tuple[ModelBuildMetadataIdentifier, ...] = Field(
        default=(), description="Build metadata identifiers in order"
    )

    def __init__(
        self, major: int = 0, minor: int = 0, patch: int = 0, **data: Any
    ) -> None:
        super().__init__(major=major, minor=minor, patch=patch, **data)

    @field_validator("major", "minor", "patch")
    @classmethod
    def check_component(cls, value: int, info: ValidationInfo) -> int:
        return must_be_non_negative(value, component=info.field_name)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> ModelSemVer:
        """Return version 0.0.0."""
        return cls(0, 0, 0)

    @classmethod
    def of(cls, major: int, minor: int, patch: int) -> ModelSemVer:
        """Create a version from its core components."""
        return cls(major, minor, patch)

    @classmethod
    def from_tuple(cls, version_tuple: tuple[int, int, int]) -> ModelSemVer:
        """Create ModelSemVer from a tuple of (major, minor, patch).

        Args:
            version_tuple: A tuple of exactly 3 non-negative integers.

        Returns:
            ModelSemVer instance

        Raises:
            TypeError: If version_tuple is not a tuple.
            ValueError: If tuple does not have exactly 3 elements.
            VersionValidationError: If any element is negative.

        Example:
            >>> ModelSemVer.from_tuple((1, 2, 3)).to_string()
            '1.2.3'
        """
        if not isinstance(version_tuple, tuple):
            raise TypeError(f"Expected tuple, got {type(version_tuple).__name__}")
        if len(version_tuple) != 3:
            raise ValueError(
                f"Version tuple must have exactly 3 elements (major, minor, patch), "
                f"got {len(version_tuple)}"
            )
        major, minor, patch = version_tuple
        return cls(major, minor, patch)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def validate_components(self) -> ModelSemVer:
        """Re-check that major, minor and patch are non-negative.

        Raises:
            VersionValidationError: If any component is negative.
        """
        must_be_non_negative(self.major, component="major")
        must_be_non_negative(self.minor, component="minor")
        must_be_non_negative(self.patch, component="patch")
        return self

    def is_initial_development(self) -> bool:
        """Major version zero is for initial development (semver item 4)."""
        return self.major == 0

    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    # -------------------------------------------------------------------------
    # Identifiers
    # -------------------------------------------------------------------------

    def with_identifier(self, identifier: ModelIdentifier) -> ModelSemVer:
        """Append a prerelease or build metadata identifier.

        Identifiers are neither deduplicated nor reordered.

        Raises:
            TypeError: If identifier is neither a prerelease nor a build identifier.
        """
        field_name = _identifier_field(identifier)
        current: tuple[ModelIdentifier, ...] = getattr(self, field_name)
        return self._evolve("with_identifier", **{field_name: (*current, identifier)})

    def with_new_identifier(self, identifier: ModelIdentifier) -> ModelSemVer:
        """Replace all identifiers of the same kind with ``identifier``."""
        field_name = _identifier_field(identifier)
        return self._evolve("with_new_identifier", **{field_name: (identifier,)})

    def with_prerelease(self, identifier: ModelPrereleaseIdentifier) -> ModelSemVer:
        return self.with_identifier(_require(identifier, ModelPrereleaseIdentifier))

    def with_build(self, identifier: ModelBuildMetadataIdentifier) -> ModelSemVer:
        return self.with_identifier(_require(identifier, ModelBuildMetadataIdentifier))

    def with_new_prerelease(
        self, identifier: ModelPrereleaseIdentifier
    ) -> ModelSemVer:
        return self.with_new_identifier(
            _require(identifier, ModelPrereleaseIdentifier)
        )

    def with_new_build(self, identifier: ModelBuildMetadataIdentifier) -> ModelSemVer:
        return self.with_new_identifier(
            _require(identifier, ModelBuildMetadataIdentifier)
        )

    def with_release_identifier(self, label: str | None) -> ModelSemVer:
        """Validate ``label`` as a prerelease identifier and append it.

        Raises:
            IdentifierNullError: If label is None.
            IdentifierPatternError: If label fails the identifier grammar.
            IdentifierLeadingZeroError: If label is numeric with a leading zero.
        """
        return self.with_prerelease(ModelPrereleaseIdentifier(label))

    # -------------------------------------------------------------------------
    # Increments
    # -------------------------------------------------------------------------
    # A new release sheds prerelease and build identifiers.

    def increment_major(self) -> ModelSemVer:
        """Return the next major version: X+1.0.0."""
        return self._evolve(
            "increment_major",
            major=self.major + 1,
            minor=0,
            patch=0,
            prerelease=(),
            build=(),
        )

    def increment_minor(self) -> ModelSemVer:
        """Return the next minor version: X.Y+1.0."""
        return self._evolve(
            "increment_minor",
            minor=self.minor + 1,
            patch=0,
            prerelease=(),
            build=(),
        )

    def increment_patch(self) -> ModelSemVer:
        """Return the next patch version: X.Y.Z+1."""
        return self._evolve(
            "increment_patch",
            patch=self.patch + 1,
            prerelease=(),
            build=(),
        )

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Render as ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``."""
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result = f"{result}-{'.'.join(str(i) for i in self.prerelease)}"
        if self.build:
            result = f"{result}+{'.'.join(str(i) for i in self.build)}"
        return result

    def __str__(self) -> str:
        return self.to_string()

    def _evolve(self, operation: str, **update: Any) -> ModelSemVer:
        # Updates are pre-validated; model_copy skips validation.
        result = self.model_copy(update=update)
        logger.debug(
            "Derived semantic version",
            extra={
                "operation": operation,
                "source_version": self.to_string(),
                "version": result.to_string(),
            },
        )
        return result


def _identifier_field(identifier: object) -> str:
    if isinstance(identifier, ModelPrereleaseIdentifier):
        return "prerelease"
    if isinstance(identifier, ModelBuildMetadataIdentifier):
        return "build"
    raise TypeError(
        f"Expected a prerelease or build identifier, got {type(identifier).__name__}"
    )


def _require(identifier: object, expected: type[ModelIdentifier]) -> Any:
    if not isinstance(identifier, expected):
        raise TypeError(
            f"Expected {expected.__name__}, got {type(identifier).__name__}"
        )
    return identifier


SEMVER_ZERO = ModelSemVer(0, 0, 0)

__all__ = ["ModelSemVer", "SEMVER_ZERO"]

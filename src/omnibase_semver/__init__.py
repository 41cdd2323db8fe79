# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Semantic Version Library - Build and render SemVer 2.0.0 values.

Key Components:
    - ModelSemVer: Immutable version value with increment and identifier operations
    - ModelPrereleaseIdentifier / ModelBuildMetadataIdentifier: Validated labels
    - prerelease() / build(): Identifier factory helpers
    - SemVerError hierarchy with EnumSemVerErrorCode classification

Example:
    >>> from omnibase_semver import ModelSemVer, build, prerelease
    >>> str(ModelSemVer(1, 2, 3).with_prerelease(prerelease("rc1")).with_build(build("7")))
    '1.2.3-rc1+7'
"""

from omnibase_semver.enums import EnumSemVerErrorCode
from omnibase_semver.errors import (
    IdentifierError,
    IdentifierLeadingZeroError,
    IdentifierNullError,
    IdentifierPatternError,
    ModelSemVerErrorContext,
    SemVerError,
    VersionValidationError,
)
from omnibase_semver.models import (
    SEMVER_ZERO,
    ModelBuildMetadataIdentifier,
    ModelIdentifier,
    ModelPrereleaseIdentifier,
    ModelSemVer,
    build,
    prerelease,
)

__all__: list[str] = [
    "EnumSemVerErrorCode",
    "IdentifierError",
    "IdentifierLeadingZeroError",
    "IdentifierNullError",
    "IdentifierPatternError",
    "ModelBuildMetadataIdentifier",
    "ModelIdentifier",
    "ModelPrereleaseIdentifier",
    "ModelSemVer",
    "ModelSemVerErrorContext",
    "SEMVER_ZERO",
    "SemVerError",
    "VersionValidationError",
    "build",
    "prerelease",
]

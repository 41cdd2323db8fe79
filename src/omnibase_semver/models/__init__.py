# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Models.

This module exports the version and identifier Pydantic models.
"""

from omnibase_semver.models.model_identifier import (
    ModelBuildMetadataIdentifier,
    ModelIdentifier,
    ModelPrereleaseIdentifier,
    build,
    prerelease,
)
from omnibase_semver.models.model_semver import SEMVER_ZERO, ModelSemVer

__all__: list[str] = [
    # Version model
    "ModelSemVer",
    "SEMVER_ZERO",
    # Identifier models
    "ModelBuildMetadataIdentifier",
    "ModelIdentifier",
    "ModelPrereleaseIdentifier",
    "build",
    "prerelease",
]

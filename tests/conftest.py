# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_semver tests."""

from __future__ import annotations

import pytest

from omnibase_semver import ModelSemVer, build, prerelease


@pytest.fixture
def version_123() -> ModelSemVer:
    """Plain release version 1.2.3."""
    return ModelSemVer(1, 2, 3)


@pytest.fixture
def tagged_version_123() -> ModelSemVer:
    """Version 1.2.3-alpha.1+build.001 carrying both identifier kinds."""
    return (
        ModelSemVer(1, 2, 3)
        .with_prerelease(prerelease("alpha"))
        .with_prerelease(prerelease("1"))
        .with_build(build("build"))
        .with_build(build("001"))
    )

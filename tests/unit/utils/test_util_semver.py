# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for identifier validation utilities."""

import pytest

from omnibase_semver.errors import (
    IdentifierLeadingZeroError,
    IdentifierNullError,
    IdentifierPatternError,
)
from omnibase_semver.utils import (
    IDENTIFIER_PATTERN,
    validate_build_identifier,
    validate_identifier,
    validate_prerelease_identifier,
)


class TestValidateIdentifier:
    """Test the shared identifier grammar."""

    def test_pattern_text(self) -> None:
        assert IDENTIFIER_PATTERN.pattern == "^[0-9A-Za-z-]*$"

    @pytest.mark.parametrize("label", ["", "a", "Z9", "--", "0001"])
    def test_valid(self, label: str) -> None:
        assert validate_identifier(label) == label

    @pytest.mark.parametrize("label", ["a b", "a_b", "a.b", "alpha\n", "#"])
    def test_invalid(self, label: str) -> None:
        with pytest.raises(IdentifierPatternError):
            validate_identifier(label)

    def test_none(self) -> None:
        with pytest.raises(IdentifierNullError) as exc_info:
            validate_identifier(None)
        assert exc_info.value.context == {
            "operation": "validate",
            "target_name": "identifier",
        }

    def test_non_string(self) -> None:
        with pytest.raises(TypeError, match="got bytes"):
            validate_identifier(b"alpha")  # type: ignore[arg-type]


class TestValidatePrereleaseIdentifier:
    """Test the prerelease leading-zero rule."""

    @pytest.mark.parametrize("label", ["0", "1000234", "", "0a", "x00"])
    def test_valid(self, label: str) -> None:
        assert validate_prerelease_identifier(label) == label

    @pytest.mark.parametrize("label", ["00", "0001234", "01"])
    def test_leading_zero(self, label: str) -> None:
        with pytest.raises(IdentifierLeadingZeroError):
            validate_prerelease_identifier(label)

    def test_pattern_checked_before_leading_zero(self) -> None:
        with pytest.raises(IdentifierPatternError):
            validate_prerelease_identifier("01#")


class TestValidateBuildIdentifier:
    """Test build metadata validation."""

    def test_leading_zero_allowed(self) -> None:
        assert validate_build_identifier("001") == "001"

    def test_target_name(self) -> None:
        with pytest.raises(IdentifierPatternError) as exc_info:
            validate_build_identifier("a+b")
        assert exc_info.value.context["target_name"] == "build"

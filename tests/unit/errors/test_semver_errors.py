# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for semver error classes."""

import pytest

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


class TestSemVerError:
    """Test SemVerError base class."""

    def test_basic_initialization(self) -> None:
        error = SemVerError(
            "Version is invalid",
            error_code=EnumSemVerErrorCode.NEGATIVE_COMPONENT,
        )

        assert str(error) == "Version is invalid"
        assert error.message == "Version is invalid"
        assert error.error_code == EnumSemVerErrorCode.NEGATIVE_COMPONENT
        assert error.context == {}

    def test_with_context(self) -> None:
        context = ModelSemVerErrorContext(operation="construct", target_name="major")

        error = SemVerError(
            "Version is invalid",
            error_code=EnumSemVerErrorCode.NEGATIVE_COMPONENT,
            context=context,
            value=-1,
        )

        assert error.context == {
            "operation": "construct",
            "target_name": "major",
            "value": -1,
        }

    def test_is_not_value_error(self) -> None:
        """Errors must pass through pydantic validators unwrapped."""
        assert not issubclass(SemVerError, ValueError)


class TestErrorCodes:
    """Test each subclass carries its fixed error code."""

    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (VersionValidationError, EnumSemVerErrorCode.NEGATIVE_COMPONENT),
            (IdentifierNullError, EnumSemVerErrorCode.NULL_IDENTIFIER),
            (IdentifierPatternError, EnumSemVerErrorCode.PATTERN_MISMATCH),
            (IdentifierLeadingZeroError, EnumSemVerErrorCode.LEADING_ZERO),
        ],
    )
    def test_error_code(
        self, error_cls: type[SemVerError], code: EnumSemVerErrorCode
    ) -> None:
        error = error_cls("failed")  # type: ignore[call-arg]
        assert error.error_code == code
        assert isinstance(error, SemVerError)

    @pytest.mark.parametrize(
        "error_cls",
        [IdentifierNullError, IdentifierPatternError, IdentifierLeadingZeroError],
    )
    def test_identifier_errors_share_base(self, error_cls: type[SemVerError]) -> None:
        assert issubclass(error_cls, IdentifierError)

    def test_error_code_values_are_strings(self) -> None:
        assert EnumSemVerErrorCode.LEADING_ZERO.value == "SEMVER_004_LEADING_ZERO"
        assert EnumSemVerErrorCode("SEMVER_002_NULL_IDENTIFIER") is (
            EnumSemVerErrorCode.NULL_IDENTIFIER
        )


class TestModelSemVerErrorContext:
    """Test the error context model."""

    def test_defaults(self) -> None:
        context = ModelSemVerErrorContext()
        assert context.operation is None
        assert context.target_name is None

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(Exception):  # ValidationError from Pydantic
            ModelSemVerErrorContext(label="x")  # type: ignore[call-arg]

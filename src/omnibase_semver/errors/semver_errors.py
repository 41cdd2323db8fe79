# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Error Classes.

Error Hierarchy:
    SemVerError (base error)
    ├── VersionValidationError
    └── IdentifierError
        ├── IdentifierNullError
        ├── IdentifierPatternError
        └── IdentifierLeadingZeroError

All errors:
    - Carry an EnumSemVerErrorCode for classification
    - Accept ModelSemVerErrorContext for bundled context parameters
    - Accept extra keyword context (value, label, pattern, ...)
    - Are raised synchronously and never retried internally

SemVerError must not extend ValueError: pydantic wraps ValueError raised
inside validators into its own ValidationError.
"""

from typing import Optional

from omnibase_semver.enums import EnumSemVerErrorCode
from omnibase_semver.errors.model_semver_error_context import (
    ModelSemVerErrorContext,
)


class SemVerError(Exception):
    """Base error class for semantic version errors.

    Structured Fields:
        error_code: Classification code for the failure
        context: Dict built from ModelSemVerErrorContext and extra kwargs

    Example:
        >>> raise SemVerError(
        ...     "Version is invalid",
        ...     error_code=EnumSemVerErrorCode.NEGATIVE_COMPONENT,
        ...     value=-1,
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumSemVerErrorCode,
        context: Optional[ModelSemVerErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize SemVerError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error classification code
            context: Bundled context (operation, target_name)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name

        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = structured_context


class VersionValidationError(SemVerError):
    """Raised when a major, minor or patch component is negative.

    Example:
        >>> raise VersionValidationError(
        ...     "Number -1 must be positive",
        ...     context=ModelSemVerErrorContext(target_name="major"),
        ...     value=-1,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelSemVerErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSemVerErrorCode.NEGATIVE_COMPONENT,
            context=context,
            **extra_context,
        )


class IdentifierError(SemVerError):
    """Base class for prerelease and build metadata identifier errors."""


class IdentifierNullError(IdentifierError):
    """Raised when an identifier label is None."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelSemVerErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSemVerErrorCode.NULL_IDENTIFIER,
            context=context,
            **extra_context,
        )


class IdentifierPatternError(IdentifierError):
    """Raised when an identifier label contains characters outside [0-9A-Za-z-].

    Example:
        >>> raise IdentifierPatternError(
        ...     "Identifier 'a#' does not match with pattern '^[0-9A-Za-z-]*$'",
        ...     label="a#",
        ...     pattern="^[0-9A-Za-z-]*$",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelSemVerErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSemVerErrorCode.PATTERN_MISMATCH,
            context=context,
            **extra_context,
        )


class IdentifierLeadingZeroError(IdentifierError):
    """Raised when a numeric prerelease label has a leading zero."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelSemVerErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSemVerErrorCode.LEADING_ZERO,
            context=context,
            **extra_context,
        )


__all__ = [
    "IdentifierError",
    "IdentifierLeadingZeroError",
    "IdentifierNullError",
    "IdentifierPatternError",
    "SemVerError",
    "VersionValidationError",
]

"""
Centralized exception hierarchy for buildplankit.

This module defines all custom exceptions raised by the build-configuration
model and the build-plan index so callers can catch them by concern.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class BuildPlanKitError(Exception):
    """Base exception for all buildplankit errors."""

    pass


# ============================================================================
# Triple Exceptions
# ============================================================================


class ParseError(BuildPlanKitError):
    """Raised when a platform triple string is malformed."""

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        msg = f"Invalid triple: {text!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Build Parameter Exceptions
# ============================================================================


class ConfigurationError(BuildPlanKitError):
    """Raised when build options are missing, malformed or inconsistent."""

    pass


class UnsupportedPlatformError(BuildPlanKitError):
    """
    Raised when a platform has no entry in the fixed test-platform matrix.

    This signals a gap in the matrix, not a runtime condition; callers are
    not expected to recover from it.
    """

    def __init__(self, platform):
        self.platform = platform
        super().__init__(f"Unsupported platform in tests: {platform}")


# ============================================================================
# Build Plan Index Exceptions
# ============================================================================


class LookupFailure(BuildPlanKitError):
    """Base exception for failed name lookups in a build plan index."""

    pass


class NotFoundError(LookupFailure):
    """Raised when a target, product or target id cannot be resolved."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} {name} not found.")


class DuplicateKeyError(LookupFailure):
    """Raised when two entries of a build plan resolve to the same name."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Duplicate {kind} name: {name}")


class TypeMismatchError(BuildPlanKitError):
    """Raised when a target description is narrowed to the wrong language family."""

    def __init__(self, expected: str, actual: str, name: str = ""):
        self.expected = expected
        self.actual = actual
        self.name = name
        subject = f"target {name}" if name else "target"
        super().__init__(
            f"Unexpected {actual} type found for {subject} (expected {expected})"
        )

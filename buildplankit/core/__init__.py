"""
Core functionality for buildplankit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    HostInfo,
    detect_host,
    clear_host_cache,
)

from .exceptions import (
    BuildPlanKitError,
    ParseError,
    ConfigurationError,
    UnsupportedPlatformError,
    LookupFailure,
    NotFoundError,
    DuplicateKeyError,
    TypeMismatchError,
)

__all__ = [
    # Platform
    "HostInfo",
    "detect_host",
    "clear_host_cache",
    # Exceptions
    "BuildPlanKitError",
    "ParseError",
    "ConfigurationError",
    "UnsupportedPlatformError",
    "LookupFailure",
    "NotFoundError",
    "DuplicateKeyError",
    "TypeMismatchError",
]

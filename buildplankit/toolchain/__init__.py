"""
Toolchain description for buildplankit.

Provides the immutable ToolchainDescriptor value and the default mock
toolchain used when build parameters are created without one.
"""

from buildplankit.toolchain.descriptor import (
    BuildFlags,
    LibraryMetadata,
    ToolchainDescriptor,
    default_toolchain,
)

__all__ = [
    "BuildFlags",
    "LibraryMetadata",
    "ToolchainDescriptor",
    "default_toolchain",
]

"""
buildplankit - build configuration fixtures and build plan indexing.

Provides the toolchain descriptor, platform triple catalog and build
parameter factory used to set up package builds under test, and the
BuildPlanIndex that makes a computed build plan addressable by name.
"""

__version__ = "0.1.0"

from buildplankit.core.exceptions import (
    BuildPlanKitError,
    ParseError,
    ConfigurationError,
    UnsupportedPlatformError,
    NotFoundError,
    DuplicateKeyError,
    TypeMismatchError,
)
from buildplankit.toolchain import ToolchainDescriptor, default_toolchain
from buildplankit.cross import PlatformTriple, parse_triple, render_triple
from buildplankit.config import (
    BuildConfiguration,
    BuildOptions,
    BuildParameters,
    Platform,
    create_build_parameters,
    create_build_parameters_for_platform,
)
from buildplankit.plan import BuildPlan, BuildPlanIndex

__all__ = [
    "__version__",
    "BuildPlanKitError",
    "ParseError",
    "ConfigurationError",
    "UnsupportedPlatformError",
    "NotFoundError",
    "DuplicateKeyError",
    "TypeMismatchError",
    "ToolchainDescriptor",
    "default_toolchain",
    "PlatformTriple",
    "parse_triple",
    "render_triple",
    "BuildConfiguration",
    "BuildOptions",
    "BuildParameters",
    "Platform",
    "create_build_parameters",
    "create_build_parameters_for_platform",
    "BuildPlan",
    "BuildPlanIndex",
]

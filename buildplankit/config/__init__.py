"""
Build parameter configuration for buildplankit.

This package provides the build parameter model, the factory that fills it
from defaulted options, and a parser for option mappings and YAML text.
"""

from buildplankit.config.parameters import (
    BuildConfiguration,
    BuildEnvironment,
    BuildParameters,
    DebuggingParameters,
    DriverParameters,
    IndexStoreMode,
    LinkingParameters,
    LinkTimeOptimizationMode,
    Platform,
)
from buildplankit.config.factory import (
    BuildOptions,
    PLATFORM_TRIPLES,
    create_build_parameters,
    create_build_parameters_for_environment,
    create_build_parameters_for_platform,
    triple_for_platform,
)
from buildplankit.config.parser import load_build_options, parse_build_options

__all__ = [
    "BuildConfiguration",
    "BuildEnvironment",
    "BuildParameters",
    "DebuggingParameters",
    "DriverParameters",
    "IndexStoreMode",
    "LinkingParameters",
    "LinkTimeOptimizationMode",
    "Platform",
    "BuildOptions",
    "PLATFORM_TRIPLES",
    "create_build_parameters",
    "create_build_parameters_for_environment",
    "create_build_parameters_for_platform",
    "triple_for_platform",
    "load_build_options",
    "parse_build_options",
]

"""
Build parameter factory.

Creates BuildParameters from defaulted, named options. Every option has a
default suitable for unit tests, so callers only name what a test cares
about:

    from buildplankit.config import create_build_parameters

    params = create_build_parameters(configuration="release", linker_dead_strip=False)
"""

from dataclasses import dataclass, field, replace
from pathlib import PurePath, PurePosixPath
from typing import Optional, Tuple, Union
import logging

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
from buildplankit.core.exceptions import ConfigurationError, UnsupportedPlatformError
from buildplankit.cross import catalog
from buildplankit.cross.triple import PlatformTriple, parse_triple
from buildplankit.toolchain.descriptor import (
    BuildFlags,
    ToolchainDescriptor,
    default_toolchain,
)

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_ROOT = PurePosixPath("/path/to/build")
DEFAULT_WORKER_COUNT = 3

# Closed mapping from test-matrix platform to its fixed triple.
PLATFORM_TRIPLES = {
    Platform.MACOS: catalog.X86_64_MACOS,
    Platform.LINUX: catalog.ARM64_LINUX,
    Platform.ANDROID: catalog.ARM64_ANDROID,
    Platform.WINDOWS: catalog.WINDOWS,
}


@dataclass(frozen=True)
class BuildOptions:
    """
    Named options accepted by create_build_parameters().

    ``toolchain`` and ``target_triple`` default to the host's toolchain and
    triple when left as None. ``enable_debugging_entitlement`` follows the
    configuration (enabled for debug) unless set explicitly.
    """

    output_root: PurePath = DEFAULT_OUTPUT_ROOT
    configuration: BuildConfiguration = BuildConfiguration.DEBUG
    toolchain: Optional[ToolchainDescriptor] = None
    flags: BuildFlags = field(default_factory=BuildFlags)
    target_triple: Optional[PlatformTriple] = None
    index_store_mode: IndexStoreMode = IndexStoreMode.OFF
    use_explicit_module_build: bool = False
    linker_dead_strip: bool = True
    link_time_optimization_mode: Optional[LinkTimeOptimizationMode] = None
    omit_frame_pointers: Optional[bool] = None
    can_rename_entrypoint_function_name: bool = False
    should_disable_local_rpath: bool = False
    should_link_static_swift_stdlib: bool = False
    worker_count: int = DEFAULT_WORKER_COUNT
    enable_debugging_entitlement: Optional[bool] = None
    pkg_config_directories: Tuple[PurePath, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "configuration", BuildConfiguration.coerce(self.configuration)
        )
        object.__setattr__(
            self, "index_store_mode", IndexStoreMode.coerce(self.index_store_mode)
        )
        object.__setattr__(
            self,
            "link_time_optimization_mode",
            LinkTimeOptimizationMode.coerce(self.link_time_optimization_mode),
        )
        if isinstance(self.target_triple, str):
            object.__setattr__(
                self, "target_triple", parse_triple(self.target_triple)
            )
        if self.target_triple is not None and not isinstance(
            self.target_triple, PlatformTriple
        ):
            raise ConfigurationError(
                f"target_triple must be a triple string or PlatformTriple, "
                f"got {self.target_triple!r}"
            )
        if self.toolchain is not None and not isinstance(
            self.toolchain, ToolchainDescriptor
        ):
            raise ConfigurationError(
                f"toolchain must be a ToolchainDescriptor, got {self.toolchain!r}"
            )
        if not isinstance(self.flags, BuildFlags):
            raise ConfigurationError(f"flags must be BuildFlags, got {self.flags!r}")
        if isinstance(self.output_root, str):
            object.__setattr__(self, "output_root", PurePosixPath(self.output_root))
        object.__setattr__(
            self,
            "pkg_config_directories",
            tuple(
                PurePosixPath(p) if isinstance(p, str) else p
                for p in self.pkg_config_directories
            ),
        )

        if isinstance(self.worker_count, bool) or not isinstance(
            self.worker_count, int
        ):
            raise ConfigurationError(
                f"worker_count must be an integer, got {self.worker_count!r}"
            )
        if self.worker_count < 1:
            raise ConfigurationError(
                f"worker_count must be at least 1, got {self.worker_count}"
            )

    @property
    def debugging_entitlement(self) -> bool:
        """Effective debugging entitlement setting."""
        if self.enable_debugging_entitlement is not None:
            return self.enable_debugging_entitlement
        return self.configuration is BuildConfiguration.DEBUG


def create_build_parameters(
    options: Optional[BuildOptions] = None, **overrides
) -> BuildParameters:
    """
    Create build parameters from options.

    Args:
        options: Base options. Defaults to BuildOptions().
        **overrides: Individual BuildOptions fields to replace

    Returns:
        Immutable BuildParameters

    Raises:
        ConfigurationError: If an option value is invalid
        ParseError: If a target triple string is malformed

    Example:
        >>> params = create_build_parameters(configuration="release")
        >>> params.debugging_parameters.should_enable_debugging_entitlement
        False
    """
    if options is None:
        try:
            options = BuildOptions(**overrides)
        except TypeError as e:
            raise ConfigurationError(f"Invalid build option: {e}") from e
    elif overrides:
        try:
            options = replace(options, **overrides)
        except TypeError as e:
            raise ConfigurationError(f"Invalid build option: {e}") from e

    toolchain = options.toolchain or default_toolchain()
    triple = options.target_triple or catalog.host_triple()

    if options.should_link_static_swift_stdlib and triple.is_darwin():
        logger.warning(
            f"Static linking of the Swift standard library is not supported "
            f"on {triple}; the option will be ignored by the linker"
        )

    return BuildParameters(
        data_path=options.output_root,
        configuration=options.configuration,
        toolchain=toolchain,
        triple=triple,
        flags=options.flags,
        pkg_config_directories=options.pkg_config_directories,
        workers=options.worker_count,
        index_store_mode=options.index_store_mode,
        debugging_parameters=DebuggingParameters(
            triple=triple,
            should_enable_debugging_entitlement=options.debugging_entitlement,
            omit_frame_pointers=options.omit_frame_pointers,
        ),
        driver_parameters=DriverParameters(
            can_rename_entrypoint_function_name=options.can_rename_entrypoint_function_name,
            use_explicit_module_build=options.use_explicit_module_build,
        ),
        linking_parameters=LinkingParameters(
            linker_dead_strip=options.linker_dead_strip,
            link_time_optimization_mode=options.link_time_optimization_mode,
            should_disable_local_rpath=options.should_disable_local_rpath,
            should_link_static_swift_stdlib=options.should_link_static_swift_stdlib,
        ),
    )


def triple_for_platform(platform: Union[Platform, str]) -> PlatformTriple:
    """
    Look up the fixed catalog triple for a test-matrix platform.

    Raises:
        UnsupportedPlatformError: If the platform is outside the test matrix
    """
    if isinstance(platform, str):
        try:
            platform = Platform.coerce(platform)
        except ConfigurationError:
            raise UnsupportedPlatformError(platform) from None

    try:
        return PLATFORM_TRIPLES[platform]
    except KeyError:
        raise UnsupportedPlatformError(platform) from None


def create_build_parameters_for_platform(
    platform: Union[Platform, str],
    configuration: Union[BuildConfiguration, str, None] = None,
) -> BuildParameters:
    """
    Create build parameters for a test-matrix platform.

    Args:
        platform: One of macOS, Linux, Android or Windows
        configuration: Build configuration, debug when omitted

    Raises:
        UnsupportedPlatformError: If the platform is outside the test matrix
    """
    triple = triple_for_platform(platform)
    return create_build_parameters(
        configuration=(
            BuildConfiguration.DEBUG if configuration is None else configuration
        ),
        target_triple=triple,
    )


def create_build_parameters_for_environment(
    environment: BuildEnvironment,
) -> BuildParameters:
    """Create build parameters for a BuildEnvironment."""
    return create_build_parameters_for_platform(
        environment.platform, environment.configuration
    )

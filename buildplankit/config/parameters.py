"""
Build parameter model.

BuildParameters aggregates everything a build or test invocation needs to
know about where and how to build. Independent toggles are grouped into
three sub-configurations so each build phase depends only on its own:

- DebuggingParameters: consumed by the debug-info and entitlement steps
- DriverParameters: consumed by the compiler driver
- LinkingParameters: consumed by the linker
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional, Tuple

from buildplankit.core.exceptions import ConfigurationError
from buildplankit.cross.triple import PlatformTriple
from buildplankit.toolchain.descriptor import BuildFlags, ToolchainDescriptor


def _coerce_enum(enum_cls, value, option: str):
    """Convert a string option into an enum member."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = [member.value for member in enum_cls]
        raise ConfigurationError(
            f"Invalid {option}: {value!r} (expected one of {valid})"
        ) from None


class BuildConfiguration(Enum):
    """Build configuration."""

    DEBUG = "debug"
    RELEASE = "release"

    @property
    def dirname(self) -> str:
        """Directory name used below the output root."""
        return self.value

    @classmethod
    def coerce(cls, value) -> "BuildConfiguration":
        return _coerce_enum(cls, value, "configuration")


class IndexStoreMode(Enum):
    """Whether the compiler writes an index store."""

    ON = "on"
    OFF = "off"
    AUTO = "auto"

    @classmethod
    def coerce(cls, value) -> "IndexStoreMode":
        return _coerce_enum(cls, value, "index store mode")


class LinkTimeOptimizationMode(Enum):
    """Link-time optimization flavour."""

    FULL = "full"
    THIN = "thin"

    @classmethod
    def coerce(cls, value) -> Optional["LinkTimeOptimizationMode"]:
        if value is None:
            return None
        return _coerce_enum(cls, value, "link-time optimization mode")


class Platform(Enum):
    """
    Platforms a build environment can name.

    Only macOS, Linux, Android and Windows belong to the test matrix; the
    remaining members exist so environments outside it can be expressed.
    """

    MACOS = "macos"
    IOS = "ios"
    TVOS = "tvos"
    WATCHOS = "watchos"
    LINUX = "linux"
    ANDROID = "android"
    WINDOWS = "windows"
    WASI = "wasi"
    OPENBSD = "openbsd"

    @classmethod
    def coerce(cls, value) -> "Platform":
        return _coerce_enum(cls, value, "platform")


@dataclass(frozen=True)
class BuildEnvironment:
    """Platform and optional configuration a build is evaluated for."""

    platform: Platform
    configuration: Optional[BuildConfiguration] = None


@dataclass(frozen=True)
class DebuggingParameters:
    """Debug-info related settings."""

    triple: PlatformTriple
    should_enable_debugging_entitlement: bool
    omit_frame_pointers: Optional[bool] = None


@dataclass(frozen=True)
class DriverParameters:
    """Compiler driver settings."""

    can_rename_entrypoint_function_name: bool = False
    use_explicit_module_build: bool = False


@dataclass(frozen=True)
class LinkingParameters:
    """Linker settings."""

    linker_dead_strip: bool = True
    link_time_optimization_mode: Optional[LinkTimeOptimizationMode] = None
    should_disable_local_rpath: bool = False
    should_link_static_swift_stdlib: bool = False


@dataclass(frozen=True)
class BuildParameters:
    """
    Complete, immutable parameters for one build or test invocation.

    The triple and toolchain are stored as given; whether the toolchain can
    actually target the triple is the caller's concern.

    Raises:
        ConfigurationError: If the worker count is below one or the
            debugging triple differs from the target triple
    """

    data_path: PurePath
    configuration: BuildConfiguration
    toolchain: ToolchainDescriptor
    triple: PlatformTriple
    flags: BuildFlags = field(default_factory=BuildFlags)
    pkg_config_directories: Tuple[PurePath, ...] = ()
    workers: int = 3
    index_store_mode: IndexStoreMode = IndexStoreMode.OFF
    debugging_parameters: Optional[DebuggingParameters] = None
    driver_parameters: DriverParameters = field(default_factory=DriverParameters)
    linking_parameters: LinkingParameters = field(default_factory=LinkingParameters)

    def __post_init__(self):
        if self.workers < 1:
            raise ConfigurationError(
                f"Worker count must be at least 1, got {self.workers}"
            )

        object.__setattr__(
            self, "pkg_config_directories", tuple(self.pkg_config_directories)
        )

        if self.debugging_parameters is None:
            object.__setattr__(
                self,
                "debugging_parameters",
                DebuggingParameters(
                    triple=self.triple,
                    should_enable_debugging_entitlement=(
                        self.configuration is BuildConfiguration.DEBUG
                    ),
                ),
            )
        elif self.debugging_parameters.triple != self.triple:
            raise ConfigurationError(
                f"Debugging triple {self.debugging_parameters.triple} does not "
                f"match target triple {self.triple}"
            )

    @property
    def build_path(self) -> PurePath:
        """Directory for this configuration's build products."""
        return self.data_path / self.configuration.dirname

"""
Toolchain description for build parameter fixtures.

A ToolchainDescriptor is a pure value: it records where the compiler and
librarian live, which search paths and flags apply, and which libraries the
toolchain ships. Nothing here checks that a path exists.

Example:
    ```python
    from buildplankit.toolchain import default_toolchain

    toolchain = default_toolchain()
    print(toolchain.librarian_path)
    ```
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Optional, Tuple
import logging

from buildplankit.core.platform import HostInfo, detect_host

logger = logging.getLogger(__name__)

FAKE_TOOL_ROOT = PurePosixPath("/fake/path/to")

# Librarian per host OS family.
LIBRARIAN_BY_FAMILY = {
    "windows": "link.exe",
    "darwin": "libtool",
    "unix": "llvm-ar",
}


@dataclass(frozen=True)
class BuildFlags:
    """
    Extra flags applied to every compile and link step.

    Attributes:
        c_compiler_flags: Flags passed to the C compiler
        cxx_compiler_flags: Flags passed to the C++ compiler
        swift_compiler_flags: Flags passed to the Swift compiler
        linker_flags: Flags passed to the linker
        xcbuild_flags: Flags passed to xcbuild
    """

    c_compiler_flags: Tuple[str, ...] = ()
    cxx_compiler_flags: Tuple[str, ...] = ()
    swift_compiler_flags: Tuple[str, ...] = ()
    linker_flags: Tuple[str, ...] = ()
    xcbuild_flags: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples so the value stays hashable.
        for name in (
            "c_compiler_flags",
            "cxx_compiler_flags",
            "swift_compiler_flags",
            "linker_flags",
            "xcbuild_flags",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def __add__(self, other: "BuildFlags") -> "BuildFlags":
        if not isinstance(other, BuildFlags):
            return NotImplemented
        return BuildFlags(
            c_compiler_flags=self.c_compiler_flags + other.c_compiler_flags,
            cxx_compiler_flags=self.cxx_compiler_flags + other.cxx_compiler_flags,
            swift_compiler_flags=self.swift_compiler_flags
            + other.swift_compiler_flags,
            linker_flags=self.linker_flags + other.linker_flags,
            xcbuild_flags=self.xcbuild_flags + other.xcbuild_flags,
        )

    def is_empty(self) -> bool:
        """True when no flag of any kind is set."""
        return not (
            self.c_compiler_flags
            or self.cxx_compiler_flags
            or self.swift_compiler_flags
            or self.linker_flags
            or self.xcbuild_flags
        )


@dataclass(frozen=True)
class LibraryMetadata:
    """A library the toolchain provides prebuilt."""

    identity: str
    version: str
    product_name: str
    schema_version: int = 1


@dataclass(frozen=True)
class ToolchainDescriptor:
    """
    Immutable description of one toolchain.

    Attributes:
        librarian_path: Static library archiver / linker
        swift_compiler_path: Swift compiler driver
        clang_compiler_path: C-family compiler
        include_search_paths: Extra header search paths
        library_search_paths: Extra library search paths
        swift_resources_path: Optional dynamic resources directory
        swift_static_resources_path: Optional static resources directory
        is_swift_development_toolchain: Whether the toolchain was built locally
        sdk_root_path: Optional SDK root
        swift_plugin_server_path: Optional macro plugin server executable
        extra_flags: Flags applied to every build using this toolchain
        provided_libraries: Libraries shipped with the toolchain
        host: Host the descriptor was created for, used for capability queries
    """

    librarian_path: PurePosixPath
    swift_compiler_path: PurePosixPath = FAKE_TOOL_ROOT / "swiftc"
    clang_compiler_path: PurePosixPath = FAKE_TOOL_ROOT / "clang"
    include_search_paths: Tuple[PurePosixPath, ...] = ()
    library_search_paths: Tuple[PurePosixPath, ...] = ()
    swift_resources_path: Optional[PurePosixPath] = None
    swift_static_resources_path: Optional[PurePosixPath] = None
    is_swift_development_toolchain: bool = False
    sdk_root_path: Optional[PurePosixPath] = None
    swift_plugin_server_path: Optional[PurePosixPath] = None
    extra_flags: BuildFlags = field(default_factory=BuildFlags)
    provided_libraries: Tuple[LibraryMetadata, ...] = ()
    host: Optional[HostInfo] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "include_search_paths", tuple(self.include_search_paths)
        )
        object.__setattr__(
            self, "library_search_paths", tuple(self.library_search_paths)
        )
        object.__setattr__(self, "provided_libraries", tuple(self.provided_libraries))

    def get_clang_compiler(self) -> PurePosixPath:
        """Return the C-family compiler path."""
        return self.clang_compiler_path

    def is_clang_compiler_vendor_apple(self) -> Optional[bool]:
        """
        Check whether the C-family compiler is Apple-flavored.

        The answer is derived from the host platform only; the compiler is
        never executed.

        Returns:
            True on Darwin hosts, False on other recognised hosts,
            None when the host OS is unknown
        """
        host = self.host or detect_host()
        if not host.is_recognized:
            return None
        return host.os_family == "darwin"


def default_toolchain(host: Optional[HostInfo] = None) -> ToolchainDescriptor:
    """
    Build the default mock toolchain for a host.

    Args:
        host: Host to describe. Detected when omitted.

    Returns:
        ToolchainDescriptor with placeholder executable paths

    Example:
        >>> default_toolchain(HostInfo('windows', 'x64')).librarian_path.name
        'link.exe'
    """
    host = host or detect_host()
    librarian = LIBRARIAN_BY_FAMILY[host.os_family]
    logger.debug(f"Default toolchain for {host.os_family} host uses {librarian}")
    return ToolchainDescriptor(librarian_path=FAKE_TOOL_ROOT / librarian, host=host)

"""
Host platform detection for buildplankit.

This module answers the one question the build-configuration model needs
from the invoking environment: which operating system family and CPU
architecture are we running on. Detection only consults the ``platform``
module; it never spawns a subprocess or touches the filesystem.

Usage:
    from buildplankit.core.platform import detect_host

    host = detect_host()
    print(f"OS: {host.os}")
    print(f"Family: {host.os_family}")
"""

import platform
import functools
from dataclasses import dataclass


DARWIN_OS_NAMES = ("macos", "ios")


@dataclass(frozen=True)
class HostInfo:
    """
    Host platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos', 'android', 'ios', 'unknown')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm', 'riscv' or raw machine name)
        system: Raw lower-cased ``platform.system()`` value
    """

    os: str
    arch: str
    system: str = ""

    @property
    def os_family(self) -> str:
        """
        Collapse the OS into the three default-path branches.

        Returns:
            'windows', 'darwin' or 'unix'

        Example:
            >>> HostInfo('ios', 'arm64').os_family
            'darwin'
        """
        if self.os == "windows":
            return "windows"
        if self.os in DARWIN_OS_NAMES:
            return "darwin"
        return "unix"

    @property
    def is_recognized(self) -> bool:
        """True when the OS was normalised to a known name."""
        return self.os != "unknown"

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').
        """
        return f"{self.os}-{self.arch}"


@functools.lru_cache(maxsize=1)
def detect_host() -> HostInfo:
    """
    Detect current host platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        HostInfo instance with detected platform information
    """
    return HostInfo(
        os=_detect_os(),
        arch=_detect_architecture(),
        system=platform.system().lower(),
    )


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', 'android', 'ios',
        or 'unknown' for anything else
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "linux":
        if "android" in platform.platform().lower():
            return "android"
        return "linux"
    elif system == "android":
        return "android"
    elif system == "darwin":
        description = platform.platform().lower()
        if "iphone" in description or "ios" in description:
            return "ios"
        return "macos"
    elif system == "ios":
        return "ios"
    else:
        return "unknown"


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm', 'riscv'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    elif machine.startswith("riscv"):
        return "riscv"
    else:
        return machine


def clear_host_cache():
    """
    Clear the host detection cache.

    This forces the next call to detect_host() to re-detect.
    Useful for testing.
    """
    detect_host.cache_clear()


__all__ = [
    "HostInfo",
    "detect_host",
    "clear_host_cache",
]

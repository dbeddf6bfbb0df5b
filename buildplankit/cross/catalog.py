"""
Named platform triples for the supported test matrix, and the host triple.

The catalog is closed: it lists exactly the triples build-plan fixtures are
exercised against. The host triple is the one piece of process-wide mutable
state in buildplankit; it is computed once, under a lock, from host
platform detection.
"""

import threading
from typing import Dict, Optional
import logging

from buildplankit.core.platform import HostInfo, detect_host
from buildplankit.cross.triple import PlatformTriple, parse_triple

logger = logging.getLogger(__name__)

X86_64_MACOS = parse_triple("x86_64-apple-macosx")
X86_64_LINUX = parse_triple("x86_64-unknown-linux-gnu")
ARM64_LINUX = parse_triple("aarch64-unknown-linux-gnu")
ARM64_ANDROID = parse_triple("aarch64-unknown-linux-android")
WINDOWS = parse_triple("x86_64-unknown-windows-msvc")
WASI = parse_triple("wasm32-unknown-wasi")
ARM64_IOS = parse_triple("arm64-apple-ios")

# Minimum deployment target applied to the macOS host triple.
MACOS_DEPLOYMENT_TARGET = "10.13"

_CATALOG: Dict[str, PlatformTriple] = {
    "x86_64_macos": X86_64_MACOS,
    "x86_64_linux": X86_64_LINUX,
    "arm64_linux": ARM64_LINUX,
    "arm64_android": ARM64_ANDROID,
    "windows": WINDOWS,
    "wasi": WASI,
    "arm64_ios": ARM64_IOS,
}

_TRIPLE_ARCH = {
    "x64": "x86_64",
    "arm64": "aarch64",
    "x86": "i686",
    "arm": "armv7",
    "riscv": "riscv64",
}


def catalog_triples() -> Dict[str, PlatformTriple]:
    """Return a copy of the named catalog triples."""
    return dict(_CATALOG)


def resolve_host_triple(host: HostInfo) -> PlatformTriple:
    """
    Map host platform information to its default target triple.

    Args:
        host: Detected (or injected) host information

    Returns:
        PlatformTriple the host toolchain would target by default
    """
    arch = _TRIPLE_ARCH.get(host.arch, host.arch) or "unknown"

    if host.os_family == "darwin":
        # Apple spells 64-bit ARM as arm64.
        if host.arch == "arm64":
            arch = "arm64"
        os_name = "ios" if host.os == "ios" else "macosx"
        return PlatformTriple(arch=arch, vendor="apple", os=os_name)
    if host.os == "windows":
        return PlatformTriple(arch, "unknown", "windows", environment="msvc")
    if host.os == "android":
        return PlatformTriple(arch, "unknown", "linux", environment="android")
    if host.os == "linux":
        return PlatformTriple(arch, "unknown", "linux", environment="gnu")
    return PlatformTriple(arch, "unknown", host.system or "unknown")


class HostTripleProvider:
    """
    One-time initialised holder for the host triple.

    The first call to get() computes the triple under a lock; later calls
    return the stored value without locking.
    """

    def __init__(self, detector=detect_host):
        self._detector = detector
        self._lock = threading.Lock()
        self._triple: Optional[PlatformTriple] = None

    def get(self) -> PlatformTriple:
        triple = self._triple
        if triple is not None:
            return triple
        with self._lock:
            if self._triple is None:
                host = self._detector()
                self._triple = resolve_host_triple(host)
                logger.debug(
                    f"Resolved host triple {self._triple} for {host.platform_string()}"
                )
            return self._triple

    def reset(self):
        """Forget the computed triple so the next get() recomputes it."""
        with self._lock:
            self._triple = None


_HOST_TRIPLE = HostTripleProvider()


def host_triple() -> PlatformTriple:
    """Return the memoised host triple."""
    return _HOST_TRIPLE.get()


def reset_host_triple():
    """
    Clear the memoised host triple.

    Useful for testing together with clear_host_cache().
    """
    _HOST_TRIPLE.reset()


def default_target_triple(triple: Optional[PlatformTriple] = None) -> str:
    """
    Render the default target triple string.

    On macOS the host triple is versioned with the minimum deployment
    target; every other host renders unchanged.

    Args:
        triple: Host triple to render. Defaults to host_triple().
    """
    triple = triple or host_triple()
    if triple.is_macos():
        return triple.triple_string_for_platform_version(MACOS_DEPLOYMENT_TARGET)
    return triple.triple_string

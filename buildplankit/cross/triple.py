"""
Platform triple parsing and rendering.

A triple names a target platform as ``arch-vendor-os[-environment]``. The
OS component may carry a version suffix (``macosx10.13``, ``ios17.0``).
Parsing keeps every component verbatim so rendering a parsed canonical
string reproduces it exactly.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from buildplankit.core.exceptions import ParseError

_COMPONENT_RE = re.compile(r"^[A-Za-z0-9_.]+$")
_OS_RE = re.compile(
    r"^(?P<name>[A-Za-z_][A-Za-z0-9_]*?)(?P<version>[0-9][0-9.]*)?$"
)

DARWIN_OS_NAMES = ("macosx", "macos", "darwin", "ios", "tvos", "watchos", "visionos")


@dataclass(frozen=True)
class PlatformTriple:
    """
    Structured platform triple.

    Attributes:
        arch: CPU architecture (e.g., 'x86_64', 'aarch64', 'wasm32')
        vendor: Vendor (e.g., 'apple', 'unknown')
        os: Operating system name without version (e.g., 'linux', 'macosx')
        environment: Optional environment / ABI (e.g., 'gnu', 'android', 'msvc')
        os_version: Optional OS version suffix (e.g., '10.13')
    """

    arch: str
    vendor: str
    os: str
    environment: Optional[str] = None
    os_version: Optional[str] = None

    @property
    def triple_string(self) -> str:
        """Canonical string form of this triple."""
        return render_triple(self)

    def triple_string_for_platform_version(self, version: str) -> str:
        """
        Render the triple with the OS version replaced.

        Example:
            >>> parse_triple("x86_64-apple-macosx").triple_string_for_platform_version("10.13")
            'x86_64-apple-macosx10.13'
        """
        return render_triple(replace(self, os_version=version or None))

    def without_version(self) -> "PlatformTriple":
        """Return a copy of this triple with the OS version dropped."""
        return replace(self, os_version=None)

    def is_darwin(self) -> bool:
        return self.vendor == "apple" or self.os in DARWIN_OS_NAMES

    def is_macos(self) -> bool:
        return self.os in ("macosx", "macos")

    def is_linux(self) -> bool:
        return self.os == "linux"

    def is_android(self) -> bool:
        return self.environment is not None and self.environment.startswith("android")

    def is_windows(self) -> bool:
        return self.os == "windows"

    def is_wasi(self) -> bool:
        return self.os == "wasi"

    def __str__(self) -> str:
        return self.triple_string


def parse_triple(text: str) -> PlatformTriple:
    """
    Parse a triple string.

    Args:
        text: Triple such as 'aarch64-unknown-linux-gnu'

    Returns:
        PlatformTriple with the string's components

    Raises:
        ParseError: If the string does not have 3 or 4 well-formed components
    """
    if not isinstance(text, str) or not text:
        raise ParseError(str(text), "empty triple")

    components = text.split("-")
    if len(components) not in (3, 4):
        raise ParseError(
            text, f"expected 3 or 4 components, found {len(components)}"
        )

    for component in components:
        if not _COMPONENT_RE.match(component):
            raise ParseError(text, f"malformed component {component!r}")

    os_match = _OS_RE.match(components[2])
    if os_match is None:
        raise ParseError(text, f"malformed operating system {components[2]!r}")

    return PlatformTriple(
        arch=components[0],
        vendor=components[1],
        os=os_match.group("name"),
        os_version=os_match.group("version"),
        environment=components[3] if len(components) == 4 else None,
    )


def render_triple(triple: PlatformTriple) -> str:
    """
    Render a triple to its canonical string form.

    This is the exact inverse of parse_triple() for canonical strings.
    """
    text = f"{triple.arch}-{triple.vendor}-{triple.os}{triple.os_version or ''}"
    if triple.environment:
        text += f"-{triple.environment}"
    return text

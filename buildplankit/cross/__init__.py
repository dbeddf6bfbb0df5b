"""
Platform triples for buildplankit.

This package provides triple parsing and rendering, the closed catalog of
triples in the supported test matrix, and the memoised host triple.
"""

from buildplankit.cross.triple import PlatformTriple, parse_triple, render_triple
from buildplankit.cross.catalog import (
    X86_64_MACOS,
    X86_64_LINUX,
    ARM64_LINUX,
    ARM64_ANDROID,
    WINDOWS,
    WASI,
    ARM64_IOS,
    MACOS_DEPLOYMENT_TARGET,
    HostTripleProvider,
    catalog_triples,
    resolve_host_triple,
    host_triple,
    reset_host_triple,
    default_target_triple,
)

__all__ = [
    "PlatformTriple",
    "parse_triple",
    "render_triple",
    "X86_64_MACOS",
    "X86_64_LINUX",
    "ARM64_LINUX",
    "ARM64_ANDROID",
    "WINDOWS",
    "WASI",
    "ARM64_IOS",
    "MACOS_DEPLOYMENT_TARGET",
    "HostTripleProvider",
    "catalog_triples",
    "resolve_host_triple",
    "host_triple",
    "reset_host_triple",
    "default_target_triple",
]

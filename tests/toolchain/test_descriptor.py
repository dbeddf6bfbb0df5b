"""
tests/toolchain/test_descriptor.py

Unit tests for the toolchain descriptor.
"""

import pytest
from dataclasses import FrozenInstanceError
from pathlib import PurePosixPath
from unittest.mock import patch

from buildplankit.core.platform import HostInfo
from buildplankit.toolchain.descriptor import (
    BuildFlags,
    LibraryMetadata,
    ToolchainDescriptor,
    default_toolchain,
)


class TestDefaultToolchain:
    """Tests for default_toolchain()."""

    def test_linux_uses_llvm_ar(self, linux_host):
        toolchain = default_toolchain(linux_host)
        assert toolchain.librarian_path == PurePosixPath("/fake/path/to/llvm-ar")

    def test_macos_uses_libtool(self, macos_host):
        toolchain = default_toolchain(macos_host)
        assert toolchain.librarian_path == PurePosixPath("/fake/path/to/libtool")

    def test_ios_uses_libtool(self):
        toolchain = default_toolchain(HostInfo(os="ios", arch="arm64"))
        assert toolchain.librarian_path.name == "libtool"

    def test_windows_uses_link(self, windows_host):
        toolchain = default_toolchain(windows_host)
        assert toolchain.librarian_path == PurePosixPath("/fake/path/to/link.exe")

    def test_unknown_host_falls_back_to_llvm_ar(self, unknown_host):
        assert default_toolchain(unknown_host).librarian_path.name == "llvm-ar"

    def test_placeholder_values(self, linux_host):
        """Test the remaining defaults of the mock toolchain."""
        toolchain = default_toolchain(linux_host)

        assert toolchain.swift_compiler_path == PurePosixPath("/fake/path/to/swiftc")
        assert toolchain.get_clang_compiler() == PurePosixPath("/fake/path/to/clang")
        assert toolchain.include_search_paths == ()
        assert toolchain.library_search_paths == ()
        assert toolchain.swift_resources_path is None
        assert toolchain.swift_static_resources_path is None
        assert toolchain.is_swift_development_toolchain is False
        assert toolchain.sdk_root_path is None
        assert toolchain.swift_plugin_server_path is None
        assert toolchain.extra_flags.is_empty()
        assert toolchain.provided_libraries == ()

    @patch("buildplankit.toolchain.descriptor.detect_host")
    def test_detects_host_when_omitted(self, mock_detect, windows_host):
        mock_detect.return_value = windows_host

        toolchain = default_toolchain()

        assert toolchain.librarian_path.name == "link.exe"
        mock_detect.assert_called_once()

    def test_same_host_gives_equal_values(self, linux_host):
        assert default_toolchain(linux_host) == default_toolchain(linux_host)


class TestClangVendor:
    """Tests for is_clang_compiler_vendor_apple()."""

    def test_apple_on_macos(self, macos_host):
        assert default_toolchain(macos_host).is_clang_compiler_vendor_apple() is True

    def test_not_apple_on_linux(self, linux_host):
        assert default_toolchain(linux_host).is_clang_compiler_vendor_apple() is False

    def test_not_apple_on_windows(self, windows_host):
        toolchain = default_toolchain(windows_host)
        assert toolchain.is_clang_compiler_vendor_apple() is False

    def test_unknown_host(self, unknown_host):
        toolchain = default_toolchain(unknown_host)
        assert toolchain.is_clang_compiler_vendor_apple() is None

    @patch("buildplankit.toolchain.descriptor.detect_host")
    def test_without_host_uses_detection(self, mock_detect, macos_host):
        mock_detect.return_value = macos_host
        toolchain = ToolchainDescriptor(librarian_path=PurePosixPath("/usr/bin/ar"))

        assert toolchain.is_clang_compiler_vendor_apple() is True


class TestToolchainDescriptor:
    """Tests for the descriptor value itself."""

    def test_is_immutable(self, mock_toolchain):
        with pytest.raises(FrozenInstanceError):
            mock_toolchain.librarian_path = PurePosixPath("/other")

    def test_lists_stored_as_tuples(self, custom_toolchain):
        assert custom_toolchain.include_search_paths == (
            PurePosixPath("/opt/swift/usr/include"),
        )
        assert isinstance(custom_toolchain.provided_libraries, tuple)
        assert custom_toolchain.provided_libraries[0] == LibraryMetadata(
            identity="swift-syntax", version="510.0.0", product_name="SwiftSyntax"
        )

    def test_paths_are_not_checked(self):
        """Test that nonexistent paths are accepted."""
        toolchain = ToolchainDescriptor(
            librarian_path=PurePosixPath("/does/not/exist/ar"),
            sdk_root_path=PurePosixPath("/does/not/exist/sdk"),
        )
        assert toolchain.sdk_root_path.name == "sdk"

    def test_host_not_part_of_equality(self, linux_host, windows_host):
        first = ToolchainDescriptor(librarian_path=PurePosixPath("/ar"), host=linux_host)
        second = ToolchainDescriptor(
            librarian_path=PurePosixPath("/ar"), host=windows_host
        )
        assert first == second


class TestBuildFlags:
    """Tests for BuildFlags."""

    def test_empty_by_default(self):
        assert BuildFlags().is_empty()

    def test_lists_become_tuples(self):
        flags = BuildFlags(c_compiler_flags=["-O2"], linker_flags=["-lm"])

        assert flags.c_compiler_flags == ("-O2",)
        assert flags.linker_flags == ("-lm",)
        assert not flags.is_empty()
        hash(flags)

    def test_merge(self):
        merged = BuildFlags(swift_compiler_flags=["-g"]) + BuildFlags(
            swift_compiler_flags=["-Onone"], xcbuild_flags=["-quiet"]
        )

        assert merged.swift_compiler_flags == ("-g", "-Onone")
        assert merged.xcbuild_flags == ("-quiet",)

    def test_merge_with_other_type(self):
        with pytest.raises(TypeError):
            BuildFlags() + ["-g"]

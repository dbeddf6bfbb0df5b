"""Build option parser for buildplankit.

This module turns already-loaded option data (a mapping, or a YAML document
held in a string) into validated BuildOptions. It never reads files.
"""

from pathlib import PurePosixPath
from typing import Any, Dict, Mapping, Optional
import yaml

from buildplankit.config.factory import BuildOptions, triple_for_platform
from buildplankit.core.exceptions import ConfigurationError
from buildplankit.toolchain.descriptor import BuildFlags, ToolchainDescriptor

BOOLEAN_OPTIONS = (
    "use_explicit_module_build",
    "linker_dead_strip",
    "can_rename_entrypoint_function_name",
    "should_disable_local_rpath",
    "should_link_static_swift_stdlib",
)

OPTIONAL_BOOLEAN_OPTIONS = (
    "omit_frame_pointers",
    "enable_debugging_entitlement",
)

PASSTHROUGH_OPTIONS = (
    "configuration",
    "index_store_mode",
    "link_time_optimization_mode",
    "target_triple",
)

FLAG_KEYS = {
    "c": "c_compiler_flags",
    "cxx": "cxx_compiler_flags",
    "swift": "swift_compiler_flags",
    "linker": "linker_flags",
    "xcbuild": "xcbuild_flags",
}

TOOLCHAIN_PATH_KEYS = (
    "librarian_path",
    "swift_compiler_path",
    "clang_compiler_path",
    "swift_resources_path",
    "swift_static_resources_path",
    "sdk_root_path",
    "swift_plugin_server_path",
)

KNOWN_OPTIONS = (
    set(BOOLEAN_OPTIONS)
    | set(OPTIONAL_BOOLEAN_OPTIONS)
    | set(PASSTHROUGH_OPTIONS)
    | {
        "output_root",
        "platform",
        "flags",
        "toolchain",
        "worker_count",
        "pkg_config_directories",
    }
)


def load_build_options(text: str) -> BuildOptions:
    """
    Parse build options from a YAML document.

    Args:
        text: YAML document content

    Returns:
        Validated BuildOptions

    Raises:
        ConfigurationError: If the document is invalid
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise ConfigurationError("Build options document is empty")

    return parse_build_options(data)


def parse_build_options(data: Mapping[str, Any]) -> BuildOptions:
    """
    Parse build options from a mapping.

    Args:
        data: Option names mapped to values

    Returns:
        Validated BuildOptions

    Raises:
        ConfigurationError: If an option is unknown, has the wrong type, or
            conflicts with another option
        ParseError: If the target triple is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Build options must be a mapping, got {type(data).__name__}"
        )

    unknown = sorted(set(data) - KNOWN_OPTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown build option(s): {', '.join(unknown)}")

    if "platform" in data and "target_triple" in data:
        raise ConfigurationError(
            "Options 'platform' and 'target_triple' cannot be combined"
        )

    kwargs: Dict[str, Any] = {}

    for name in BOOLEAN_OPTIONS:
        if name in data:
            kwargs[name] = _require_bool(data[name], name)

    for name in OPTIONAL_BOOLEAN_OPTIONS:
        if name in data and data[name] is not None:
            kwargs[name] = _require_bool(data[name], name)

    for name in PASSTHROUGH_OPTIONS:
        if data.get(name) is not None:
            kwargs[name] = data[name]

    if "target_triple" in kwargs:
        _require_str(kwargs["target_triple"], "target_triple")

    # YAML reads bare on/off as booleans.
    if isinstance(kwargs.get("index_store_mode"), bool):
        kwargs["index_store_mode"] = "on" if kwargs["index_store_mode"] else "off"

    if "platform" in data:
        kwargs["target_triple"] = triple_for_platform(data["platform"])

    if "output_root" in data:
        kwargs["output_root"] = PurePosixPath(
            _require_str(data["output_root"], "output_root")
        )

    if "worker_count" in data:
        kwargs["worker_count"] = data["worker_count"]

    if "pkg_config_directories" in data:
        kwargs["pkg_config_directories"] = tuple(
            PurePosixPath(_require_str(p, "pkg_config_directories"))
            for p in _require_list(
                data["pkg_config_directories"], "pkg_config_directories"
            )
        )

    if "flags" in data:
        kwargs["flags"] = _parse_flags(data["flags"])

    if "toolchain" in data:
        kwargs["toolchain"] = _parse_toolchain(data["toolchain"])

    return BuildOptions(**kwargs)


def _parse_flags(data: Optional[Mapping[str, Any]]) -> BuildFlags:
    """Parse the flags section."""
    if data is None:
        return BuildFlags()
    if not isinstance(data, Mapping):
        raise ConfigurationError("flags must be a dictionary")

    unknown = sorted(set(data) - set(FLAG_KEYS))
    if unknown:
        raise ConfigurationError(
            f"Unknown flag kind(s): {', '.join(unknown)} "
            f"(expected {', '.join(FLAG_KEYS)})"
        )

    return BuildFlags(
        **{
            FLAG_KEYS[key]: tuple(
                _require_str(flag, f"flags.{key}")
                for flag in _require_list(values, f"flags.{key}")
            )
            for key, values in data.items()
        }
    )


def _parse_toolchain(data: Mapping[str, Any]) -> ToolchainDescriptor:
    """Parse toolchain configuration."""
    if not isinstance(data, Mapping):
        raise ConfigurationError("toolchain must be a dictionary")

    if "librarian_path" not in data:
        raise ConfigurationError("Toolchain missing required field: librarian_path")

    known = set(TOOLCHAIN_PATH_KEYS) | {
        "include_search_paths",
        "library_search_paths",
        "is_swift_development_toolchain",
    }
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown toolchain field(s): {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    for key in TOOLCHAIN_PATH_KEYS:
        if data.get(key) is not None:
            kwargs[key] = PurePosixPath(_require_str(data[key], f"toolchain.{key}"))

    for key in ("include_search_paths", "library_search_paths"):
        if key in data:
            kwargs[key] = tuple(
                PurePosixPath(_require_str(p, f"toolchain.{key}"))
                for p in _require_list(data[key], f"toolchain.{key}")
            )

    if "is_swift_development_toolchain" in data:
        kwargs["is_swift_development_toolchain"] = _require_bool(
            data["is_swift_development_toolchain"],
            "toolchain.is_swift_development_toolchain",
        )

    return ToolchainDescriptor(**kwargs)


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got {value!r}")
    return value


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")
    return value


def _require_list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise ConfigurationError(f"{name} must be a list, got {value!r}")
    return value

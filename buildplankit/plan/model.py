"""
Build plan model.

These types describe the shape of a build plan as produced by the external
planning stage: resolved module identities, a modules graph, per-target and
per-product build descriptions, and the synthesized test targets. Planning
itself happens elsewhere; the classes here only carry its result so the
index and test fixtures have something concrete to work with.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from buildplankit.core.exceptions import TypeMismatchError

SWIFT_FAMILY = "swift"
CLANG_FAMILY = "clang"


@dataclass(frozen=True)
class ResolvedModule:
    """
    Identity of one module in a resolved package graph.

    Attributes:
        id: Unique identifier (unique across packages)
        name: Display name (unique only by convention)
        package: Owning package identity
    """

    id: str
    name: str
    package: str = ""


@dataclass(frozen=True)
class ResolvedProduct:
    """Identity of one product in a resolved package graph."""

    name: str
    package: str = ""


@dataclass
class ModulesGraph:
    """Resolved graph of all modules reachable from the root packages."""

    all_targets: Dict[str, ResolvedModule] = field(default_factory=dict)

    @classmethod
    def from_modules(cls, modules: Sequence[ResolvedModule]) -> "ModulesGraph":
        return cls(all_targets={module.id: module for module in modules})

    def get(self, target_id: str) -> Optional[ResolvedModule]:
        return self.all_targets.get(target_id)


@dataclass(frozen=True)
class TargetBuildDescription:
    """
    Build description for one target.

    Concrete descriptions belong to one source-language family; use
    swift_target() or clang_target() to narrow to it.
    """

    target: ResolvedModule

    family = "unknown"

    @property
    def name(self) -> str:
        return self.target.name

    def swift_target(self) -> "SwiftTargetBuildDescription":
        """
        Narrow to a Swift target description.

        Raises:
            TypeMismatchError: If this target is not a Swift target
        """
        if not isinstance(self, SwiftTargetBuildDescription):
            raise TypeMismatchError(SWIFT_FAMILY, self.family, self.name)
        return self

    def clang_target(self) -> "ClangTargetBuildDescription":
        """
        Narrow to a C-family target description.

        Raises:
            TypeMismatchError: If this target is not a C-family target
        """
        if not isinstance(self, ClangTargetBuildDescription):
            raise TypeMismatchError(CLANG_FAMILY, self.family, self.name)
        return self


@dataclass(frozen=True)
class SwiftTargetBuildDescription(TargetBuildDescription):
    """Target compiled by the Swift compiler."""

    sources: Sequence[str] = ()
    is_test_target: bool = False

    family = SWIFT_FAMILY


@dataclass(frozen=True)
class ClangTargetBuildDescription(TargetBuildDescription):
    """Target compiled by the C-family compiler."""

    sources: Sequence[str] = ()
    is_cxx: bool = False

    family = CLANG_FAMILY


@dataclass(frozen=True)
class BuildProductDescription:
    """Base for everything a build plan lists as a product."""

    product: ResolvedProduct


@dataclass(frozen=True)
class ProductBuildDescription(BuildProductDescription):
    """A product the linker produces (executable, library or test bundle)."""

    product_type: str = "executable"


@dataclass(frozen=True)
class PluginBuildDescription(BuildProductDescription):
    """A plugin product; built for the host and never linked into the package."""

    capability: str = "buildTool"


@dataclass
class BuildPlan:
    """
    Result of the external planning stage.

    Attributes:
        graph: Modules graph the plan was computed from
        target_map: Target id mapped to its build description
        build_products: Every product description, linkable or not
        derived_test_targets_map: Test product name mapped to the test
            targets synthesized for it (not present in ``graph``)
    """

    graph: ModulesGraph
    target_map: Mapping[str, TargetBuildDescription] = field(default_factory=dict)
    build_products: List[BuildProductDescription] = field(default_factory=list)
    derived_test_targets_map: Mapping[str, List[ResolvedModule]] = field(
        default_factory=dict
    )

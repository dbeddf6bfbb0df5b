"""
Build plan indexing for buildplankit.

This package provides the build plan model produced by the external
planning stage and the BuildPlanIndex that makes it addressable by name.
"""

from buildplankit.plan.model import (
    BuildPlan,
    BuildProductDescription,
    ClangTargetBuildDescription,
    ModulesGraph,
    PluginBuildDescription,
    ProductBuildDescription,
    ResolvedModule,
    ResolvedProduct,
    SwiftTargetBuildDescription,
    TargetBuildDescription,
)
from buildplankit.plan.index import (
    BuildPlanIndex,
    resolve_target,
    target_lookup_sources,
)

__all__ = [
    "BuildPlan",
    "BuildProductDescription",
    "ClangTargetBuildDescription",
    "ModulesGraph",
    "PluginBuildDescription",
    "ProductBuildDescription",
    "ResolvedModule",
    "ResolvedProduct",
    "SwiftTargetBuildDescription",
    "TargetBuildDescription",
    "BuildPlanIndex",
    "resolve_target",
    "target_lookup_sources",
]

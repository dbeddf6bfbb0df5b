"""
Unit tests for the build plan index.
"""

import logging

import pytest

from buildplankit.core.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    TypeMismatchError,
)
from buildplankit.plan.index import (
    BuildPlanIndex,
    resolve_target,
    target_lookup_sources,
)
from buildplankit.plan.model import (
    BuildPlan,
    ClangTargetBuildDescription,
    ModulesGraph,
    ProductBuildDescription,
    ResolvedModule,
    ResolvedProduct,
    SwiftTargetBuildDescription,
    TargetBuildDescription,
)


class TestBuildIndex:
    """Tests for BuildPlanIndex.build()."""

    def test_counts(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        assert index.target_count() == 3
        assert index.product_count() == 1
        assert index.target_names() == ["A", "B", "C"]
        assert index.product_names() == ["A"]

    def test_target_lookup(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        target = index.target("B")

        assert target.name == "B"
        assert target is simple_plan.target_map["B-id"]

    def test_product_lookup(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)
        assert index.product("A").product.name == "A"

    def test_missing_product(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(NotFoundError) as exc_info:
            index.product("B")

        assert exc_info.value.kind == "product"
        assert exc_info.value.name == "B"

    def test_missing_target(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(NotFoundError, match="Target Z not found"):
            index.target("Z")

    def test_keeps_plan(self, simple_plan):
        assert BuildPlanIndex.build(simple_plan).plan is simple_plan

    def test_empty_plan(self):
        index = BuildPlanIndex.build(BuildPlan(graph=ModulesGraph()))

        assert index.target_count() == 0
        assert index.product_count() == 0

    def test_maps_are_read_only(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(TypeError):
            index.target_map["D"] = index.target("A")
        with pytest.raises(TypeError):
            index.product_map["B"] = index.product("A")

    def test_non_linkable_products_excluded(self, plan_builder):
        plan = plan_builder(
            swift_targets=["Tool"], products=["tool"], plugins=["GenPlugin"]
        )

        index = BuildPlanIndex.build(plan)

        assert index.product_count() == 1
        with pytest.raises(NotFoundError):
            index.product("GenPlugin")

    def test_derived_test_targets_resolved(self, plan_builder):
        plan = plan_builder(
            swift_targets=["Lib"],
            products=["PackageTests"],
            derived_test_targets={"PackageTests": ["PackageDiscoveredTests", "Runner"]},
        )

        index = BuildPlanIndex.build(plan)

        assert index.target_count() == 3
        assert index.swift_target("Runner").is_test_target is True

    def test_logs_summary(self, simple_plan, caplog):
        with caplog.at_level(logging.DEBUG, logger="buildplankit.plan.index"):
            BuildPlanIndex.build(simple_plan)

        assert "3 targets and 1 products" in caplog.text

    def test_repr(self, simple_plan):
        assert repr(BuildPlanIndex.build(simple_plan)) == (
            "BuildPlanIndex(targets=3, products=1)"
        )


class TestBuildIndexFailures:
    """Tests for index construction failures."""

    def test_duplicate_target_names(self):
        first = ResolvedModule(id="pkg1.X", name="X", package="pkg1")
        second = ResolvedModule(id="pkg2.X", name="X", package="pkg2")
        plan = BuildPlan(
            graph=ModulesGraph.from_modules([first, second]),
            target_map={
                first.id: SwiftTargetBuildDescription(target=first),
                second.id: ClangTargetBuildDescription(target=second),
            },
        )

        with pytest.raises(DuplicateKeyError) as exc_info:
            BuildPlanIndex.build(plan)

        assert exc_info.value.kind == "target"
        assert exc_info.value.name == "X"

    def test_duplicate_product_names(self, plan_builder):
        plan = plan_builder(swift_targets=["A"])
        plan.build_products = [
            ProductBuildDescription(product=ResolvedProduct("exe", "pkg1")),
            ProductBuildDescription(product=ResolvedProduct("exe", "pkg2")),
        ]

        with pytest.raises(DuplicateKeyError, match="Duplicate product name: exe"):
            BuildPlanIndex.build(plan)

    def test_unresolved_target_id(self, plan_builder):
        plan = plan_builder(swift_targets=["A"], products=["A"])
        orphan = ResolvedModule(id="orphan-id", name="Orphan")
        plan.target_map = dict(plan.target_map)
        plan.target_map[orphan.id] = SwiftTargetBuildDescription(target=orphan)

        with pytest.raises(NotFoundError) as exc_info:
            BuildPlanIndex.build(plan)

        assert exc_info.value.name == "orphan-id"
        assert "orphan-id" in str(exc_info.value)

    def test_failure_logged(self, plan_builder, caplog):
        plan = plan_builder()
        orphan = ResolvedModule(id="orphan-id", name="Orphan")
        plan.target_map = {orphan.id: SwiftTargetBuildDescription(target=orphan)}

        with caplog.at_level(logging.ERROR, logger="buildplankit.plan.index"):
            with pytest.raises(NotFoundError):
                BuildPlanIndex.build(plan)

        assert "orphan-id" in caplog.text


class TestNarrowing:
    """Tests for the language-family narrowing accessors."""

    def test_swift_target(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        swift = index.target("A").swift_target()

        assert isinstance(swift, SwiftTargetBuildDescription)
        assert index.swift_target("A") is swift

    def test_clang_target(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)
        assert isinstance(index.clang_target("C"), ClangTargetBuildDescription)

    def test_swift_accessor_on_clang_target(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(TypeMismatchError) as exc_info:
            index.target("C").swift_target()

        assert exc_info.value.expected == "swift"
        assert exc_info.value.actual == "clang"

    def test_clang_accessor_on_swift_target(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(TypeMismatchError) as exc_info:
            index.clang_target("B")

        assert exc_info.value.expected == "clang"
        assert exc_info.value.actual == "swift"

    def test_base_description_reports_unknown_family(self):
        description = TargetBuildDescription(target=ResolvedModule("t-id", "T"))

        with pytest.raises(TypeMismatchError) as exc_info:
            description.swift_target()

        assert exc_info.value.actual == "unknown"
        assert "Unexpected unknown type found for target T" in str(exc_info.value)

    def test_mismatch_leaves_index_usable(self, simple_plan):
        index = BuildPlanIndex.build(simple_plan)

        with pytest.raises(TypeMismatchError):
            index.swift_target("C")

        assert index.target_count() == 3
        assert index.clang_target("C").name == "C"


class TestLookupSources:
    """Tests for ordered target id resolution."""

    def test_graph_takes_priority(self):
        in_graph = ResolvedModule(id="T-id", name="FromGraph")
        derived = ResolvedModule(id="T-id", name="FromDerived")
        plan = BuildPlan(
            graph=ModulesGraph.from_modules([in_graph]),
            derived_test_targets_map={"Tests": [derived]},
        )

        module = resolve_target("T-id", target_lookup_sources(plan))

        assert module.name == "FromGraph"

    def test_derived_targets_flattened(self):
        plan = BuildPlan(
            graph=ModulesGraph(),
            derived_test_targets_map={
                "FooTests": [ResolvedModule(id="a", name="A")],
                "BarTests": [ResolvedModule(id="b", name="B")],
            },
        )
        sources = target_lookup_sources(plan)

        assert resolve_target("a", sources).name == "A"
        assert resolve_target("b", sources).name == "B"

    def test_extra_source(self):
        extra = {"x": ResolvedModule(id="x", name="X")}
        sources = [lambda _: None, extra.get]

        assert resolve_target("x", sources).name == "X"

    def test_no_source_knows_id(self):
        with pytest.raises(NotFoundError):
            resolve_target("missing", [])

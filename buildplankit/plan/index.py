"""
Name-addressable index over a computed build plan.

A build plan keys its targets by id. Verification code wants to ask for
"the description of target Foo" instead, so BuildPlanIndex reconciles the
plan's target ids with display names once, checks that names are unique,
and exposes read-only lookups.

Example:
    ```python
    from buildplankit.plan import BuildPlanIndex

    index = BuildPlanIndex.build(plan)
    swift = index.target("Foo").swift_target()
    exe = index.product("foo-cli")
    ```
"""

from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Tuple, TypeVar
import logging

from buildplankit.core.exceptions import DuplicateKeyError, NotFoundError
from buildplankit.plan.model import (
    BuildPlan,
    ClangTargetBuildDescription,
    ProductBuildDescription,
    ResolvedModule,
    SwiftTargetBuildDescription,
    TargetBuildDescription,
)

logger = logging.getLogger(__name__)

V = TypeVar("V")

# A lookup source resolves a target id to its module identity, or None.
TargetLookup = Callable[[str], Optional[ResolvedModule]]


def _unique_mapping(kind: str, pairs: Iterable[Tuple[str, V]]) -> Mapping[str, V]:
    """Build a read-only mapping, failing on the first repeated key."""
    result = {}
    for name, value in pairs:
        if name in result:
            logger.error(f"Build plan contains duplicate {kind} name: {name}")
            raise DuplicateKeyError(kind, name)
        result[name] = value
    return MappingProxyType(result)


def target_lookup_sources(plan: BuildPlan) -> List[TargetLookup]:
    """
    Ordered sources used to resolve a target id to its identity.

    The plan's modules graph is consulted first, then the test targets
    synthesized for test products.
    """
    derived = {
        module.id: module
        for modules in plan.derived_test_targets_map.values()
        for module in modules
    }
    return [plan.graph.get, derived.get]


def resolve_target(
    target_id: str, sources: Iterable[TargetLookup]
) -> ResolvedModule:
    """
    Resolve a target id using the first source that knows it.

    Raises:
        NotFoundError: If no source knows the id
    """
    for lookup in sources:
        module = lookup(target_id)
        if module is not None:
            return module
    logger.error(f"Target id {target_id} is not part of the build plan graph")
    raise NotFoundError("target", target_id)


class BuildPlanIndex:
    """
    Uniqueness-checked target and product tables for one build plan.

    Construction either succeeds completely or raises; a partially built
    index is never returned. Once built the index is read-only.
    """

    def __init__(
        self,
        plan: BuildPlan,
        target_map: Mapping[str, TargetBuildDescription],
        product_map: Mapping[str, ProductBuildDescription],
    ):
        self._plan = plan
        self._target_map = MappingProxyType(dict(target_map))
        self._product_map = MappingProxyType(dict(product_map))

    @classmethod
    def build(cls, plan: BuildPlan) -> "BuildPlanIndex":
        """
        Index a build plan by target and product name.

        Args:
            plan: Completed build plan

        Returns:
            BuildPlanIndex over the plan

        Raises:
            NotFoundError: If a target id cannot be resolved to an identity
            DuplicateKeyError: If two targets or two products share a name
        """
        sources = target_lookup_sources(plan)
        target_map = _unique_mapping(
            "target",
            (
                (resolve_target(target_id, sources).name, description)
                for target_id, description in plan.target_map.items()
            ),
        )

        product_map = _unique_mapping(
            "product",
            (
                (description.product.name, description)
                for description in plan.build_products
                if isinstance(description, ProductBuildDescription)
            ),
        )

        logger.debug(
            f"Indexed build plan with {len(target_map)} targets "
            f"and {len(product_map)} products"
        )
        return cls(plan, target_map, product_map)

    @property
    def plan(self) -> BuildPlan:
        """The plan this index was built from."""
        return self._plan

    @property
    def target_map(self) -> Mapping[str, TargetBuildDescription]:
        return self._target_map

    @property
    def product_map(self) -> Mapping[str, ProductBuildDescription]:
        return self._product_map

    def target_count(self) -> int:
        return len(self._target_map)

    def product_count(self) -> int:
        return len(self._product_map)

    def target_names(self) -> List[str]:
        return sorted(self._target_map)

    def product_names(self) -> List[str]:
        return sorted(self._product_map)

    def target(self, name: str) -> TargetBuildDescription:
        """
        Look up a target description by name.

        Raises:
            NotFoundError: If no target has this name
        """
        try:
            return self._target_map[name]
        except KeyError:
            raise NotFoundError("target", name) from None

    def product(self, name: str) -> ProductBuildDescription:
        """
        Look up a linkable product description by name.

        Raises:
            NotFoundError: If no linkable product has this name
        """
        try:
            return self._product_map[name]
        except KeyError:
            raise NotFoundError("product", name) from None

    def swift_target(self, name: str) -> SwiftTargetBuildDescription:
        """Look up a target and narrow it to a Swift target."""
        return self.target(name).swift_target()

    def clang_target(self, name: str) -> ClangTargetBuildDescription:
        """Look up a target and narrow it to a C-family target."""
        return self.target(name).clang_target()

    def __repr__(self) -> str:
        return (
            f"BuildPlanIndex(targets={self.target_count()}, "
            f"products={self.product_count()})"
        )

"""Test plan builder - derives ordered checks from a manifest.

TIER 2: May import from core, lib.

build_plan() is pure and deterministic: the same manifest and settings
always yield an equal plan. Config (plan.purpose_max_length,
plan.suite_prefix) is only read by build_plans().

Order of checks:
1. public-surface: components, services, types, hooks, collections
2. dependency: blocks, collections, components, utilities (never external)
3. purpose: one per statement, summarized for display
4. error-boundary: one per block dependency
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from core.errors import ConfigError
from core.types import DependencyCategory, SurfaceCategory, TestCategory
from lib.config import get
from manifest.graph import build_dependency_graph, execution_order
from manifest.model import ManifestInfo

DEFAULT_PURPOSE_MAX_LENGTH = 50
DEFAULT_SUITE_PREFIX = "@manifest:"

PLAN_DEPENDENCY_CATEGORIES = (
    DependencyCategory.BLOCKS,
    DependencyCategory.COLLECTIONS,
    DependencyCategory.COMPONENTS,
    DependencyCategory.UTILITIES,
)

ERROR_BOUNDARY_HINT = (
    "Make {block} fail (raise from its loader or mock it to error), then check "
    "the consuming surface renders its error boundary and stays usable"
)


@dataclass(frozen=True)
class TestSpec:
    """One planned check."""

    __test__ = False

    category: TestCategory
    description: str
    hint: str | None = None


@dataclass(frozen=True)
class TestPlan:
    """Ordered checks derived from one manifest."""

    __test__ = False

    manifest_id: str
    suite_name: str
    checks: tuple[TestSpec, ...] = ()

    def by_category(self, category: TestCategory) -> list[TestSpec]:
        """Get checks of one category, in plan order."""
        return [check for check in self.checks if check.category == category]

    def __len__(self) -> int:
        return len(self.checks)


def suite_name_for(manifest_id: str, prefix: str = DEFAULT_SUITE_PREFIX) -> str:
    """Derive the suite name for a manifest id ("blocks/hero" -> "@manifest:blocks:hero")."""
    return f"{prefix}{manifest_id.replace('/', ':')}"


def summarize_purpose(statement: str, max_length: int) -> str:
    """Truncate a purpose statement for display.

    Args:
        statement: Purpose statement.
        max_length: Maximum characters kept from the statement.

    Returns:
        The statement, or its first max_length characters followed
        by "..." when longer.
    """
    if len(statement) <= max_length:
        return statement
    return f"{statement[:max_length]}..."


def build_plan(
    manifest: ManifestInfo,
    purpose_max_length: int = DEFAULT_PURPOSE_MAX_LENGTH,
    suite_prefix: str = DEFAULT_SUITE_PREFIX,
) -> TestPlan:
    """Build the test plan for a manifest.

    Args:
        manifest: Validated manifest.
        purpose_max_length: Characters kept from each purpose statement.
        suite_prefix: Prefix of the suite name.

    Returns:
        TestPlan with checks in deterministic order.
    """
    checks: list[TestSpec] = []

    for category in SurfaceCategory:
        checks.extend(
            TestSpec(
                TestCategory.PUBLIC_SURFACE,
                f"public surface: {category.value} -> {symbol} is importable",
            )
            for symbol in manifest.public(category)
        )

    for category in PLAN_DEPENDENCY_CATEGORIES:
        checks.extend(
            TestSpec(
                TestCategory.DEPENDENCY,
                f"dependency: {category.value} -> {dep} loads without error",
            )
            for dep in manifest.depends_on(category)
        )

    checks.extend(
        TestSpec(TestCategory.PURPOSE, f"purpose: {summarize_purpose(p, purpose_max_length)}")
        for p in manifest.purpose
    )

    # Only blocks get error boundaries; collections/components do not
    checks.extend(
        TestSpec(
            TestCategory.ERROR_BOUNDARY,
            f"error-boundary: {block} failure is contained",
            hint=ERROR_BOUNDARY_HINT.format(block=block),
        )
        for block in manifest.depends_on(DependencyCategory.BLOCKS)
    )

    return TestPlan(
        manifest_id=manifest.id,
        suite_name=suite_name_for(manifest.id, suite_prefix),
        checks=tuple(checks),
    )


def plan_settings() -> tuple[int, str]:
    """Read (purpose_max_length, suite_prefix) from the project config.

    Raises:
        ConfigError: If the config is invalid or a value has the wrong type.
    """
    max_length = get("plan.purpose_max_length", DEFAULT_PURPOSE_MAX_LENGTH)
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
        raise ConfigError(f"plan.purpose_max_length must be a positive integer, got {max_length!r}")

    prefix = get("plan.suite_prefix", DEFAULT_SUITE_PREFIX)
    if not isinstance(prefix, str):
        raise ConfigError(f"plan.suite_prefix must be a string, got {prefix!r}")

    return max_length, prefix


def build_plans(
    manifests: Iterable[ManifestInfo],
    purpose_max_length: int | None = None,
    suite_prefix: str | None = None,
) -> list[TestPlan]:
    """Build plans for all manifests, dependencies first.

    Settings left as None come from the project config.

    Raises:
        CyclicManifestDependencyError: If manifests depend on each other in a cycle.
        ConfigError: If a setting has to be read from an invalid config.
    """
    if purpose_max_length is None or suite_prefix is None:
        configured_length, configured_prefix = plan_settings()
        if purpose_max_length is None:
            purpose_max_length = configured_length
        if suite_prefix is None:
            suite_prefix = configured_prefix

    by_id = {m.id: m for m in manifests}
    order = execution_order(build_dependency_graph(by_id.values()))
    return [build_plan(by_id[manifest_id], purpose_max_length, suite_prefix) for manifest_id in order]


def count_by_category(plan: TestPlan) -> dict[TestCategory, int]:
    """Count checks per category (all categories present)."""
    counts = Counter(check.category for check in plan.checks)
    return {category: counts.get(category, 0) for category in TestCategory}

"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from enum import Enum


class ManifestKind(str, Enum):
    """Kind of module a manifest describes."""

    COLLECTION = "collection"
    BLOCK = "block"
    COMPONENT = "component"
    UTILITY = "utility"


class SurfaceCategory(str, Enum):
    """Public surface categories, in plan order."""

    COMPONENTS = "components"
    SERVICES = "services"
    TYPES = "types"
    HOOKS = "hooks"
    COLLECTIONS = "collections"


class InternalCategory(str, Enum):
    """Internal surface categories.

    Superset of SurfaceCategory: internal helpers may also be
    declared as utils or config.
    """

    COMPONENTS = "components"
    SERVICES = "services"
    TYPES = "types"
    HOOKS = "hooks"
    COLLECTIONS = "collections"
    UTILS = "utils"
    CONFIG = "config"


class DependencyCategory(str, Enum):
    """Dependency categories, in plan order."""

    BLOCKS = "blocks"
    COLLECTIONS = "collections"
    COMPONENTS = "components"
    UTILITIES = "utilities"
    EXTERNAL = "external"

    def is_internal(self) -> bool:
        """Check if the category references modules inside the system."""
        return self != DependencyCategory.EXTERNAL


class TestCategory(str, Enum):
    """Planned check categories."""

    __test__ = False  # not a pytest test class

    PUBLIC_SURFACE = "public-surface"
    DEPENDENCY = "dependency"
    PURPOSE = "purpose"
    ERROR_BOUNDARY = "error-boundary"


class ViolationKind(str, Enum):
    """Cross-layer consistency violation kinds."""

    STATE_DIVERGENCE = "state-divergence"
    MISSING_AUDIT_ENTRY = "missing-audit-entry"


class Provider(str, Enum):
    """Snapshot provider names."""

    UI = "ui"
    STORE = "store"
    AUDIT = "audit"


# Dependency categories that take part in the manifest graph
GRAPH_CATEGORIES = (
    DependencyCategory.BLOCKS,
    DependencyCategory.COLLECTIONS,
    DependencyCategory.COMPONENTS,
)

"""Core module - types, errors, snapshot values, ports.

TIER 0: No imports outside core, only Python stdlib.

Exports:
- Error types: ShadowkitError, ConfigError, ManifestParseError,
  CyclicManifestDependencyError, ProviderUnavailableError, SnapshotError
- Enums: ManifestKind, SurfaceCategory, InternalCategory, DependencyCategory,
  TestCategory, ViolationKind, Provider
- Snapshots: normalize, deep_equal, diff_paths, fingerprint
- Ports: UISnapshotProvider, StoreSnapshotProvider, AuditProvider
"""

from core.errors import (
    ConfigError,
    CyclicManifestDependencyError,
    ManifestParseError,
    ProviderUnavailableError,
    ShadowkitError,
    SnapshotError,
)
from core.jsonc import loads as loads_jsonc
from core.ports import (
    AuditProvider,
    StoreSnapshotProvider,
    UISnapshotProvider,
    verify_port,
)
from core.snapshot import deep_equal, diff_paths, fingerprint, normalize
from core.types import (
    DependencyCategory,
    InternalCategory,
    ManifestKind,
    Provider,
    SurfaceCategory,
    TestCategory,
    ViolationKind,
)

__all__ = [
    "AuditProvider",
    "ConfigError",
    "CyclicManifestDependencyError",
    "DependencyCategory",
    "InternalCategory",
    "ManifestKind",
    "ManifestParseError",
    "Provider",
    "ProviderUnavailableError",
    "ShadowkitError",
    "SnapshotError",
    "StoreSnapshotProvider",
    "SurfaceCategory",
    "TestCategory",
    "UISnapshotProvider",
    "ViolationKind",
    "deep_equal",
    "diff_paths",
    "fingerprint",
    "loads_jsonc",
    "normalize",
    "verify_port",
]

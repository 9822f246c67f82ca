"""Shadow inspector - cross-layer consistency checks.

TIER 2: May import from core, lib.

Compares what the UI shows for an entity with what the store holds,
and checks that the audit trail recorded an operation for it. The
three layers are read through injected providers (see core.ports);
the inspector itself performs no I/O.

Usage:
    inspector = ShadowInspector(ui, store, audit)
    check = inspector.verify("page", page_id)
    assert check.consistent, check.violations

Violations are data. A provider that fails raises
ProviderUnavailableError instead, so an outage is never reported as
a divergence.
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from core.errors import ProviderUnavailableError, SnapshotError
from core.ports import AuditProvider, StoreSnapshotProvider, UISnapshotProvider
from core.snapshot import Value, diff_paths, fingerprint, normalize
from core.types import Provider, ViolationKind
from lib.logger import get_logger

logger = get_logger("inspector")


@dataclass(frozen=True)
class InvariantCheck:
    """Result of verifying one entity across UI, store and audit trail."""

    entity_type: str
    entity_id: str
    ui_state: Value
    store_state: Value
    audit_trail: tuple[Value, ...]
    violations: tuple[str, ...] = ()

    def __hash__(self) -> int:
        return hash((self.entity_type, self.entity_id, self.violations))

    @property
    def consistent(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "ui_state": copy.deepcopy(self.ui_state),
            "store_state": copy.deepcopy(self.store_state),
            "audit_trail": copy.deepcopy(list(self.audit_trail)),
            "consistent": self.consistent,
            "violations": list(self.violations),
        }


@dataclass(frozen=True)
class ConsistencyDigest:
    """Fingerprint-based consistency result, cheap to poll repeatedly.

    Cannot name the diverging field; use InvariantCheck for that.
    """

    entity_type: str
    entity_id: str
    ui_fingerprint: str
    store_fingerprint: str
    audit_present: bool
    violations: tuple[str, ...] = ()

    @property
    def consistent(self) -> bool:
        return not self.violations


def _call(provider: Provider, entity_id: str, fetch: Callable[..., Any], *args: Any) -> Any:
    """Call a provider, turning any failure into ProviderUnavailableError."""
    try:
        return fetch(*args)
    except Exception as e:
        logger.error("%s provider failed for %s: %s", provider.value, entity_id, e)
        raise ProviderUnavailableError(provider.value, entity_id, str(e) or type(e).__name__) from e


class ShadowInspector:
    """Verifies UI, store and audit trail agree for an entity.

    Args:
        ui_provider: entity_id -> UI state, or None if not shown.
        store_provider: (entity_type, entity_id) -> stored state, or None.
        audit_provider: entity_id -> list of recorded operations.
    """

    def __init__(
        self,
        ui_provider: UISnapshotProvider,
        store_provider: StoreSnapshotProvider,
        audit_provider: AuditProvider,
    ):
        self.ui_provider = ui_provider
        self.store_provider = store_provider
        self.audit_provider = audit_provider

    def _fetch(self, entity_type: str, entity_id: str) -> tuple[Value, Value, tuple[Value, ...]]:
        """Read and normalize all three snapshots (UI, store, audit order)."""
        ui_raw = _call(Provider.UI, entity_id, self.ui_provider, entity_id)
        store_raw = _call(Provider.STORE, entity_id, self.store_provider, entity_type, entity_id)
        audit_raw = _call(Provider.AUDIT, entity_id, self.audit_provider, entity_id)

        if audit_raw is None:
            raise ProviderUnavailableError(Provider.AUDIT.value, entity_id, "returned no result")
        if not isinstance(audit_raw, list | tuple):
            raise SnapshotError(
                f"Audit trail for {entity_id!r} must be a list, got {type(audit_raw).__name__}"
            )

        return normalize(ui_raw), normalize(store_raw), tuple(normalize(audit_raw))

    def verify(self, entity_type: str, entity_id: str) -> InvariantCheck:
        """Verify one entity.

        Args:
            entity_type: Entity type passed to the store provider (e.g. "page").
            entity_id: Entity identifier.

        Returns:
            InvariantCheck with one "state-divergence: <path>" violation
            per differing field and "missing-audit-entry" if the audit
            trail is empty.

        Raises:
            ProviderUnavailableError: If any provider fails.
            SnapshotError: If a snapshot holds unsupported values.
        """
        ui_state, store_state, audit_trail = self._fetch(entity_type, entity_id)

        violations = [
            f"{ViolationKind.STATE_DIVERGENCE.value}: {path}"
            for path in diff_paths(ui_state, store_state)
        ]
        if not audit_trail:
            violations.append(ViolationKind.MISSING_AUDIT_ENTRY.value)

        if violations:
            logger.info("%s %s inconsistent: %s", entity_type, entity_id, "; ".join(violations))
        else:
            logger.debug("%s %s consistent", entity_type, entity_id)

        return InvariantCheck(
            entity_type=entity_type,
            entity_id=entity_id,
            ui_state=ui_state,
            store_state=store_state,
            audit_trail=audit_trail,
            violations=tuple(violations),
        )

    def summarize(self, entity_type: str, entity_id: str) -> ConsistencyDigest:
        """Compare fingerprints of UI and store state instead of diffing them.

        Raises:
            ProviderUnavailableError: If any provider fails.
            SnapshotError: If a snapshot holds unsupported values.
        """
        ui_state, store_state, audit_trail = self._fetch(entity_type, entity_id)

        ui_fingerprint = fingerprint(ui_state)
        store_fingerprint = fingerprint(store_state)

        violations = []
        if ui_fingerprint != store_fingerprint:
            violations.append(ViolationKind.STATE_DIVERGENCE.value)
        if not audit_trail:
            violations.append(ViolationKind.MISSING_AUDIT_ENTRY.value)

        return ConsistencyDigest(
            entity_type=entity_type,
            entity_id=entity_id,
            ui_fingerprint=ui_fingerprint,
            store_fingerprint=store_fingerprint,
            audit_present=bool(audit_trail),
            violations=tuple(violations),
        )


def verify(
    entity_type: str,
    entity_id: str,
    ui_provider: UISnapshotProvider,
    store_provider: StoreSnapshotProvider,
    audit_provider: AuditProvider,
) -> InvariantCheck:
    """Verify one entity with the given providers (see ShadowInspector.verify)."""
    return ShadowInspector(ui_provider, store_provider, audit_provider).verify(entity_type, entity_id)


def summarize(
    entity_type: str,
    entity_id: str,
    ui_provider: UISnapshotProvider,
    store_provider: StoreSnapshotProvider,
    audit_provider: AuditProvider,
) -> ConsistencyDigest:
    """Fingerprint one entity with the given providers (see ShadowInspector.summarize)."""
    return ShadowInspector(ui_provider, store_provider, audit_provider).summarize(
        entity_type, entity_id
    )

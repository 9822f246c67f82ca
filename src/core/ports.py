"""Port interfaces for snapshot providers.

TIER 0: No internal imports, only Python stdlib.

The shadow inspector never talks to a browser, database or audit log
directly. Callers inject three plain callables that satisfy these
ports; any callable with the right signature qualifies.

Usage:
    def ui(entity_id: str) -> Any:
        return page.evaluate(EXTRACT_STATE, entity_id)

    def store(entity_type: str, entity_id: str) -> Any:
        return db.fetch_one(f"SELECT * FROM {entity_type}s WHERE id = %s", entity_id)

    def audit(entity_id: str) -> list[Any]:
        return db.fetch_all("SELECT * FROM audit_logs WHERE entity_id = %s", entity_id)

Contract:
    A provider returns None for "entity not found" and raises on
    infrastructure failure (store unreachable, UI not rendered, audit
    log unavailable). It must never return a value that looks like an
    empty result when the resource could not be read.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UISnapshotProvider(Protocol):
    """Port for reading an entity's state as shown by the UI."""

    def __call__(self, entity_id: str) -> Any:
        """Return the UI state of the entity, or None if not shown."""
        ...


@runtime_checkable
class StoreSnapshotProvider(Protocol):
    """Port for reading an entity from the system of record."""

    def __call__(self, entity_type: str, entity_id: str) -> Any:
        """Return the stored state of the entity, or None if absent."""
        ...


@runtime_checkable
class AuditProvider(Protocol):
    """Port for reading the audit trail of an entity."""

    def __call__(self, entity_id: str) -> list[Any]:
        """Return recorded operations for the entity, oldest first."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Runtime checks only see that the object is callable; arity is not
    verified.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.
    """
    return isinstance(implementation, port)

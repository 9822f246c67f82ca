"""Custom exceptions for shadowkit.

TIER 0: No internal imports, only Python stdlib.
"""

from pathlib import Path


class ShadowkitError(Exception):
    """Base exception for shadowkit."""

    pass


class ConfigError(ShadowkitError):
    """Configuration error."""

    pass


class ManifestParseError(ShadowkitError):
    """A manifest declaration is malformed or duplicates another one."""

    def __init__(self, source: Path | str | None, reason: str, manifest_id: str | None = None):
        self.source = source
        self.reason = reason
        self.manifest_id = manifest_id

        location = str(source) if source is not None else "<memory>"
        if manifest_id:
            location = f"{location} ({manifest_id})"
        super().__init__(f"Invalid manifest {location}: {reason}")


class CyclicManifestDependencyError(ShadowkitError):
    """Manifest dependency graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic manifest dependency: {'→'.join(self.cycle)}")


class ProviderUnavailableError(ShadowkitError):
    """A snapshot provider could not produce a result."""

    def __init__(self, provider: str, entity_id: str, detail: str = ""):
        self.provider = provider
        self.entity_id = entity_id
        self.detail = detail

        message = f"{provider} provider unavailable for entity {entity_id!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class SnapshotError(ShadowkitError):
    """Snapshot holds a value outside the supported variant set."""

    pass

"""Manifest model - validated, read-only module declarations.

TIER 2: May import from core, lib.

A manifest declares a module's identity, public and internal surface,
and dependencies:

    {
      "id": "pages",
      "kind": "collection",
      "purpose": ["Static pages can be created and published"],
      "publicAPI": {"components": ["PageForm"]},
      "internalAPI": {"utils": ["slugify"]},
      "dependencies": {"blocks": ["ArchiveBlock"], "external": ["react"]}
    }
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from core.errors import ManifestParseError
from core.types import (
    DependencyCategory,
    InternalCategory,
    ManifestKind,
    SurfaceCategory,
)

C = TypeVar("C", bound=Enum)


@dataclass(frozen=True)
class ManifestInfo:
    """Static description of one module.

    Every category of every map is present; undeclared categories
    hold an empty tuple.
    """

    id: str
    kind: ManifestKind
    name: str = ""
    purpose: tuple[str, ...] = ()
    public_surface: dict[SurfaceCategory, tuple[str, ...]] = field(default_factory=dict)
    internal_surface: dict[InternalCategory, tuple[str, ...]] = field(default_factory=dict)
    dependencies: dict[DependencyCategory, tuple[str, ...]] = field(default_factory=dict)
    source: Path | None = field(default=None, compare=False)

    def __hash__(self) -> int:
        # Surface and dependency maps are dicts; hash the scalar identity
        return hash((self.id, self.kind, self.name, self.purpose))

    def public(self, category: SurfaceCategory) -> tuple[str, ...]:
        """Get public symbols of a category."""
        return self.public_surface.get(category, ())

    def depends_on(self, category: DependencyCategory) -> tuple[str, ...]:
        """Get referenced module ids of a dependency category."""
        return self.dependencies.get(category, ())

    @property
    def public_symbol_count(self) -> int:
        return sum(len(symbols) for symbols in self.public_surface.values())


def _fail(source: Path | None, reason: str, manifest_id: str | None = None) -> ManifestParseError:
    return ManifestParseError(source, reason, manifest_id)


def _parse_names(
    value: Any, where: str, source: Path | None, manifest_id: str
) -> tuple[str, ...]:
    """Validate a list of non-empty strings, kept in declaration order."""
    if not isinstance(value, list):
        raise _fail(source, f"{where} must be a list of strings", manifest_id)

    names: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise _fail(source, f"{where} contains a non-string or empty entry", manifest_id)
        names.append(item)

    return tuple(names)


def _parse_category_map(
    raw: Any,
    categories: type[C],
    where: str,
    source: Path | None,
    manifest_id: str,
) -> dict[C, tuple[str, ...]]:
    """Parse a {category: [names]} map over a closed category set."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise _fail(source, f"{where} must be an object", manifest_id)

    known = {c.value: c for c in categories}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        raise _fail(
            source,
            f"{where} has unknown categor{'y' if len(unknown) == 1 else 'ies'}: "
            f"{', '.join(unknown)} (expected one of {', '.join(known)})",
            manifest_id,
        )

    parsed = {}
    for category in categories:
        value = raw.get(category.value)
        parsed[category] = (
            () if value is None else _parse_names(value, f"{where}.{category.value}", source, manifest_id)
        )
    return parsed


def parse_manifest(data: Any, source: Path | None = None) -> ManifestInfo:
    """Validate one decoded manifest declaration.

    The kind may be declared as "kind" or "type". Unknown top-level
    fields are ignored; unknown categories are rejected.

    Args:
        data: Decoded manifest record.
        source: File the record came from (for error messages).

    Returns:
        Validated ManifestInfo.

    Raises:
        ManifestParseError: On a missing id, wrong kind tag, unknown
            category, malformed list, or a symbol that is both public
            and internal in the same category.
    """
    if not isinstance(data, dict):
        raise _fail(source, "manifest must be an object")

    manifest_id = data.get("id")
    if not isinstance(manifest_id, str) or not manifest_id.strip():
        raise _fail(source, "missing or empty 'id'")

    kind_tag = data.get("kind", data.get("type"))
    try:
        kind = ManifestKind(kind_tag)
    except ValueError:
        allowed = ", ".join(k.value for k in ManifestKind)
        raise _fail(source, f"invalid kind {kind_tag!r} (expected one of {allowed})", manifest_id) from None

    name = data.get("name", manifest_id)
    if not isinstance(name, str):
        raise _fail(source, "'name' must be a string", manifest_id)

    purpose_raw = data.get("purpose", [])
    if isinstance(purpose_raw, str):
        purpose_raw = [purpose_raw]
    purpose = _parse_names(purpose_raw, "purpose", source, manifest_id)

    public = _parse_category_map(data.get("publicAPI"), SurfaceCategory, "publicAPI", source, manifest_id)
    internal = _parse_category_map(
        data.get("internalAPI"), InternalCategory, "internalAPI", source, manifest_id
    )
    dependencies = _parse_category_map(
        data.get("dependencies"), DependencyCategory, "dependencies", source, manifest_id
    )

    for category in SurfaceCategory:
        overlap = [s for s in public[category] if s in internal[InternalCategory(category.value)]]
        if overlap:
            raise _fail(
                source,
                f"{category.value} both public and internal: {', '.join(overlap)}",
                manifest_id,
            )

    return ManifestInfo(
        id=manifest_id,
        kind=kind,
        name=name,
        purpose=purpose,
        public_surface=public,
        internal_surface=internal,
        dependencies=dependencies,
        source=source,
    )

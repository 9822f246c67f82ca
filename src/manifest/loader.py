"""Manifest loader - discovers and parses manifest files.

TIER 2: May import from core, lib.

Scans the project for manifest.jsonc / manifest.json files (patterns
configurable via manifests.scan_patterns) and validates each one.
A malformed file is reported and skipped; strict mode aborts instead.
"""

import json
from pathlib import Path

from core.errors import ManifestParseError
from core.jsonc import loads as loads_jsonc
from lib.config import get, get_project_root
from lib.logger import configure_from_config, get_logger
from manifest.model import ManifestInfo, parse_manifest

logger = get_logger("loader")


def _is_excluded(path: Path, root: Path, exclude_dirs: list[str]) -> bool:
    try:
        parts = path.relative_to(root).parts[:-1]
    except ValueError:
        return False
    return any(part in exclude_dirs for part in parts)


def discover_manifests(root: Path | None = None, patterns: list[str] | None = None) -> list[Path]:
    """Find manifest files under a project root.

    Settings are read from the config under root when root is given.

    Args:
        root: Project root directory.
        patterns: Glob patterns relative to root (default: manifests.scan_patterns).

    Returns:
        Sorted, de-duplicated list of manifest file paths.
    """
    config_root = root
    if root is None:
        root = get_project_root()

    if patterns is None:
        patterns = get(
            "manifests.scan_patterns", ["**/manifest.jsonc", "**/manifest.json"], root=config_root
        )

    exclude_dirs = get("manifests.exclude_dirs", [], root=config_root)

    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if path.is_file() and not _is_excluded(path, root, exclude_dirs):
                found.add(path)

    return sorted(found)


def read_manifest(path: Path) -> ManifestInfo:
    """Read and validate a single manifest file.

    Args:
        path: Manifest file (JSON or JSONC).

    Returns:
        Validated ManifestInfo.

    Raises:
        ManifestParseError: If the file cannot be read, decoded or validated.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, f"cannot read file: {e}") from e

    try:
        data = loads_jsonc(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    return parse_manifest(data, source=path)


def load_all(
    root: Path | None = None,
    patterns: list[str] | None = None,
    strict: bool = False,
) -> tuple[list[ManifestInfo], list[ManifestParseError]]:
    """Load every manifest in the project.

    Files are processed in path order. When two manifests share an id,
    the first one wins and the second is reported as an error.

    Args:
        root: Project root directory.
        patterns: Glob patterns overriding manifests.scan_patterns.
        strict: If True, raise on the first malformed manifest.

    Returns:
        Tuple of (valid manifests, per-entry errors).

    Raises:
        ManifestParseError: In strict mode, for the first malformed entry.
    """
    configure_from_config()

    manifests: list[ManifestInfo] = []
    errors: list[ManifestParseError] = []
    seen: dict[str, Path | None] = {}

    for path in discover_manifests(root, patterns):
        try:
            manifest = read_manifest(path)
            if manifest.id in seen:
                raise ManifestParseError(
                    path, f"duplicate id, first declared in {seen[manifest.id]}", manifest.id
                )
        except ManifestParseError as e:
            if strict:
                raise
            logger.warning("Skipping %s", e)
            errors.append(e)
            continue

        seen[manifest.id] = path
        manifests.append(manifest)

    logger.debug("Loaded %d manifest(s), %d error(s)", len(manifests), len(errors))
    return manifests, errors


def format_scan_report(manifests: list[ManifestInfo], errors: list[ManifestParseError]) -> str:
    """Format load_all() results for display.

    Args:
        manifests: Valid manifests.
        errors: Per-entry errors.

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = ["── Manifests ───────────────────────"]

    lines.append(f"✓ {len(manifests)} manifest(s) loaded")
    for manifest in manifests:
        lines.append(f"  • {manifest.id} [{manifest.kind.value}]")

    if errors:
        lines.append(f"✗ {len(errors)} manifest(s) rejected:")
        for error in errors:
            lines.append(f"  ❌ {error.source}: {error.reason}")

    return "\n".join(lines)

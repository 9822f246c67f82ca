"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def clear_config_cache():
    """Clear config cache before and after test."""
    from lib.config import clear_cache

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def project(tmp_path, monkeypatch, clear_config_cache):
    """Use tmp_path as the project root."""
    monkeypatch.setenv("SHADOWKIT_PROJECT_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_manifest(project):
    """Write a manifest file under the project root.

    Usage:
        path = write_manifest("src/pages", {"id": "pages", ...})
    """

    def _write(directory: str, data: dict | str, filename: str = "manifest.json") -> Path:
        target = project / directory
        target.mkdir(parents=True, exist_ok=True)
        path = target / filename
        path.write_text(data if isinstance(data, str) else json.dumps(data, indent=2))
        return path

    return _write


@pytest.fixture
def pages_manifest_data():
    """Return the pages collection manifest as declared on disk."""
    return {
        "id": "pages",
        "kind": "collection",
        "purpose": ["Static pages can be created, published and archived"],
        "publicAPI": {"components": ["PageForm"]},
        "dependencies": {"blocks": ["ArchiveBlock"], "external": ["react"]},
    }


class FakeLayers:
    """In-memory UI, store and audit layers for the shadow inspector."""

    def __init__(self):
        self.ui: dict[str, object] = {}
        self.store: dict[tuple[str, str], object] = {}
        self.audit: dict[str, list] = {}
        self.calls: list[str] = []

    def ui_provider(self, entity_id):
        self.calls.append("ui")
        return self.ui.get(entity_id)

    def store_provider(self, entity_type, entity_id):
        self.calls.append("store")
        return self.store.get((entity_type, entity_id))

    def audit_provider(self, entity_id):
        self.calls.append("audit")
        return self.audit.get(entity_id, [])


@pytest.fixture
def layers():
    """Return empty fake layers."""
    return FakeLayers()

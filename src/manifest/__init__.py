"""Manifest module - model, loader, dependency graph, test plans.

TIER 2: May import from core, lib.
"""

from .graph import build_dependency_graph, execution_order, find_cycle
from .loader import discover_manifests, format_scan_report, load_all, read_manifest
from .model import ManifestInfo, parse_manifest
from .plan import (
    TestPlan,
    TestSpec,
    build_plan,
    build_plans,
    count_by_category,
    plan_settings,
    suite_name_for,
    summarize_purpose,
)

__all__ = [
    "ManifestInfo",
    "TestPlan",
    "TestSpec",
    "build_dependency_graph",
    "build_plan",
    "build_plans",
    "count_by_category",
    "discover_manifests",
    "execution_order",
    "find_cycle",
    "format_scan_report",
    "load_all",
    "parse_manifest",
    "plan_settings",
    "read_manifest",
    "suite_name_for",
    "summarize_purpose",
]

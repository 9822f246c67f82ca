"""Shadow module - cross-layer consistency checks.

TIER 2: May import from core, lib.
"""

from .inspector import (
    ConsistencyDigest,
    InvariantCheck,
    ShadowInspector,
    summarize,
    verify,
)
from .report import format_check_report, format_compact

__all__ = [
    "ConsistencyDigest",
    "InvariantCheck",
    "ShadowInspector",
    "format_check_report",
    "format_compact",
    "summarize",
    "verify",
]

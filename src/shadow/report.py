"""Terminal formatting for shadow inspector results.

TIER 2: May import from core, lib.
"""

from collections.abc import Sequence

from shadow.inspector import ConsistencyDigest, InvariantCheck

Result = InvariantCheck | ConsistencyDigest


def format_check_report(results: Sequence[Result]) -> str:
    """Format verify()/summarize() results for display.

    Args:
        results: Checked entities.

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = ["── Shadow ──────────────────────────"]

    failing = [r for r in results if not r.consistent]

    if not failing:
        lines.append(f"✓ {len(results)} entit{'y' if len(results) == 1 else 'ies'} consistent")
        return "\n".join(lines)

    lines.append(f"✗ {len(failing)} of {len(results)} entities inconsistent:")
    for result in failing:
        lines.append(f"  ❌ {result.entity_type}:{result.entity_id}")
        lines.extend(f"     {violation}" for violation in result.violations)

    return "\n".join(lines)


def format_compact(results: Sequence[Result]) -> str | None:
    """Format results as a one-line warning.

    Returns:
        Compact warning string, or None if everything is consistent.
    """
    failing = sum(1 for r in results if not r.consistent)

    if failing == 0:
        return None

    return f"⚠️ {failing} inconsistent entit{'y' if failing == 1 else 'ies'}"

"""JSONC decoder - JSON with comments and trailing commas.

TIER 0: No internal imports, only Python stdlib.

Manifests and config files are JSONC, so both go through loads().
"""

import json
import re
from typing import Any

# Strings first so that "//" or "/*" inside them is never treated as a comment
_TOKEN = re.compile(
    r"""
    (?P<string>"(?:\\.|[^"\\])*")
    | (?P<line>//[^\n]*)
    | (?P<block>/\*.*?\*/)
    | (?P<comma>,(?=(?:\s|//[^\n]*|/\*.*?\*/)*[\]}]))
    """,
    re.VERBOSE | re.DOTALL,
)


def _replace(match: re.Match) -> str:
    if match.lastgroup == "string":
        return match.group(0)
    if match.lastgroup == "block":
        # Keep line numbers stable for json error messages
        return "\n" * match.group(0).count("\n")
    return ""


def to_json(content: str) -> str:
    """Convert JSONC to valid JSON.

    Removes // and /* */ comments and trailing commas before ] or },
    leaving string literals untouched.

    Args:
        content: JSONC text.

    Returns:
        JSON text accepted by json.loads().
    """
    return _TOKEN.sub(_replace, content)


def loads(content: str) -> Any:
    """Parse JSONC text.

    Raises:
        json.JSONDecodeError: If the text is not valid once comments
            and trailing commas are removed.
    """
    return json.loads(to_json(content))

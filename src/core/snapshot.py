"""Snapshot value model - structural equality, diffs and fingerprints.

TIER 0: Imports from core only, plus Python stdlib.

A snapshot is a JSON-like value from one layer (UI, store, audit):

    None | bool | int | float | str | list[Value] | dict[str, Value]

Comparison is type-strict: "1" != 1 and True != 1. Integers and
floats form a single number variant, so 1 == 1.0.
"""

import hashlib
import json
import math
from typing import Any

from core.errors import SnapshotError

Value = Any  # None | bool | int | float | str | list[Value] | dict[str, Value]

ROOT_PATH = "<root>"


def normalize(value: Any, path: str = ROOT_PATH) -> Value:
    """Return a detached copy of a snapshot, validating its variant.

    Tuples become lists. Mapping keys must be strings.

    Args:
        value: Raw snapshot from a provider.
        path: Path of value inside the snapshot (for error messages).

    Returns:
        Normalized copy sharing no containers with the input.

    Raises:
        SnapshotError: If a value is not one of the supported variants.
    """
    if value is None or isinstance(value, bool | int | str):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise SnapshotError(f"Non-finite number {value!r} at {path}")
        return value

    if isinstance(value, list | tuple):
        return [normalize(item, _index_path(path, i)) for i, item in enumerate(value)]

    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise SnapshotError(f"Non-string key {key!r} at {path}")
            result[key] = normalize(item, _key_path(path, key))
        return result

    raise SnapshotError(f"Unsupported {type(value).__name__} value at {path}")


def _variant(value: Value) -> str:
    """Get the variant tag of a normalized value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    return "map"


def deep_equal(a: Value, b: Value) -> bool:
    """Check structural equality of two normalized values.

    Maps are equal iff they have the same key set and every value is
    recursively equal. Lists compare element-wise in order.
    """
    if _variant(a) != _variant(b):
        return False

    if isinstance(a, list):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, dict):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    return a == b


def _key_path(parent: str, key: str) -> str:
    return key if parent == ROOT_PATH else f"{parent}.{key}"


def _index_path(parent: str, index: int) -> str:
    prefix = "" if parent == ROOT_PATH else parent
    return f"{prefix}[{index}]"


def diff_paths(a: Value, b: Value, path: str = ROOT_PATH) -> list[str]:
    """List the field paths where two normalized values differ.

    Map keys are visited in sorted order, so the result is stable.
    A key present on one side only is reported at its own path. Lists
    of different length are reported as a whole.

    Args:
        a: First value.
        b: Second value.
        path: Path of the values being compared.

    Returns:
        Differing paths, e.g. ["status", "tags[1]", "author.name"].
    """
    if _variant(a) != _variant(b):
        return [path]

    if isinstance(a, dict):
        paths: list[str] = []
        for key in sorted(a.keys() | b.keys()):
            child = _key_path(path, key)
            if key not in a or key not in b:
                paths.append(child)
            else:
                paths.extend(diff_paths(a[key], b[key], child))
        return paths

    if isinstance(a, list):
        if len(a) != len(b):
            return [path]
        paths = []
        for i, (x, y) in enumerate(zip(a, b)):
            paths.extend(diff_paths(x, y, _index_path(path, i)))
        return paths

    return [] if a == b else [path]


def _canonical(value: Value) -> Value:
    """Collapse integral floats so equal numbers serialize identically."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_canonical(item) for item in value]
    if isinstance(value, dict):
        return {key: _canonical(item) for key, item in value.items()}
    return value


def fingerprint(value: Value) -> str:
    """Compute a stable content hash of a normalized value.

    Two values have the same fingerprint iff deep_equal() holds
    (modulo SHA-256 collisions).

    Returns:
        Hex SHA-256 digest of the canonical JSON encoding.
    """
    encoded = json.dumps(
        _canonical(value),
        sort_keys=True,
        separators=(",", ":"),
        allow_nan=False,
    )
    return hashlib.sha256(encoded.encode("ascii")).hexdigest()

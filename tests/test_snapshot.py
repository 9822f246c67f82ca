"""Tests for core/snapshot.py - snapshot values."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from core.errors import SnapshotError
from core.snapshot import deep_equal, diff_paths, fingerprint, normalize

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers(min_value=-(10**6), max_value=10**6)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=6), children, max_size=4),
    max_leaves=20,
)


class TestNormalize:
    """Tests for normalize()."""

    def test_returns_detached_copy(self):
        """Mutating the input must not change the normalized copy."""
        raw = {"tags": ["a"], "meta": {"x": 1}}
        value = normalize(raw)
        raw["tags"].append("b")
        raw["meta"]["x"] = 2
        assert value == {"tags": ["a"], "meta": {"x": 1}}

    def test_tuples_become_lists(self):
        """Tuples should be accepted as lists."""
        assert normalize({"a": (1, 2)}) == {"a": [1, 2]}

    def test_rejects_non_string_keys(self):
        """Map keys must be strings."""
        with pytest.raises(SnapshotError, match="Non-string key"):
            normalize({1: "one"})

    def test_rejects_unsupported_types(self):
        """Sets, objects and the like are not snapshot values."""
        with pytest.raises(SnapshotError, match=r"set value at items\[0\]"):
            normalize({"items": [{1, 2}]})

    def test_rejects_nan(self):
        """NaN is never equal to itself, so it cannot be compared."""
        with pytest.raises(SnapshotError):
            normalize(float("nan"))


class TestDeepEqual:
    """Tests for deep_equal()."""

    def test_maps_ignore_key_order(self):
        """Key order should not matter."""
        assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_lists_respect_order(self):
        """Lists compare element-wise in order."""
        assert not deep_equal([1, 2], [2, 1])

    def test_strict_string_vs_number(self):
        """'1' and 1 are different values."""
        assert not deep_equal({"id": "1"}, {"id": 1})

    def test_strict_bool_vs_number(self):
        """True and 1 are different values."""
        assert not deep_equal(True, 1)
        assert not deep_equal([0], [False])

    def test_int_equals_float(self):
        """Numbers are one variant."""
        assert deep_equal({"n": 1}, {"n": 1.0})

    def test_missing_key(self):
        """Different key sets are unequal."""
        assert not deep_equal({"a": None}, {})

    @given(json_values)
    def test_reflexive(self, value):
        """Every normalized value equals itself."""
        assert deep_equal(normalize(value), normalize(value))


class TestDiffPaths:
    """Tests for diff_paths()."""

    def test_single_field(self):
        """Should name the differing field."""
        assert diff_paths({"status": "draft"}, {"status": "published"}) == ["status"]

    def test_nested_and_list_paths(self):
        """Nested keys use dots, list items use [i]."""
        a = {"author": {"name": "Ann"}, "tags": ["x", "y"]}
        b = {"author": {"name": "Bob"}, "tags": ["x", "z"]}
        assert diff_paths(a, b) == ["author.name", "tags[1]"]

    def test_one_sided_keys(self):
        """Keys present on one side are reported at their own path."""
        assert diff_paths({"a": 1, "c": 3}, {"b": 2, "c": 3}) == ["a", "b"]

    def test_list_length_mismatch(self):
        """Lists of different length are reported as a whole."""
        assert diff_paths({"tags": [1]}, {"tags": [1, 2]}) == ["tags"]

    def test_root_mismatch(self):
        """A missing entity on one side diverges at the root."""
        assert diff_paths(None, {"status": "draft"}) == ["<root>"]

    def test_top_level_list_index(self):
        """Top-level list items have bare index paths."""
        assert diff_paths([1, 2], [1, 3]) == ["[1]"]

    @given(json_values, json_values)
    def test_empty_iff_equal(self, a, b):
        """No differing paths exactly when values are equal."""
        a, b = normalize(a), normalize(b)
        assert (diff_paths(a, b) == []) == deep_equal(a, b)


class TestFingerprint:
    """Tests for fingerprint()."""

    def test_is_hex_sha256(self):
        """Should return a 64-char hex digest."""
        digest = fingerprint({"a": 1})
        assert len(digest) == 64
        int(digest, 16)

    def test_key_order_does_not_matter(self):
        """Equal maps fingerprint identically."""
        assert fingerprint({"a": 1, "b": [1, 2]}) == fingerprint({"b": [1, 2], "a": 1})

    def test_int_and_integral_float_match(self):
        """1 and 1.0 are equal, so their fingerprints match."""
        assert fingerprint({"n": 1}) == fingerprint({"n": 1.0})

    def test_strict_types_differ(self):
        """'1', 1 and True fingerprint differently."""
        assert len({fingerprint("1"), fingerprint(1), fingerprint(True)}) == 3

    def test_lone_surrogate(self):
        """Strings that are not valid UTF-8 still fingerprint."""
        assert fingerprint({"title": "\ud800"}) == fingerprint({"title": "\ud800"})
        assert fingerprint({"title": "\ud800"}) != fingerprint({"title": "\ud801"})

    def test_non_ascii_text(self):
        """Non-ASCII text is distinguished from its escaped spelling."""
        assert fingerprint("é") != fingerprint("\\u00e9")

    @given(json_values, json_values)
    def test_agrees_with_deep_equal(self, a, b):
        """Fingerprints match exactly when values are equal."""
        a, b = normalize(a), normalize(b)
        assert (fingerprint(a) == fingerprint(b)) == deep_equal(a, b)

"""
Tests for canonical serialization of intervals
"""

import pytest
from intervalkit import Interval, EMPTY, WHOLE
from intervalkit.core.canonical_json import (
    canonical_dumps,
    canonical_hash,
    decode_float,
    encode_float,
)


class TestCanonicalJson:
    """Test canonical JSON helpers."""

    def test_sorted_compact(self):
        """Test key ordering and separators."""
        assert canonical_dumps({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_hash_stable(self):
        """Test that equal objects hash equally."""
        assert canonical_hash({"a": 1, "b": 2}) == canonical_hash({"b": 2, "a": 1})
        assert len(canonical_hash({})) == 64

    def test_non_finite_floats(self):
        """Test that non-finite floats serialize as strings."""
        assert canonical_dumps(float('inf')) == '"inf"'
        assert canonical_dumps({"x": [1.5, float('-inf')]}) == '{"x":[1.5,"-inf"]}'

    def test_intervals_in_containers(self):
        """Test serialization of intervals nested in lists and dicts."""
        assert canonical_dumps([Interval(1.0, 2.0), WHOLE]) == (
            '[{"lower":1.0,"upper":2.0},{"lower":"-inf","upper":"inf"}]'
        )
        assert canonical_dumps({"box": EMPTY}) == '{"box":{"lower":"inf","upper":"-inf"}}'
        assert canonical_hash(Interval(3.0, 1.0)) == canonical_hash(EMPTY)

    def test_float_encoding(self):
        """Test encoding of non-finite floats."""
        assert encode_float(1.5) == 1.5
        assert encode_float(float('inf')) == "inf"
        assert encode_float(float('-inf')) == "-inf"
        assert encode_float(float('nan')) == "nan"
        assert decode_float("-inf") == float('-inf')
        assert decode_float(2) == 2.0
        with pytest.raises(ValueError):
            decode_float("infinity")
        with pytest.raises(ValueError):
            decode_float(True)


class TestIntervalCanonical:
    """Test interval serialization and fingerprints."""

    def test_to_canonical(self):
        """Test canonical forms of ordinary and sentinel intervals."""
        assert Interval(1.0, 2.0).to_canonical() == {"lower": 1.0, "upper": 2.0}
        assert WHOLE.to_canonical() == {"lower": "-inf", "upper": "inf"}
        assert EMPTY.to_canonical() == {"lower": "inf", "upper": "-inf"}
        assert Interval(3.0, 1.0).to_canonical() == EMPTY.to_canonical()

    def test_from_canonical(self):
        """Test reading canonical forms back."""
        assert Interval.from_canonical({"lower": 1.0, "upper": 2.0}) == Interval(1.0, 2.0)
        assert Interval.from_canonical(WHOLE.to_canonical()) == WHOLE
        assert Interval.from_canonical(EMPTY.to_canonical()).is_empty

    def test_from_canonical_invalid(self):
        """Test that malformed payloads raise ValueError."""
        with pytest.raises(ValueError):
            Interval.from_canonical({"lower": 1.0})
        with pytest.raises(ValueError):
            Interval.from_canonical({"lower": "bogus", "upper": 1.0})
        with pytest.raises(ValueError):
            Interval.from_canonical(None)

    def test_fingerprint(self):
        """Test short fingerprints."""
        fp = Interval(1.0, 2.0).fingerprint()
        assert len(fp) == 16
        assert fp == Interval(1, 2).fingerprint()
        assert fp != Interval(1.0, 2.5).fingerprint()
        assert Interval(3.0, 1.0).fingerprint() == EMPTY.fingerprint()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

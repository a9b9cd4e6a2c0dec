"""Tests for axis sequence validation."""

import pytest

from torcheuler import (
    PROPER_EULER_SEQUENCES,
    TAIT_BRYAN_SEQUENCES,
    VALID_SEQUENCES,
    Axis,
    InvalidSequenceError,
    RotationError,
    validate_sequence,
)
from torcheuler._sequence import get_axes, is_proper_euler, reverse_sequence


class TestSequences:
    """Tests for the sequence tables."""

    def test_tait_bryan_sequences(self):
        """Tait-Bryan sequences have three different axes."""
        expected = {"xyz", "xzy", "yxz", "yzx", "zxy", "zyx"}
        assert TAIT_BRYAN_SEQUENCES == frozenset(expected)

    def test_proper_euler_sequences(self):
        """Proper Euler sequences have first and third axes same."""
        expected = {"xyx", "xzx", "yxy", "yzy", "zxz", "zyz"}
        assert PROPER_EULER_SEQUENCES == frozenset(expected)

    def test_valid_sequences(self):
        """Valid sequences are every triple without immediate repeats."""
        triples = {
            a + b + c
            for a in "xyz"
            for b in "xyz"
            for c in "xyz"
            if a != b and b != c
        }
        assert VALID_SEQUENCES == frozenset(triples)
        assert len(VALID_SEQUENCES) == 12


class TestValidateSequence:
    """Tests for validate_sequence."""

    @pytest.mark.parametrize("sequence", sorted(VALID_SEQUENCES))
    def test_valid(self, sequence):
        """Valid sequences do not raise."""
        validate_sequence(sequence)

    @pytest.mark.parametrize("sequence", ["xxy", "xyy", "zzz", "yxx"])
    def test_adjacent_repeat(self, sequence):
        """Immediately repeated axes are rejected."""
        with pytest.raises(InvalidSequenceError, match="consecutive"):
            validate_sequence(sequence)

    @pytest.mark.parametrize("sequence", ["", "x", "xy", "xyzx"])
    def test_wrong_length(self, sequence):
        """Sequences that are not three axes long are rejected."""
        with pytest.raises(InvalidSequenceError, match="exactly 3"):
            validate_sequence(sequence)

    @pytest.mark.parametrize("sequence", ["xya", "XYZ", "x z", "abc"])
    def test_unknown_axis(self, sequence):
        """Characters outside x, y, z are rejected."""
        with pytest.raises(InvalidSequenceError, match="unknown axis"):
            validate_sequence(sequence)

    def test_not_a_string(self):
        """Non-string sequences are rejected."""
        with pytest.raises(InvalidSequenceError):
            validate_sequence(["x", "y", "z"])

    def test_error_hierarchy(self):
        """InvalidSequenceError is a RotationError and a ValueError."""
        with pytest.raises(RotationError):
            validate_sequence("xxy")
        with pytest.raises(ValueError):
            validate_sequence("xxy")


class TestSequenceHelpers:
    """Tests for sequence helpers."""

    def test_get_axes(self):
        """Get axes from a sequence."""
        assert get_axes("xyz") == (Axis.X, Axis.Y, Axis.Z)
        assert get_axes("zyx") == (Axis.Z, Axis.Y, Axis.X)
        assert get_axes("zxz") == (Axis.Z, Axis.X, Axis.Z)

    def test_is_proper_euler(self):
        """Proper Euler sequences repeat the first axis last."""
        for sequence in PROPER_EULER_SEQUENCES:
            assert is_proper_euler(sequence)
        for sequence in TAIT_BRYAN_SEQUENCES:
            assert not is_proper_euler(sequence)

    def test_reverse_sequence(self):
        """Reversal stays within the valid sequences."""
        assert reverse_sequence("xyz") == "zyx"
        assert reverse_sequence("xzx") == "xzx"
        for sequence in VALID_SEQUENCES:
            assert reverse_sequence(sequence) in VALID_SEQUENCES

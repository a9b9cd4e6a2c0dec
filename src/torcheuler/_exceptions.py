"""Exceptions for rotation construction."""


class RotationError(Exception):
    """Base exception for rotation errors."""

    pass


class InvalidSequenceError(RotationError, ValueError):
    """Raised when an axis sequence is invalid.

    This occurs when:
    - The sequence does not have exactly three axes
    - An axis letter is not one of 'x', 'y', 'z'
    - The same axis appears twice in a row (e.g. "xxy")
    """

    pass


class InvalidAngleCountError(RotationError, ValueError):
    """Raised when the number of angles does not match the sequence length."""

    pass

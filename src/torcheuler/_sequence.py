"""Axis sequences.

An axis sequence is a three-letter string over ``x``, ``y`` and ``z`` in
which no axis is repeated immediately. There are 12 of them:

- 6 Tait-Bryan sequences (three different axes): xyz, xzy, yxz, yzx, zxy, zyx
- 6 proper Euler sequences (first and third axes same): xyx, xzx, yxy, yzy,
  zxz, zyz

Each sequence can be composed intrinsically or extrinsically, giving 24
conventions, each of which has an active and a passive form.
"""

from typing import Tuple

from torcheuler._axis import Axis
from torcheuler._exceptions import InvalidSequenceError

# Also known as Cardan angles or nautical angles
TAIT_BRYAN_SEQUENCES = frozenset({"xyz", "xzy", "yxz", "yzx", "zxy", "zyx"})

# Also known as classic Euler angles
PROPER_EULER_SEQUENCES = frozenset(
    {"xyx", "xzx", "yxy", "yzy", "zxz", "zyz"}
)

VALID_SEQUENCES = TAIT_BRYAN_SEQUENCES | PROPER_EULER_SEQUENCES


def validate_sequence(sequence: str) -> None:
    """Validate an axis sequence.

    Parameters
    ----------
    sequence : str
        Axis sequence (e.g., "xyz", "zyx", "zxz").

    Raises
    ------
    InvalidSequenceError
        If the sequence is not three characters long, contains a character
        other than 'x', 'y' or 'z', or repeats an axis immediately.

    Examples
    --------
    >>> validate_sequence("xyz")  # No error
    >>> validate_sequence("zxz")  # No error
    >>> validate_sequence("xxy")  # Raises InvalidSequenceError
    """
    if not isinstance(sequence, str) or len(sequence) != 3:
        raise InvalidSequenceError(
            f"Invalid axis sequence {sequence!r}: expected exactly 3 axes. "
            f"Valid: {sorted(VALID_SEQUENCES)}"
        )

    for letter in sequence:
        if letter not in ("x", "y", "z"):
            raise InvalidSequenceError(
                f"Invalid axis sequence {sequence!r}: unknown axis {letter!r}. "
                f"Valid: {sorted(VALID_SEQUENCES)}"
            )

    if sequence[0] == sequence[1] or sequence[1] == sequence[2]:
        raise InvalidSequenceError(
            f"Invalid axis sequence {sequence!r}: consecutive axes must differ. "
            f"Valid: {sorted(VALID_SEQUENCES)}"
        )


def get_axes(sequence: str) -> Tuple[Axis, Axis, Axis]:
    """Get the axes of a sequence.

    Examples
    --------
    >>> get_axes("xyz")
    (<Axis.X: 0>, <Axis.Y: 1>, <Axis.Z: 2>)
    >>> get_axes("zxz")
    (<Axis.Z: 2>, <Axis.X: 0>, <Axis.Z: 2>)
    """
    return (
        Axis.from_letter(sequence[0]),
        Axis.from_letter(sequence[1]),
        Axis.from_letter(sequence[2]),
    )


def is_proper_euler(sequence: str) -> bool:
    return sequence[0] == sequence[2]


def reverse_sequence(sequence: str) -> str:
    """Reverse an axis sequence.

    Intrinsic composition of ``sequence`` equals extrinsic composition of the
    reversed sequence with the angles reversed.

    >>> reverse_sequence("xyz")
    'zyx'
    """
    return sequence[::-1]

"""torcheuler: Euler angle rotation matrices for PyTorch."""

from torcheuler._axis import Axis, elementary_rotation
from torcheuler._euler_angles import (
    EulerAngles,
    euler_angles,
    euler_angles_to_matrix,
    get_rotation_matrix,
    matrix_to_euler_angles,
)
from torcheuler._exceptions import (
    InvalidAngleCountError,
    InvalidSequenceError,
    RotationError,
)
from torcheuler._rotation_matrix import (
    RotationMatrix,
    is_rotation_matrix,
    rotation_matrix,
    rotation_matrix_apply,
    rotation_matrix_inverse,
)
from torcheuler._sequence import (
    PROPER_EULER_SEQUENCES,
    TAIT_BRYAN_SEQUENCES,
    VALID_SEQUENCES,
    validate_sequence,
)

__all__ = [
    "Axis",
    "EulerAngles",
    "InvalidAngleCountError",
    "InvalidSequenceError",
    "PROPER_EULER_SEQUENCES",
    "RotationError",
    "RotationMatrix",
    "TAIT_BRYAN_SEQUENCES",
    "VALID_SEQUENCES",
    "elementary_rotation",
    "euler_angles",
    "euler_angles_to_matrix",
    "get_rotation_matrix",
    "is_rotation_matrix",
    "matrix_to_euler_angles",
    "rotation_matrix",
    "rotation_matrix_apply",
    "rotation_matrix_inverse",
    "validate_sequence",
]

__version__ = "0.1.0"

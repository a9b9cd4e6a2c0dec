"""Euler angles rotation representation and conversions.

Euler angles represent a 3D rotation as a sequence of three rotations around
coordinate axes. The axis sequence (e.g., "xyz") specifies the order of the
rotation axes; ``angles[..., n]`` is the rotation about ``sequence[n]``.

Two independent flags select the convention:

- ``is_intrinsic``: intrinsic rotations are about the axes of the rotating
  (body) frame, extrinsic rotations are about the fixed (world) axes.
- ``is_active``: active rotations rotate vectors within a fixed frame,
  passive rotations rotate the frame. A passive matrix is the transpose of
  the corresponding active matrix.

With :math:`R_n` the active elementary rotation about ``sequence[n]``, the
active composite matrix is :math:`R_3 R_2 R_1` for extrinsic sequences and
:math:`R_1 R_2 R_3` for intrinsic ones. The passive composite is its
transpose, the product of the passive elementary rotations
:math:`P_n = R_n^T` in the opposite order.
"""

from __future__ import annotations

import warnings
from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torcheuler._axis import elementary_rotation
from torcheuler._sequence import (
    get_axes,
    is_proper_euler,
    reverse_sequence,
    validate_sequence,
)
from torcheuler._validation import (
    _as_tensor,
    _check_angle_count,
    _check_matrix_shape,
)

_GIMBAL_LOCK_TOLERANCE = 1e-7


@tensorclass(nocast=True)
class EulerAngles:
    """Euler angles rotation representation.

    Represents a 3D rotation as three angles around coordinate axes,
    together with the convention that interprets them.

    Attributes
    ----------
    angles : Tensor
        Euler angles in radians, shape (..., 3).
        The three angles correspond to rotations around the axes specified
        by the sequence in order.
    sequence : str
        Axis sequence like "xyz", "zyx" or "zxz".
    is_intrinsic : bool
        Rotations about the body axes (True) or the world axes (False).
    is_active : bool
        Active (True) or passive (False) rotation.

    Examples
    --------
    Intrinsic active xyz angles (roll, pitch, yaw):
        EulerAngles(
            angles=torch.tensor([0.1, 0.2, 0.3]),
            sequence="xyz",
            is_intrinsic=True,
            is_active=True,
        )

    Batch of Euler angles:
        EulerAngles(
            angles=torch.randn(100, 3),
            sequence="zxz",
            is_intrinsic=False,
            is_active=True,
            batch_size=[100],
        )

    Notes
    -----
    Euler angles suffer from gimbal lock when the middle angle approaches
    +/- pi/2 (for Tait-Bryan sequences) or 0/pi (for proper Euler).
    """

    angles: Tensor
    sequence: str
    is_intrinsic: bool
    is_active: bool


def euler_angles(
    angles: Union[Tensor, Sequence[float]],
    sequence: str = "xyz",
    is_intrinsic: bool = True,
    is_active: bool = True,
) -> EulerAngles:
    """Create Euler angles from tensor.

    Parameters
    ----------
    angles : Tensor or sequence of float
        Euler angles in radians, shape (..., 3).
    sequence : str, optional
        Axis sequence (default: "xyz"). Valid options are:
        - Tait-Bryan: "xyz", "xzy", "yxz", "yzx", "zxy", "zyx"
        - Proper Euler: "xyx", "xzx", "yxy", "yzy", "zxz", "zyz"
    is_intrinsic : bool, optional
        Intrinsic (default) or extrinsic composition.
    is_active : bool, optional
        Active (default) or passive rotation.

    Returns
    -------
    EulerAngles
        EulerAngles instance.

    Raises
    ------
    InvalidSequenceError
        If sequence is not valid.
    InvalidAngleCountError
        If angles does not have last dimension 3.

    Examples
    --------
    >>> ea = euler_angles(torch.tensor([0.1, 0.2, 0.3]), sequence="zyx")
    >>> ea.angles
    tensor([0.1000, 0.2000, 0.3000])
    >>> ea.sequence
    'zyx'
    """
    validate_sequence(sequence)
    angles = _as_tensor(angles)
    _check_angle_count("euler_angles", angles)
    return EulerAngles(
        angles=angles,
        sequence=sequence,
        is_intrinsic=is_intrinsic,
        is_active=is_active,
    )


def _compose(
    sequence: str, angles: Tensor, is_intrinsic: bool, is_active: bool
) -> Tensor:
    r1, r2, r3 = (
        elementary_rotation(axis, angles[..., n], is_active)
        for n, axis in enumerate(get_axes(sequence))
    )

    # Passive matrices are transposes, so (R1 @ R2 @ R3)^T = P3 @ P2 @ P1
    if is_intrinsic == is_active:
        return r1 @ r2 @ r3

    return r3 @ r2 @ r1


def get_rotation_matrix(
    sequence: str,
    angles: Union[Tensor, Sequence[float]],
    is_intrinsic: bool,
    is_active: bool,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert an axis sequence and three angles to a rotation matrix.

    Parameters
    ----------
    sequence : str
        Axis sequence, three letters from 'x', 'y', 'z' with no axis
        repeated immediately (e.g., "xyz", "zyz").
    angles : Tensor or sequence of float
        Angles in radians, shape (..., 3). ``angles[..., n]`` is the rotation
        about ``sequence[n]``.
    is_intrinsic : bool
        Rotate about the body axes (True) or the fixed world axes (False).
    is_active : bool
        Rotate vectors (True) or the reference frame (False).
    dtype : torch.dtype, optional
        Output dtype. Defaults to the dtype of ``angles`` if it is a tensor,
        otherwise ``torch.float64``.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Rotation matrix, shape (..., 3, 3).

    Raises
    ------
    InvalidSequenceError
        If sequence is not valid.
    InvalidAngleCountError
        If there are not exactly three angles.

    Notes
    -----
    - Intrinsic composition of a sequence equals extrinsic composition of the
      reversed sequence with reversed angles.
    - The passive matrix is the transpose of the active matrix.
    - NaN or infinite angles propagate into the result unchecked.

    Examples
    --------
    >>> get_rotation_matrix("xyz", [0.0, 0.0, 0.0], True, True)
    tensor([[1., 0., 0.],
            [0., 1., 0.],
            [0., 0., 1.]], dtype=torch.float64)
    """
    validate_sequence(sequence)
    angles = _as_tensor(angles, dtype=dtype, device=device)
    _check_angle_count("get_rotation_matrix", angles)
    return _compose(sequence, angles, is_intrinsic, is_active)


def euler_angles_to_matrix(ea: EulerAngles) -> Tensor:
    """Convert Euler angles to 3x3 rotation matrix.

    Parameters
    ----------
    ea : EulerAngles
        Euler angles with shape (..., 3).

    Returns
    -------
    Tensor
        Rotation matrix, shape (..., 3, 3).

    See Also
    --------
    matrix_to_euler_angles : Inverse conversion.
    get_rotation_matrix : Same conversion from plain arguments.

    Examples
    --------
    >>> import math
    >>> ea = euler_angles(torch.tensor([0.0, 0.0, math.pi / 2]))
    >>> euler_angles_to_matrix(ea).round()
    tensor([[ 0., -1.,  0.],
            [ 1.,  0.,  0.],
            [ 0.,  0.,  1.]])
    """
    validate_sequence(ea.sequence)
    _check_angle_count("euler_angles_to_matrix", ea.angles)
    return _compose(
        ea.sequence, ea.angles, bool(ea.is_intrinsic), bool(ea.is_active)
    )


def _matrix_to_angles_tait_bryan(
    matrix: Tensor, i: int, j: int, k: int, tolerance: float
) -> tuple[Tensor, Tensor]:
    """Extract extrinsic active angles for Tait-Bryan sequences.

    The matrix is R = R_k(c) @ R_j(b) @ R_i(a) with three different axes.
    Parity classifies the sequence:
    - Even (cyclic): xyz, yzx, zxy - where (j-i) % 3 == 1
    - Odd (anti-cyclic): xzy, yxz, zyx - where (j-i) % 3 == 2
    """
    is_even = (j - i) % 3 == 1
    sign = 1.0 if is_even else -1.0

    # R[k,i] = -sign*sin(b)
    # R[k,j] = sign*sin(a)*cos(b), R[k,k] = cos(a)*cos(b)
    # R[j,i] = sign*sin(c)*cos(b), R[i,i] = cos(c)*cos(b)
    angle2 = torch.asin(torch.clamp(-sign * matrix[..., k, i], -1.0, 1.0))
    angle1 = torch.atan2(sign * matrix[..., k, j], matrix[..., k, k])
    angle3 = torch.atan2(sign * matrix[..., j, i], matrix[..., i, i])

    # With cos(b) = 0 only a combination of a and c is determined, and row j
    # of R equals row j of R_i(a') for that combination
    locked = torch.cos(angle2).abs() < tolerance
    locked_angle1 = torch.atan2(
        -sign * matrix[..., j, k], matrix[..., j, j]
    )

    angle1 = torch.where(locked, locked_angle1, angle1)
    angle3 = torch.where(locked, torch.zeros_like(angle3), angle3)

    return torch.stack([angle1, angle2, angle3], dim=-1), locked


def _matrix_to_angles_proper(
    matrix: Tensor, i: int, j: int, tolerance: float
) -> tuple[Tensor, Tensor]:
    """Extract extrinsic active angles for proper Euler sequences.

    The matrix is R = R_i(c) @ R_j(b) @ R_i(a) where i != j.
    Parity classifies the sequence:
    - Even (cyclic): xyx, yzy, zxz - where (j-i) % 3 == 1
    - Odd (anti-cyclic): xzx, yxy, zyz - where (j-i) % 3 == 2
    """
    # The axis that is neither i nor j
    other = 3 - i - j
    is_even = (j - i) % 3 == 1
    sign = 1.0 if is_even else -1.0

    # R[i,i] = cos(b)
    # R[i,j] = sin(a)*sin(b), R[i,other] = sign*cos(a)*sin(b)
    # R[j,i] = sin(c)*sin(b), R[other,i] = -sign*cos(c)*sin(b)
    angle2 = torch.acos(torch.clamp(matrix[..., i, i], -1.0, 1.0))
    angle1 = torch.atan2(matrix[..., i, j], sign * matrix[..., i, other])
    angle3 = torch.atan2(matrix[..., j, i], -sign * matrix[..., other, i])

    # With sin(b) = 0, row j of R is that of R_i(a + c) or R_i(a - c)
    locked = torch.sin(angle2).abs() < tolerance
    locked_angle1 = torch.atan2(
        -sign * matrix[..., j, other], matrix[..., j, j]
    )

    angle1 = torch.where(locked, locked_angle1, angle1)
    angle3 = torch.where(locked, torch.zeros_like(angle3), angle3)

    return torch.stack([angle1, angle2, angle3], dim=-1), locked


def matrix_to_euler_angles(
    matrix: Tensor,
    sequence: str,
    is_intrinsic: bool = True,
    is_active: bool = True,
) -> EulerAngles:
    """Convert 3x3 rotation matrix to Euler angles.

    Parameters
    ----------
    matrix : Tensor
        Rotation matrix, shape (..., 3, 3).
    sequence : str
        Axis sequence (e.g., "xyz", "zxz").
    is_intrinsic : bool, optional
        Intrinsic (default) or extrinsic composition.
    is_active : bool, optional
        Whether ``matrix`` is an active (default) or passive rotation.

    Returns
    -------
    EulerAngles
        Euler angles with shape (..., 3). The first and third angles lie in
        (-pi, pi]; the middle angle lies in [-pi/2, pi/2] for Tait-Bryan
        sequences and [0, pi] for proper Euler sequences.

    Raises
    ------
    InvalidSequenceError
        If sequence is not valid.
    ValueError
        If matrix does not have last two dimensions (3, 3).

    Warns
    -----
    RuntimeWarning
        If the matrix is at gimbal lock. Only the sum or difference of the
        outer angles is determined there, so the third angle (extrinsic) or
        the first angle (intrinsic) is set to zero.

    See Also
    --------
    euler_angles_to_matrix : Inverse conversion.

    Examples
    --------
    >>> R = torch.eye(3)
    >>> matrix_to_euler_angles(R, "xyz").angles
    tensor([0., 0., 0.])
    """
    validate_sequence(sequence)
    _check_matrix_shape("matrix_to_euler_angles", matrix)

    # Reduce to extrinsic active: passive is the transpose, and intrinsic
    # is extrinsic about the reversed sequence with reversed angles
    active = matrix if is_active else matrix.transpose(-1, -2)
    extrinsic = reverse_sequence(sequence) if is_intrinsic else sequence
    i, j, k = (int(axis) for axis in get_axes(extrinsic))

    if active.is_floating_point():
        eps = torch.finfo(active.dtype).eps
    else:
        eps = torch.finfo(torch.get_default_dtype()).eps
    tolerance = max(_GIMBAL_LOCK_TOLERANCE, 100 * eps)

    if is_proper_euler(extrinsic):
        angles, locked = _matrix_to_angles_proper(active, i, j, tolerance)
    else:
        angles, locked = _matrix_to_angles_tait_bryan(
            active, i, j, k, tolerance
        )

    if is_intrinsic:
        angles = angles.flip(-1)

    # Skip the check for meta tensors and during torch.compile
    if not active.is_meta and not torch.compiler.is_compiling():
        if bool(locked.any()):
            warnings.warn(
                "Gimbal lock detected. Setting one outer angle to zero "
                "since it is not possible to uniquely determine all "
                "angles.",
                RuntimeWarning,
                stacklevel=2,
            )

    return EulerAngles(
        angles=angles,
        sequence=sequence,
        is_intrinsic=is_intrinsic,
        is_active=is_active,
    )

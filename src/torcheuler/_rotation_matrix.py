"""RotationMatrix representation and operations."""

from __future__ import annotations

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torcheuler._validation import _check_matrix_shape


@tensorclass
class RotationMatrix:
    """3x3 rotation matrix (SO(3) element).

    A rotation matrix R in SO(3) satisfies:
    - Orthogonality: R^T R = I
    - Unit determinant: det(R) = +1

    Attributes
    ----------
    matrix : Tensor
        Rotation matrix, shape (..., 3, 3).

    Examples
    --------
    Identity rotation:
        RotationMatrix(matrix=torch.eye(3))

    Batch of rotation matrices:
        RotationMatrix(matrix=torch.randn(100, 3, 3))

    Notes
    -----
    This class does not enforce orthogonality or unit determinant.
    Use :func:`is_rotation_matrix` to check a matrix, and
    :func:`get_rotation_matrix` to build valid ones from Euler angles.
    """

    matrix: Tensor


def rotation_matrix(matrix: Tensor) -> RotationMatrix:
    """Create RotationMatrix from matrix tensor.

    Parameters
    ----------
    matrix : Tensor
        Rotation matrix, shape (..., 3, 3).

    Returns
    -------
    RotationMatrix
        RotationMatrix instance.

    Raises
    ------
    ValueError
        If matrix does not have last two dimensions (3, 3).

    Examples
    --------
    >>> R = rotation_matrix(torch.eye(3))
    >>> R.matrix
    tensor([[1., 0., 0.],
            [0., 1., 0.],
            [0., 0., 1.]])
    """
    _check_matrix_shape("rotation_matrix", matrix)
    return RotationMatrix(matrix=matrix)


def rotation_matrix_apply(matrix: Tensor, vector: Tensor) -> Tensor:
    """Rotate vectors by rotation matrices.

    Parameters
    ----------
    matrix : Tensor
        Rotation matrix, shape (..., 3, 3).
    vector : Tensor
        Vectors, shape (..., 3). Batch dimensions broadcast with ``matrix``.

    Returns
    -------
    Tensor
        Rotated vectors ``R @ v``, shape (..., 3).

    Examples
    --------
    >>> R = torch.tensor([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    >>> rotation_matrix_apply(R, torch.tensor([1.0, 0.0, 0.0]))
    tensor([0., 1., 0.])
    """
    _check_matrix_shape("rotation_matrix_apply", matrix)
    if vector.shape[-1] != 3:
        raise ValueError(
            f"rotation_matrix_apply: vector must have last dimension 3, got {vector.shape[-1]}"
        )
    return (matrix @ vector.unsqueeze(-1)).squeeze(-1)


def rotation_matrix_inverse(matrix: Tensor) -> Tensor:
    """Invert rotation matrices.

    The inverse of a rotation matrix is its transpose. It is also the
    passive counterpart of an active rotation and vice versa.
    """
    _check_matrix_shape("rotation_matrix_inverse", matrix)
    return matrix.transpose(-1, -2)


def is_rotation_matrix(matrix: Tensor, atol: float = 1e-6) -> Tensor:
    """Check whether matrices are proper rotations.

    Parameters
    ----------
    matrix : Tensor
        Matrices, shape (..., 3, 3).
    atol : float, optional
        Absolute tolerance for ``R^T R = I`` and ``det(R) = 1``.

    Returns
    -------
    Tensor
        Boolean tensor, shape (...).
    """
    _check_matrix_shape("is_rotation_matrix", matrix)
    identity = torch.eye(3, dtype=matrix.dtype, device=matrix.device)
    gram = matrix.transpose(-1, -2) @ matrix
    orthogonal = ((gram - identity).abs() <= atol).all(dim=-1).all(dim=-1)
    proper = (torch.linalg.det(matrix) - 1).abs() <= atol
    return orthogonal & proper

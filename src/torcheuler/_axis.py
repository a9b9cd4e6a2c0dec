"""Principal axes and elementary rotations about them."""

from __future__ import annotations

import enum
from typing import Optional, Union

import torch
from torch import Tensor

from torcheuler._exceptions import InvalidSequenceError
from torcheuler._validation import _as_tensor


class Axis(enum.IntEnum):
    """Principal coordinate axis.

    The integer value is the index of the axis in a 3-vector.
    """

    X = 0
    Y = 1
    Z = 2

    @classmethod
    def from_letter(cls, letter: str) -> "Axis":
        """Get the axis named by ``letter`` ('x', 'y' or 'z')."""
        try:
            return _LETTERS[letter]
        except (KeyError, TypeError):
            raise InvalidSequenceError(
                f"Invalid axis {letter!r}. Valid: ['x', 'y', 'z']"
            ) from None

    @property
    def letter(self) -> str:
        return self.name.lower()


_LETTERS = {"x": Axis.X, "y": Axis.Y, "z": Axis.Z}


def elementary_rotation(
    axis: Union[Axis, str],
    angle: Union[Tensor, float],
    is_active: bool = True,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Rotation matrix about a single principal axis.

    With :math:`c = \cos\theta` and :math:`s = \sin\theta`, the active
    matrices are

    .. math::

        R_x = \begin{bmatrix} 1 & 0 & 0 \\ 0 & c & -s \\ 0 & s & c \end{bmatrix},
        \quad
        R_y = \begin{bmatrix} c & 0 & s \\ 0 & 1 & 0 \\ -s & 0 & c \end{bmatrix},
        \quad
        R_z = \begin{bmatrix} c & -s & 0 \\ s & c & 0 \\ 0 & 0 & 1 \end{bmatrix}

    Active matrices rotate column vectors counter-clockwise about the axis
    (right-hand rule). Passive matrices are their transposes, i.e. they
    rotate the frame instead of the vector.

    Parameters
    ----------
    axis : Axis or str
        Rotation axis, ``Axis.X``/``Axis.Y``/``Axis.Z`` or 'x'/'y'/'z'.
    angle : Tensor or float
        Rotation angle in radians, shape (...). Any real value.
    is_active : bool, optional
        Active (default) or passive rotation.
    dtype : torch.dtype, optional
        Output dtype. Defaults to the dtype of ``angle`` if it is a tensor,
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
        If ``axis`` is not a valid axis.

    Examples
    --------
    >>> import math
    >>> elementary_rotation("z", math.pi / 2).round()
    tensor([[ 0., -1.,  0.],
            [ 1.,  0.,  0.],
            [ 0.,  0.,  1.]], dtype=torch.float64)
    """
    if not isinstance(axis, Axis):
        axis = Axis.from_letter(axis)

    angle = _as_tensor(angle, dtype=dtype, device=device)

    c = torch.cos(angle)
    s = torch.sin(angle)
    if not is_active:
        s = -s

    one = torch.ones_like(c)
    zero = torch.zeros_like(c)

    if axis == Axis.X:
        rows = (
            (one, zero, zero),
            (zero, c, -s),
            (zero, s, c),
        )
    elif axis == Axis.Y:
        rows = (
            (c, zero, s),
            (zero, one, zero),
            (-s, zero, c),
        )
    else:
        rows = (
            (c, -s, zero),
            (s, c, zero),
            (zero, zero, one),
        )

    return torch.stack([torch.stack(row, dim=-1) for row in rows], dim=-2)

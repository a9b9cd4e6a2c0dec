"""Input coercion and shape checks shared by the conversion functions."""

from __future__ import annotations

from typing import Optional

import torch
from torch import Tensor

from torcheuler._exceptions import InvalidAngleCountError


def _as_tensor(
    value,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    # Python numbers default to float64 rather than the torch default dtype
    if isinstance(value, Tensor):
        if dtype is None and device is None:
            return value
        return value.to(dtype=dtype, device=device)
    return torch.as_tensor(
        value,
        dtype=torch.float64 if dtype is None else dtype,
        device=device,
    )


def _check_angle_count(name: str, angles: Tensor) -> None:
    if angles.dim() == 0 or angles.shape[-1] != 3:
        count = 1 if angles.dim() == 0 else angles.shape[-1]
        raise InvalidAngleCountError(
            f"{name}: angles must have last dimension 3, got {count}"
        )


def _check_matrix_shape(name: str, matrix: Tensor) -> None:
    if matrix.dim() < 2 or matrix.shape[-2:] != (3, 3):
        raise ValueError(
            f"{name}: matrix must have last two dimensions (3, 3), got {tuple(matrix.shape[-2:])}"
        )

"""Tests for RotationMatrix tensorclass and helpers."""

import math

import pytest
import torch

from torcheuler import (
    RotationMatrix,
    elementary_rotation,
    is_rotation_matrix,
    rotation_matrix,
    rotation_matrix_apply,
    rotation_matrix_inverse,
)


class TestRotationMatrixConstruction:
    """Tests for RotationMatrix construction."""

    def test_from_tensor(self):
        """Create RotationMatrix from tensor."""
        mat = torch.eye(3)
        R = RotationMatrix(matrix=mat)
        assert R.matrix.shape == (3, 3)
        assert torch.allclose(R.matrix, mat)

    def test_factory_function(self):
        """Create via rotation_matrix() factory."""
        mat = torch.eye(3)
        R = rotation_matrix(mat)
        assert isinstance(R, RotationMatrix)
        assert torch.allclose(R.matrix, mat)

    def test_batch(self):
        """Batch of rotation matrices."""
        R = rotation_matrix(torch.randn(10, 3, 3))
        assert R.matrix.shape == (10, 3, 3)

    @pytest.mark.parametrize("shape", [(4, 4), (2, 2), (9,), (3, 4)])
    def test_invalid_shape(self, shape):
        """Raise error for wrong last dimensions."""
        with pytest.raises(ValueError, match="last two dimensions"):
            rotation_matrix(torch.randn(*shape))


class TestRotationMatrixApply:
    """Tests for rotation_matrix_apply."""

    def test_quarter_turn(self):
        """Quarter turn about z maps x to y."""
        R = elementary_rotation("z", math.pi / 2)
        v = torch.tensor([1.0, 0.0, 0.0], dtype=torch.float64)
        expected = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        assert torch.allclose(rotation_matrix_apply(R, v), expected, atol=1e-12)

    def test_broadcast(self):
        """One matrix applied to a batch of vectors."""
        R = elementary_rotation("x", 0.3)
        v = torch.randn(8, 3, dtype=torch.float64)
        result = rotation_matrix_apply(R, v)
        assert result.shape == (8, 3)
        assert torch.allclose(result, v @ R.T)

    def test_invalid_vector(self):
        """Raise error for vectors that are not 3D."""
        with pytest.raises(ValueError, match="last dimension 3"):
            rotation_matrix_apply(torch.eye(3), torch.ones(4))


class TestRotationMatrixInverse:
    """Tests for rotation_matrix_inverse."""

    def test_inverse(self):
        """R^-1 R = I."""
        R = elementary_rotation("y", torch.randn(5, dtype=torch.float64))
        product = rotation_matrix_inverse(R) @ R
        expected = torch.eye(3, dtype=torch.float64).expand(5, 3, 3)
        assert torch.allclose(product, expected, atol=1e-12)

    def test_inverse_is_passive(self):
        """Inverse of an active rotation is the passive rotation."""
        active = elementary_rotation("z", 0.8, is_active=True)
        passive = elementary_rotation("z", 0.8, is_active=False)
        assert torch.equal(rotation_matrix_inverse(active), passive)


class TestIsRotationMatrix:
    """Tests for is_rotation_matrix."""

    def test_rotation(self):
        """Elementary rotations are rotation matrices."""
        R = elementary_rotation("x", torch.randn(6, dtype=torch.float64))
        assert is_rotation_matrix(R).all()
        assert is_rotation_matrix(R).shape == (6,)

    def test_reflection(self):
        """Reflections have determinant -1."""
        reflection = torch.diag(torch.tensor([1.0, 1.0, -1.0]))
        assert not is_rotation_matrix(reflection)

    def test_scaled(self):
        """Scaled matrices are not orthonormal."""
        assert not is_rotation_matrix(2 * torch.eye(3))

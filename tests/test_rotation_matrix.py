"""Unit tests for RotationMatrix."""

import math

import jax.numpy as jnp
import pytest

from rotax import EulerAnglesZyx, RotationMatrix, RotationQuaternion, RotationUsage, Rz

PI = math.pi
ATOL = 1e-12

ACTIVE = RotationUsage.ACTIVE
PASSIVE = RotationUsage.PASSIVE


class TestRotationMatrix:
    def test_default_identity(self):
        assert jnp.allclose(RotationMatrix().to_matrix(), jnp.eye(3))

    def test_elements(self):
        R = RotationMatrix(0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)
        assert float(R.r12) == pytest.approx(-1.0, abs=ATOL)
        assert float(R.r21) == pytest.approx(1.0, abs=ATOL)
        assert float(R.r33) == pytest.approx(1.0, abs=ATOL)
        assert float(R[0, 1]) == pytest.approx(-1.0, abs=ATOL)

    def test_invalid_raises(self):
        with pytest.raises(ValueError, match="not a proper rotation matrix"):
            RotationMatrix(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, -1.0)

    def test_non_orthogonal_raises(self):
        with pytest.raises(ValueError):
            RotationMatrix.from_matrix(jnp.array([[1.0, 0.1, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]))

    def test_bad_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            RotationMatrix.from_matrix(jnp.eye(2))

    def test_from_matrix_skip_validation(self):
        R = RotationMatrix.from_matrix(2.0 * jnp.eye(3), validate=False)
        assert float(R.r11) == pytest.approx(2.0, abs=ATOL)

    def test_passive_stores_transpose(self):
        M = Rz(0.4)
        R = RotationMatrix.from_matrix(M, usage=PASSIVE)
        assert jnp.allclose(R.to_stored_implementation(), M.T, atol=ATOL)
        assert jnp.allclose(R.to_matrix(), M, atol=ATOL)
        assert float(R.r12) == pytest.approx(float(M[0, 1]), abs=ATOL)

    def test_rotation_constructors(self):
        assert RotationMatrix.rotation_z(PI / 2.0) == EulerAnglesZyx(PI / 2.0, 0.0, 0.0)
        assert RotationMatrix.rotation_y(30.0, use_degrees=True) == EulerAnglesZyx(0.0, PI / 6.0, 0.0)
        assert RotationMatrix.rotation_x(-0.2) == EulerAnglesZyx(0.0, 0.0, -0.2)

    def test_rotation_constructor_passive(self):
        R = RotationMatrix.rotation_z(PI / 2.0, usage=PASSIVE)
        assert jnp.allclose(R.rotate(jnp.array([1.0, 0.0, 0.0])), jnp.array([0.0, -1.0, 0.0]), atol=ATOL)

    def test_determinant(self):
        R = EulerAnglesZyx(0.3, 0.2, 0.1).to(RotationMatrix)
        assert float(R.determinant()) == pytest.approx(1.0, abs=ATOL)

    def test_inverted_is_transpose(self):
        R = EulerAnglesZyx(0.3, 0.2, 0.1).to(RotationMatrix)
        assert jnp.allclose(R.inverted().to_matrix(), R.to_matrix().T, atol=ATOL)

    def test_mul_native(self):
        A = RotationMatrix.rotation_z(0.3)
        B = RotationMatrix.rotation_x(0.5)
        assert jnp.allclose((A * B).to_matrix(), A.to_matrix() @ B.to_matrix(), atol=ATOL)

    def test_mul_native_passive(self):
        A = RotationMatrix.rotation_z(0.3, usage=PASSIVE)
        B = RotationMatrix.rotation_x(0.5, usage=PASSIVE)
        assert jnp.allclose((A * B).to_matrix(), B.to_matrix() @ A.to_matrix(), atol=ATOL)

    def test_mul_mixed_representation(self):
        A = RotationMatrix.rotation_z(0.3)
        q = RotationQuaternion(1.0, 0.0, 1.0, 0.0)
        result = A * q
        assert isinstance(result, RotationMatrix)
        assert jnp.allclose(result.to_matrix(), A.to_matrix() @ q.to(RotationMatrix).to_matrix(), atol=ATOL)

    def test_str(self):
        s = str(RotationMatrix())
        assert s.startswith("RotationMatrix(")
        assert "ACTIVE" in s

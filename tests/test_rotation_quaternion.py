"""Unit tests for RotationQuaternion."""

import math

import jax
import jax.numpy as jnp
import pytest

from rotax import EulerAnglesZyx, RotationMatrix, RotationQuaternion, RotationUsage

PI = math.pi
SQRT2_2 = math.sqrt(2.0) / 2.0
ATOL = 1e-12

ACTIVE = RotationUsage.ACTIVE
PASSIVE = RotationUsage.PASSIVE


class TestRotationQuaternion:
    def test_default_identity(self):
        q = RotationQuaternion()
        assert jnp.allclose(q.to_vector(), jnp.array([1.0, 0.0, 0.0, 0.0]))

    def test_new_normalizes(self):
        q = RotationQuaternion(1.0, 1.0, 1.0, 1.0)
        assert float(q.w) == pytest.approx(0.5, abs=ATOL)
        assert float(q.x) == pytest.approx(0.5, abs=ATOL)
        assert float(q.y) == pytest.approx(0.5, abs=ATOL)
        assert float(q.z) == pytest.approx(0.5, abs=ATOL)
        assert float(q.norm()) == pytest.approx(1.0, abs=ATOL)

    def test_zero_raises(self):
        with pytest.raises(ValueError, match="zero"):
            RotationQuaternion(0.0, 0.0, 0.0, 0.0)

    def test_real_imaginary(self):
        q = RotationQuaternion(1.0, 1.0, 1.0, 1.0)
        assert float(q.real) == pytest.approx(0.5, abs=ATOL)
        assert jnp.allclose(q.imaginary, jnp.array([0.5, 0.5, 0.5]), atol=ATOL)

    def test_from_vector_scalar_last(self):
        q = RotationQuaternion.from_vector(jnp.array([0.0, 0.0, 0.0, 1.0]), scalar_first=False)
        assert float(q.w) == pytest.approx(1.0, abs=ATOL)

    def test_to_vector_scalar_last(self):
        q = RotationQuaternion(SQRT2_2, 0.0, 0.0, SQRT2_2)
        v = q.to_vector(scalar_first=False)
        assert jnp.allclose(v, jnp.array([0.0, 0.0, SQRT2_2, SQRT2_2]), atol=ATOL)

    def test_from_vector_bad_shape(self):
        with pytest.raises(ValueError, match="shape"):
            RotationQuaternion.from_vector(jnp.zeros(3))

    def test_getitem(self):
        q = RotationQuaternion()
        assert float(q[0]) == pytest.approx(1.0, abs=ATOL)

    def test_passive_stores_conjugate(self):
        q = RotationQuaternion(SQRT2_2, 0.0, 0.0, SQRT2_2, usage=PASSIVE)
        assert jnp.allclose(q.to_stored_implementation(), jnp.array([SQRT2_2, 0.0, 0.0, -SQRT2_2]))
        assert jnp.allclose(q.to_implementation(), jnp.array([SQRT2_2, 0.0, 0.0, SQRT2_2]))

    def test_yaw_quaternion(self):
        q = EulerAnglesZyx(PI / 2.0, 0.0, 0.0).to(RotationQuaternion)
        assert jnp.allclose(q.to_vector(), jnp.array([SQRT2_2, 0.0, 0.0, SQRT2_2]), atol=ATOL)

    def test_conjugated(self):
        q = RotationQuaternion(1.0, 2.0, 3.0, 4.0)
        qc = q.conjugated()
        assert jnp.allclose(qc.imaginary, -q.imaginary, atol=ATOL)
        assert (q * qc) == RotationQuaternion()

    def test_mul_hamilton(self):
        q1 = RotationQuaternion(1.0, 1.0, 0.0, 0.0)
        q2 = RotationQuaternion(1.0, 0.0, 1.0, 0.0)
        assert q1 * q2 == RotationQuaternion(1.0, 1.0, 1.0, 1.0)

    def test_mul_passive_reverses_nominal_order(self):
        q1 = RotationQuaternion(1.0, 1.0, 0.0, 0.0, usage=PASSIVE)
        q2 = RotationQuaternion(1.0, 0.0, 1.0, 0.0, usage=PASSIVE)
        expected = RotationQuaternion(1.0, 0.0, 1.0, 0.0) * RotationQuaternion(1.0, 1.0, 0.0, 0.0)
        assert jnp.allclose((q1 * q2).to_implementation(), expected.to_implementation(), atol=ATOL)

    def test_unique(self):
        u = RotationQuaternion(-0.5, 0.5, 0.5, 0.5).get_unique()
        assert jnp.allclose(u.to_vector(), jnp.array([0.5, -0.5, -0.5, -0.5]), atol=ATOL)

    def test_eq_double_cover(self):
        assert RotationQuaternion(0.5, 0.5, 0.5, 0.5) == RotationQuaternion(-0.5, -0.5, -0.5, -0.5)

    def test_eq_zero_scalar(self):
        assert RotationQuaternion(0.0, 1.0, 0.0, 0.0) == RotationQuaternion(0.0, -1.0, 0.0, 0.0)

    def test_ne(self):
        assert RotationQuaternion() != RotationQuaternion(0.0, 1.0, 0.0, 0.0)

    def test_from_vectors(self):
        q = RotationQuaternion.from_vectors([1.0, 0.0, 0.0], [0.0, 0.0, 3.0])
        v = q.rotate(jnp.array([1.0, 0.0, 0.0]))
        assert jnp.allclose(v, jnp.array([0.0, 0.0, 1.0]), atol=ATOL)

    def test_from_vectors_passive(self):
        q = RotationQuaternion.from_vectors([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], usage=PASSIVE)
        assert jnp.allclose(q.inverse_rotate(jnp.array([1.0, 0.0, 0.0])), jnp.array([0.0, 1.0, 0.0]), atol=ATOL)

    def test_matrix_round_trip(self):
        q = RotationQuaternion(0.3, -0.2, 0.9, 0.1, usage=PASSIVE)
        assert q.to(RotationMatrix).to(RotationQuaternion) == q

    def test_vmap_rotate(self):
        q = RotationQuaternion(1.0, 0.0, 0.0, 1.0)
        vs = jax.random.normal(jax.random.PRNGKey(7), (64, 3))
        out = jax.vmap(q.rotate)(vs)
        expected = (q.to(RotationMatrix).to_matrix() @ vs.T).T
        assert jnp.allclose(out, expected, atol=ATOL)

    def test_from_vector_needs_concrete_values(self):
        with pytest.raises(jax.errors.ConcretizationTypeError):
            jax.jit(lambda v: RotationQuaternion.from_vector(v).to_vector())(jnp.array([1.0, 0.0, 0.0, 0.0]))

    def test_conversion_under_jit(self):
        @jax.jit
        def to_quaternion(e):
            return e.to(RotationQuaternion)

        e = EulerAnglesZyx(0.3, -0.2, 0.9, usage=PASSIVE)
        q = to_quaternion(e)
        assert q.usage is PASSIVE
        assert q == e

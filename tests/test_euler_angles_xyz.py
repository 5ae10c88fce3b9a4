"""Unit tests for EulerAnglesXyz (roll-pitch-yaw)."""

import math

import jax.numpy as jnp
import pytest

from rotax import (
    EulerAnglesRpy,
    EulerAnglesXyz,
    EulerAnglesZyx,
    RotationMatrix,
    RotationQuaternion,
    RotationUsage,
    Rx,
    Ry,
    Rz,
    wrap_angle,
)

PI = math.pi
ATOL = 1e-12

ACTIVE = RotationUsage.ACTIVE
PASSIVE = RotationUsage.PASSIVE


class TestEulerAnglesXyz:
    def test_values(self):
        e = EulerAnglesXyz(0.1, 0.2, 0.3)
        assert float(e.roll) == pytest.approx(0.1, abs=ATOL)
        assert float(e.pitch) == pytest.approx(0.2, abs=ATOL)
        assert float(e.yaw) == pytest.approx(0.3, abs=ATOL)
        assert float(e.x) == float(e.roll)
        assert float(e.z) == float(e.yaw)

    def test_alias(self):
        assert EulerAnglesRpy is EulerAnglesXyz

    def test_degrees(self):
        e = EulerAnglesXyz(0.0, 0.0, 180.0, use_degrees=True)
        assert float(e.yaw) == pytest.approx(PI, abs=ATOL)

    def test_matrix_is_x_y_z_product(self):
        e = EulerAnglesXyz(0.4, -0.3, 1.2)
        expected = Rx(0.4) @ Ry(-0.3) @ Rz(1.2)
        assert jnp.allclose(e.to(RotationMatrix).to_matrix(), expected, atol=ATOL)

    def test_active_roll(self):
        v = EulerAnglesXyz(PI / 2.0, 0.0, 0.0).rotate(jnp.array([0.0, 1.0, 0.0]))
        assert jnp.allclose(v, jnp.array([0.0, 0.0, 1.0]), atol=ATOL)

    def test_passive_roll(self):
        e = EulerAnglesXyz(PI / 2.0, 0.0, 0.0, usage=PASSIVE)
        v = e.rotate(jnp.array([0.0, 1.0, 0.0]))
        assert jnp.allclose(v, jnp.array([0.0, 0.0, -1.0]), atol=ATOL)

    def test_passive_stores_negated(self):
        e = EulerAnglesXyz(0.1, 0.2, 0.3, usage=PASSIVE)
        assert jnp.allclose(e.to_stored_implementation(), jnp.array([-0.1, -0.2, -0.3]))
        assert jnp.allclose(e.to_vector(), jnp.array([0.1, 0.2, 0.3]))

    def test_setters(self):
        e = EulerAnglesXyz(usage=PASSIVE)
        e.set_x(0.1)
        e.set_y(0.2)
        e.set_z(0.3)
        assert jnp.allclose(e.to_vector(), jnp.array([0.1, 0.2, 0.3]))

    def test_from_vector_bad_shape(self):
        with pytest.raises(ValueError):
            EulerAnglesXyz.from_vector(jnp.zeros(4))

    @pytest.mark.parametrize("usage", [ACTIVE, PASSIVE])
    def test_inverted(self, usage):
        e = EulerAnglesXyz(-1.3, 0.7, 2.2, usage=usage)
        R = e.to(RotationMatrix).to_matrix()
        assert jnp.allclose(e.inverted().to(RotationMatrix).to_matrix(), R.T, atol=ATOL)

    def test_unique(self):
        u = EulerAnglesXyz(0.0, PI, 0.0).get_unique()
        assert jnp.allclose(u.to_vector(), jnp.array([-PI, 0.0, -PI]), atol=ATOL)

    @pytest.mark.parametrize("pitch", [PI / 2.0, -PI / 2.0])
    def test_unique_idempotent_at_pitch_bounds(self, pitch):
        once = EulerAnglesXyz(0.0, pitch, 0.0).get_unique()
        twice = once.get_unique()
        assert jnp.allclose(wrap_angle(twice.to_vector() - once.to_vector()), 0.0, atol=ATOL)
        assert twice == once

    @pytest.mark.parametrize("usage", [ACTIVE, PASSIVE])
    @pytest.mark.parametrize("pitch", [PI / 2.0, -PI / 2.0])
    def test_gimbal_lock_round_trip_eq(self, pitch, usage):
        e = EulerAnglesXyz(0.3, pitch, 0.7, usage=usage)
        for target in (RotationQuaternion, RotationMatrix, EulerAnglesZyx):
            back = e.to(target).to(EulerAnglesXyz)
            assert back == e

    def test_order_remap_to_zyx(self):
        e = EulerAnglesXyz(0.4, -0.3, 1.2)
        z = e.to(EulerAnglesZyx)
        assert jnp.allclose(
            z.to(RotationMatrix).to_matrix(), e.to(RotationMatrix).to_matrix(), atol=ATOL
        )
        assert z.to(EulerAnglesXyz) == e

    def test_single_axis_matches_zyx(self):
        # A pure yaw is the same in both sequences
        assert EulerAnglesXyz(0.0, 0.0, 0.8).to(EulerAnglesZyx) == EulerAnglesZyx(0.8, 0.0, 0.0)

    def test_repr(self):
        assert "roll=" in repr(EulerAnglesXyz(0.1, 0.2, 0.3))

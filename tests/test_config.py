"""Tests for the rotax.config module and the dtype-adaptive tolerances."""

import logging

import jax
import jax.numpy as jnp
import pytest

from rotax import EulerAnglesZyx, RotationMatrix, RotationQuaternion
from rotax.config import get_dtype, set_dtype
from rotax.rotations._tolerance import (
    get_gimbal_lock_tolerance,
    get_orthogonality_tolerance,
    get_rotation_epsilon,
    get_zero_norm_tolerance,
)

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True

    def test_float64_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="rotax.config"):
            set_dtype(jnp.float64)
        assert "64-bit" in caplog.text


class TestTolerances:
    def test_float64(self):
        set_dtype(jnp.float64)
        assert get_rotation_epsilon() == 1e-9
        assert get_gimbal_lock_tolerance() == 1e-8
        assert get_zero_norm_tolerance() == 1e-15
        assert get_orthogonality_tolerance() == 1e-6

    def test_float32(self):
        assert get_rotation_epsilon() == 1e-5
        assert get_gimbal_lock_tolerance() == 1e-4
        assert get_zero_norm_tolerance() == 1e-7
        assert get_orthogonality_tolerance() == 1e-4

    def test_float16(self):
        set_dtype(jnp.float16)
        assert get_rotation_epsilon() == 1e-2
        assert get_gimbal_lock_tolerance() == 1e-2

    def test_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_rotation_epsilon() == 1e-2
        assert get_zero_norm_tolerance() == 1e-3


class TestDtypeSwitchingOutputs:
    """Verify that payload dtypes match the configured dtype."""

    def test_euler_float32(self):
        e = EulerAnglesZyx(0.1, 0.2, 0.3)
        assert e.dtype == jnp.float32

    def test_euler_float64(self):
        set_dtype(jnp.float64)
        e = EulerAnglesZyx(0.1, 0.2, 0.3)
        assert e.dtype == jnp.float64

    def test_conversion_keeps_dtype(self):
        set_dtype(jnp.float64)
        q = EulerAnglesZyx(0.1, 0.2, 0.3).to(RotationQuaternion)
        assert q.dtype == jnp.float64

    def test_explicit_cast(self):
        set_dtype(jnp.float64)
        q = EulerAnglesZyx(0.1, 0.2, 0.3).to(RotationQuaternion, dtype=jnp.float32)
        assert q.dtype == jnp.float32

    def test_astype(self):
        set_dtype(jnp.float64)
        R = RotationMatrix().astype(jnp.float32)
        assert R.dtype == jnp.float32

    def test_float32_round_trip_within_epsilon(self):
        e = EulerAnglesZyx(0.5, -0.3, 1.2)
        assert e.to(RotationMatrix).to(EulerAnglesZyx) == e

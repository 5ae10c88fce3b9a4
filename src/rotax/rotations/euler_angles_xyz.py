"""Euler angles X-Y'-Z'' (roll-pitch-yaw) rotation representation.

Provides the ``EulerAnglesXyz`` class (alias ``EulerAnglesRpy``)
representing a rotation as roll about X, then pitch about the new Y, then
yaw about the newest Z: ``R = Rx(roll) @ Ry(pitch) @ Rz(yaw)``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations.conversions import (
    inverse_rpy,
    rpy_from_rotation_matrix,
    rpy_to_rotation_matrix,
    unique_euler_angles,
)
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage
from rotax.utils import to_radians, wrap_angle


class EulerAnglesXyz(RotationBase):
    """Rotation as three successive intrinsic rotations X, Y', Z''.

    Internal storage is a shape ``(3,)`` array ``[roll, pitch, yaw]`` in
    radians (negated for passive usage).

    Args:
        roll (float): Rotation about X. Default: ``0.0``.
        pitch (float): Rotation about Y'. Default: ``0.0``.
        yaw (float): Rotation about Z''. Default: ``0.0``.
        use_degrees (bool): If ``True``, interpret angles as degrees. Default: ``False``.
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.
    """

    __slots__ = ()

    def __init__(
        self,
        roll: float = 0.0,
        pitch: float = 0.0,
        yaw: float = 0.0,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        rpy = to_radians(jnp.asarray([roll, pitch, yaw], dtype=get_dtype()), use_degrees)
        self._usage = RotationUsage(usage)
        self._set_implementation(rpy)

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return -data

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return inverse_rpy(data)

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        return unique_euler_angles(data)

    @staticmethod
    def _comparison_implementation(data: jax.Array) -> jax.Array:
        return unique_euler_angles(rpy_from_rotation_matrix(rpy_to_rotation_matrix(data)))

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.zeros(3, dtype=get_dtype())

    @staticmethod
    def _implementation_difference(a: jax.Array, b: jax.Array) -> jax.Array:
        return wrap_angle(a - b)

    @classmethod
    def from_vector(
        cls,
        vec: jax.Array,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> EulerAnglesXyz:
        """Create from a 3-element vector ``[roll, pitch, yaw]``.

        Args:
            vec (jax.Array): Array-like of shape ``(3,)``.
            use_degrees (bool): If ``True``, interpret as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            EulerAnglesXyz: New instance.

        Raises:
            ValueError: If ``vec`` does not have shape ``(3,)``.
        """
        v = jnp.asarray(vec, dtype=get_dtype())
        if v.shape != (3,):
            raise ValueError(f"Expected a vector of shape (3,), got {v.shape}")
        return cls._from_implementation(to_radians(v, use_degrees), usage)

    def to_vector(self) -> jax.Array:
        """Return the nominal angles ``[roll, pitch, yaw]``."""
        return self.to_implementation()

    @property
    def roll(self) -> jax.Array:
        """Rotation about X in radians."""
        return self.to_implementation()[0]

    @property
    def pitch(self) -> jax.Array:
        """Rotation about Y' in radians."""
        return self.to_implementation()[1]

    @property
    def yaw(self) -> jax.Array:
        """Rotation about Z'' in radians."""
        return self.to_implementation()[2]

    @property
    def x(self) -> jax.Array:
        return self.roll

    @property
    def y(self) -> jax.Array:
        return self.pitch

    @property
    def z(self) -> jax.Array:
        return self.yaw

    def _set_angle(self, idx: int, value: float) -> None:
        self._set_implementation(self.to_implementation().at[idx].set(value))

    def set_roll(self, roll: float) -> None:
        self._set_angle(0, roll)

    def set_pitch(self, pitch: float) -> None:
        self._set_angle(1, pitch)

    def set_yaw(self, yaw: float) -> None:
        self._set_angle(2, yaw)

    def set_x(self, x: float) -> None:
        self.set_roll(x)

    def set_y(self, y: float) -> None:
        self.set_pitch(y)

    def set_z(self, z: float) -> None:
        self.set_yaw(z)

    def __str__(self) -> str:
        rpy = self.to_implementation()
        return (
            f"EulerAnglesXyz(roll={float(rpy[0]):.6f}, "
            f"pitch={float(rpy[1]):.6f}, "
            f"yaw={float(rpy[2]):.6f}, "
            f"usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        rpy = self.to_implementation()
        return (
            f"EulerAnglesXyz(roll={float(rpy[0])}, "
            f"pitch={float(rpy[1])}, "
            f"yaw={float(rpy[2])}, "
            f"usage={self._usage.name})"
        )


EulerAnglesRpy = EulerAnglesXyz

register_rotation_pytree(EulerAnglesXyz)

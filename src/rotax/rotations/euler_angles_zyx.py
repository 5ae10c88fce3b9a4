"""Euler angles Z-Y'-X'' (yaw-pitch-roll) rotation representation.

Provides the ``EulerAnglesZyx`` class (alias ``EulerAnglesYpr``)
representing a rotation as yaw about Z, then pitch about the new Y, then
roll about the newest X: ``R = Rz(yaw) @ Ry(pitch) @ Rx(roll)``.

Passive instances store the negated angle triple; every accessor and
mutator applies the sign rule so callers always see nominal angles.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations.conversions import (
    inverse_ypr,
    unique_euler_angles,
    ypr_from_rotation_matrix,
    ypr_to_rotation_matrix,
)
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage
from rotax.utils import to_radians, wrap_angle


class EulerAnglesZyx(RotationBase):
    """Rotation as three successive intrinsic rotations Z, Y', X''.

    Internal storage is a shape ``(3,)`` array ``[yaw, pitch, roll]`` in
    radians (negated for passive usage).  Angles are not range-restricted
    until :meth:`get_unique` is applied.

    This class is registered as a JAX pytree.  The angle array is the leaf;
    the usage tag is auxiliary data.

    Args:
        yaw (float): Rotation about Z. Default: ``0.0``.
        pitch (float): Rotation about Y'. Default: ``0.0``.
        roll (float): Rotation about X''. Default: ``0.0``.
        use_degrees (bool): If ``True``, interpret angles as degrees. Default: ``False``.
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.
    """

    __slots__ = ()

    def __init__(
        self,
        yaw: float = 0.0,
        pitch: float = 0.0,
        roll: float = 0.0,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        ypr = to_radians(jnp.asarray([yaw, pitch, roll], dtype=get_dtype()), use_degrees)
        self._usage = RotationUsage(usage)
        self._set_implementation(ypr)

    # Payload hooks

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return -data

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return inverse_ypr(data)

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        return unique_euler_angles(data)

    @staticmethod
    def _comparison_implementation(data: jax.Array) -> jax.Array:
        # Gimbal-locked triples only agree after extraction from the matrix
        return unique_euler_angles(ypr_from_rotation_matrix(ypr_to_rotation_matrix(data)))

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.zeros(3, dtype=get_dtype())

    @staticmethod
    def _implementation_difference(a: jax.Array, b: jax.Array) -> jax.Array:
        # -pi and pi are the same canonical yaw/roll
        return wrap_angle(a - b)

    # Factory methods

    @classmethod
    def from_vector(
        cls,
        vec: jax.Array,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> EulerAnglesZyx:
        """Create from a 3-element vector ``[yaw, pitch, roll]``.

        Args:
            vec (jax.Array): Array-like of shape ``(3,)``.
            use_degrees (bool): If ``True``, interpret as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            EulerAnglesZyx: New instance.

        Raises:
            ValueError: If ``vec`` does not have shape ``(3,)``.
        """
        v = jnp.asarray(vec, dtype=get_dtype())
        if v.shape != (3,):
            raise ValueError(f"Expected a vector of shape (3,), got {v.shape}")
        return cls._from_implementation(to_radians(v, use_degrees), usage)

    def to_vector(self) -> jax.Array:
        """Return the nominal angles ``[yaw, pitch, roll]``."""
        return self.to_implementation()

    # Properties

    @property
    def yaw(self) -> jax.Array:
        """Rotation about Z in radians."""
        return self.to_implementation()[0]

    @property
    def pitch(self) -> jax.Array:
        """Rotation about Y' in radians."""
        return self.to_implementation()[1]

    @property
    def roll(self) -> jax.Array:
        """Rotation about X'' in radians."""
        return self.to_implementation()[2]

    @property
    def z(self) -> jax.Array:
        """Alias of :attr:`yaw`."""
        return self.yaw

    @property
    def y(self) -> jax.Array:
        """Alias of :attr:`pitch`."""
        return self.pitch

    @property
    def x(self) -> jax.Array:
        """Alias of :attr:`roll`."""
        return self.roll

    # Mutators

    def _set_angle(self, idx: int, value: float) -> None:
        self._set_implementation(self.to_implementation().at[idx].set(value))

    def set_yaw(self, yaw: float) -> None:
        """Set the rotation about Z in radians."""
        self._set_angle(0, yaw)

    def set_pitch(self, pitch: float) -> None:
        """Set the rotation about Y' in radians."""
        self._set_angle(1, pitch)

    def set_roll(self, roll: float) -> None:
        """Set the rotation about X'' in radians."""
        self._set_angle(2, roll)

    def set_z(self, z: float) -> None:
        self.set_yaw(z)

    def set_y(self, y: float) -> None:
        self.set_pitch(y)

    def set_x(self, x: float) -> None:
        self.set_roll(x)

    # String representations

    def __str__(self) -> str:
        ypr = self.to_implementation()
        return (
            f"EulerAnglesZyx(yaw={float(ypr[0]):.6f}, "
            f"pitch={float(ypr[1]):.6f}, "
            f"roll={float(ypr[2]):.6f}, "
            f"usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        ypr = self.to_implementation()
        return (
            f"EulerAnglesZyx(yaw={float(ypr[0])}, "
            f"pitch={float(ypr[1])}, "
            f"roll={float(ypr[2])}, "
            f"usage={self._usage.name})"
        )


EulerAnglesYpr = EulerAnglesZyx

register_rotation_pytree(EulerAnglesZyx)

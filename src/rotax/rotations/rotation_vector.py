"""Rotation vector representation.

Provides the ``RotationVector`` class: a 3-vector whose direction is the
rotation axis and whose norm is the rotation angle in radians.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations.conversions import (
    rotation_vector_to_angle_axis,
    unique_rotation_vector,
)
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage


class RotationVector(RotationBase):
    """Rotation as ``angle * axis``.

    Internal storage is a shape ``(3,)`` array, negated for passive usage.
    The zero vector is the identity.

    Args:
        x (float): x-component. Default: ``0.0``.
        y (float): y-component. Default: ``0.0``.
        z (float): z-component. Default: ``0.0``.
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.
    """

    __slots__ = ()

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        self._usage = RotationUsage(usage)
        self._set_implementation(jnp.asarray([x, y, z], dtype=get_dtype()))

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return -data

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return -data

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        return unique_rotation_vector(data)

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.zeros(3, dtype=get_dtype())

    @classmethod
    def from_vector(
        cls,
        vec: jax.Array,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationVector:
        """Create from a 3-element vector.

        Args:
            vec (jax.Array): Array-like of shape ``(3,)``.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationVector: New instance.

        Raises:
            ValueError: If ``vec`` does not have shape ``(3,)``.
        """
        v = jnp.asarray(vec, dtype=get_dtype())
        if v.shape != (3,):
            raise ValueError(f"Expected a vector of shape (3,), got {v.shape}")
        return cls._from_implementation(v, usage)

    def to_vector(self) -> jax.Array:
        """Return the nominal rotation vector."""
        return self.to_implementation()

    @property
    def vector(self) -> jax.Array:
        return self.to_implementation()

    @property
    def x(self) -> jax.Array:
        return self.to_implementation()[0]

    @property
    def y(self) -> jax.Array:
        return self.to_implementation()[1]

    @property
    def z(self) -> jax.Array:
        return self.to_implementation()[2]

    @property
    def angle(self) -> jax.Array:
        """Rotation angle, the norm of the vector."""
        return rotation_vector_to_angle_axis(self.to_implementation())[0]

    @property
    def axis(self) -> jax.Array:
        """Unit rotation axis; ``[1, 0, 0]`` for the zero vector."""
        return rotation_vector_to_angle_axis(self.to_implementation())[1]

    def set_vector(self, vec: jax.Array) -> None:
        """Replace the nominal rotation vector.

        Raises:
            ValueError: If ``vec`` does not have shape ``(3,)``.
        """
        v = jnp.asarray(vec, dtype=self.dtype)
        if v.shape != (3,):
            raise ValueError(f"Expected a vector of shape (3,), got {v.shape}")
        self._set_implementation(v)

    def __str__(self) -> str:
        v = self.to_implementation()
        return (
            f"RotationVector(x={float(v[0]):.6f}, y={float(v[1]):.6f}, "
            f"z={float(v[2]):.6f}, usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        v = self.to_implementation()
        return (
            f"RotationVector(x={float(v[0])}, y={float(v[1])}, "
            f"z={float(v[2])}, usage={self._usage.name})"
        )


register_rotation_pytree(RotationVector)

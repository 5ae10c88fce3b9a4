"""Unit quaternion rotation representation.

Provides the ``RotationQuaternion`` class representing a rotation as a unit
Hamilton quaternion in scalar-first convention ``[w, x, y, z]``.

The quaternion is normalized on construction.  It is the pivot of the
conversion engine: every representation converts to and from it directly,
and pairs without a direct conversion are routed through it.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations.conversions import (
    quaternion_conjugate,
    quaternion_from_vectors,
    unique_quaternion,
)
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage


class RotationQuaternion(RotationBase):
    """Unit quaternion representing a 3D rotation.

    Internal storage is a shape ``(4,)`` array in scalar-first order
    ``[w, x, y, z]``.  Passive instances store the conjugate.  ``q`` and
    ``-q`` describe the same rotation; :meth:`get_unique` picks the one with
    ``w >= 0``.

    Args:
        w (float): Scalar (real) component. Default: ``1.0``.
        x (float): First vector (imaginary) component. Default: ``0.0``.
        y (float): Second vector (imaginary) component. Default: ``0.0``.
        z (float): Third vector (imaginary) component. Default: ``0.0``.
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.

    The constructor and :meth:`from_vector` check the norm on the host, so
    they need concrete values and cannot be called on traced arrays inside
    ``jax.jit``.  Inside traced code, convert from another representation
    with :meth:`from_rotation` or :meth:`to` instead.

    Raises:
        ValueError: If the quaternion has zero norm.
    """

    __slots__ = ()

    def __init__(
        self,
        w: float = 1.0,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        self._usage = RotationUsage(usage)
        self._set_implementation(_normalized(jnp.asarray([w, x, y, z], dtype=get_dtype())))

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return quaternion_conjugate(data)

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return quaternion_conjugate(data)

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        return unique_quaternion(data)

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.array([1.0, 0.0, 0.0, 0.0], dtype=get_dtype())

    @staticmethod
    def _implementation_difference(a: jax.Array, b: jax.Array) -> jax.Array:
        # w == 0 leaves the sign of a canonical quaternion open
        return jnp.where(jnp.dot(a, b) >= 0.0, a - b, a + b)

    # Factory methods

    @classmethod
    def from_vector(
        cls,
        v: jax.Array,
        scalar_first: bool = True,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationQuaternion:
        """Create from a 4-element vector.

        Args:
            v (jax.Array): Array-like of shape ``(4,)``.
            scalar_first (bool): If ``True``, ``v = [w, x, y, z]``.
                If ``False``, ``v = [x, y, z, w]``.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationQuaternion: New normalized quaternion.

        Raises:
            ValueError: If ``v`` does not have shape ``(4,)`` or zero norm.
        """
        v = jnp.asarray(v, dtype=get_dtype())
        if v.shape != (4,):
            raise ValueError(f"Expected a vector of shape (4,), got {v.shape}")
        if not scalar_first:
            v = jnp.roll(v, 1)
        return cls._from_implementation(_normalized(v), usage)

    @classmethod
    def from_vectors(
        cls,
        v1: jax.Array,
        v2: jax.Array,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationQuaternion:
        """Shortest-arc rotation taking the direction of ``v1`` onto ``v2``.

        Args:
            v1 (jax.Array): Source direction of shape ``(3,)``.
            v2 (jax.Array): Target direction of shape ``(3,)``.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationQuaternion: Rotation ``q`` with ``q.rotate(v1)`` parallel
            to ``v2`` for active usage.
        """
        dtype = get_dtype()
        q = quaternion_from_vectors(jnp.asarray(v1, dtype=dtype), jnp.asarray(v2, dtype=dtype))
        return cls._from_implementation(q, usage)

    def to_vector(self, scalar_first: bool = True) -> jax.Array:
        """Return the nominal quaternion as a 4-element vector.

        Args:
            scalar_first (bool): If ``True``, return ``[w, x, y, z]``.
                If ``False``, return ``[x, y, z, w]``.

        Returns:
            jnp.ndarray: Array of shape ``(4,)``.
        """
        q = self.to_implementation()
        if scalar_first:
            return q
        return jnp.roll(q, -1)

    # Properties

    @property
    def w(self) -> jax.Array:
        """Scalar component."""
        return self.to_implementation()[0]

    @property
    def x(self) -> jax.Array:
        """First vector component."""
        return self.to_implementation()[1]

    @property
    def y(self) -> jax.Array:
        """Second vector component."""
        return self.to_implementation()[2]

    @property
    def z(self) -> jax.Array:
        """Third vector component."""
        return self.to_implementation()[3]

    @property
    def real(self) -> jax.Array:
        return self.w

    @property
    def imaginary(self) -> jax.Array:
        """Vector part ``[x, y, z]``."""
        return self.to_implementation()[1:]

    # Methods

    def norm(self) -> jax.Array:
        """Return the Euclidean norm (``1`` up to rounding)."""
        return jnp.linalg.norm(self._data)

    def conjugated(self) -> RotationQuaternion:
        """Return the conjugate, which for a unit quaternion is the inverse.

        Returns:
            RotationQuaternion: Conjugate with the same usage.
        """
        return self.inverted()

    def __getitem__(self, idx: int) -> jax.Array:
        return self.to_implementation()[idx]

    # String representations

    def __str__(self) -> str:
        q = self.to_implementation()
        return (
            f"RotationQuaternion(w={float(q[0]):.6f}, "
            f"x={float(q[1]):.6f}, "
            f"y={float(q[2]):.6f}, "
            f"z={float(q[3]):.6f}, "
            f"usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        q = self.to_implementation()
        return (
            f"RotationQuaternion(w={float(q[0])}, "
            f"x={float(q[1])}, "
            f"y={float(q[2])}, "
            f"z={float(q[3])}, "
            f"usage={self._usage.name})"
        )


def _normalized(q: jax.Array) -> jax.Array:
    """Unit quaternion along ``q``.  Reads the norm on the host, so ``q`` must be concrete."""
    n = jnp.linalg.norm(q)
    if float(n) == 0.0:
        raise ValueError("Cannot build a rotation from a zero quaternion")
    return q / n


register_rotation_pytree(RotationQuaternion)

"""Angle-axis rotation representation.

Provides the ``AngleAxis`` class storing a rotation angle together with a
unit rotation axis.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations.conversions import normalize_axis, unique_angle_axis
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage
from rotax.utils import to_radians


def _pack(angle: jax.Array, axis: jax.Array) -> jax.Array:
    return jnp.concatenate([jnp.reshape(angle, (1,)), axis])


class AngleAxis(RotationBase):
    """Rotation by ``angle`` radians about a unit ``axis``.

    Internal storage is a shape ``(4,)`` array ``[angle, ax, ay, az]``.  The
    axis is normalized on construction; a zero axis is replaced by the unit
    x-axis.  Passive instances store the negated angle with the same axis.

    Args:
        angle (float): Rotation angle. Default: ``0.0``.
        axis (jax.Array): Rotation axis of shape ``(3,)``. Default: ``[1, 0, 0]``.
        use_degrees (bool): If ``True``, interpret ``angle`` as degrees. Default: ``False``.
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.

    Examples:
        ```python
        from rotax import AngleAxis
        aa = AngleAxis(90.0, [0.0, 0.0, 1.0], use_degrees=True)
        aa.rotate([1.0, 0.0, 0.0])  # ~[0, 1, 0]
        ```
    """

    __slots__ = ()

    def __init__(
        self,
        angle: float = 0.0,
        axis: jax.Array = (1.0, 0.0, 0.0),
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        dtype = get_dtype()
        axis = jnp.asarray(axis, dtype=dtype)
        if axis.shape != (3,):
            raise ValueError(f"Expected an axis of shape (3,), got {axis.shape}")
        angle = to_radians(jnp.asarray(angle, dtype=dtype), use_degrees)
        self._usage = RotationUsage(usage)
        self._set_implementation(_pack(angle, normalize_axis(axis)))

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return data.at[0].multiply(-1.0)

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return data.at[0].multiply(-1.0)

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        angle, axis = unique_angle_axis(data[0], data[1:])
        return _pack(angle, axis)

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.array([0.0, 1.0, 0.0, 0.0], dtype=get_dtype())

    @staticmethod
    def _implementation_difference(a: jax.Array, b: jax.Array) -> jax.Array:
        # The axis of a zero rotation is arbitrary
        return a[0] * a[1:] - b[0] * b[1:]

    @classmethod
    def from_values(
        cls,
        angle: float,
        x: float,
        y: float,
        z: float,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> AngleAxis:
        """Create from an angle and the three axis components.

        Args:
            angle (float): Rotation angle.
            x (float): Axis x-component.
            y (float): Axis y-component.
            z (float): Axis z-component.
            use_degrees (bool): If ``True``, interpret ``angle`` as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            AngleAxis: New instance.
        """
        return cls(angle, [x, y, z], use_degrees=use_degrees, usage=usage)

    @classmethod
    def from_vector(
        cls,
        vec: jax.Array,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> AngleAxis:
        """Create from a 4-element vector ``[angle, x, y, z]``.

        Args:
            vec (jax.Array): Array-like of shape ``(4,)``.
            use_degrees (bool): If ``True``, interpret the angle as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            AngleAxis: New instance.

        Raises:
            ValueError: If ``vec`` does not have shape ``(4,)``.
        """
        v = jnp.asarray(vec, dtype=get_dtype())
        if v.shape != (4,):
            raise ValueError(f"Expected a vector of shape (4,), got {v.shape}")
        return cls(v[0], v[1:], use_degrees=use_degrees, usage=usage)

    def to_vector(self) -> jax.Array:
        """Return the nominal parameters ``[angle, x, y, z]``."""
        return self.to_implementation()

    @property
    def angle(self) -> jax.Array:
        """Rotation angle in radians."""
        return self.to_implementation()[0]

    @property
    def axis(self) -> jax.Array:
        """Unit rotation axis of shape ``(3,)``."""
        return self.to_implementation()[1:]

    def set_angle(self, angle: float, use_degrees: bool = False) -> None:
        """Set the rotation angle, keeping the axis."""
        angle = to_radians(jnp.asarray(angle, dtype=self.dtype), use_degrees)
        self._set_implementation(self.to_implementation().at[0].set(angle))

    def set_axis(self, axis: jax.Array) -> None:
        """Set the rotation axis, keeping the angle.

        Args:
            axis (jax.Array): Axis of shape ``(3,)``; normalized here.

        Raises:
            ValueError: If ``axis`` does not have shape ``(3,)``.
        """
        axis = jnp.asarray(axis, dtype=self.dtype)
        if axis.shape != (3,):
            raise ValueError(f"Expected an axis of shape (3,), got {axis.shape}")
        self._set_implementation(_pack(self.angle, normalize_axis(axis)))

    def __str__(self) -> str:
        data = self.to_implementation()
        return (
            f"AngleAxis(angle={float(data[0]):.6f}, "
            f"axis=[{float(data[1]):.6f}, {float(data[2]):.6f}, {float(data[3]):.6f}], "
            f"usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        data = self.to_implementation()
        return (
            f"AngleAxis(angle={float(data[0])}, "
            f"axis=[{float(data[1])}, {float(data[2])}, {float(data[3])}], "
            f"usage={self._usage.name})"
        )


register_rotation_pytree(AngleAxis)

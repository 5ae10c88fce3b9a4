"""Rotation matrix (DCM) representation.

Provides the ``RotationMatrix`` class representing a rotation as a
3x3 orthogonal matrix with determinant +1 (SO(3)).

The constructor validates that the matrix is a proper rotation matrix.
Conversion outputs and pytree unflatten bypass validation.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.config import get_dtype
from rotax.rotations._tolerance import get_orthogonality_tolerance
from rotax.rotations.elementary import Rx, Ry, Rz
from rotax.rotations.rotation_base import RotationBase, register_rotation_pytree
from rotax.rotations.usage import RotationUsage


def _is_so3(matrix: jax.Array, tol: float | None = None) -> bool:
    """Check if a matrix is in SO(3).

    Tests orthogonality (R^T R ≈ I) and unit determinant (det ≈ +1).

    Args:
        matrix (jax.Array): Array of shape ``(3, 3)``.
        tol (float | None): Tolerance for the checks.  Defaults to
            :func:`get_orthogonality_tolerance`.

    Returns:
        bool: ``True`` if the matrix is a proper rotation matrix.
    """
    if tol is None:
        tol = get_orthogonality_tolerance()
    rtr = matrix.T @ matrix
    orth_err = jnp.max(jnp.abs(rtr - jnp.eye(3, dtype=matrix.dtype)))
    det = jnp.linalg.det(matrix)
    return bool(orth_err < tol and jnp.abs(det - 1.0) < tol)


def _validated(matrix: jax.Array) -> jax.Array:
    if not _is_so3(matrix):
        raise ValueError(
            f"Matrix is not a proper rotation matrix. det={float(jnp.linalg.det(matrix)):.6f}"
        )
    return matrix


class RotationMatrix(RotationBase):
    """3x3 rotation matrix (Direction Cosine Matrix).

    Internal storage is a shape ``(3, 3)`` JAX array; passive instances store
    the transpose.  The constructor validates SO(3) membership.  Use
    ``from_matrix`` with ``validate=False`` to skip validation when the
    matrix is already known to be valid.

    Args:
        r11 (float): Element (0, 0).
        r12 (float): Element (0, 1).
        r13 (float): Element (0, 2).
        r21 (float): Element (1, 0).
        r22 (float): Element (1, 1).
        r23 (float): Element (1, 2).
        r31 (float): Element (2, 0).
        r32 (float): Element (2, 1).
        r33 (float): Element (2, 2).
        usage (RotationUsage): Active or passive. Default: ``RotationUsage.ACTIVE``.

    Raises:
        ValueError: If the matrix is not in SO(3).
    """

    __slots__ = ()

    def __init__(
        self,
        r11: float = 1.0,
        r12: float = 0.0,
        r13: float = 0.0,
        r21: float = 0.0,
        r22: float = 1.0,
        r23: float = 0.0,
        r31: float = 0.0,
        r32: float = 0.0,
        r33: float = 1.0,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> None:
        data = jnp.asarray(
            [
                [r11, r12, r13],
                [r21, r22, r23],
                [r31, r32, r33],
            ],
            dtype=get_dtype(),
        )
        self._usage = RotationUsage(usage)
        self._set_implementation(_validated(data))

    @staticmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        return data.T

    @staticmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        return data.T

    @staticmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        return data

    @classmethod
    def _identity_implementation(cls) -> jax.Array:
        return jnp.eye(3, dtype=get_dtype())

    # Properties

    @property
    def r11(self) -> jax.Array:
        """Element (0, 0)."""
        return self.to_implementation()[0, 0]

    @property
    def r12(self) -> jax.Array:
        """Element (0, 1)."""
        return self.to_implementation()[0, 1]

    @property
    def r13(self) -> jax.Array:
        """Element (0, 2)."""
        return self.to_implementation()[0, 2]

    @property
    def r21(self) -> jax.Array:
        """Element (1, 0)."""
        return self.to_implementation()[1, 0]

    @property
    def r22(self) -> jax.Array:
        """Element (1, 1)."""
        return self.to_implementation()[1, 1]

    @property
    def r23(self) -> jax.Array:
        """Element (1, 2)."""
        return self.to_implementation()[1, 2]

    @property
    def r31(self) -> jax.Array:
        """Element (2, 0)."""
        return self.to_implementation()[2, 0]

    @property
    def r32(self) -> jax.Array:
        """Element (2, 1)."""
        return self.to_implementation()[2, 1]

    @property
    def r33(self) -> jax.Array:
        """Element (2, 2)."""
        return self.to_implementation()[2, 2]

    # Factory methods

    @classmethod
    def from_matrix(
        cls,
        matrix: jax.Array,
        validate: bool = True,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationMatrix:
        """Create from a 3x3 array of nominal entries.

        Args:
            matrix (jax.Array): Array-like of shape ``(3, 3)``.
            validate (bool): If ``True``, check SO(3) membership. Default: ``True``.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationMatrix: New instance.

        Raises:
            ValueError: If the shape is not ``(3, 3)``, or ``validate=True``
                and the matrix is not SO(3).
        """
        data = jnp.asarray(matrix, dtype=get_dtype())
        if data.shape != (3, 3):
            raise ValueError(f"Expected a matrix of shape (3, 3), got {data.shape}")
        if validate:
            data = _validated(data)
        return cls._from_implementation(data, usage)

    def to_matrix(self) -> jax.Array:
        """Return the nominal 3x3 array.

        Returns:
            jnp.ndarray: Array of shape ``(3, 3)``.
        """
        return self.to_implementation()

    @classmethod
    def rotation_x(
        cls,
        angle: float,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationMatrix:
        """Rotation about the x-axis.

        Args:
            angle (float): Rotation angle.
            use_degrees (bool): If ``True``, interpret as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationMatrix: Rotation about x.
        """
        return cls._from_implementation(Rx(angle, use_degrees).astype(get_dtype()), usage)

    @classmethod
    def rotation_y(
        cls,
        angle: float,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationMatrix:
        """Rotation about the y-axis.

        Args:
            angle (float): Rotation angle.
            use_degrees (bool): If ``True``, interpret as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationMatrix: Rotation about y.
        """
        return cls._from_implementation(Ry(angle, use_degrees).astype(get_dtype()), usage)

    @classmethod
    def rotation_z(
        cls,
        angle: float,
        use_degrees: bool = False,
        usage: RotationUsage = RotationUsage.ACTIVE,
    ) -> RotationMatrix:
        """Rotation about the z-axis.

        Args:
            angle (float): Rotation angle.
            use_degrees (bool): If ``True``, interpret as degrees.
            usage (RotationUsage): Active or passive.

        Returns:
            RotationMatrix: Rotation about z.
        """
        return cls._from_implementation(Rz(angle, use_degrees).astype(get_dtype()), usage)

    def determinant(self) -> jax.Array:
        """Determinant of the matrix (``+1`` up to rounding)."""
        return jnp.linalg.det(self._data)

    def __getitem__(self, idx: int | tuple[int, int]) -> jax.Array:
        return self.to_implementation()[idx]

    # String representations

    def __str__(self) -> str:
        d = self.to_implementation()
        return (
            f"RotationMatrix(\n"
            f"  [{float(d[0, 0]):10.6f} {float(d[0, 1]):10.6f} {float(d[0, 2]):10.6f}]\n"
            f"  [{float(d[1, 0]):10.6f} {float(d[1, 1]):10.6f} {float(d[1, 2]):10.6f}]\n"
            f"  [{float(d[2, 0]):10.6f} {float(d[2, 1]):10.6f} {float(d[2, 2]):10.6f}],\n"
            f"  usage={self._usage.name})"
        )

    def __repr__(self) -> str:
        return self.__str__()


register_rotation_pytree(RotationMatrix)

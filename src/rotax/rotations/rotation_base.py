"""Common base class of all rotation representations.

``RotationBase`` owns the usage tag and the stored payload and implements
every operation that is the same for all parameterizations: conversion
through the dispatch table, composition, comparison, rotation of vectors,
inversion and canonicalization.  Subclasses only describe their payload:
how the passive payload relates to the nominal one, how to invert and
canonicalize nominal parameters, and the identity.

Nominal parameters are what constructors accept and accessors return.  The
stored payload equals them for ``ACTIVE`` rotations and is their
negation/inverse for ``PASSIVE`` rotations.
"""

from __future__ import annotations

import abc
from typing import TypeVar

import jax
import jax.numpy as jnp

from rotax.rotations._dispatch import check_same_usage, convert, multiply
from rotax.rotations._tolerance import get_rotation_epsilon
from rotax.rotations.usage import RotationUsage

R = TypeVar("R", bound="RotationBase")


class RotationBase(abc.ABC):
    """Abstract rotation value with a usage tag.

    Subclasses store their payload in ``_data`` and must implement
    :meth:`_passive_payload`, :meth:`_invert_implementation`,
    :meth:`_unique_implementation` and :meth:`_identity_implementation`.
    """

    __slots__ = ('_data', '_usage')

    # Payload hooks

    @staticmethod
    @abc.abstractmethod
    def _passive_payload(data: jax.Array) -> jax.Array:
        """Map nominal parameters to the passive stored payload and back.

        Must be an involution.
        """

    @staticmethod
    @abc.abstractmethod
    def _invert_implementation(data: jax.Array) -> jax.Array:
        """Nominal parameters of the inverse rotation."""

    @staticmethod
    @abc.abstractmethod
    def _unique_implementation(data: jax.Array) -> jax.Array:
        """Canonical nominal parameters."""

    @classmethod
    @abc.abstractmethod
    def _identity_implementation(cls) -> jax.Array:
        """Nominal parameters of the identity rotation."""

    @classmethod
    def _comparison_implementation(cls, data: jax.Array) -> jax.Array:
        """Nominal parameters in the form used by ``==``.  Defaults to the canonical form."""
        return cls._unique_implementation(data)

    @staticmethod
    def _implementation_difference(a: jax.Array, b: jax.Array) -> jax.Array:
        """Element-wise difference of two canonical payloads."""
        return a - b

    # Construction

    @classmethod
    def _from_stored(cls: type[R], data: jax.Array, usage: RotationUsage) -> R:
        """Create from a stored payload without any conversion.

        Used by pytree unflatten and the composition engine.

        Args:
            data (jax.Array): Stored payload.
            usage (RotationUsage): Usage tag.

        Returns:
            RotationBase: New instance.
        """
        obj = object.__new__(cls)
        obj._usage = RotationUsage(usage)
        obj._data = data
        return obj

    @classmethod
    def _from_implementation(cls: type[R], data: jax.Array, usage: RotationUsage) -> R:
        """Create from nominal parameters, applying the usage rule.

        Args:
            data (jax.Array): Nominal parameters.
            usage (RotationUsage): Usage tag.

        Returns:
            RotationBase: New instance.
        """
        usage = RotationUsage(usage)
        if usage is RotationUsage.PASSIVE:
            data = cls._passive_payload(data)
        return cls._from_stored(data, usage)

    def _set_implementation(self, data: jax.Array) -> None:
        if self._usage is RotationUsage.PASSIVE:
            data = self._passive_payload(data)
        self._data = data

    @classmethod
    def from_rotation(cls: type[R], other: RotationBase, usage: RotationUsage | None = None) -> R:
        """Create from any other rotation through the conversion engine.

        Args:
            other (RotationBase): Source rotation of any representation.
            usage (RotationUsage | None): Expected usage.  Defaults to the
                usage of ``other``.

        Returns:
            RotationBase: Equivalent rotation with the usage of ``other``.

        Raises:
            TypeError: If ``usage`` differs from ``other.usage`` or ``other``
                is not a rotation.
        """
        if not isinstance(other, RotationBase):
            raise TypeError(f"Expected a rotation, got {type(other).__name__}")
        if usage is not None and RotationUsage(usage) is not other.usage:
            raise TypeError(
                f"Cannot convert {other.usage.value} rotation to "
                f"{RotationUsage(usage).value} {cls.__name__}"
            )
        return convert(cls, other)

    def to(self, cls: type[R], dtype=None) -> R:
        """Convert to another representation with the same usage.

        Args:
            cls (type): Target representation type.
            dtype: Optional float dtype of the result.

        Returns:
            RotationBase: Equivalent rotation of type ``cls``.
        """
        return convert(cls, self, dtype=dtype)

    def astype(self: R, dtype) -> R:
        """Return a copy with the payload cast to ``dtype``.

        Args:
            dtype: Target float dtype.

        Returns:
            RotationBase: Same rotation in the requested precision.
        """
        return type(self)._from_stored(self._data.astype(dtype), self._usage)

    # Properties

    @property
    def usage(self) -> RotationUsage:
        """Usage tag, fixed for the lifetime of the value."""
        return self._usage

    @property
    def dtype(self):
        """Float dtype of the payload."""
        return self._data.dtype

    def to_implementation(self) -> jax.Array:
        """Return the nominal parameters.

        Returns:
            jnp.ndarray: Nominal payload, identical for both usages.
        """
        if self._usage is RotationUsage.PASSIVE:
            return self._passive_payload(self._data)
        return self._data

    def to_stored_implementation(self) -> jax.Array:
        """Return the stored payload.

        Returns:
            jnp.ndarray: Nominal payload for ``ACTIVE``; its
            negation/inverse for ``PASSIVE``.
        """
        return self._data

    # Inversion, identity, canonicalization

    def inverted(self: R) -> R:
        """Return the inverse rotation.

        Returns:
            RotationBase: Inverse with the same type and usage.
        """
        return type(self)._from_implementation(
            self._invert_implementation(self.to_implementation()), self._usage
        )

    def invert(self: R) -> R:
        """Invert in place.

        Returns:
            RotationBase: ``self``.
        """
        self._data = self.inverted()._data
        return self

    def set_identity(self: R) -> R:
        """Reset to the identity rotation in place.

        Returns:
            RotationBase: ``self``.
        """
        identity = jnp.asarray(self._identity_implementation(), dtype=self._data.dtype)
        self._set_implementation(identity)
        return self

    def get_unique(self: R) -> R:
        """Return the canonical representative of this rotation.

        Returns:
            RotationBase: Canonical rotation with the same type and usage.
        """
        return type(self)._from_implementation(
            self._unique_implementation(self.to_implementation()), self._usage
        )

    def set_unique(self: R) -> R:
        """Canonicalize in place.

        Returns:
            RotationBase: ``self``.
        """
        self._data = self.get_unique()._data
        return self

    # Vector rotation

    def _stored_rotation_matrix(self) -> jax.Array:
        from rotax.rotations.rotation_matrix import RotationMatrix

        return convert(RotationMatrix, self).to_stored_implementation()

    def rotate(self, vector: jax.Array) -> jax.Array:
        """Rotate a 3-vector or the columns of a ``3 x N`` matrix.

        Active rotations move the vector; passive rotations express the
        fixed vector in the rotated frame.

        Args:
            vector (jax.Array): Array of shape ``(3,)`` or ``(3, N)``.

        Returns:
            jnp.ndarray: Rotated array with the input shape.

        Raises:
            ValueError: If the leading dimension is not 3.
        """
        v = jnp.asarray(vector)
        if v.ndim not in (1, 2) or v.shape[0] != 3:
            raise ValueError(f"Expected an array of shape (3,) or (3, N), got {v.shape}")
        return self._stored_rotation_matrix() @ v

    def inverse_rotate(self, vector: jax.Array) -> jax.Array:
        """Apply the inverse of :meth:`rotate`.

        Args:
            vector (jax.Array): Array of shape ``(3,)`` or ``(3, N)``.

        Returns:
            jnp.ndarray: Rotated array with the input shape.

        Raises:
            ValueError: If the leading dimension is not 3.
        """
        v = jnp.asarray(vector)
        if v.ndim not in (1, 2) or v.shape[0] != 3:
            raise ValueError(f"Expected an array of shape (3,) or (3, N), got {v.shape}")
        return self._stored_rotation_matrix().T @ v

    # Comparison

    def get_disparity_angle(self, other: RotationBase) -> jax.Array:
        """Angle of the relative rotation between ``self`` and ``other``.

        Args:
            other (RotationBase): Rotation of any representation with the same usage.

        Returns:
            jax.Array: Angle in radians in ``[0, pi]``.

        Raises:
            TypeError: If the usages differ.
        """
        from rotax.rotations.conversions import quaternion_conjugate, quaternion_multiply
        from rotax.rotations.rotation_quaternion import RotationQuaternion

        check_same_usage(self, other)
        q_self = convert(RotationQuaternion, self).to_stored_implementation()
        q_other = convert(RotationQuaternion, other).to_stored_implementation()
        rel = quaternion_multiply(quaternion_conjugate(q_self), q_other)
        return 2.0 * jnp.arctan2(jnp.linalg.norm(rel[1:]), jnp.abs(rel[0]))

    def is_near(self, other: RotationBase, tol: float | None = None) -> bool:
        """Return ``True`` if the disparity angle is below ``tol``.

        Args:
            other (RotationBase): Rotation of any representation with the same usage.
            tol (float | None): Angle tolerance in radians.  Defaults to
                :func:`get_rotation_epsilon`.

        Returns:
            bool: Whether the rotations are close.
        """
        if tol is None:
            tol = get_rotation_epsilon()
        return bool(self.get_disparity_angle(other) < tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationBase):
            return NotImplemented
        check_same_usage(self, other)
        eps = get_rotation_epsilon()
        a = self._comparison_implementation(self.to_implementation())
        b = self._comparison_implementation(convert(type(self), other).to_implementation())
        return bool(jnp.all(jnp.abs(self._implementation_difference(a, b)) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, RotationBase):
            return NotImplemented
        return not self.__eq__(other)

    # Composition

    def __mul__(self: R, other: object) -> R:
        """Composition: ``(a * b).rotate(v) == a.rotate(b.rotate(v))``."""
        if not isinstance(other, RotationBase):
            return NotImplemented
        return multiply(self, other)


def _flatten(rotation: RotationBase):
    return (rotation._data,), rotation._usage


def register_rotation_pytree(cls: type[RotationBase]) -> type[RotationBase]:
    """Register a representation as a JAX pytree.

    The payload is the only leaf; the usage tag is auxiliary data.

    Args:
        cls (type): Concrete ``RotationBase`` subclass.

    Returns:
        type: ``cls`` unchanged.
    """
    jax.tree_util.register_pytree_node(
        cls,
        _flatten,
        lambda usage, children: cls._from_stored(children[0], usage),
    )
    return cls

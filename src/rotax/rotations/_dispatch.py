"""Runtime dispatch tables for conversion and composition.

The conversion table maps ``(destination type, source type)`` to a function
taking a source rotation and returning a destination rotation of the same
usage.  The multiplication table maps a representation type to a function
composing two rotations into that type.  Both tables are filled once by
:mod:`rotax.rotations._conversion_table` when :mod:`rotax.rotations` is
imported.

Pairs without a direct conversion are routed through
:class:`~rotax.rotations.rotation_quaternion.RotationQuaternion`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from rotax.rotations.rotation_base import RotationBase

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="RotationBase")

_CONVERSIONS: dict[tuple[type, type], Callable] = {}
_MULTIPLICATIONS: dict[type, Callable] = {}


def register_conversion(destination: type, source: type) -> Callable[[Callable], Callable]:
    """Decorator registering a direct ``source -> destination`` conversion.

    Args:
        destination (type): Representation type produced by the function.
        source (type): Representation type accepted by the function.

    Returns:
        Callable: Decorator returning the function unchanged.
    """

    def decorator(func: Callable) -> Callable:
        key = (destination, source)
        if key in _CONVERSIONS:
            logger.warning(
                "Overriding conversion %s -> %s", source.__name__, destination.__name__
            )
        _CONVERSIONS[key] = func
        return func

    return decorator


def register_multiplication(representation: type) -> Callable[[Callable], Callable]:
    """Decorator registering a native composition for ``representation``.

    Args:
        representation (type): Type of the left operand and of the result.

    Returns:
        Callable: Decorator returning the function unchanged.
    """

    def decorator(func: Callable) -> Callable:
        if representation in _MULTIPLICATIONS:
            logger.warning("Overriding multiplication for %s", representation.__name__)
        _MULTIPLICATIONS[representation] = func
        return func

    return decorator


def has_direct_conversion(destination: type, source: type) -> bool:
    """Return ``True`` if a direct ``source -> destination`` entry exists."""
    return (destination, source) in _CONVERSIONS


def check_same_usage(lhs: RotationBase, rhs: RotationBase) -> None:
    """Raise ``TypeError`` if two rotations carry different usage tags."""
    if lhs.usage is not rhs.usage:
        raise TypeError(
            f"Cannot combine {lhs.usage.value} {type(lhs).__name__} with "
            f"{rhs.usage.value} {type(rhs).__name__}"
        )


def convert(destination: type[R], rotation: RotationBase, dtype=None) -> R:
    """Convert a rotation to another representation of the same usage.

    Args:
        destination (type): Target representation type.
        rotation (RotationBase): Source rotation.
        dtype: Optional float dtype to cast the result to.

    Returns:
        RotationBase: Rotation of type ``destination``.

    Raises:
        TypeError: If ``rotation`` is not a rotation, or no route to
            ``destination`` exists.
    """
    from rotax.rotations.rotation_base import RotationBase
    from rotax.rotations.rotation_quaternion import RotationQuaternion

    if not isinstance(rotation, RotationBase):
        raise TypeError(f"Expected a rotation, got {type(rotation).__name__}")

    source = type(rotation)
    if source is destination:
        result = destination._from_stored(rotation.to_stored_implementation(), rotation.usage)
    elif (destination, source) in _CONVERSIONS:
        result = _CONVERSIONS[(destination, source)](rotation)
    else:
        to_pivot = _CONVERSIONS.get((RotationQuaternion, source))
        from_pivot = _CONVERSIONS.get((destination, RotationQuaternion))
        if to_pivot is None or from_pivot is None:
            raise TypeError(
                f"No conversion from {source.__name__} to {destination.__name__}"
            )
        logger.debug(
            "Routing %s -> %s through RotationQuaternion",
            source.__name__,
            destination.__name__,
        )
        result = from_pivot(to_pivot(rotation))

    if dtype is not None:
        result = result.astype(dtype)
    return result


def multiply(lhs: R, rhs: RotationBase) -> R:
    """Compose two rotations: apply ``rhs`` first, then ``lhs``.

    Uses the native composition registered for ``type(lhs)`` if any,
    otherwise lifts both operands to quaternions.

    Args:
        lhs (RotationBase): Left operand; fixes the result type.
        rhs (RotationBase): Right operand, any representation.

    Returns:
        RotationBase: Composition of type ``type(lhs)``.

    Raises:
        TypeError: If the usages differ.
    """
    check_same_usage(lhs, rhs)
    func = _MULTIPLICATIONS.get(type(lhs), multiply_via_quaternion)
    return func(lhs, rhs)


def multiply_via_quaternion(lhs: R, rhs: RotationBase) -> R:
    """Compose by Hamilton product of the *stored* quaternions.

    The stored payload of a passive rotation is the inverse of its nominal
    parameters, so the single product ``q_lhs * q_rhs`` on stored
    quaternions gives "``rhs`` first, then ``lhs``" for both usages.

    Args:
        lhs (RotationBase): Left operand.
        rhs (RotationBase): Right operand.

    Returns:
        RotationBase: Composition of type ``type(lhs)``.
    """
    from rotax.rotations.conversions import quaternion_multiply
    from rotax.rotations.rotation_quaternion import RotationQuaternion

    q_lhs = convert(RotationQuaternion, lhs).to_stored_implementation()
    q_rhs = convert(RotationQuaternion, rhs).to_stored_implementation()
    q = RotationQuaternion._from_stored(quaternion_multiply(q_lhs, q_rhs), lhs.usage)
    return convert(type(lhs), q)

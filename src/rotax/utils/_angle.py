"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
rotax, providing JAX-traceable degree/radian conversion via
``jnp.where``, and the floating-point modulo used to wrap angles.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from rotax.constants import PI, TWO_PI


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def floating_point_modulo(x: ArrayLike, y: ArrayLike) -> Array:
    """Floating-point modulo with the sign of the divisor.

    Computes ``x - y * floor(x / y)``.  For ``y > 0`` the result lies in
    ``[0, y)``; for ``y < 0`` it lies in ``(y, 0]``.  Rounding can push the
    raw result onto the excluded bound (``m == y``) or leave a negative
    value too small to survive ``y + m``; both cases map to ``0``.  A zero
    divisor returns ``x`` unchanged.

    Args:
        x (ArrayLike): Dividend.
        y (ArrayLike): Divisor.

    Returns:
        Array: ``x`` modulo ``y``.
    """
    x = jnp.asarray(x)
    y = jnp.asarray(y, dtype=x.dtype)
    safe_y = jnp.where(y == 0.0, 1.0, y)
    m = x - safe_y * jnp.floor(x / safe_y)

    pos = jnp.where(
        m >= safe_y,
        0.0,
        jnp.where(m < 0.0, jnp.where(safe_y + m == safe_y, 0.0, safe_y + m), m),
    )
    neg = jnp.where(
        m <= safe_y,
        0.0,
        jnp.where(m > 0.0, jnp.where(safe_y + m == safe_y, 0.0, safe_y + m), m),
    )
    return jnp.where(y == 0.0, x, jnp.where(y > 0.0, pos, neg)).astype(x.dtype)


def wrap_angle(angle: ArrayLike) -> Array:
    """Wrap an angle into the half-open interval ``[-pi, pi)``.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Array: Wrapped angle in radians.
    """
    return floating_point_modulo(jnp.asarray(angle) + PI, TWO_PI) - PI

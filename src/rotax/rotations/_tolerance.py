"""Dtype-adaptive tolerances for rotation comparisons and singularity guards.

Provides ``get_rotation_epsilon`` for element-wise comparisons of
canonical rotations, ``get_orthogonality_tolerance`` for rotation matrix
validation, ``get_gimbal_lock_tolerance`` for the gimbal-lock
branch of Euler angle extraction and ``get_zero_norm_tolerance`` for the
default-axis branch of angle-axis extraction.  All of them scale with the
float dtype configured through :func:`rotax.config.set_dtype`.
"""

from __future__ import annotations

import jax.numpy as jnp

from rotax.config import get_dtype


def get_rotation_epsilon() -> float:
    """Return the dtype-adaptive tolerance for rotation comparisons.

    The tolerance scales with the precision of the configured float dtype:

    - ``float64``:  1e-9
    - ``float32``:  1e-5
    - ``float16``:  1e-2
    - ``bfloat16``: 1e-2

    Returns:
        float: Absolute tolerance for element-wise comparisons.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-9
    if dtype == jnp.float32:
        return 1e-5
    # float16 and bfloat16
    return 1e-2


def get_gimbal_lock_tolerance() -> float:
    """Return the ``cos(pitch)`` threshold of the gimbal-lock branch.

    Roughly the square root of the dtype's machine epsilon, which balances
    the error of the regular branch (``eps / cos(pitch)``) against the error
    of the locked branch (``cos(pitch)``).

    - ``float64``:  1e-8
    - ``float32``:  1e-4
    - ``float16``:  1e-2
    - ``bfloat16``: 1e-2

    Returns:
        float: Absolute threshold.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-8
    if dtype == jnp.float32:
        return 1e-4
    return 1e-2


def get_zero_norm_tolerance() -> float:
    """Return the norm below which a rotation axis is treated as undefined.

    - ``float64``:  1e-15
    - ``float32``:  1e-7
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute threshold.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-15
    if dtype == jnp.float32:
        return 1e-7
    return 1e-3


def get_orthogonality_tolerance() -> float:
    """Return the tolerance of the SO(3) membership check.

    Bounds both ``max|R^T R - I|`` and ``|det(R) - 1|``.

    - ``float64``:  1e-6
    - ``float32``:  1e-4
    - ``float16``:  5e-2
    - ``bfloat16``: 5e-2

    Returns:
        float: Absolute tolerance.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-6
    if dtype == jnp.float32:
        return 1e-4
    return 5e-2

"""Elementary (single-axis) active rotation matrices."""

import jax.numpy as jnp

from rotax.utils import to_radians


def Rx(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Active rotation matrix for a rotation about the x-axis.

    Args:
        angle (float): Right-handed angle of rotation about the positive x-axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   -s],
                      [0.0,   +s,   +c]])

def Ry(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Active rotation matrix for a rotation about the y-axis.

    Args:
        angle (float): Right-handed angle of rotation about the positive y-axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   +s],
                      [0.0, +1.0,  0.0],
                      [ -s,  0.0,   +c]])

def Rz(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Active rotation matrix for a rotation about the z-axis.

    Args:
        angle (float): Right-handed angle of rotation about the positive z-axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   -s,  0.0],
                      [ +s,   +c,  0.0],
                      [0.0,  0.0,  1.0]])

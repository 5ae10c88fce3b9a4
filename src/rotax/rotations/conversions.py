"""Pure conversion kernels between rotation parameterizations.

All functions operate on raw JAX arrays (no class instances) to avoid
circular imports between class modules.  The representation classes call
these kernels on their *nominal* (active-convention) parameters and wrap
the results.  Every kernel is compatible with ``jax.jit`` and
``jax.vmap``: singular branches are selected with ``jnp.where``.

Convention:
    Rotations are active and right-handed.
    Quaternion layout is scalar-first Hamilton: ``[w, x, y, z]`` (shape ``(4,)``).
    Rotation matrix layout is row-major: shape ``(3, 3)``.
    Angle-axis is ``(angle_scalar, axis(3,))``.
    ZYX Euler angles are ``ypr = [yaw, pitch, roll]`` with
    ``R = Rz(yaw) @ Ry(pitch) @ Rx(roll)``.
    XYZ Euler angles are ``rpy = [roll, pitch, yaw]`` with
    ``R = Rx(roll) @ Ry(pitch) @ Rz(yaw)``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from rotax.constants import HALF_PI, PI
from rotax.rotations._tolerance import (
    get_gimbal_lock_tolerance,
    get_rotation_epsilon,
    get_zero_norm_tolerance,
)
from rotax.utils import wrap_angle


# ---------------------------------------------------------------------------
# Quaternion algebra
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Hamilton product of two quaternions.

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)`` in scalar-first order.
        q2 (jax.Array): Second quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Normalized product quaternion of shape ``(4,)``.
    """
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    result = jnp.concatenate([jnp.array([s]), v])
    return result / jnp.linalg.norm(result)


def quaternion_conjugate(q: jax.Array) -> jax.Array:
    """Conjugate ``[w, -x, -y, -z]``; the inverse of a unit quaternion."""
    return jnp.array([q[0], -q[1], -q[2], -q[3]])


def unique_quaternion(q: jax.Array) -> jax.Array:
    """Select the hemisphere ``w >= 0`` of the quaternion double cover."""
    return jnp.where(q[0] < 0.0, -q, q)


def quaternion_from_vectors(v1: jax.Array, v2: jax.Array) -> jax.Array:
    """Shortest-arc quaternion rotating direction ``v1`` onto direction ``v2``.

    For anti-parallel inputs the rotation is half a turn about an axis
    orthogonal to ``v1``.

    Args:
        v1 (jax.Array): Source direction of shape ``(3,)``.
        v2 (jax.Array): Target direction of shape ``(3,)``.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.
    """
    u1 = v1 / jnp.linalg.norm(v1)
    u2 = v2 / jnp.linalg.norm(v2)
    d = jnp.dot(u1, u2)

    # Any axis orthogonal to u1, built from the least aligned basis vector
    helper = jnp.where(
        jnp.abs(u1[0]) < 0.9,
        jnp.array([1.0, 0.0, 0.0], dtype=u1.dtype),
        jnp.array([0.0, 1.0, 0.0], dtype=u1.dtype),
    )
    ortho = jnp.cross(u1, helper)
    ortho = ortho / jnp.linalg.norm(ortho)

    antiparallel = 1.0 + d < get_gimbal_lock_tolerance()
    q = jnp.where(
        antiparallel,
        jnp.concatenate([jnp.zeros(1, dtype=u1.dtype), ortho]),
        jnp.concatenate([jnp.array([1.0 + d]), jnp.cross(u1, u2)]),
    )
    return q / jnp.linalg.norm(q)


# ---------------------------------------------------------------------------
# Quaternion <-> Rotation Matrix
# ---------------------------------------------------------------------------

def quaternion_to_rotation_matrix(q: jax.Array) -> jax.Array:
    """Convert a unit quaternion to an active 3x3 rotation matrix.

    Args:
        q (jax.Array): Quaternion array of shape ``(4,)`` in scalar-first order ``[w, x, y, z]``.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    w, x, y, z = q[0], q[1], q[2], q[3]

    return jnp.array([
        [1.0 - 2.0*(y*y + z*z),  2.0*(x*y - w*z),        2.0*(x*z + w*y)],
        [2.0*(x*y + w*z),        1.0 - 2.0*(x*x + z*z),  2.0*(y*z - w*x)],
        [2.0*(x*z - w*y),        2.0*(y*z + w*x),        1.0 - 2.0*(x*x + y*y)],
    ])


def rotation_matrix_to_quaternion(R: jax.Array) -> jax.Array:
    """Convert an active 3x3 rotation matrix to a unit quaternion.

    Uses Shepperd's method with ``jax.lax.switch`` on ``argmax`` for
    numerical stability and JIT compatibility.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Quaternion array of shape ``(4,)`` in scalar-first order ``[w, x, y, z]``.
    """
    # Four times the squares of w, x, y, z
    qvec = jnp.array([
        1.0 + R[0, 0] + R[1, 1] + R[2, 2],
        1.0 + R[0, 0] - R[1, 1] - R[2, 2],
        1.0 - R[0, 0] + R[1, 1] - R[2, 2],
        1.0 - R[0, 0] - R[1, 1] + R[2, 2],
    ])

    ind_max = jnp.argmax(qvec)
    q_max = qvec[ind_max]

    def _case_w(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            sq,
            (R[2, 1] - R[1, 2]) / sq,
            (R[0, 2] - R[2, 0]) / sq,
            (R[1, 0] - R[0, 1]) / sq,
        ])

    def _case_x(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[2, 1] - R[1, 2]) / sq,
            sq,
            (R[0, 1] + R[1, 0]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
        ])

    def _case_y(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[0, 2] - R[2, 0]) / sq,
            (R[0, 1] + R[1, 0]) / sq,
            sq,
            (R[1, 2] + R[2, 1]) / sq,
        ])

    def _case_z(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[1, 0] - R[0, 1]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
            (R[1, 2] + R[2, 1]) / sq,
            sq,
        ])

    q = jax.lax.switch(ind_max, [_case_w, _case_x, _case_y, _case_z], None)
    return q / jnp.linalg.norm(q)


# ---------------------------------------------------------------------------
# Angle-Axis / Rotation Vector <-> Quaternion, Rotation Matrix
# ---------------------------------------------------------------------------

def normalize_axis(axis: jax.Array) -> jax.Array:
    """Normalize a rotation axis, falling back to the unit x-axis.

    Args:
        axis (jax.Array): Axis vector of shape ``(3,)``.

    Returns:
        jnp.ndarray: Unit axis of shape ``(3,)``.  A (near) zero input
        returns ``[1, 0, 0]``.
    """
    n = jnp.linalg.norm(axis)
    defined = n > get_zero_norm_tolerance()
    safe_n = jnp.where(defined, n, 1.0)
    default_axis = jnp.array([1.0, 0.0, 0.0], dtype=axis.dtype)
    return jnp.where(defined, axis / safe_n, default_axis)


def angle_axis_to_quaternion(angle: jax.Array, axis: jax.Array) -> jax.Array:
    """Convert an angle-axis rotation to a unit quaternion.

    Args:
        angle (jax.Array): Rotation angle in radians (scalar).
        axis (jax.Array): Rotation axis of shape ``(3,)``; normalized here.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    k = normalize_axis(axis)
    half = angle / 2.0
    s = jnp.sin(half)
    q = jnp.array([jnp.cos(half), k[0] * s, k[1] * s, k[2] * s])
    return q / jnp.linalg.norm(q)


def quaternion_to_angle_axis(q: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Convert a unit quaternion to angle-axis form.

    The angle is ``2 * atan2(|v|, w)`` which stays accurate for small
    rotations.  When the vector part vanishes the axis is undefined and the
    unit x-axis ``[1, 0, 0]`` is returned with a zero angle.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        tuple: ``(angle, axis)`` where ``angle`` is a scalar in ``[0, 2*pi]``
        and ``axis`` has shape ``(3,)``.
    """
    v = jnp.array([q[1], q[2], q[3]])
    angle = 2.0 * jnp.arctan2(jnp.linalg.norm(v), q[0])
    return angle, normalize_axis(v)


def rotation_vector_to_angle_axis(v: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Split a rotation vector into angle (its norm) and unit axis.

    A zero vector maps to angle ``0`` about the unit x-axis.

    Args:
        v (jax.Array): Rotation vector of shape ``(3,)``.

    Returns:
        tuple: ``(angle, axis)``.
    """
    return jnp.linalg.norm(v), normalize_axis(v)


def angle_axis_to_rotation_vector(angle: jax.Array, axis: jax.Array) -> jax.Array:
    """Collapse an angle-axis rotation into a rotation vector ``angle * axis``."""
    return angle * normalize_axis(axis)


def rotation_vector_to_quaternion(v: jax.Array) -> jax.Array:
    """Convert a rotation vector to a unit quaternion."""
    angle, axis = rotation_vector_to_angle_axis(v)
    return angle_axis_to_quaternion(angle, axis)


def quaternion_to_rotation_vector(q: jax.Array) -> jax.Array:
    """Convert a unit quaternion to a rotation vector."""
    angle, axis = quaternion_to_angle_axis(q)
    return angle * axis


def angle_axis_to_rotation_matrix(angle: jax.Array, axis: jax.Array) -> jax.Array:
    """Rodrigues' formula ``cI + s[k]x + (1 - c)kk^T``.

    Args:
        angle (jax.Array): Rotation angle in radians (scalar).
        axis (jax.Array): Rotation axis of shape ``(3,)``; normalized here.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    kx, ky, kz = normalize_axis(axis)
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    t = 1.0 - c

    return jnp.array([
        [c + kx*kx*t,     kx*ky*t - kz*s,  kx*kz*t + ky*s],
        [kx*ky*t + kz*s,  c + ky*ky*t,     ky*kz*t - kx*s],
        [kx*kz*t - ky*s,  ky*kz*t + kx*s,  c + kz*kz*t],
    ])


def unique_angle_axis(angle: jax.Array, axis: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Canonical angle-axis pair with the angle in ``[0, pi]``.

    The angle is wrapped into ``[-pi, pi)``; a negative angle is made
    positive by flipping the axis.  At a half turn ``pi`` both axis
    directions give the same rotation; the one whose first non-zero
    component is positive is kept.

    Args:
        angle (jax.Array): Rotation angle in radians.
        axis (jax.Array): Unit axis of shape ``(3,)``.

    Returns:
        tuple: ``(angle, axis)``.
    """
    wrapped = wrap_angle(angle)
    negative = wrapped < 0.0
    angle = jnp.where(negative, -wrapped, wrapped)
    axis = jnp.where(negative, -axis, axis)
    half_turn = angle > PI - get_rotation_epsilon()
    return angle, jnp.where(half_turn, _leading_positive(axis), axis)


def _leading_positive(axis: jax.Array) -> jax.Array:
    """Flip ``axis`` so that its first non-zero component is positive."""
    tol = get_zero_norm_tolerance()
    lead = jnp.where(
        jnp.abs(axis[0]) > tol,
        axis[0],
        jnp.where(jnp.abs(axis[1]) > tol, axis[1], axis[2]),
    )
    return jnp.where(lead < 0.0, -axis, axis)


def unique_rotation_vector(v: jax.Array) -> jax.Array:
    """Canonical rotation vector with norm in ``[0, pi]``."""
    angle, axis = rotation_vector_to_angle_axis(v)
    angle, axis = unique_angle_axis(angle, axis)
    return angle * axis


# ---------------------------------------------------------------------------
# Euler angles -> Quaternion, Rotation Matrix
# ---------------------------------------------------------------------------

def ypr_to_quaternion(ypr: jax.Array) -> jax.Array:
    """Convert ZYX Euler angles ``[yaw, pitch, roll]`` to a quaternion.

    Closed form of ``qz(yaw) * qy(pitch) * qx(roll)``.

    Args:
        ypr (jax.Array): Angles of shape ``(3,)`` in radians.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    cy, sy = jnp.cos(ypr[0] / 2.0), jnp.sin(ypr[0] / 2.0)
    cp, sp = jnp.cos(ypr[1] / 2.0), jnp.sin(ypr[1] / 2.0)
    cr, sr = jnp.cos(ypr[2] / 2.0), jnp.sin(ypr[2] / 2.0)

    q = jnp.array([
        cy*cp*cr + sy*sp*sr,
        cy*cp*sr - sy*sp*cr,
        cy*sp*cr + sy*cp*sr,
        sy*cp*cr - cy*sp*sr,
    ])
    return q / jnp.linalg.norm(q)


def rpy_to_quaternion(rpy: jax.Array) -> jax.Array:
    """Convert XYZ Euler angles ``[roll, pitch, yaw]`` to a quaternion.

    Closed form of ``qx(roll) * qy(pitch) * qz(yaw)``.

    Args:
        rpy (jax.Array): Angles of shape ``(3,)`` in radians.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    cr, sr = jnp.cos(rpy[0] / 2.0), jnp.sin(rpy[0] / 2.0)
    cp, sp = jnp.cos(rpy[1] / 2.0), jnp.sin(rpy[1] / 2.0)
    cy, sy = jnp.cos(rpy[2] / 2.0), jnp.sin(rpy[2] / 2.0)

    q = jnp.array([
        cr*cp*cy - sr*sp*sy,
        sr*cp*cy + cr*sp*sy,
        cr*sp*cy - sr*cp*sy,
        sr*sp*cy + cr*cp*sy,
    ])
    return q / jnp.linalg.norm(q)


def ypr_to_rotation_matrix(ypr: jax.Array) -> jax.Array:
    """Convert ZYX Euler angles to ``Rz(yaw) @ Ry(pitch) @ Rx(roll)``.

    Args:
        ypr (jax.Array): Angles ``[yaw, pitch, roll]`` of shape ``(3,)`` in radians.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    cy, sy = jnp.cos(ypr[0]), jnp.sin(ypr[0])
    cp, sp = jnp.cos(ypr[1]), jnp.sin(ypr[1])
    cr, sr = jnp.cos(ypr[2]), jnp.sin(ypr[2])

    return jnp.array([
        [cy*cp,  cy*sp*sr - sy*cr,  cy*sp*cr + sy*sr],
        [sy*cp,  sy*sp*sr + cy*cr,  sy*sp*cr - cy*sr],
        [-sp,    cp*sr,             cp*cr],
    ])


def rpy_to_rotation_matrix(rpy: jax.Array) -> jax.Array:
    """Convert XYZ Euler angles to ``Rx(roll) @ Ry(pitch) @ Rz(yaw)``.

    Args:
        rpy (jax.Array): Angles ``[roll, pitch, yaw]`` of shape ``(3,)`` in radians.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    cr, sr = jnp.cos(rpy[0]), jnp.sin(rpy[0])
    cp, sp = jnp.cos(rpy[1]), jnp.sin(rpy[1])
    cy, sy = jnp.cos(rpy[2]), jnp.sin(rpy[2])

    return jnp.array([
        [cp*cy,              -cp*sy,             sp],
        [cr*sy + sr*sp*cy,   cr*cy - sr*sp*sy,   -sr*cp],
        [sr*sy - cr*sp*cy,   sr*cy + cr*sp*sy,   cr*cp],
    ])


# ---------------------------------------------------------------------------
# Rotation Matrix, Quaternion, Angle-Axis -> Euler angles
# ---------------------------------------------------------------------------

def ypr_from_rotation_matrix(R: jax.Array) -> jax.Array:
    """Extract ZYX Euler angles ``[yaw, pitch, roll]`` from a rotation matrix.

    Pitch is ``atan2(-R[2,0], sqrt(R[0,0]^2 + R[1,0]^2))`` and lies in
    ``[-pi/2, pi/2]``.  At gimbal lock (``cos(pitch)`` below
    :func:`get_gimbal_lock_tolerance`) yaw and roll are coupled; roll is set
    to zero and the whole remaining rotation is attributed to yaw.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Angles of shape ``(3,)`` in radians.
    """
    cos_pitch = jnp.sqrt(R[0, 0]*R[0, 0] + R[1, 0]*R[1, 0])
    locked = cos_pitch < get_gimbal_lock_tolerance()

    pitch = jnp.arctan2(-R[2, 0], cos_pitch)
    yaw = jnp.where(locked, jnp.arctan2(-R[0, 1], R[1, 1]), jnp.arctan2(R[1, 0], R[0, 0]))
    roll = jnp.where(locked, jnp.zeros_like(pitch), jnp.arctan2(R[2, 1], R[2, 2]))

    return jnp.stack([yaw, pitch, roll])


def rpy_from_rotation_matrix(R: jax.Array) -> jax.Array:
    """Extract XYZ Euler angles ``[roll, pitch, yaw]`` from a rotation matrix.

    Pitch is ``atan2(R[0,2], sqrt(R[0,0]^2 + R[0,1]^2))``.  At gimbal lock
    yaw is set to zero and the whole remaining rotation is attributed to
    roll.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Angles of shape ``(3,)`` in radians.
    """
    cos_pitch = jnp.sqrt(R[0, 0]*R[0, 0] + R[0, 1]*R[0, 1])
    locked = cos_pitch < get_gimbal_lock_tolerance()

    pitch = jnp.arctan2(R[0, 2], cos_pitch)
    roll = jnp.where(locked, jnp.arctan2(R[2, 1], R[1, 1]), jnp.arctan2(-R[1, 2], R[2, 2]))
    yaw = jnp.where(locked, jnp.zeros_like(pitch), jnp.arctan2(-R[0, 1], R[0, 0]))

    return jnp.stack([roll, pitch, yaw])


def ypr_from_quaternion(q: jax.Array) -> jax.Array:
    """Extract ZYX Euler angles from a unit quaternion.

    There is no separate quaternion formula: the full rotation matrix is
    built from ``q`` with :func:`quaternion_to_rotation_matrix` and the
    angles are read off it by :func:`ypr_from_rotation_matrix`, including
    its gimbal-lock branch.  Both steps are closed form.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Angles ``[yaw, pitch, roll]`` in radians.
    """
    return ypr_from_rotation_matrix(quaternion_to_rotation_matrix(q))


def rpy_from_quaternion(q: jax.Array) -> jax.Array:
    """Extract XYZ Euler angles ``[roll, pitch, yaw]`` from a unit quaternion.

    Builds the full rotation matrix and reads the angles off it with
    :func:`rpy_from_rotation_matrix`.
    """
    return rpy_from_rotation_matrix(quaternion_to_rotation_matrix(q))


def ypr_from_angle_axis(angle: jax.Array, axis: jax.Array) -> jax.Array:
    """Extract ZYX Euler angles from an angle-axis rotation.

    The full Rodrigues matrix is built with
    :func:`angle_axis_to_rotation_matrix` and the angles are read off it by
    :func:`ypr_from_rotation_matrix`; there is no separate angle-axis
    formula.

    Args:
        angle (jax.Array): Rotation angle in radians.
        axis (jax.Array): Rotation axis of shape ``(3,)``.

    Returns:
        jnp.ndarray: Angles ``[yaw, pitch, roll]`` in radians.
    """
    return ypr_from_rotation_matrix(angle_axis_to_rotation_matrix(angle, axis))


def rpy_from_angle_axis(angle: jax.Array, axis: jax.Array) -> jax.Array:
    """Extract XYZ Euler angles ``[roll, pitch, yaw]`` from an angle-axis rotation.

    Builds the full Rodrigues matrix and reads the angles off it with
    :func:`rpy_from_rotation_matrix`.
    """
    return rpy_from_rotation_matrix(angle_axis_to_rotation_matrix(angle, axis))


def ypr_from_rotation_vector(v: jax.Array) -> jax.Array:
    """Extract ZYX Euler angles from a rotation vector via its angle-axis split.

    A zero vector yields the identity ``[0, 0, 0]``.
    """
    angle, axis = rotation_vector_to_angle_axis(v)
    return ypr_from_angle_axis(angle, axis)


# ---------------------------------------------------------------------------
# Euler angle order remap and inverse
# ---------------------------------------------------------------------------

def ypr_from_rpy(rpy: jax.Array) -> jax.Array:
    """ZYX angles ``[yaw, pitch, roll]`` of the rotation given by XYZ angles.

    Args:
        rpy (jax.Array): Angles ``[roll, pitch, yaw]`` of the XYZ sequence.

    Returns:
        jnp.ndarray: Angles ``[yaw, pitch, roll]`` of the ZYX sequence.
    """
    return ypr_from_rotation_matrix(rpy_to_rotation_matrix(rpy))


def rpy_from_ypr(ypr: jax.Array) -> jax.Array:
    """XYZ angles ``[roll, pitch, yaw]`` of the rotation given by ZYX angles."""
    return rpy_from_rotation_matrix(ypr_to_rotation_matrix(ypr))


def inverse_ypr(ypr: jax.Array) -> jax.Array:
    """ZYX angles of the inverse rotation.

    ``(Rz(y) Ry(p) Rx(r))^-1 = Rx(-r) Ry(-p) Rz(-y)``, which is the XYZ
    sequence ``[-r, -p, -y]``; it is remapped back to ZYX order.

    Args:
        ypr (jax.Array): Angles ``[yaw, pitch, roll]``.

    Returns:
        jnp.ndarray: Angles ``[yaw', pitch', roll']`` of the inverse.
    """
    return ypr_from_rpy(-ypr[::-1])


def inverse_rpy(rpy: jax.Array) -> jax.Array:
    """XYZ angles of the inverse rotation.

    ``(Rx(r) Ry(p) Rz(y))^-1 = Rz(-y) Ry(-p) Rx(-r)``, the ZYX sequence
    ``[-y, -p, -r]``, remapped back to XYZ order.
    """
    return rpy_from_ypr(-rpy[::-1])


# ---------------------------------------------------------------------------
# Euler angle canonicalization
# ---------------------------------------------------------------------------

def unique_euler_angles(angles: jax.Array) -> jax.Array:
    """Canonical representative of a Tait-Bryan angle triple.

    Applies to both ``[yaw, pitch, roll]`` and ``[roll, pitch, yaw]``; the
    middle element is the pitch.

    1. Each angle is wrapped into ``[-pi, pi)``.
    2. A pitch ``> pi/2`` is reflected to ``-(pitch - pi)``; a pitch
       ``< -pi/2`` to ``-(pitch + pi)``.  In both cases the outer angles are
       shifted by half a turn towards zero.

    The result has outer angles in ``[-pi, pi)`` and pitch in
    ``[-pi/2, pi/2]``.  A pitch of exactly ``pi/2`` is a fixed point of the
    reflection and is left unchanged together with its outer angles, so
    applying the function twice gives the same triple.

    Args:
        angles (jax.Array): Angles of shape ``(3,)`` in radians.

    Returns:
        jnp.ndarray: Canonical angles of shape ``(3,)``.
    """
    wrapped = wrap_angle(angles)
    first, pitch, third = wrapped[0], wrapped[1], wrapped[2]

    upper = pitch > HALF_PI
    lower = pitch < -HALF_PI
    flipped = upper | lower

    def _half_turn(angle):
        return jnp.where(angle >= 0.0, angle - PI, angle + PI)

    first = jnp.where(flipped, _half_turn(first), first)
    third = jnp.where(flipped, _half_turn(third), third)
    pitch = jnp.where(upper, -(pitch - PI), jnp.where(lower, -(pitch + PI), pitch))

    return jnp.stack([first, pitch, third])

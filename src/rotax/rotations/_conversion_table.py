"""Direct conversions and native compositions between representations.

Every function converts *nominal* parameters with a pure kernel from
:mod:`rotax.rotations.conversions` and rebuilds the destination with the
usage of the source, so the same kernels serve active and passive
rotations.  Importing this module fills the dispatch tables.
"""

from __future__ import annotations

from rotax.rotations import conversions as cv
from rotax.rotations._dispatch import convert, register_conversion, register_multiplication
from rotax.rotations.angle_axis import AngleAxis, _pack
from rotax.rotations.euler_angles_xyz import EulerAnglesXyz
from rotax.rotations.euler_angles_zyx import EulerAnglesZyx
from rotax.rotations.rotation_matrix import RotationMatrix
from rotax.rotations.rotation_quaternion import RotationQuaternion
from rotax.rotations.rotation_vector import RotationVector


def _angle_axis_parts(aa: AngleAxis):
    data = aa.to_implementation()
    return data[0], data[1:]


def _angle_axis_from_parts(angle, axis, usage) -> AngleAxis:
    return AngleAxis._from_implementation(_pack(angle, axis), usage)


# ---------------------------------------------------------------------------
# -> RotationQuaternion
# ---------------------------------------------------------------------------

@register_conversion(RotationQuaternion, EulerAnglesZyx)
def _quaternion_from_zyx(e: EulerAnglesZyx) -> RotationQuaternion:
    return RotationQuaternion._from_implementation(cv.ypr_to_quaternion(e.to_implementation()), e.usage)


@register_conversion(RotationQuaternion, EulerAnglesXyz)
def _quaternion_from_xyz(e: EulerAnglesXyz) -> RotationQuaternion:
    return RotationQuaternion._from_implementation(cv.rpy_to_quaternion(e.to_implementation()), e.usage)


@register_conversion(RotationQuaternion, AngleAxis)
def _quaternion_from_angle_axis(aa: AngleAxis) -> RotationQuaternion:
    angle, axis = _angle_axis_parts(aa)
    return RotationQuaternion._from_implementation(cv.angle_axis_to_quaternion(angle, axis), aa.usage)


@register_conversion(RotationQuaternion, RotationVector)
def _quaternion_from_rotation_vector(rv: RotationVector) -> RotationQuaternion:
    q = cv.rotation_vector_to_quaternion(rv.to_implementation())
    return RotationQuaternion._from_implementation(q, rv.usage)


@register_conversion(RotationQuaternion, RotationMatrix)
def _quaternion_from_matrix(r: RotationMatrix) -> RotationQuaternion:
    q = cv.rotation_matrix_to_quaternion(r.to_implementation())
    return RotationQuaternion._from_implementation(q, r.usage)


# ---------------------------------------------------------------------------
# -> RotationMatrix
# ---------------------------------------------------------------------------

@register_conversion(RotationMatrix, RotationQuaternion)
def _matrix_from_quaternion(q: RotationQuaternion) -> RotationMatrix:
    R = cv.quaternion_to_rotation_matrix(q.to_implementation())
    return RotationMatrix._from_implementation(R, q.usage)


@register_conversion(RotationMatrix, EulerAnglesZyx)
def _matrix_from_zyx(e: EulerAnglesZyx) -> RotationMatrix:
    return RotationMatrix._from_implementation(cv.ypr_to_rotation_matrix(e.to_implementation()), e.usage)


@register_conversion(RotationMatrix, EulerAnglesXyz)
def _matrix_from_xyz(e: EulerAnglesXyz) -> RotationMatrix:
    return RotationMatrix._from_implementation(cv.rpy_to_rotation_matrix(e.to_implementation()), e.usage)


@register_conversion(RotationMatrix, AngleAxis)
def _matrix_from_angle_axis(aa: AngleAxis) -> RotationMatrix:
    angle, axis = _angle_axis_parts(aa)
    R = cv.angle_axis_to_rotation_matrix(angle, axis)
    return RotationMatrix._from_implementation(R, aa.usage)


# ---------------------------------------------------------------------------
# -> EulerAnglesZyx
# ---------------------------------------------------------------------------

@register_conversion(EulerAnglesZyx, RotationQuaternion)
def _zyx_from_quaternion(q: RotationQuaternion) -> EulerAnglesZyx:
    return EulerAnglesZyx._from_implementation(cv.ypr_from_quaternion(q.to_implementation()), q.usage)


@register_conversion(EulerAnglesZyx, RotationMatrix)
def _zyx_from_matrix(r: RotationMatrix) -> EulerAnglesZyx:
    return EulerAnglesZyx._from_implementation(cv.ypr_from_rotation_matrix(r.to_implementation()), r.usage)


@register_conversion(EulerAnglesZyx, AngleAxis)
def _zyx_from_angle_axis(aa: AngleAxis) -> EulerAnglesZyx:
    angle, axis = _angle_axis_parts(aa)
    return EulerAnglesZyx._from_implementation(cv.ypr_from_angle_axis(angle, axis), aa.usage)


@register_conversion(EulerAnglesZyx, RotationVector)
def _zyx_from_rotation_vector(rv: RotationVector) -> EulerAnglesZyx:
    ypr = cv.ypr_from_rotation_vector(rv.to_implementation())
    return EulerAnglesZyx._from_implementation(ypr, rv.usage)


@register_conversion(EulerAnglesZyx, EulerAnglesXyz)
def _zyx_from_xyz(e: EulerAnglesXyz) -> EulerAnglesZyx:
    return EulerAnglesZyx._from_implementation(cv.ypr_from_rpy(e.to_implementation()), e.usage)


# ---------------------------------------------------------------------------
# -> EulerAnglesXyz
# ---------------------------------------------------------------------------

@register_conversion(EulerAnglesXyz, RotationQuaternion)
def _xyz_from_quaternion(q: RotationQuaternion) -> EulerAnglesXyz:
    return EulerAnglesXyz._from_implementation(cv.rpy_from_quaternion(q.to_implementation()), q.usage)


@register_conversion(EulerAnglesXyz, RotationMatrix)
def _xyz_from_matrix(r: RotationMatrix) -> EulerAnglesXyz:
    return EulerAnglesXyz._from_implementation(cv.rpy_from_rotation_matrix(r.to_implementation()), r.usage)


@register_conversion(EulerAnglesXyz, AngleAxis)
def _xyz_from_angle_axis(aa: AngleAxis) -> EulerAnglesXyz:
    angle, axis = _angle_axis_parts(aa)
    return EulerAnglesXyz._from_implementation(cv.rpy_from_angle_axis(angle, axis), aa.usage)


@register_conversion(EulerAnglesXyz, EulerAnglesZyx)
def _xyz_from_zyx(e: EulerAnglesZyx) -> EulerAnglesXyz:
    return EulerAnglesXyz._from_implementation(cv.rpy_from_ypr(e.to_implementation()), e.usage)


# ---------------------------------------------------------------------------
# -> AngleAxis, RotationVector
# ---------------------------------------------------------------------------

@register_conversion(AngleAxis, RotationQuaternion)
def _angle_axis_from_quaternion(q: RotationQuaternion) -> AngleAxis:
    angle, axis = cv.quaternion_to_angle_axis(q.to_implementation())
    return _angle_axis_from_parts(angle, axis, q.usage)


@register_conversion(AngleAxis, RotationVector)
def _angle_axis_from_rotation_vector(rv: RotationVector) -> AngleAxis:
    angle, axis = cv.rotation_vector_to_angle_axis(rv.to_implementation())
    return _angle_axis_from_parts(angle, axis, rv.usage)


@register_conversion(RotationVector, AngleAxis)
def _rotation_vector_from_angle_axis(aa: AngleAxis) -> RotationVector:
    angle, axis = _angle_axis_parts(aa)
    v = cv.angle_axis_to_rotation_vector(angle, axis)
    return RotationVector._from_implementation(v, aa.usage)


@register_conversion(RotationVector, RotationQuaternion)
def _rotation_vector_from_quaternion(q: RotationQuaternion) -> RotationVector:
    v = cv.quaternion_to_rotation_vector(q.to_implementation())
    return RotationVector._from_implementation(v, q.usage)


# ---------------------------------------------------------------------------
# Native compositions
# ---------------------------------------------------------------------------

@register_multiplication(RotationQuaternion)
def _multiply_quaternions(lhs: RotationQuaternion, rhs) -> RotationQuaternion:
    q_rhs = convert(RotationQuaternion, rhs).to_stored_implementation()
    q = cv.quaternion_multiply(lhs.to_stored_implementation(), q_rhs)
    return RotationQuaternion._from_stored(q, lhs.usage)


@register_multiplication(RotationMatrix)
def _multiply_matrices(lhs: RotationMatrix, rhs) -> RotationMatrix:
    R_rhs = convert(RotationMatrix, rhs).to_stored_implementation()
    return RotationMatrix._from_stored(lhs.to_stored_implementation() @ R_rhs, lhs.usage)

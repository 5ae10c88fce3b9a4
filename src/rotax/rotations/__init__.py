"""Strongly-typed 3D rotations with an active/passive usage tag.

Provides six interconvertible rotation representation types:

- :class:`EulerAnglesZyx` -- yaw, pitch, roll about Z, Y', X''
- :class:`EulerAnglesXyz` -- roll, pitch, yaw about X, Y', Z''
- :class:`AngleAxis` -- rotation angle about a unit axis
- :class:`RotationVector` -- axis scaled by the rotation angle
- :class:`RotationQuaternion` -- unit quaternion (scalar-first ``[w, x, y, z]``)
- :class:`RotationMatrix` -- 3x3 direction cosine matrix (SO(3))

Any two rotations of the same usage can be converted, composed with ``*``
and compared with ``==``.  Also re-exports the elementary rotation
functions :func:`Rx`, :func:`Ry`, :func:`Rz` and the :class:`RotationUsage`
enum.
"""

from .elementary import (
    Rx,
    Ry,
    Rz,
)

from .usage import RotationUsage
from .rotation_base import RotationBase
from .euler_angles_zyx import EulerAnglesZyx, EulerAnglesYpr
from .euler_angles_xyz import EulerAnglesXyz, EulerAnglesRpy
from .angle_axis import AngleAxis
from .rotation_vector import RotationVector
from .rotation_quaternion import RotationQuaternion
from .rotation_matrix import RotationMatrix
from ._dispatch import convert
from . import _conversion_table  # noqa: F401

__all__ = [
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    # Usage tag
    "RotationUsage",
    # Rotation representations
    "RotationBase",
    "EulerAnglesZyx",
    "EulerAnglesYpr",
    "EulerAnglesXyz",
    "EulerAnglesRpy",
    "AngleAxis",
    "RotationVector",
    "RotationQuaternion",
    "RotationMatrix",
    # Conversion engine
    "convert",
]

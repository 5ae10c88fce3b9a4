"""
rotax is a small library of strongly-typed 3D rotations implemented in JAX.
"""

from .constants import (
    PI,
    TWO_PI,
    HALF_PI,
    DEG2RAD,
    RAD2DEG,
)

from .config import set_dtype, get_dtype

from .rotations import (
    Rx,
    Ry,
    Rz,
    RotationUsage,
    RotationBase,
    EulerAnglesZyx,
    EulerAnglesYpr,
    EulerAnglesXyz,
    EulerAnglesRpy,
    AngleAxis,
    RotationVector,
    RotationQuaternion,
    RotationMatrix,
    convert,
)

from .utils import (
    floating_point_modulo,
    wrap_angle,
    to_radians,
    from_radians,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "PI",
    "TWO_PI",
    "HALF_PI",
    "DEG2RAD",
    "RAD2DEG",
    # Config
    "set_dtype",
    "get_dtype",
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    # Rotations
    "RotationUsage",
    "RotationBase",
    "EulerAnglesZyx",
    "EulerAnglesYpr",
    "EulerAnglesXyz",
    "EulerAnglesRpy",
    "AngleAxis",
    "RotationVector",
    "RotationQuaternion",
    "RotationMatrix",
    "convert",
    # Utils
    "floating_point_modulo",
    "wrap_angle",
    "to_radians",
    "from_radians",
]

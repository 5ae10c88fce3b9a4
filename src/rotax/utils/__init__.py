"""Shared utility functions for rotax.

Provides angle conversion and angle wrapping helpers.
"""

from rotax.utils._angle import floating_point_modulo, from_radians, to_radians, wrap_angle

__all__ = [
    "floating_point_modulo",
    "from_radians",
    "to_radians",
    "wrap_angle",
]

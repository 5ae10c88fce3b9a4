"""Rotation usage tag.

Every rotation value carries a :class:`RotationUsage`.  An ``ACTIVE``
rotation moves vectors inside a fixed frame; a ``PASSIVE`` rotation
re-expresses fixed vectors in a rotated frame.  Both accept and report
the same nominal parameters; a passive value stores the inverse of them.
"""

from __future__ import annotations

import enum


class RotationUsage(enum.Enum):
    """Active or passive interpretation of a rotation.

    Attributes:
        ACTIVE: Stored parameters equal the nominal parameters.
        PASSIVE: Stored parameters are the negation/inverse of the nominal
            parameters.
    """

    ACTIVE = "active"
    PASSIVE = "passive"

    @property
    def other(self) -> RotationUsage:
        """The opposite usage."""
        if self is RotationUsage.ACTIVE:
            return RotationUsage.PASSIVE
        return RotationUsage.ACTIVE

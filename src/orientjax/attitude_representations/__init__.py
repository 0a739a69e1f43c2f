"""Attitude representations for 3D rotations.

Provides two interconvertible attitude representation types:

- :class:`Quaternion` -- unit quaternion (scalar-first ``[w, x, y, z]``)
- :class:`EulerAngle` -- three intrinsic rotations in one of six Tait-Bryan orders

and the :class:`EulerAngleOrder` enum.
"""

from .quaternion import Quaternion
from .euler_angle import EulerAngle, EulerAngleOrder

__all__ = [
    "Quaternion",
    "EulerAngle",
    "EulerAngleOrder",
]

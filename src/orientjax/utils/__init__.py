"""Shared utility functions for orientjax.

Provides angle conversion helpers.
"""

from orientjax.utils._angle import deg_to_rad_or_zero, from_radians, to_radians

__all__ = [
    "deg_to_rad_or_zero",
    "from_radians",
    "to_radians",
]

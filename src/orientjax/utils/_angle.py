"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
orientjax, providing JAX-traceable degree/radian conversion via
``jnp.where``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientjax.constants import DEG2RAD


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def deg_to_rad_or_zero(angle: float | None) -> float:
    """Convert an optional sensor angle from degrees to radians.

    Sensor events may omit any field; a missing reading counts as zero.
    NaN is passed through unchanged.

    Args:
        angle (float | None): Angle in degrees, or ``None``.

    Returns:
        float: Angle in radians.
    """
    if angle is None:
        return 0.0
    return angle * DEG2RAD

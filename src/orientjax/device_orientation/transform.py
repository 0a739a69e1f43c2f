"""Device orientation to camera rotation transform.

Maps the W3C device orientation angles ``alpha``, ``beta``, ``gamma``
(intrinsic Tait-Bryan Z-X'-Y'') and the screen rotation angle to the
quaternion of a camera looking out of the back of the device.

The rotation is composed of three stages, each isolating one convention:

1. Device orientation, re-expressed as an intrinsic ``YXZ`` Euler rotation
   with components ``(beta, alpha, -gamma)`` on ``(X, Y, Z)``.
2. A fixed -90 deg turn about X, so the camera looks out of the back of
   the device rather than out of its top edge.
3. A turn of ``-screen`` about Z, compensating for the UI being rotated
   relative to the device's natural orientation.

All inputs are radians.  Nothing is clamped or validated: NaN or
out-of-range inputs produce a NaN or otherwise meaningless quaternion
rather than an error.  The composition is compiled once per input dtype
with ``jax.jit``; ``compute_rotation_array`` is itself compatible with
``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientjax.attitude_representations import EulerAngleOrder, Quaternion
from orientjax.attitude_representations.conversions import (
    axis_angle_to_quaternion,
    euler_angle_to_quaternion,
    quaternion_multiply,
)
from orientjax.config import get_dtype
from orientjax.constants import SQRT_HALF

CAMERA_BACK = (SQRT_HALF, -SQRT_HALF, 0.0, 0.0)
"""-90 deg rotation about X, scalar-first ``[w, x, y, z]``."""

SCREEN_AXIS = (0.0, 0.0, 1.0)
"""Device forward axis, about which the screen rotation is undone."""


@jax.jit
def _rotation_kernel(alpha: Array, beta: Array, gamma: Array, screen: Array) -> Array:
    # Constants follow the input dtype so each dtype gets its own compilation.
    dtype = alpha.dtype

    # 'ZXY' for the device, 'YXZ' for the camera
    q_device = euler_angle_to_quaternion(
        jnp.int32(EulerAngleOrder.YXZ.value), beta, alpha, -gamma
    )
    q = quaternion_multiply(q_device, jnp.asarray(CAMERA_BACK, dtype=dtype))

    q_screen = axis_angle_to_quaternion(jnp.asarray(SCREEN_AXIS, dtype=dtype), -screen)
    return quaternion_multiply(q, q_screen)


def compute_rotation_array(alpha: ArrayLike, beta: ArrayLike, gamma: ArrayLike, screen: ArrayLike) -> Array:
    """Compute the camera quaternion for a device orientation.

    Args:
        alpha: Heading in radians, including any heading offset.
        beta: Front-back tilt in radians.
        gamma: Left-right tilt in radians.
        screen: Screen rotation relative to the natural orientation, in radians.

    Returns:
        Quaternion of shape ``(4,)`` in scalar-first order.

    Examples:
        ```python
        import jax
        import jax.numpy as jnp
        from orientjax.device_orientation.transform import compute_rotation_array
        alphas = jnp.linspace(0.0, jnp.pi, 8)
        zeros = jnp.zeros(8)
        qs = jax.vmap(compute_rotation_array)(alphas, zeros, zeros, zeros)
        ```
    """
    _float = get_dtype()
    return _rotation_kernel(
        jnp.asarray(alpha, dtype=_float),
        jnp.asarray(beta, dtype=_float),
        jnp.asarray(gamma, dtype=_float),
        jnp.asarray(screen, dtype=_float),
    )


def compute_rotation(alpha: float, beta: float, gamma: float, screen: float) -> Quaternion:
    """Compute the camera rotation for a device orientation.

    Thin wrapper around :func:`compute_rotation_array` returning a
    :class:`~orientjax.attitude_representations.Quaternion`.  The result is
    not renormalized.

    Args:
        alpha: Heading in radians, including any heading offset.
        beta: Front-back tilt in radians.
        gamma: Left-right tilt in radians.
        screen: Screen rotation in radians.

    Returns:
        Quaternion: Rotation of the camera in the scene frame.
    """
    return Quaternion._from_internal(compute_rotation_array(alpha, beta, gamma, screen))

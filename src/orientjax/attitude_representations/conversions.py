"""Pure conversion functions between attitude representations.

All functions operate on raw JAX arrays (no class instances) to avoid
circular imports between class modules.  The classes in ``quaternion.py``
and ``euler_angle.py`` call these kernels and wrap the results.

Convention:
    Quaternion layout is scalar-first: ``[w, x, y, z]`` (shape ``(4,)``).
    Rotations are active (they rotate vectors, not frames).
    Rotation matrix layout is row-major: shape ``(3, 3)``.
    Euler angles are stored per axis as ``[x, y, z]`` and applied
    intrinsically in the sequence given by the order index.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp


# Above this magnitude the middle angle is within ~0.03 deg of +/-90 deg and
# the first and third axes are treated as aligned.
_GIMBAL_LIMIT = 0.9999999


# ---------------------------------------------------------------------------
# Euler Angle -> Quaternion (6 branches)
# ---------------------------------------------------------------------------
#
# c1, c2, c3 / s1, s2, s3 are the half-angle cosines / sines of the X, Y
# and Z components respectively, independent of the rotation order.

def _ea_to_q_xyz(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 - s1*s2*s3,
        s1*c2*c3 + c1*s2*s3,
        c1*s2*c3 - s1*c2*s3,
        c1*c2*s3 + s1*s2*c3,
    ])

def _ea_to_q_yxz(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 + s1*s2*s3,
        s1*c2*c3 + c1*s2*s3,
        c1*s2*c3 - s1*c2*s3,
        c1*c2*s3 - s1*s2*c3,
    ])

def _ea_to_q_zxy(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 - s1*s2*s3,
        s1*c2*c3 - c1*s2*s3,
        c1*s2*c3 + s1*c2*s3,
        c1*c2*s3 + s1*s2*c3,
    ])

def _ea_to_q_zyx(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 + s1*s2*s3,
        s1*c2*c3 - c1*s2*s3,
        c1*s2*c3 + s1*c2*s3,
        c1*c2*s3 - s1*s2*c3,
    ])

def _ea_to_q_yzx(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 - s1*s2*s3,
        s1*c2*c3 + c1*s2*s3,
        c1*s2*c3 + s1*c2*s3,
        c1*c2*s3 - s1*s2*c3,
    ])

def _ea_to_q_xzy(c1: jax.Array, c2: jax.Array, c3: jax.Array, s1: jax.Array, s2: jax.Array, s3: jax.Array) -> jax.Array:
    return jnp.array([
        c1*c2*c3 + s1*s2*s3,
        s1*c2*c3 - c1*s2*s3,
        c1*s2*c3 - s1*c2*s3,
        c1*c2*s3 + s1*s2*c3,
    ])

_EA_TO_Q_BRANCHES = [
    _ea_to_q_xyz,   # 0
    _ea_to_q_yxz,   # 1
    _ea_to_q_zxy,   # 2
    _ea_to_q_zyx,   # 3
    _ea_to_q_yzx,   # 4
    _ea_to_q_xzy,   # 5
]

# Branch callables must keep a stable identity for lax.switch to reuse traces.
_EA_TO_Q_SWITCH = [lambda t, f=f: f(*t) for f in _EA_TO_Q_BRANCHES]


def euler_angle_to_quaternion(order_idx: jax.Array, x: jax.Array, y: jax.Array, z: jax.Array) -> jax.Array:
    """Convert intrinsic Euler angles to a quaternion via ``jax.lax.switch``.

    The result is not renormalized; it is a unit quaternion to within
    rounding for finite inputs.

    Args:
        order_idx (jax.Array): Integer index 0--5 matching ``EulerAngleOrder``.
        x (jax.Array): Rotation about the X axis in radians.
        y (jax.Array): Rotation about the Y axis in radians.
        z (jax.Array): Rotation about the Z axis in radians.

    Returns:
        jnp.ndarray: Quaternion of shape ``(4,)`` in scalar-first order.
    """
    c1 = jnp.cos(x / 2.0)
    c2 = jnp.cos(y / 2.0)
    c3 = jnp.cos(z / 2.0)
    s1 = jnp.sin(x / 2.0)
    s2 = jnp.sin(y / 2.0)
    s3 = jnp.sin(z / 2.0)

    trig = (c1, c2, c3, s1, s2, s3)

    return jax.lax.switch(order_idx, _EA_TO_Q_SWITCH, trig)


# ---------------------------------------------------------------------------
# Axis-angle -> Quaternion
# ---------------------------------------------------------------------------

def axis_angle_to_quaternion(axis: jax.Array, angle: jax.Array) -> jax.Array:
    """Convert an axis-angle rotation to a quaternion.

    The axis is normalized before use, so any non-zero vector is accepted.

    Args:
        axis (jax.Array): Rotation axis vector of shape ``(3,)``.
        angle (jax.Array): Rotation angle in radians (scalar).

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    u = axis / jnp.linalg.norm(axis)
    half = angle / 2.0
    s = jnp.sin(half)
    return jnp.array([jnp.cos(half), u[0] * s, u[1] * s, u[2] * s])


# ---------------------------------------------------------------------------
# Quaternion -> Rotation Matrix
# ---------------------------------------------------------------------------

def quaternion_to_rotation_matrix(q: jax.Array) -> jax.Array:
    """Convert a unit quaternion to the active 3x3 rotation matrix.

    Args:
        q (jax.Array): Quaternion array of shape ``(4,)`` in scalar-first order ``[w, x, y, z]``.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    qs, q1, q2, q3 = q[0], q[1], q[2], q[3]

    return jnp.array([
        [qs*qs + q1*q1 - q2*q2 - q3*q3,  2.0*q1*q2 - 2.0*qs*q3,          2.0*q1*q3 + 2.0*qs*q2],
        [2.0*q1*q2 + 2.0*qs*q3,           qs*qs - q1*q1 + q2*q2 - q3*q3,  2.0*q2*q3 - 2.0*qs*q1],
        [2.0*q1*q3 - 2.0*qs*q2,           2.0*q2*q3 + 2.0*qs*q1,          qs*qs - q1*q1 - q2*q2 + q3*q3],
    ])


# ---------------------------------------------------------------------------
# Rotation Matrix -> Euler Angle (6 branches)
# ---------------------------------------------------------------------------
#
# Each branch returns [x, y, z].  Near gimbal lock the third angle in the
# sequence is pinned to zero and the first absorbs the combined rotation.

def _rm_to_ea_xyz(R: jax.Array) -> jax.Array:
    m = R[0, 2]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    y = jnp.arcsin(jnp.clip(m, -1.0, 1.0))
    x = jnp.where(free, jnp.arctan2(-R[1, 2], R[2, 2]), jnp.arctan2(R[2, 1], R[1, 1]))
    z = jnp.where(free, jnp.arctan2(-R[0, 1], R[0, 0]), 0.0)
    return jnp.array([x, y, z])

def _rm_to_ea_yxz(R: jax.Array) -> jax.Array:
    m = R[1, 2]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    x = jnp.arcsin(-jnp.clip(m, -1.0, 1.0))
    y = jnp.where(free, jnp.arctan2(R[0, 2], R[2, 2]), jnp.arctan2(-R[2, 0], R[0, 0]))
    z = jnp.where(free, jnp.arctan2(R[1, 0], R[1, 1]), 0.0)
    return jnp.array([x, y, z])

def _rm_to_ea_zxy(R: jax.Array) -> jax.Array:
    m = R[2, 1]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    x = jnp.arcsin(jnp.clip(m, -1.0, 1.0))
    y = jnp.where(free, jnp.arctan2(-R[2, 0], R[2, 2]), 0.0)
    z = jnp.where(free, jnp.arctan2(-R[0, 1], R[1, 1]), jnp.arctan2(R[1, 0], R[0, 0]))
    return jnp.array([x, y, z])

def _rm_to_ea_zyx(R: jax.Array) -> jax.Array:
    m = R[2, 0]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    y = jnp.arcsin(-jnp.clip(m, -1.0, 1.0))
    x = jnp.where(free, jnp.arctan2(R[2, 1], R[2, 2]), 0.0)
    z = jnp.where(free, jnp.arctan2(R[1, 0], R[0, 0]), jnp.arctan2(-R[0, 1], R[1, 1]))
    return jnp.array([x, y, z])

def _rm_to_ea_yzx(R: jax.Array) -> jax.Array:
    m = R[1, 0]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    z = jnp.arcsin(jnp.clip(m, -1.0, 1.0))
    x = jnp.where(free, jnp.arctan2(-R[1, 2], R[1, 1]), 0.0)
    y = jnp.where(free, jnp.arctan2(-R[2, 0], R[0, 0]), jnp.arctan2(R[0, 2], R[2, 2]))
    return jnp.array([x, y, z])

def _rm_to_ea_xzy(R: jax.Array) -> jax.Array:
    m = R[0, 1]
    free = jnp.abs(m) < _GIMBAL_LIMIT
    z = jnp.arcsin(-jnp.clip(m, -1.0, 1.0))
    x = jnp.where(free, jnp.arctan2(R[2, 1], R[1, 1]), jnp.arctan2(-R[1, 2], R[2, 2]))
    y = jnp.where(free, jnp.arctan2(R[0, 2], R[0, 0]), 0.0)
    return jnp.array([x, y, z])

_RM_TO_EA_BRANCHES = [
    _rm_to_ea_xyz,   # 0
    _rm_to_ea_yxz,   # 1
    _rm_to_ea_zxy,   # 2
    _rm_to_ea_zyx,   # 3
    _rm_to_ea_yzx,   # 4
    _rm_to_ea_xzy,   # 5
]


def rotation_matrix_to_euler_angle(order_idx: jax.Array, R: jax.Array) -> jax.Array:
    """Extract intrinsic Euler angles from an active rotation matrix.

    Args:
        order_idx (jax.Array): Integer index 0--5 matching ``EulerAngleOrder``.
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Array ``[x, y, z]`` in radians.
    """
    return jax.lax.switch(order_idx, _RM_TO_EA_BRANCHES, R)


# ---------------------------------------------------------------------------
# Quaternion products
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Hamilton product of two quaternions.

    The product is returned as-is.  Composing unit quaternions yields a
    unit quaternion, and NaN components propagate.

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)`` in scalar-first order.
        q2 (jax.Array): Second quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Product quaternion of shape ``(4,)``.
    """
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    return jnp.concatenate([jnp.array([s]), v])


def quaternion_dot(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Four-component inner product of two quaternions.

    For unit quaternions this is ``cos(theta / 2)`` where ``theta`` is the
    angle of the relative rotation (up to sign).

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)``.
        q2 (jax.Array): Second quaternion of shape ``(4,)``.

    Returns:
        jax.Array: Scalar dot product.
    """
    return jnp.dot(q1, q2)

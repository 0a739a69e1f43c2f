"""Euler angle attitude representation.

Provides the ``EulerAngleOrder`` enum defining the six Tait-Bryan
rotation sequences, and the ``EulerAngle`` class representing an attitude
as three intrinsic rotations.

Angles are stored per axis (``x``, ``y``, ``z``) rather than per position
in the sequence, so changing the order reinterprets the same three values.
The ``EulerAngleOrder`` values are contiguous integers 0--5, suitable for
use as branch indices in ``jax.lax.switch`` for JIT-compatible dispatch.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from orientjax.config import get_dtype, get_rotation_epsilon
from orientjax.utils import from_radians, to_radians

if TYPE_CHECKING:
    from orientjax.attitude_representations.quaternion import Quaternion


class EulerAngleOrder(enum.IntEnum):
    """The six Tait-Bryan intrinsic rotation sequences.

    Each member names the axes of three successive rotations, each about
    an axis of the frame produced by the previous ones.  ``YXZ`` means
    rotate about Y, then about the new X, then about the newest Z.

    Attributes:
        XYZ: X-Y'-Z'' sequence (index 0).
        YXZ: Y-X'-Z'' sequence, the usual camera convention (index 1).
        ZXY: Z-X'-Y'' sequence, the W3C device orientation convention (index 2).
        ZYX: Z-Y'-X'' sequence, also known as Yaw-Pitch-Roll (index 3).
        YZX: Y-Z'-X'' sequence (index 4).
        XZY: X-Z'-Y'' sequence (index 5).
    """

    XYZ = 0
    YXZ = 1
    ZXY = 2
    ZYX = 3
    YZX = 4
    XZY = 5


class EulerAngle:
    """Attitude represented as three intrinsic rotations about the body axes.

    Internal storage is always in radians.  The ``use_degrees`` parameter on
    the constructor converts degree inputs to radians on construction.

    This class is registered as a JAX pytree.  The three angle scalars are
    leaves; the ``order`` (an ``EulerAngleOrder``) is auxiliary data.

    Args:
        order (EulerAngleOrder): Rotation sequence (e.g. ``EulerAngleOrder.YXZ``).
        x (float): Rotation about the X axis.
        y (float): Rotation about the Y axis.
        z (float): Rotation about the Z axis.
        use_degrees (bool): If ``True``, interpret angles as degrees. Default: ``False``.
    """

    __slots__ = ('_order', '_x', '_y', '_z')

    def __init__(
        self,
        order: EulerAngleOrder,
        x: float,
        y: float,
        z: float,
        use_degrees: bool = False,
    ) -> None:
        _float = get_dtype()
        self._order = EulerAngleOrder(order)
        self._x = _float(to_radians(x, use_degrees))
        self._y = _float(to_radians(y, use_degrees))
        self._z = _float(to_radians(z, use_degrees))

    @classmethod
    def _from_internal(cls, order: EulerAngleOrder, x: jax.Array, y: jax.Array, z: jax.Array) -> EulerAngle:
        """Create from raw JAX arrays without conversion.

        Used by pytree unflatten and conversion outputs.

        Args:
            order (EulerAngleOrder): Rotation sequence.
            x (jax.Array): X-axis angle in radians.
            y (jax.Array): Y-axis angle in radians.
            z (jax.Array): Z-axis angle in radians.

        Returns:
            EulerAngle: New instance.
        """
        obj = object.__new__(cls)
        obj._order = EulerAngleOrder(order)
        obj._x = x
        obj._y = y
        obj._z = z
        return obj

    # Properties

    @property
    def order(self) -> EulerAngleOrder:
        """Rotation sequence."""
        return self._order

    @property
    def x(self) -> jax.Array:
        """Rotation about the X axis in radians."""
        return self._x

    @property
    def y(self) -> jax.Array:
        """Rotation about the Y axis in radians."""
        return self._y

    @property
    def z(self) -> jax.Array:
        """Rotation about the Z axis in radians."""
        return self._z

    # Factory methods

    @classmethod
    def from_vector(cls, vec: jax.Array, order: EulerAngleOrder, use_degrees: bool = False) -> EulerAngle:
        """Create from a 3-element vector [x, y, z].

        Args:
            vec (jax.Array): Array-like of shape (3,).
            order (EulerAngleOrder): Rotation sequence.
            use_degrees (bool): If ``True``, interpret as degrees.

        Returns:
            EulerAngle: New instance.
        """
        return cls(order, vec[0], vec[1], vec[2], use_degrees=use_degrees)

    def to_vector(self, use_degrees: bool = False) -> jax.Array:
        """Return the angles as ``[x, y, z]``.

        Args:
            use_degrees (bool): If ``True``, return degrees instead of radians.

        Returns:
            jax.Array: Angles of shape ``(3,)``.
        """
        return from_radians(jnp.array([self._x, self._y, self._z]), use_degrees)

    # Conversion methods

    def to_quaternion(self) -> Quaternion:
        """Convert to ``Quaternion``.

        Returns:
            Quaternion: Equivalent quaternion.
        """
        from orientjax.attitude_representations.conversions import euler_angle_to_quaternion
        from orientjax.attitude_representations.quaternion import Quaternion

        q = euler_angle_to_quaternion(
            jnp.int32(self._order.value), self._x, self._y, self._z
        )
        return Quaternion._from_internal(q)

    def reorder(self, order: EulerAngleOrder) -> EulerAngle:
        """Express the same rotation with a different sequence.

        Args:
            order (EulerAngleOrder): Target rotation sequence.

        Returns:
            EulerAngle: Equivalent euler angle in the target order.
        """
        return self.to_quaternion().to_euler_angle(order)

    @classmethod
    def from_quaternion(cls, q: Quaternion, order: EulerAngleOrder) -> EulerAngle:
        """Create from a ``Quaternion``.

        Args:
            q (Quaternion): Source quaternion.
            order (EulerAngleOrder): Target rotation sequence.

        Returns:
            EulerAngle: Equivalent euler angle.
        """
        return q.to_euler_angle(order)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EulerAngle):
            return NotImplemented
        eps = get_rotation_epsilon()
        return bool(
            self._order == other._order
            and jnp.abs(self._x - other._x) < eps
            and jnp.abs(self._y - other._y) < eps
            and jnp.abs(self._z - other._z) < eps
        )

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, EulerAngle):
            return NotImplemented
        return not self.__eq__(other)

    # String representations

    def __str__(self) -> str:
        return (
            f"EulerAngle(order={self._order.name}, "
            f"x={float(self._x):.6f}, "
            f"y={float(self._y):.6f}, "
            f"z={float(self._z):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"EulerAngle(order={self._order.name}, "
            f"x={float(self._x)}, "
            f"y={float(self._y)}, "
            f"z={float(self._z)})"
        )


# Register as JAX pytree: angles are leaves, order is auxiliary data
jax.tree_util.register_pytree_node(
    EulerAngle,
    lambda e: ((e._x, e._y, e._z), e._order),
    lambda order, children: EulerAngle._from_internal(order, *children),
)

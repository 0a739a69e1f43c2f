"""Quaternion attitude representation.

Provides the ``Quaternion`` class representing a rotation as a unit
quaternion in scalar-first convention ``[w, x, y, z]``.

The quaternion is normalized on construction.  Products and conversion
outputs are wrapped without renormalization so that composition of unit
quaternions stays bit-for-bit what the Hamilton product gives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from orientjax.config import get_dtype, get_rotation_epsilon
from orientjax.utils import to_radians

if TYPE_CHECKING:
    from orientjax.attitude_representations.euler_angle import EulerAngle, EulerAngleOrder


class Quaternion:
    """Unit quaternion representing a 3D rotation.

    Internal storage is a shape ``(4,)`` array in scalar-first order
    ``[w, x, y, z]``.  The quaternion is normalized on construction.

    This class is registered as a JAX pytree with the data array as
    the sole leaf and no auxiliary data.

    Args:
        s (float): Scalar (real) component.
        v1 (float): First vector (imaginary) component.
        v2 (float): Second vector (imaginary) component.
        v3 (float): Third vector (imaginary) component.
    """

    __slots__ = ('_data',)

    def __init__(self, s: float, v1: float, v2: float, v3: float) -> None:
        _float = get_dtype()
        q = jnp.array([_float(s), _float(v1), _float(v2), _float(v3)])
        self._data = q / jnp.linalg.norm(q)

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Quaternion:
        """Create from a raw JAX array without normalization.

        Used by pytree unflatten and conversion outputs.

        Args:
            data (jax.Array): Array of shape ``(4,)`` in scalar-first order.

        Returns:
            Quaternion: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def w(self) -> jax.Array:
        """Scalar component."""
        return self._data[0]

    @property
    def x(self) -> jax.Array:
        """First vector component."""
        return self._data[1]

    @property
    def y(self) -> jax.Array:
        """Second vector component."""
        return self._data[2]

    @property
    def z(self) -> jax.Array:
        """Third vector component."""
        return self._data[3]

    # Factory methods

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the identity rotation ``[1, 0, 0, 0]``."""
        return cls._from_internal(jnp.array([1.0, 0.0, 0.0, 0.0], dtype=get_dtype()))

    @classmethod
    def from_vector(cls, v: jax.Array, scalar_first: bool = True) -> Quaternion:
        """Create from a 4-element vector.

        Args:
            v (jax.Array): Array-like of shape ``(4,)``.
            scalar_first (bool): If ``True``, ``v = [w, x, y, z]``.
                If ``False``, ``v = [x, y, z, w]``.

        Returns:
            Quaternion: New normalized quaternion.
        """
        if scalar_first:
            return cls(v[0], v[1], v[2], v[3])
        else:
            return cls(v[3], v[0], v[1], v[2])

    @classmethod
    def from_axis_angle(cls, axis: jax.Array, angle: float, use_degrees: bool = False) -> Quaternion:
        """Create a rotation of ``angle`` about ``axis``.

        Args:
            axis (jax.Array): Rotation axis of shape ``(3,)``; normalized internally.
            angle (float): Rotation angle (right-hand rule).
            use_degrees (bool): If ``True``, interpret ``angle`` as degrees.

        Returns:
            Quaternion: Equivalent unit quaternion.
        """
        from orientjax.attitude_representations.conversions import axis_angle_to_quaternion

        _float = get_dtype()
        q = axis_angle_to_quaternion(
            jnp.asarray(axis, dtype=_float), _float(to_radians(angle, use_degrees))
        )
        return cls._from_internal(q)

    def to_vector(self, scalar_first: bool = True) -> jax.Array:
        """Return the quaternion as a 4-element vector.

        Args:
            scalar_first (bool): If ``True``, return ``[w, x, y, z]``.
                If ``False``, return ``[x, y, z, w]``.

        Returns:
            jnp.ndarray: Array of shape ``(4,)``.
        """
        if scalar_first:
            return self._data
        else:
            return jnp.array([self._data[1], self._data[2], self._data[3], self._data[0]])

    # Methods

    def normalize(self) -> Quaternion:
        """Return a new normalized quaternion.

        Returns:
            Quaternion: Unit quaternion.
        """
        return Quaternion._from_internal(self._data / jnp.linalg.norm(self._data))

    def norm(self) -> jax.Array:
        """Return the Euclidean norm.

        Returns:
            jax.Array: Scalar norm.
        """
        return jnp.linalg.norm(self._data)

    def conjugate(self) -> Quaternion:
        """Return the conjugate quaternion ``[w, -x, -y, -z]``.

        For a unit quaternion, the conjugate equals the inverse.

        Returns:
            Quaternion: Conjugate quaternion.
        """
        return Quaternion._from_internal(
            self._data * jnp.array([1.0, -1.0, -1.0, -1.0], dtype=self._data.dtype)
        )

    def dot(self, other: Quaternion) -> jax.Array:
        """Four-component inner product with ``other``.

        Args:
            other (Quaternion): Second quaternion.

        Returns:
            jax.Array: Scalar dot product.
        """
        from orientjax.attitude_representations.conversions import quaternion_dot

        return quaternion_dot(self._data, other._data)

    def angle_to(self, other: Quaternion) -> jax.Array:
        """Angle of the shortest rotation taking ``self`` to ``other``.

        Args:
            other (Quaternion): Target rotation.

        Returns:
            jax.Array: Angle in radians, in ``[0, pi]``.
        """
        d = jnp.clip(jnp.abs(self.dot(other)), 0.0, 1.0)
        return 2.0 * jnp.arccos(d)

    # Operators

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (quaternion * quaternion)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        from orientjax.attitude_representations.conversions import quaternion_multiply

        q = quaternion_multiply(self._data, other._data)
        return Quaternion._from_internal(q)

    def __neg__(self) -> Quaternion:
        return Quaternion._from_internal(-self._data)

    def __getitem__(self, idx: int) -> jax.Array:
        return self._data[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        eps = get_rotation_epsilon()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return not self.__eq__(other)

    # Conversion methods

    def to_euler_angle(self, order: EulerAngleOrder) -> EulerAngle:
        """Convert to ``EulerAngle`` with specified rotation sequence.

        Goes through the rotation matrix representation.

        Args:
            order (EulerAngleOrder): ``EulerAngleOrder`` specifying the rotation sequence.

        Returns:
            EulerAngle: Equivalent euler angle.
        """
        from orientjax.attitude_representations.conversions import (
            quaternion_to_rotation_matrix,
            rotation_matrix_to_euler_angle,
        )
        from orientjax.attitude_representations.euler_angle import EulerAngle

        R = quaternion_to_rotation_matrix(self._data)
        angles = rotation_matrix_to_euler_angle(jnp.int32(order.value), R)
        return EulerAngle._from_internal(order, angles[0], angles[1], angles[2])

    @classmethod
    def from_euler_angle(cls, e: EulerAngle) -> Quaternion:
        """Create from an ``EulerAngle``.

        Args:
            e (EulerAngle): Source euler angle.

        Returns:
            Quaternion: Equivalent quaternion.
        """
        return e.to_quaternion()

    # String representations

    def __str__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0]):.6f}, "
            f"x={float(self._data[1]):.6f}, "
            f"y={float(self._data[2]):.6f}, "
            f"z={float(self._data[3]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0])}, "
            f"x={float(self._data[1])}, "
            f"y={float(self._data[2])}, "
            f"z={float(self._data[3])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Quaternion,
    lambda q: ((q._data,), None),
    lambda _, children: Quaternion._from_internal(children[0]),
)

"""Host objects whose rotation a tracker drives.

A rotation target only needs a settable ``quaternion`` and a settable
``rotation_order``.  :class:`SceneObject` is a plain implementation that
also exposes its rotation as Euler angles in that order.
"""

from __future__ import annotations

from typing import Protocol

from orientjax.attitude_representations import EulerAngle, EulerAngleOrder, Quaternion


class RotationTarget(Protocol):
    """Anything with a settable quaternion and Euler rotation order."""

    quaternion: Quaternion
    rotation_order: EulerAngleOrder


class SceneObject:
    """Scene graph node holding a rotation.

    Args:
        quaternion: Initial rotation. Default: identity.
        rotation_order: Order used when reading or writing :attr:`rotation`.
            Default: ``EulerAngleOrder.XYZ``.
    """

    def __init__(
        self,
        quaternion: Quaternion | None = None,
        rotation_order: EulerAngleOrder = EulerAngleOrder.XYZ,
    ) -> None:
        self.quaternion = quaternion if quaternion is not None else Quaternion.identity()
        self.rotation_order = EulerAngleOrder(rotation_order)

    @property
    def rotation(self) -> EulerAngle:
        """Current rotation as Euler angles in :attr:`rotation_order`."""
        return self.quaternion.to_euler_angle(self.rotation_order)

    @rotation.setter
    def rotation(self, value: EulerAngle) -> None:
        self.quaternion = value.to_quaternion()

    def __repr__(self) -> str:
        return f"SceneObject(quaternion={self.quaternion!r}, rotation_order={self.rotation_order.name})"

"""Device orientation controls.

Converts W3C-style device orientation readings into the rotation of a
scene object and notifies listeners when that rotation changes:

- :func:`compute_rotation` -- pure transform from sensor angles to a quaternion
- :class:`DeviceOrientationTracker` -- lifecycle, dirty check and ``change`` events
- :class:`SceneObject` -- a minimal rotation target
- sources and permission gates the tracker subscribes through
"""

from orientjax.device_orientation._types import OrientationSample
from orientjax.device_orientation.events import CHANGE_EVENT, Event, EventDispatcher
from orientjax.device_orientation.scene import RotationTarget, SceneObject
from orientjax.device_orientation.sources import (
    PERMISSION_DENIED,
    PERMISSION_GRANTED,
    PermissionGate,
    PushScreenSource,
    PushSensorSource,
    ScreenOrientationSource,
    SensorSource,
    StaticPermissionGate,
)
from orientjax.device_orientation.tracker import DeviceOrientationTracker
from orientjax.device_orientation.transform import (
    CAMERA_BACK,
    SCREEN_AXIS,
    compute_rotation,
    compute_rotation_array,
)

__all__ = [
    # Types
    "OrientationSample",
    # Transform
    "CAMERA_BACK",
    "SCREEN_AXIS",
    "compute_rotation",
    "compute_rotation_array",
    # Events
    "CHANGE_EVENT",
    "Event",
    "EventDispatcher",
    # Targets
    "RotationTarget",
    "SceneObject",
    # Sources
    "PERMISSION_DENIED",
    "PERMISSION_GRANTED",
    "PermissionGate",
    "PushScreenSource",
    "PushSensorSource",
    "ScreenOrientationSource",
    "SensorSource",
    "StaticPermissionGate",
    # Tracker
    "DeviceOrientationTracker",
]

"""
orientjax turns device orientation sensor readings into scene rotations, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    CHANGE_EPSILON,
    CHANGE_SCALE,
)

from .config import set_dtype, get_dtype, TrackerConfig

from .attitude_representations import (
    Quaternion,
    EulerAngle,
    EulerAngleOrder,
)

from .device_orientation import (
    OrientationSample,
    compute_rotation,
    compute_rotation_array,
    Event,
    EventDispatcher,
    SceneObject,
    PushSensorSource,
    PushScreenSource,
    StaticPermissionGate,
    DeviceOrientationTracker,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "CHANGE_EPSILON",
    "CHANGE_SCALE",
    # Config
    "set_dtype",
    "get_dtype",
    "TrackerConfig",
    # Attitude Representations
    "Quaternion",
    "EulerAngle",
    "EulerAngleOrder",
    # Device Orientation
    "OrientationSample",
    "compute_rotation",
    "compute_rotation_array",
    "Event",
    "EventDispatcher",
    "SceneObject",
    "PushSensorSource",
    "PushScreenSource",
    "StaticPermissionGate",
    "DeviceOrientationTracker",
]

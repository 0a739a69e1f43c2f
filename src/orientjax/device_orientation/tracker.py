"""Device orientation tracker.

:class:`DeviceOrientationTracker` turns the latest device orientation
reading into the rotation of a scene object, once per call to
:meth:`~DeviceOrientationTracker.update`, and dispatches a ``change``
event only when that rotation has moved by more than a small threshold.

Readings and screen angles arrive through injected sources and simply
overwrite the stored values (latest wins).  ``update`` is synchronous and
is meant to be driven by the host's render loop.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import Future

from orientjax.attitude_representations import EulerAngleOrder, Quaternion
from orientjax.config import TrackerConfig
from orientjax.device_orientation._types import OrientationSample
from orientjax.device_orientation.events import CHANGE_EVENT, Event, EventDispatcher
from orientjax.device_orientation.scene import RotationTarget
from orientjax.device_orientation.sources import (
    PERMISSION_GRANTED,
    PermissionGate,
    ScreenOrientationSource,
    SensorSource,
)
from orientjax.device_orientation.transform import compute_rotation
from orientjax.utils import deg_to_rad_or_zero

logger = logging.getLogger(__name__)


class DeviceOrientationTracker(EventDispatcher):
    """Drive a target's rotation from device orientation readings.

    On construction the target's Euler rotation order is set to ``YXZ``.
    With ``auto_connect`` the tracker connects immediately.

    Args:
        target: Object whose ``quaternion`` is written on every effective
            update.
        sensor_source: Source of :class:`OrientationSample` readings.
        screen_source: Source of screen rotation angles in degrees.
        permission_gate: Optional gate that must grant access before the
            tracker subscribes to the sources.
        config: Change notification parameters. Default: ``TrackerConfig()``.
        auto_connect: Call :meth:`connect` from the constructor. Default: ``True``.

    Attributes:
        enabled: When ``False``, :meth:`update` does nothing.
        alpha_offset: Radians added to the heading before the transform.
        device_orientation: Latest reading, ``None`` until one arrives.
        screen_orientation: Latest screen angle in degrees, ``None`` if unknown.
        permission_error: The ``PermissionError`` from the most recent
            refused permission request, ``None`` otherwise.

    Examples:
        ```python
        from orientjax.device_orientation import (
            DeviceOrientationTracker, PushSensorSource, SceneObject,
        )
        camera = SceneObject()
        sensor = PushSensorSource()
        tracker = DeviceOrientationTracker(camera, sensor_source=sensor)
        tracker.add_event_listener("change", lambda event: print(camera.quaternion))
        sensor.push({"alpha": 90.0, "beta": 0.0, "gamma": 0.0})
        tracker.update()
        ```
    """

    def __init__(
        self,
        target: RotationTarget,
        sensor_source: SensorSource | None = None,
        screen_source: ScreenOrientationSource | None = None,
        permission_gate: PermissionGate | None = None,
        config: TrackerConfig | None = None,
        auto_connect: bool = True,
    ) -> None:
        super().__init__()
        self.target = target
        self.target.rotation_order = EulerAngleOrder.YXZ

        self.sensor_source = sensor_source
        self.screen_source = screen_source
        self.permission_gate = permission_gate
        self.config = config if config is not None else TrackerConfig()

        self.enabled = False
        self.alpha_offset = 0.0
        self.device_orientation: OrientationSample | None = None
        self.screen_orientation: float | None = None
        self.permission_error: PermissionError | None = None

        self._last_quaternion = Quaternion.identity()
        self._connected = False
        self._subscribed = False
        # Bumped on every connect/disconnect transition; permission results
        # from an earlier cycle are ignored.
        self._generation = 0

        if auto_connect:
            self.connect()

    # Properties

    @property
    def connected(self) -> bool:
        """Whether the tracker is in the connected state."""
        return self._connected

    @property
    def subscribed(self) -> bool:
        """Whether the tracker is currently subscribed to its sources."""
        return self._subscribed

    @property
    def last_notified_rotation(self) -> Quaternion:
        """Rotation at the time of the most recent ``change`` event."""
        return self._last_quaternion

    # Source callbacks

    def on_device_orientation(self, sample: OrientationSample) -> None:
        """Store the latest sensor reading."""
        self.device_orientation = sample

    def on_screen_orientation(self, angle: float | None) -> None:
        """Store the latest screen angle in degrees."""
        self.screen_orientation = angle

    # Lifecycle

    def connect(self) -> None:
        """Start listening to the sensor and screen sources.

        The screen angle is read once immediately.  Without a permission
        gate the tracker subscribes at once; with one, it subscribes when
        the gate grants access, provided it has not been disconnected in
        the meantime.  ``enabled`` becomes ``True`` in either case.

        Calling ``connect`` again while connected never subscribes twice.
        """
        if self.screen_source is not None:
            self.on_screen_orientation(self.screen_source.angle)

        if not self._connected:
            self._connected = True
            self._generation += 1
            logger.debug("Connecting device orientation tracker")

        if self.permission_gate is None:
            self._subscribe()
        else:
            self._request_permission()

        self.enabled = True

    def disconnect(self) -> None:
        """Stop listening to the sources and disable updates."""
        if self._subscribed:
            if self.screen_source is not None:
                self.screen_source.unsubscribe(self.on_screen_orientation)
            if self.sensor_source is not None:
                self.sensor_source.unsubscribe(self.on_device_orientation)
            self._subscribed = False
            logger.debug("Unsubscribed from device orientation sources")

        if self._connected:
            self._connected = False
            self._generation += 1

        self.enabled = False

    def dispose(self) -> None:
        """Release the sources; equivalent to :meth:`disconnect`."""
        self.disconnect()

    # Update

    def update(self) -> bool:
        """Apply the latest reading to the target.

        Does nothing when disabled or before the first reading.  Otherwise
        writes the new rotation into ``target.quaternion`` and dispatches a
        ``change`` event if it differs enough from the last notified one.

        Returns:
            bool: ``True`` if a ``change`` event was dispatched.
        """
        if not self.enabled:
            return False

        device = self.device_orientation
        if device is None:
            return False

        alpha = deg_to_rad_or_zero(device.alpha) + self.alpha_offset  # Z
        beta = deg_to_rad_or_zero(device.beta)  # X'
        gamma = deg_to_rad_or_zero(device.gamma)  # Y''
        orient = deg_to_rad_or_zero(self.screen_orientation)  # O

        quaternion = compute_rotation(alpha, beta, gamma, orient)
        self.target.quaternion = quaternion

        distance = self.config.change_scale * (
            1.0 - _cosine_half_angle(self._last_quaternion, quaternion)
        )
        if distance > self.config.change_epsilon:
            self._last_quaternion = quaternion
            self.dispatch_event(Event(CHANGE_EVENT))
            return True
        return False

    # Internals

    def _subscribe(self) -> None:
        if self._subscribed:
            return
        if self.screen_source is not None:
            self.screen_source.subscribe(self.on_screen_orientation)
        if self.sensor_source is not None:
            self.sensor_source.subscribe(self.on_device_orientation)
        self._subscribed = True
        logger.debug("Subscribed to device orientation sources")

    def _request_permission(self) -> None:
        generation = self._generation
        try:
            future = self.permission_gate.request_permission()
        except Exception as exc:
            self._permission_failed(exc)
            return
        future.add_done_callback(lambda f: self._on_permission_result(f, generation))

    def _on_permission_result(self, future: Future, generation: int) -> None:
        if generation != self._generation or not self._connected:
            logger.debug("Ignoring permission result for a closed connection")
            return

        try:
            response = future.result()
        except Exception as exc:
            self._permission_failed(exc)
            return

        if response == PERMISSION_GRANTED:
            self.permission_error = None
            self._subscribe()
        else:
            self._permission_failed(
                PermissionError(f"Device orientation permission not granted: {response!r}")
            )

    def _permission_failed(self, exc: Exception) -> None:
        if isinstance(exc, PermissionError):
            error = exc
        else:
            error = PermissionError(f"Unable to use the device orientation API: {exc}")
            error.__cause__ = exc
        self.permission_error = error
        logger.error("Unable to use the device orientation API: %s", exc, exc_info=exc)


def _cosine_half_angle(q1: Quaternion, q2: Quaternion) -> float:
    """Normalized dot product of two quaternions, evaluated in float64.

    Taken on host floats and divided by both norms, so rounding in the
    module dtype (a float32 quaternion is unit length only to ~1e-7)
    does not register as motion.  NaN components yield NaN.
    """
    a = q1.to_vector().tolist()
    b = q2.to_vector().tolist()
    dot = sum(x * y for x, y in zip(a, b))
    norms = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norms

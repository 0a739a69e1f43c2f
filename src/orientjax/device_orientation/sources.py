"""Collaborators that feed a device orientation tracker.

The tracker never touches platform globals.  It is handed:

- a :class:`SensorSource` delivering :class:`OrientationSample` readings,
- a :class:`ScreenOrientationSource` delivering the screen angle in degrees,
- optionally a :class:`PermissionGate` that must grant access first.

``PushSensorSource`` and ``PushScreenSource`` are in-process
implementations: host glue (or a test) pushes values into them and they
fan out to subscribers synchronously.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from concurrent.futures import Future
from typing import Any, Protocol

from orientjax.device_orientation._types import OrientationSample

PERMISSION_GRANTED = "granted"
PERMISSION_DENIED = "denied"

SampleListener = Callable[[OrientationSample], Any]
AngleListener = Callable[[float | None], Any]


class SensorSource(Protocol):
    """Producer of device orientation readings."""

    def subscribe(self, listener: SampleListener) -> None: ...

    def unsubscribe(self, listener: SampleListener) -> None: ...


class ScreenOrientationSource(Protocol):
    """Producer of screen rotation angles in degrees."""

    @property
    def angle(self) -> float | None: ...

    def subscribe(self, listener: AngleListener) -> None: ...

    def unsubscribe(self, listener: AngleListener) -> None: ...


class PermissionGate(Protocol):
    """Asynchronous permission prompt for sensor access.

    ``request_permission`` returns a future resolving to a response string;
    only :data:`PERMISSION_GRANTED` allows subscription.  A future that
    raises means the platform refused or does not support the API.
    """

    def request_permission(self) -> Future[str]: ...


class PushSensorSource:
    """Sensor source fed by explicit :meth:`push` calls."""

    def __init__(self) -> None:
        self._listeners: list[SampleListener] = []

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._listeners)

    def subscribe(self, listener: SampleListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SampleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def push(self, sample: OrientationSample | Mapping[str, Any]) -> None:
        """Deliver a reading to every subscriber.

        Args:
            sample: An ``OrientationSample`` or a mapping with optional
                ``alpha``, ``beta``, ``gamma`` keys in degrees.
        """
        if not isinstance(sample, OrientationSample):
            sample = OrientationSample.from_mapping(sample)
        for listener in list(self._listeners):
            listener(sample)


class PushScreenSource:
    """Screen orientation source fed by explicit :meth:`push` calls.

    Args:
        angle: Initial screen angle in degrees, or ``None`` if unknown.
    """

    def __init__(self, angle: float | None = 0.0) -> None:
        self._angle = angle
        self._listeners: list[AngleListener] = []

    @property
    def angle(self) -> float | None:
        """Current screen angle in degrees."""
        return self._angle

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._listeners)

    def subscribe(self, listener: AngleListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: AngleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def push(self, angle: float | None) -> None:
        """Record a new screen angle and notify every subscriber."""
        self._angle = angle
        for listener in list(self._listeners):
            listener(angle)


class StaticPermissionGate:
    """Permission gate that answers every request with a fixed response.

    Args:
        response: Response string, :data:`PERMISSION_GRANTED` by default.
    """

    def __init__(self, response: str = PERMISSION_GRANTED) -> None:
        self.response = response
        self.request_count = 0

    def request_permission(self) -> Future[str]:
        self.request_count += 1
        future: Future[str] = Future()
        future.set_result(self.response)
        return future

"""Type definitions for device orientation readings.

Provides :class:`OrientationSample`, a single reading from a device
orientation sensor.  It is a :class:`~typing.NamedTuple`, so it is
immutable and is replaced wholesale on every sensor push.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple


class OrientationSample(NamedTuple):
    """One device orientation reading, in degrees.

    The three angles are intrinsic Tait-Bryan angles of type Z-X'-Y''.
    Sensors may omit any of them; a missing angle is ``None`` and is
    treated as zero by the tracker.

    Attributes:
        alpha: Heading about the device Z axis, ``[0, 360)`` degrees.
        beta: Front-back tilt about X', ``[-180, 180)`` degrees.
        gamma: Left-right tilt about Y'', ``[-90, 90)`` degrees.
    """

    alpha: float | None = None
    beta: float | None = None
    gamma: float | None = None

    @classmethod
    def from_mapping(cls, event: Mapping[str, Any]) -> OrientationSample:
        """Build a sample from a mapping such as a decoded JSON event.

        Missing keys and ``None`` values both become ``None``; other keys
        are ignored.

        Args:
            event: Mapping with optional ``alpha``, ``beta``, ``gamma`` keys.

        Returns:
            OrientationSample: The reading.

        Examples:
            ```python
            OrientationSample.from_mapping({"alpha": 90.0, "absolute": True})
            ```
        """
        return cls(
            alpha=_optional_float(event.get("alpha")),
            beta=_optional_float(event.get("beta")),
            gamma=_optional_float(event.get("gamma")),
        )


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)

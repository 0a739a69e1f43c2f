# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "orientjax"]
#
# [tool.uv.sources]
# orientjax = { path = ".." }
# ///
"""Replay recorded device orientation readings through a tracker.

Reads a JSON-lines file in which every line is either a sensor reading,
``{"alpha": 90.0, "beta": 10.0, "gamma": -5.0}`` (any key may be missing),
or a screen rotation, ``{"screen": 90}``.  After each sensor reading the
tracker is updated once, as a render loop would, and every rotation that
produced a ``change`` event is printed.

Requires orientjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/replay_orientation.py SAMPLES [OPTIONS]

Examples:
    # Replay a recording
    uv run examples/replay_orientation.py recording.jsonl

    # Rotate the heading by 90 degrees and print Euler angles
    uv run examples/replay_orientation.py recording.jsonl --alpha-offset 90 --euler

    # Only report larger movements
    uv run examples/replay_orientation.py recording.jsonl --change-epsilon 1e-3
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import jax.numpy as jnp
import typer

from orientjax import (
    DEG2RAD,
    DeviceOrientationTracker,
    PushScreenSource,
    PushSensorSource,
    SceneObject,
    TrackerConfig,
    set_dtype,
)

set_dtype(jnp.float64)


def main(
    samples: Annotated[Path, typer.Argument(help="JSON-lines file of readings", exists=True)],
    screen: Annotated[float, typer.Option(help="Initial screen angle in degrees")] = 0.0,
    alpha_offset: Annotated[float, typer.Option(help="Heading offset in degrees")] = 0.0,
    change_epsilon: Annotated[
        float, typer.Option(help="Threshold on 8 * (1 - dot) for change events")
    ] = 1e-6,
    euler: Annotated[bool, typer.Option(help="Print YXZ Euler angles instead of quaternions")] = False,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
) -> None:
    """Replay device orientation readings and print each change."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    camera = SceneObject()
    sensor = PushSensorSource()
    screen_source = PushScreenSource(screen)
    tracker = DeviceOrientationTracker(
        camera,
        sensor_source=sensor,
        screen_source=screen_source,
        config=TrackerConfig(change_epsilon=change_epsilon),
    )
    tracker.alpha_offset = alpha_offset * DEG2RAD

    n_readings = 0
    n_changes = 0
    with samples.open() as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as exc:
                print(f"ERROR: line {line_no}: {exc}")
                sys.exit(1)

            if "screen" in record:
                screen_source.push(record["screen"])
                continue

            sensor.push(record)
            n_readings += 1
            if not tracker.update():
                continue

            n_changes += 1
            if euler:
                x, y, z = camera.rotation.to_vector(use_degrees=True).tolist()
                print(f"{line_no:6d}  x={x:9.4f}  y={y:9.4f}  z={z:9.4f}")
            else:
                print(f"{line_no:6d}  {camera.quaternion}")

    tracker.dispose()
    print(f"\n{n_readings} readings, {n_changes} change events")


if __name__ == "__main__":
    typer.run(main)

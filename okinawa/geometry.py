"""Conversions between directions and rotations."""

from __future__ import annotations

import math

import numpy as np

from .point import Point
from .rotation import Rotation

_PARALLEL_LIMIT = 0.999999


def _unit(vector: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return vector / length


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def direction_vector_to_angles(direction: Point) -> tuple[float, float]:
    """Return ``(pitch, yaw)`` in radians for a direction vector.

    Roll cannot be recovered from a single direction.
    """
    x, y, z = _unit(np.array(direction.to_tuple(), dtype=float), "direction")
    pitch = math.asin(_clamp(float(y)))
    cp = math.cos(pitch)
    if cp > 0.001:
        yaw = math.atan2(x / cp, -z / cp)
    else:
        # Looking straight up or down: yaw is arbitrary.
        yaw = math.atan2(x, -z)
    return pitch, yaw


def look_at(eye: Point, target: Point, up: Point | None = None) -> Rotation:
    """Return the rotation that turns an object at ``eye`` to face ``target``."""
    if up is None:
        up = Point(0.0, 1.0, 0.0)
    eye_pos = np.array(eye.to_tuple(), dtype=float)
    target_pos = np.array(target.to_tuple(), dtype=float)
    world_up = _unit(np.array(up.to_tuple(), dtype=float), "up vector")

    forward = _unit(target_pos - eye_pos, "eye-to-target direction")

    if abs(float(np.dot(forward, world_up))) > _PARALLEL_LIMIT:
        if abs(float(forward[1])) < _PARALLEL_LIMIT:
            world_up = np.array([0.0, 0.0, 1.0])
        else:
            world_up = np.array([1.0, 0.0, 0.0])

    right = _unit(np.cross(forward, world_up), "right vector")
    up_dir = np.cross(right, forward)

    pitch = -math.asin(_clamp(float(forward[1])))
    # atan2 is scale-invariant, so the xz projection needs no normalising.
    yaw = math.atan2(float(forward[0]), float(forward[2]))

    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    expected_up = _unit(np.array([-sy * sp, cp, -cy * sp]), "expected up")

    projected_up = _unit(up_dir - forward * np.dot(up_dir, forward), "projected up")
    projected_expected = _unit(
        expected_up - forward * np.dot(expected_up, forward), "projected expected up"
    )

    roll = math.acos(_clamp(float(np.dot(projected_up, projected_expected))))
    if float(np.dot(np.cross(projected_expected, projected_up), forward)) < 0:
        roll = -roll

    return Rotation(pitch, yaw, roll)
"""Euler-angle rotations with a cached 4x4 rotation matrix."""

from __future__ import annotations

import math

import numpy as np

from .point import Point


def _rotation_matrix(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Build the rotation matrix for yaw, then pitch, then roll."""
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    cr, sr = math.cos(roll), math.sin(roll)
    columns = np.array(
        [
            [cy * cr + sy * sp * sr, -cy * sr + sy * sp * cr, sy * cp, 0.0],
            [cp * sr, cp * cr, -sp, 0.0],
            [-sy * cr + cy * sp * sr, sy * sr + cy * sp * cr, cy * cp, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    # Each inner list above is a column; store as row-major [row, col].
    return columns.T


def _unit(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class Rotation:
    """A rotation given by pitch (x), yaw (y) and roll (z) in radians."""

    __hash__ = None  # mutable

    def __init__(self, pitch: float = 0.0, yaw: float = 0.0, roll: float = 0.0) -> None:
        self._angles = (float(pitch), float(yaw), float(roll))
        self._matrix = _rotation_matrix(*self._angles)

    @property
    def pitch(self) -> float:
        return self._angles[0]

    @property
    def yaw(self) -> float:
        return self._angles[1]

    @property
    def roll(self) -> float:
        return self._angles[2]

    @property
    def angles(self) -> tuple[float, float, float]:
        return self._angles

    @property
    def matrix(self) -> np.ndarray:
        """A copy of the 4x4 rotation matrix, indexed [row, column]."""
        return self._matrix.copy()

    def copy(self) -> Rotation:
        return Rotation(*self._angles)

    def rotate(self, dx: float, dy: float, dz: float) -> None:
        """Add the given angles to the current ones."""
        pitch, yaw, roll = self._angles
        self.set_rotation(pitch + dx, yaw + dy, roll + dz)

    def set_rotation(self, x: float, y: float, z: float) -> None:
        """Replace the angles."""
        self._angles = (float(x), float(y), float(z))
        self._matrix = _rotation_matrix(*self._angles)

    def transform_point(self, point: Point) -> Point:
        """Apply this rotation to a point."""
        result = self._matrix @ np.array([point.x, point.y, point.z, 1.0])
        return Point(float(result[0]), float(result[1]), float(result[2]))

    def combine(self, other: Rotation) -> Rotation:
        """Return the rotation equal to applying this one, then ``other``."""
        combined = other._matrix @ self._matrix
        forward = _unit(combined[:3, 2])
        up = _unit(combined[:3, 1])

        pitch = -math.asin(max(-1.0, min(1.0, float(forward[1]))))
        yaw = math.atan2(float(forward[0]), float(forward[2]))

        cp, sp = math.cos(pitch), math.sin(pitch)
        cy, sy = math.cos(yaw), math.sin(yaw)
        no_roll_up = _unit(np.array([-sy * sp, cp, -cy * sp]))
        right = np.cross(no_roll_up, forward)
        roll = math.atan2(float(np.dot(up, right)), float(np.dot(up, no_roll_up)))

        return Rotation(pitch, yaw, roll)

    def forward_vector(self) -> Point:
        pitch, yaw = self._angles[0], self._angles[1]
        cp, sp = math.cos(pitch), math.sin(pitch)
        cy, sy = math.cos(yaw), math.sin(yaw)
        return Point(-sy * cp, sp, -cy * cp)

    def right_vector(self) -> Point:
        yaw = self._angles[1]
        return Point(math.cos(yaw), 0.0, -math.sin(yaw))

    def up_vector(self) -> Point:
        return self.right_vector().cross(self.forward_vector())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._angles == other._angles

    def __str__(self) -> str:
        pitch, yaw, roll = self._angles
        return f"({pitch:g}, {yaw:g}, {roll:g})"

    def __repr__(self) -> str:
        pitch, yaw, roll = self._angles
        return f"Rotation(pitch={pitch!r}, yaw={yaw!r}, roll={roll!r})"
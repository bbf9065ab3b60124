"""Perspective camera whose view follows its position and rotation."""

from __future__ import annotations

import math

import numpy as np

from .scene_object import SceneObject

DEFAULT_FOV = 45.0
DEFAULT_NEAR = 0.1
DEFAULT_FAR = 100.0

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def perspective(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    tan_half = math.tan(fov_radians / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot build a view from a degenerate direction")
    return vector / length


def look_at_matrix(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    forward = _unit(center - eye)
    side = _unit(np.cross(forward, up))
    true_up = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye))
    matrix[1, 3] = -float(np.dot(true_up, eye))
    matrix[2, 3] = float(np.dot(forward, eye))
    return matrix


class Camera(SceneObject):
    """A camera with a perspective projection and a view matrix."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        self.aspect_ratio = float(width) / float(height)
        self.fov = DEFAULT_FOV
        self.near = DEFAULT_NEAR
        self.far = DEFAULT_FAR
        self._projection = perspective(math.radians(self.fov), self.aspect_ratio, self.near, self.far)
        self._view = np.eye(4)
        self._update_view()

    @property
    def view(self) -> np.ndarray:
        """A copy of the 4x4 view matrix, indexed [row, column]."""
        return self._view.copy()

    @property
    def projection(self) -> np.ndarray:
        """A copy of the 4x4 projection matrix, indexed [row, column]."""
        return self._projection.copy()

    def set_perspective(self, fov_degrees: float, near_plane: float, far_plane: float) -> None:
        """Replace the field of view (degrees) and clipping planes."""
        self.fov = float(fov_degrees)
        self.near = float(near_plane)
        self.far = float(far_plane)
        self._projection = perspective(math.radians(self.fov), self.aspect_ratio, self.near, self.far)

    def _update_view(self) -> None:
        eye = np.array(self.position.to_tuple(), dtype=float)
        front = np.array(self.rotation.forward_vector().to_tuple(), dtype=float)
        self._view = look_at_matrix(eye, eye + front, _WORLD_UP)

    def update_transform(self) -> None:
        """Recompute the view after the transform changes."""
        super().update_transform()
        self._update_view()
"""Positioned, rotated and scaled objects arranged in a parent/child tree."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .point import Point
from .rotation import Rotation


def _translation(offset: Point) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = offset.to_tuple()
    return matrix


def _scale(factors: Point) -> np.ndarray:
    return np.diag([factors.x, factors.y, factors.z, 1.0])


class SceneObject:
    """An object with a local transform, simple physics state and a hierarchy.

    Position and rotation are stored relative to the parent; the ``world_*``
    methods resolve them through the chain of parents.
    """

    def __init__(self) -> None:
        self._position = Point()
        self._rotation = Rotation()
        self.scaling = Point(1.0, 1.0, 1.0)

        self.speed = Point()
        self.max_vel = 0.0
        self.accel = 0.0

        self.v_rot = Point()
        self.max_v_rot = Point()
        self.accel_rot = Point()

        self._parent: SceneObject | None = None
        self._children: list[SceneObject] = []

    # Position

    @property
    def position(self) -> Point:
        """The local position."""
        return self._position

    @position.setter
    def position(self, value: Point) -> None:
        self.set_position(value)

    def world_position(self) -> Point:
        """The position in world coordinates."""
        if self._parent is None:
            return Point(*self._position)
        parent = self._parent
        return parent.world_rotation().transform_point(self._position) + parent.world_position()

    def set_position(self, x: float | Point, y: float | None = None, z: float | None = None) -> None:
        """Set the local position from a Point or from three coordinates."""
        if isinstance(x, Point):
            self._position = Point(*x)
        else:
            if y is None or z is None:
                raise TypeError("set_position needs a Point or three coordinates")
            self._position = Point(float(x), float(y), float(z))
        self.update_transform()

    def move(self, dx: float, dy: float, dz: float) -> None:
        """Shift the local position."""
        self._position = self._position + Point(dx, dy, dz)
        self.update_transform()

    # Rotation

    @property
    def rotation(self) -> Rotation:
        """The local rotation."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Rotation) -> None:
        self.set_rotation(value)

    def world_rotation(self) -> Rotation:
        """The rotation in world coordinates."""
        if self._parent is None:
            return self._rotation.copy()
        return self._parent.world_rotation().combine(self._rotation)

    def set_rotation(self, x: float | Rotation, y: float | None = None, z: float | None = None) -> None:
        """Set the local rotation from a Rotation or from three angles in radians."""
        if isinstance(x, Rotation):
            self._rotation = x.copy()
        else:
            if y is None or z is None:
                raise TypeError("set_rotation needs a Rotation or three angles")
            self._rotation.set_rotation(x, y, z)
        self.update_transform()

    def rotate(self, dx: float, dy: float, dz: float) -> None:
        """Add angles (radians) to the local rotation."""
        self._rotation.rotate(dx, dy, dz)
        self.update_transform()

    # Physics

    @property
    def speed_magnitude(self) -> float:
        return self.speed.magnitude()

    # Hierarchy

    @property
    def parent(self) -> SceneObject | None:
        return self._parent

    def children(self) -> Iterator[SceneObject]:
        """Iterate the direct children, most recently attached first."""
        return iter(list(self._children))

    def attach_to(self, parent: SceneObject | None) -> None:
        """Make ``parent`` this object's parent; ``None`` detaches it."""
        if self._parent is parent:
            return
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError("cannot attach an object to itself or its descendant")
            ancestor = ancestor._parent

        self.detach_from_parent()

        if parent is not None:
            self._parent = parent
            parent._children.insert(0, self)

        self.update_transform()

    def detach_from_parent(self) -> None:
        """Remove this object from its parent's children."""
        if self._parent is None:
            return
        siblings = self._parent._children
        if self in siblings:
            siblings.remove(self)
        self._parent = None
        self.update_transform()

    def detach_all_children(self) -> None:
        """Detach every direct child."""
        for child in list(self._children):
            child.detach_from_parent()

    # Transform

    def transform_matrix(self) -> np.ndarray:
        """The 4x4 model matrix: parent, then translation, rotation and scale."""
        matrix = self._parent.transform_matrix() if self._parent is not None else np.eye(4)
        return matrix @ _translation(self._position) @ self._rotation.matrix @ _scale(self.scaling)

    def update_transform(self) -> None:
        """Hook run whenever the local transform or the parent changes."""
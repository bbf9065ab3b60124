"""Renderable mesh items that move, rotate and carry a texture."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from . import logger
from .config import get_config
from .scene_object import SceneObject
from .texture import Texture
from .textures import get_texture_handler

# Each vertex holds 3 position floats followed by 2 texture coordinates.
VERTEX_STRIDE = 5


class Item(SceneObject):
    """A mesh of interleaved vertex data and triangle indices."""

    def __init__(self, name: str, vertices: Iterable[float], indices: Iterable[int]) -> None:
        super().__init__()
        self.vertices = np.array(list(vertices), dtype=np.float32)
        self.indices = np.array(list(indices), dtype=np.uint32)
        self.name = name
        logger.info(
            f"Item :: Creating item {name} with {len(self.vertices)} vertices "
            f"and {len(self.indices)} indices"
        )

        self.visible = True
        self.draw_wireframe = False
        self.draw_mode = "triangles"

        self.texture: Texture | None = None
        self.texture_name = ""

        self.radius = self._calculate_radius()

    def _calculate_radius(self) -> float:
        """Half the diagonal of the bounding box of the vertex positions."""
        if len(self.vertices) == 0:
            logger.warning("Item :: No vertices to calculate radius")
            return 0.0
        if len(self.vertices) < 3:
            raise ValueError("vertex data must hold at least one full position")

        count = len(self.vertices) // VERTEX_STRIDE
        rows = self.vertices[: count * VERTEX_STRIDE].reshape(-1, VERTEX_STRIDE)[:, :3]
        positions = np.vstack([self.vertices[:3], rows]).astype(float)
        low = positions.min(axis=0)
        high = positions.max(axis=0)
        size = high - low
        radius = math.sqrt(float(np.dot(size, size))) * 0.5

        logger.info(
            f"Item :: Bounds: ({low[0]:f}, {low[1]:f}, {low[2]:f}) to "
            f"({high[0]:f}, {high[1]:f}, {high[2]:f})"
        )
        logger.info(f"Item :: Calculated radius: {radius:f}")
        return radius

    def _release_texture(self) -> None:
        if self.texture is not None and self.texture_name:
            get_texture_handler().remove_reference(self.texture_name)

    def load_texture_from_file(self, texture_path: str) -> None:
        """Load a texture through the shared handler, dropping the old one.

        Raises ValueError for an empty path.
        """
        if not texture_path:
            raise ValueError("Item :: Invalid texture path")

        self._release_texture()
        self.texture = None
        self.texture_name = ""

        texture = get_texture_handler().create_texture_from_file(texture_path)
        if texture is not None:
            self.texture = texture
            self.texture_name = texture_path

    def set_texture(self, name: str, texture: Texture | None) -> None:
        """Use ``texture`` under ``name``, dropping the previous reference."""
        self._release_texture()
        self.texture = texture
        self.texture_name = name

    def set_wireframe(self, wireframe: bool) -> None:
        self.draw_wireframe = bool(wireframe)

    def step(self, dt: float) -> None:
        """Advance movement and rotation by ``dt`` milliseconds, children too."""
        frame_time = dt / get_config().get_float("graphics.time-per-frame")

        speed = self.speed
        if speed.x != 0 or speed.y != 0 or speed.z != 0:
            self.move(speed.x * frame_time, speed.y * frame_time, speed.z * frame_time)

        spin = self.v_rot
        if spin.x != 0 or spin.y != 0 or spin.z != 0:
            self.rotate(spin.x * frame_time, spin.y * frame_time, spin.z * frame_time)

        for child in self.children():
            if isinstance(child, Item):
                child.step(dt)

    def update_transform(self) -> None:
        """The model matrix is computed on demand; nothing to cache."""
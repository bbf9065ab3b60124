"""Ordered collection of scenes with one current scene."""

from __future__ import annotations

from dataclasses import dataclass

from . import logger
from .scene import Scene

MAX_SCENES = 32


@dataclass
class SceneInfo:
    """A scene together with the name it was registered under."""

    scene: Scene
    name: str


class SceneHandler:
    """Holds up to ``MAX_SCENES`` scenes and switches between them."""

    def __init__(self) -> None:
        self._collection: list[SceneInfo] = []
        self.current_scene_index = 0
        self.current_scene_name = ""
        self.current_scene: Scene | None = None

    @property
    def scene_count(self) -> int:
        return len(self._collection)

    def __len__(self) -> int:
        return len(self._collection)

    def _check_room(self) -> None:
        if len(self._collection) >= MAX_SCENES:
            raise OverflowError("Scenes :: Cannot add more scenes, maximum reached")

    def add_scene(self, scene: Scene, name: str) -> None:
        """Append a scene. Raises OverflowError when the collection is full."""
        self._check_room()
        logger.info(f"Scenes :: Add Scene: {name}")
        self._collection.append(SceneInfo(scene, name))

    def insert_scene(self, scene: Scene, name: str, index: int) -> None:
        """Insert a scene at ``index`` (0 to the current count).

        Raises OverflowError when full and IndexError for a bad index.
        """
        self._check_room()
        if index < 0 or index > len(self._collection):
            raise IndexError("Scenes :: Invalid index for scene insertion")
        self._collection.insert(index, SceneInfo(scene, name))

    def set_scene(self, index: int) -> None:
        """Make the scene at ``index`` current, deactivating the previous one.

        Raises IndexError for a bad index.
        """
        if index < 0 or index >= len(self._collection):
            raise IndexError("Scenes :: Invalid scene index")

        if self.current_scene is not None:
            self.current_scene.deactivate()

        info = self._collection[index]
        self.current_scene_index = index
        self.current_scene_name = info.name
        self.current_scene = info.scene
        self.current_scene.activate()

        logger.info(f"Scenes :: Set Scene: {info.name} ({index})")

    def advance(self) -> None:
        """Move to the next scene; does nothing at the last one."""
        if self.current_scene_index + 1 >= len(self._collection):
            return
        self.set_scene(self.current_scene_index + 1)

    def go_back(self) -> None:
        """Move to the previous scene; does nothing at the first one."""
        if self.current_scene_index == 0:
            return
        self.set_scene(self.current_scene_index - 1)
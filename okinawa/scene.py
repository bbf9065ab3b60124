"""Scenes: named collections of root items that step together."""

from __future__ import annotations

from typing import Iterator

from . import logger
from .item import Item


class Scene:
    """A named set of root items, updated only while active.

    Only items without a parent are held directly; children are reached
    through their parents.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._is_active = False
        self._is_playable = False
        self._is_current = False
        self._root_items: list[Item] = []
        logger.info(f"Scene :: Created scene: {name}")

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_playable(self) -> bool:
        return self._is_playable

    @property
    def is_current(self) -> bool:
        return self._is_current

    @property
    def item_count(self) -> int:
        return len(self._root_items)

    def __len__(self) -> int:
        return len(self._root_items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._root_items))

    def add_item(self, item: Item | None) -> None:
        """Add a root item; items that already have a parent are refused."""
        if item is None:
            return
        if item.parent is None:
            self._root_items.append(item)
        else:
            logger.warning("Scene :: Cannot add item with parent directly to scene")

    def step(self, dt: float) -> None:
        """Advance every root item (and so their children) if the scene is active."""
        if not self._is_active:
            return
        for item in self._root_items:
            item.step(dt)

    def activate(self) -> None:
        self._is_active = True
        self._is_current = True

    def deactivate(self) -> None:
        self._is_active = False
        self._is_current = False
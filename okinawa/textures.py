"""Shared, reference-counted store of textures keyed by name or path."""

from __future__ import annotations

from dataclasses import dataclass

from . import logger
from .texture import Texture


@dataclass
class _Entry:
    texture: Texture
    ref_count: int


class TextureHandler:
    """Keeps one texture per name and frees it when its last reference goes."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _reuse(self, name: str) -> Texture | None:
        entry = self._entries.get(name)
        if entry is None:
            return None
        entry.ref_count += 1
        return entry.texture

    def get_texture(self, name: str) -> Texture | None:
        """Return the stored texture, taking a reference, or None if unknown."""
        return self._reuse(name)

    def create_texture_from_file(self, path: str) -> Texture | None:
        """Return the texture for ``path``, loading it on first use.

        Returns None if the file cannot be loaded.
        """
        existing = self._reuse(path)
        if existing is not None:
            return existing

        texture = Texture.from_file(path)
        if not texture.loaded:
            return None

        self._entries[path] = _Entry(texture, 1)
        logger.info(f"TextureHandler :: Created texture '{path}' from file")
        return texture

    def create_texture_from_raw_data(
        self, name: str, data: bytes, width: int, height: int, channels: int
    ) -> Texture | None:
        """Return the texture called ``name``, building it from raw pixels on first use."""
        existing = self._reuse(name)
        if existing is not None:
            return existing

        texture = Texture.from_raw_data(data, width, height, channels)
        if not texture.loaded:
            return None

        self._entries[name] = _Entry(texture, 1)
        logger.info(
            f"TextureHandler :: Created texture '{name}' from raw data ({width}x{height})"
        )
        return texture

    def add_reference(self, name: str) -> None:
        """Take one more reference to a stored texture."""
        entry = self._entries.get(name)
        if entry is not None:
            entry.ref_count += 1

    def remove_reference(self, name: str) -> None:
        """Drop one reference; the texture is removed when none are left."""
        entry = self._entries.get(name)
        if entry is None:
            return
        entry.ref_count -= 1
        if entry.ref_count <= 0:
            logger.info(f"TextureHandler :: Removing texture: {name}")
            del self._entries[name]

    def cleanup(self) -> None:
        """Forget every stored texture."""
        self._entries.clear()


_instance: TextureHandler | None = None


def get_texture_handler() -> TextureHandler:
    """Return the shared texture handler, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = TextureHandler()
    return _instance
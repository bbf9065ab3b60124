"""Engine-wide typed configuration values."""

from __future__ import annotations

from . import logger


class Config:
    """Typed key/value settings, kept in separate stores per type."""

    def __init__(self) -> None:
        self._ints: dict[str, int] = {
            "window.width": 800,
            "window.height": 600,
            "fps": 60,
            "opengl.infolog.size": 512,
        }
        self._floats: dict[str, float] = {
            "graphics.time-per-frame": 1000.0 / 60.0,
        }
        self._bools: dict[str, bool] = {
            "graphics.wireframe": False,
            "graphics.textures": True,
        }

    def set_int(self, key: str, value: int) -> None:
        self._ints[key] = int(value)

    def set_float(self, key: str, value: float) -> None:
        self._floats[key] = float(value)

    def set_bool(self, key: str, value: bool) -> None:
        self._bools[key] = bool(value)

    def get_int(self, key: str) -> int:
        """Return the integer for ``key``, or 0 (logging an error) if unset."""
        try:
            return self._ints[key]
        except KeyError:
            logger.error(f"Config :: Failed to get int value for key: {key}")
            return 0

    def get_float(self, key: str) -> float:
        """Return the float for ``key``, or 0.0 (logging an error) if unset."""
        try:
            return self._floats[key]
        except KeyError:
            logger.error(f"Config :: Failed to get float value for key: {key}")
            return 0.0

    def get_bool(self, key: str) -> bool:
        """Return the boolean for ``key``, or False (logging an error) if unset."""
        try:
            return self._bools[key]
        except KeyError:
            logger.error(f"Config :: Failed to get bool value for key: {key}")
            return False


_instance: Config | None = None


def get_config() -> Config:
    """Return the shared configuration, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Config()
    return _instance
"""Image textures held as raw pixel rows, bottom row first."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from . import logger

_CHANNELS_BY_MODE = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


def _normalise_mode(image: Image.Image) -> Image.Image:
    if image.mode in _CHANNELS_BY_MODE:
        return image
    if image.mode in ("P", "PA"):
        has_alpha = image.mode == "PA" or "transparency" in image.info
        return image.convert("RGBA" if has_alpha else "RGB")
    bands = image.getbands()
    if "A" in bands:
        return image.convert("RGBA")
    if len(bands) == 1:
        return image.convert("L")
    return image.convert("RGB")


@dataclass
class Texture:
    """Pixel data with its size and channel count.

    ``loaded`` tells whether the texture holds usable pixel data.
    """

    width: int = 0
    height: int = 0
    channels: int = 0
    path: str = ""
    data: bytes | None = None
    loaded: bool = False

    @classmethod
    def from_file(cls, path: str) -> Texture:
        """Load an image, flipped so the bottom row comes first.

        On failure an error is logged and an unloaded texture is returned.
        """
        texture = cls(path=path)
        logger.info(f"Texture :: Loading texture: {path}")
        try:
            with Image.open(path) as opened:
                image = _normalise_mode(opened)
                image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
                data = image.tobytes()
                mode = image.mode
                width, height = image.size
        except (OSError, ValueError) as exc:
            logger.error(f"Texture :: Failed to load texture: {path} ({exc})")
            return texture

        texture.width = width
        texture.height = height
        texture.channels = _CHANNELS_BY_MODE[mode]
        texture.data = data
        texture.loaded = True
        return texture

    @classmethod
    def from_raw_data(cls, data: bytes, width: int, height: int, channels: int) -> Texture:
        """Create a loaded texture from raw pixel bytes."""
        return cls(
            width=int(width),
            height=int(height),
            channels=int(channels),
            data=bytes(data),
            loaded=True,
        )

    def create_from_raw_data(self, data: bytes, width: int, height: int, channels: int = 4) -> None:
        """Replace the pixel data.

        Raises ValueError for empty data or a non-positive size.
        """
        if not data or width <= 0 or height <= 0:
            raise ValueError("texture data must be non-empty with a positive size")
        self.width = int(width)
        self.height = int(height)
        self.channels = 4 if channels == 4 else 3
        self.data = bytes(data)
        self.loaded = True
import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from bannerpic.errors import DecodeError, InvalidImageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelBuffer:
    """An RGBA image as a read-only uint8 array of shape (height, width, 4)."""

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidImageError(f"Image has zero dimension: {self.width}x{self.height}")
        if self.data.shape != (self.height, self.width, 4):
            raise InvalidImageError(
                f"Pixel data shape {self.data.shape} does not match {self.width}x{self.height} RGBA"
            )
        if self.data.dtype != np.uint8:
            raise InvalidImageError(f"Pixel data must be uint8, got {self.data.dtype}")
        data = self.data.copy()
        data.setflags(write=False)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_array(cls, data: np.ndarray) -> "PixelBuffer":
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] != 4:
            raise InvalidImageError(f"Expected an (height, width, 4) array, got shape {data.shape}")
        return cls(width=data.shape[1], height=data.shape[0], data=data)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        if image.width == 0 or image.height == 0:
            raise InvalidImageError(f"Image has zero dimension: {image.width}x{image.height}")
        return cls.from_array(np.asarray(image.convert("RGBA"), dtype=np.uint8))

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Sequence[tuple[int, int, int, int]]) -> "PixelBuffer":
        """Build a buffer from a flat row-major sequence of (r, g, b, a) tuples."""
        if width <= 0 or height <= 0:
            raise InvalidImageError(f"Image has zero dimension: {width}x{height}")
        if len(pixels) != width * height:
            raise InvalidImageError(f"Expected {width * height} pixels for {width}x{height}, got {len(pixels)}")
        arr = np.array(pixels, dtype=np.int64).reshape(height, width, 4)
        if arr.min() < 0 or arr.max() > 255:
            raise InvalidImageError("Pixel channels must be in 0-255")
        return cls(width=width, height=height, data=arr.astype(np.uint8))

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self.data[y, x])
        return r, g, b, a


def decode(source: bytes | str | Path | Image.Image) -> PixelBuffer:
    """Decode encoded image bytes, a file path, or a PIL image into a PixelBuffer."""
    if isinstance(source, Image.Image):
        return PixelBuffer.from_image(source)
    try:
        if isinstance(source, (bytes, bytearray, memoryview)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(source)
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Cannot decode image: {exc}") from exc
    except OSError as exc:
        raise DecodeError(f"Cannot read image: {exc}") from exc
    logger.debug("Decoded %s image %dx%d", image.format, image.width, image.height)
    return PixelBuffer.from_image(image)

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from bannerpic.errors import InvalidImageError
from bannerpic.options import RenderOptions
from bannerpic.pixels import PixelBuffer
from bannerpic.sampling import resample, target_height

# Rec. 601 luma weights in thousandths, so equal channels give an exact grey
LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)


@dataclass(frozen=True)
class CharacterGrid:
    """Rows of equal-length strings produced by :func:`quantize`."""

    rows: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def to_text(self) -> str:
        """Rows joined by newlines, with no newline after the last row."""
        return "\n".join(self.rows)


def luminance(data: np.ndarray) -> np.ndarray:
    """Luma of an (..., 4) RGBA uint8 array as float64."""
    return (data[..., :3].astype(np.int64) @ LUMA_WEIGHTS) / 1000.0


def tone(gray: np.ndarray, options: RenderOptions) -> np.ndarray:
    """Apply contrast around mid-grey, brightness, clamping and inversion."""
    gray = (gray - 128.0) * options.contrast + 128.0
    gray = gray + options.brightness
    gray = np.clip(gray, 0.0, 255.0)
    if options.inverted:
        gray = 255.0 - gray
    return gray


def ramp_indices(gray: np.ndarray, ramp_length: int) -> np.ndarray:
    """Bucket 0-255 grey values into ``ramp_length`` ramp positions.

    Grey 0 lands on ramp[0] (most ink) and grey 255 on the last glyph.
    """
    top = ramp_length - 1
    return np.clip(np.floor(gray / 255.0 * top), 0, top).astype(np.int64)


def quantize(image: PixelBuffer, options: RenderOptions) -> CharacterGrid:
    """Render ``image`` as a grid of ``options.target_width`` columns.

    Pure function: the image is box-resampled to one pixel per character
    cell, fully transparent cells become spaces, and every other cell is
    mapped through luma, contrast, brightness and the character ramp.
    """
    if image.width <= 0 or image.height <= 0:
        raise InvalidImageError(f"Image has zero dimension: {image.width}x{image.height}")

    cols = options.target_width
    rows = target_height(image.width, image.height, cols)
    cells = resample(image, cols, rows).data

    gray = tone(luminance(cells), options)
    glyphs = np.array(list(options.ramp))[ramp_indices(gray, len(options.ramp))]
    glyphs[cells[..., 3] == 0] = " "

    return CharacterGrid(rows=tuple("".join(row) for row in glyphs))

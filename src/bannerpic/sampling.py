import math

import numpy as np

from bannerpic.errors import InvalidConfigError, InvalidImageError
from bannerpic.options import FONT_ASPECT_RATIO
from bannerpic.pixels import PixelBuffer


def target_height(source_width: int, source_height: int, width: int) -> int:
    """Number of character rows for ``width`` columns, corrected for cell aspect."""
    if source_width <= 0 or source_height <= 0:
        raise InvalidImageError(f"Image has zero dimension: {source_width}x{source_height}")
    if width <= 0:
        raise InvalidConfigError(f"Target width must be positive, got {width}")
    return max(1, math.floor(width * (source_height / source_width) * FONT_ASPECT_RATIO))


def _box_edges(source: int, target: int) -> tuple[np.ndarray, np.ndarray]:
    """Start/end source indices of each output bin, at least one sample wide."""
    idx = np.arange(target, dtype=np.int64)
    starts = idx * source // target
    ends = np.maximum((idx + 1) * source // target, starts + 1)
    return starts, ends


def resample(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Box-filter ``buffer`` to exactly ``width`` x ``height`` pixels.

    Colour is the alpha-weighted mean of the source pixels in the box, so
    fully transparent pixels add no colour; a box with no coverage at all
    falls back to the plain mean. Colour rounds half up. Alpha is the mean
    rounded up, so a box stays transparent only if every pixel in it is.
    When enlarging, every box holds a single source pixel, which makes this
    a nearest-neighbour upscale.
    """
    if width <= 0 or height <= 0:
        raise InvalidConfigError(f"Resample target must be positive, got {width}x{height}")
    if (width, height) == (buffer.width, buffer.height):
        return buffer

    pixels = buffer.data.astype(np.int64)
    alpha = pixels[..., 3:]
    # channels: premultiplied RGB, plain RGB, alpha
    planes = np.concatenate([pixels[..., :3] * alpha, pixels[..., :3], alpha], axis=2)

    # Summed-area table with a zero row/column in front: (H+1, W+1, 7)
    table = np.zeros((buffer.height + 1, buffer.width + 1, 7), dtype=np.int64)
    table[1:, 1:] = planes.cumsum(axis=0).cumsum(axis=1)

    r0, r1 = _box_edges(buffer.height, height)
    c0, c1 = _box_edges(buffer.width, width)
    r0, r1 = r0[:, None], r1[:, None]
    c0, c1 = c0[None, :], c1[None, :]

    sums = table[r1, c1] - table[r0, c1] - table[r1, c0] + table[r0, c0]
    counts = ((r1 - r0) * (c1 - c0))[:, :, None]
    weighted, plain, coverage = sums[..., :3], sums[..., 3:6], sums[..., 6:]

    covered = np.maximum(coverage, 1)
    rgb = np.where(coverage > 0, (2 * weighted + covered) // (2 * covered), (2 * plain + counts) // (2 * counts))
    a = -(-coverage // counts)
    means = np.concatenate([rgb, a], axis=2)
    return PixelBuffer(width=width, height=height, data=means.astype(np.uint8))

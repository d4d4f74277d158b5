import numpy as np
import pytest

from bannerpic.pixels import PixelBuffer


def flat_image(width: int, height: int, rgba: tuple[int, int, int, int]) -> PixelBuffer:
    """A buffer filled with a single RGBA colour."""
    data = np.empty((height, width, 4), dtype=np.uint8)
    data[:, :] = rgba
    return PixelBuffer.from_array(data)


def gray_strip(values: list[int]) -> PixelBuffer:
    """One opaque row of grey pixels, one per value."""
    return PixelBuffer.from_pixels(len(values), 1, [(v, v, v, 255) for v in values])


@pytest.fixture
def make_flat():
    return flat_image


@pytest.fixture
def make_strip():
    return gray_strip


@pytest.fixture
def random_image():
    rng = np.random.default_rng(42)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8))

import logging
from pathlib import Path

from PIL import Image

from bannerpic.options import RenderOptions
from bannerpic.pixels import PixelBuffer, decode
from bannerpic.quantizer import quantize

logger = logging.getLogger(__name__)


def image_to_ascii(
    image: PixelBuffer | Image.Image | bytes | str | Path,
    options: RenderOptions | None = None,
    **overrides,
) -> str:
    """Convert an image to character art text.

    ``overrides`` are RenderOptions fields applied on top of ``options``,
    e.g. ``image_to_ascii(path, target_width=60, inverted=True)``.
    """
    if options is None:
        options = RenderOptions(**overrides)
    elif overrides:
        options = options.replace(**overrides)

    if not isinstance(image, PixelBuffer):
        image = decode(image)

    grid = quantize(image, options)
    logger.debug("Rendered %dx%d image as %dx%d characters", image.width, image.height, grid.width, grid.height)
    return grid.to_text()

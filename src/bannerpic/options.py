import dataclasses
import math
import numbers
from dataclasses import dataclass

from bannerpic.charsets import resolve_ramp
from bannerpic.errors import InvalidConfigError

# A monospace cell is roughly 0.55 times as wide as it is tall
FONT_ASPECT_RATIO = 0.55


@dataclass(frozen=True)
class RenderOptions:
    """Tunable parameters for turning an image into character art.

    ``ramp`` may be a preset name from :mod:`bannerpic.charsets` or a literal
    string of at least two characters ordered dark to light. Preset names are
    resolved on construction, so ``options.ramp`` is always the literal ramp.
    """

    target_width: int = 80
    contrast: float = 1.2
    brightness: float = 0
    inverted: bool = False
    ramp: str = "standard"

    def __post_init__(self):
        if isinstance(self.target_width, bool) or not isinstance(self.target_width, numbers.Integral):
            raise InvalidConfigError(f"target_width must be an integer, got {self.target_width!r}")
        if self.target_width <= 0:
            raise InvalidConfigError(f"target_width must be positive, got {self.target_width}")
        _check_finite("contrast", self.contrast)
        if self.contrast < 0:
            raise InvalidConfigError(f"contrast must not be negative, got {self.contrast}")
        _check_finite("brightness", self.brightness)
        object.__setattr__(self, "ramp", resolve_ramp(self.ramp))

    def replace(self, **changes) -> "RenderOptions":
        return dataclasses.replace(self, **changes)


def _check_finite(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfigError(f"{name} must be finite, got {value}")

import logging
import threading

import pyfiglet

from bannerpic.errors import FontError, InvalidConfigError

logger = logging.getLogger(__name__)

# Display name -> pyfiglet font id for the fonts offered by default
FIGLET_FONTS = {
    "Standard": "standard",
    "ANSI Shadow": "ansi_shadow",
    "3D Diagonal": "3d_diagonal",
    "Big": "big",
    "Slant": "slant",
    "Doom": "doom",
    "Graffiti": "graffiti",
    "Electronic": "electronic",
    "Cyberlarge": "cyberlarge",
    "Banner3": "banner3",
    "Block": "block",
    "Bubble": "bubble",
    "Ivrit": "ivrit",
    "Lean": "lean",
    "Mini": "mini",
    "Script": "script",
    "Shadow": "shadow",
    "Small": "small",
    "Speed": "speed",
    "Star Wars": "starwars",
    "Stop": "stop",
}

_BY_LOWER_NAME = {name.lower(): font_id for name, font_id in FIGLET_FONTS.items()}

DEFAULT_WIDTH = 90


def font_id(name: str) -> str:
    """Map a display name ("ANSI Shadow") or font id ("ansi_shadow") to a font id."""
    key = name.strip().lower()
    if not key:
        raise FontError("Font name is empty")
    return _BY_LOWER_NAME.get(key, key.replace(" ", "_"))


class FontRegistry:
    """Process-wide store of parsed FIGlet fonts.

    A font is parsed the first time it is requested for a given output width
    and kept for the life of the registry. Nothing is ever evicted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._figlets: dict[tuple[str, int], pyfiglet.Figlet] = {}

    def get(self, name: str, width: int = DEFAULT_WIDTH) -> pyfiglet.Figlet:
        key = (font_id(name), width)
        with self._lock:
            figlet = self._figlets.get(key)
            if figlet is None:
                figlet = self._load(*key)
                self._figlets[key] = figlet
        return figlet

    def loaded(self) -> list[tuple[str, int]]:
        with self._lock:
            return sorted(self._figlets)

    def clear(self) -> None:
        with self._lock:
            self._figlets.clear()

    @staticmethod
    def _load(font: str, width: int) -> pyfiglet.Figlet:
        logger.debug("Loading FIGlet font %s (width %d)", font, width)
        try:
            return pyfiglet.Figlet(font=font, width=width)
        except pyfiglet.FontNotFound as exc:
            raise FontError(f"Unknown font: {font}") from exc
        except pyfiglet.FontError as exc:
            raise FontError(f"Cannot parse font {font}: {exc}") from exc


REGISTRY = FontRegistry()


def render_text(
    text: str,
    font: str = "standard",
    width: int = DEFAULT_WIDTH,
    registry: FontRegistry | None = None,
) -> str:
    """Render ``text`` as block letters, without trailing blank lines or spaces."""
    if not text.strip():
        return ""
    if width <= 0:
        raise InvalidConfigError(f"Render width must be positive, got {width}")
    figlet = (registry or REGISTRY).get(font, width)
    art = figlet.renderText(text)
    lines = [line.rstrip() for line in art.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)

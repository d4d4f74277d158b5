from bannerpic.errors import InvalidConfigError

# All ramps run dark to light: index 0 carries the most ink.
STANDARD = "@%#*+=-:. "

SIMPLE = "#. "

# Block elements: full, dark, medium and light shade
BLOCK = "█▓▒░ "

COMPLEX = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

PRESETS = {
    "standard": STANDARD,
    "simple": SIMPLE,
    "block": BLOCK,
    "complex": COMPLEX,
}


def resolve_ramp(ramp: str) -> str:
    """Return the literal ramp for a preset name, or ``ramp`` itself."""
    if not isinstance(ramp, str):
        raise InvalidConfigError(f"Character ramp must be a string, got {type(ramp).__name__}")
    preset = PRESETS.get(ramp.lower())
    if preset is not None:
        return preset
    if len(ramp) < 2:
        raise InvalidConfigError(f"Character ramp needs at least 2 characters, got {ramp!r}")
    return ramp

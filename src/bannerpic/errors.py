class BannerError(Exception):
    """Base class for everything bannerpic raises on purpose."""


class InvalidImageError(BannerError):
    """The source image is malformed or has a zero dimension."""


class InvalidConfigError(BannerError):
    """A render option is outside its domain."""


class DecodeError(BannerError):
    """The image bytes could not be decoded."""


class FontError(BannerError):
    """A FIGlet font could not be found or parsed."""

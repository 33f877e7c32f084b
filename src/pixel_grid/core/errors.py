"""Exception types raised by the grid engine."""


class PixelGridError(Exception):
    """Base class for all pixel-grid errors."""


class InvalidDimension(PixelGridError, ValueError):
    """A grid size or export scale is outside the supported range."""


class OutOfBounds(PixelGridError, IndexError):
    """A cell index falls outside the current grid."""


class InvalidImage(PixelGridError, ValueError):
    """A source image has no area (zero width or height)."""


class DecodeError(PixelGridError):
    """The image decoder could not read the source image."""

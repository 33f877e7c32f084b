"""Core data structures for the pixel grid."""

from pixel_grid.core.color import Color, EMPTY
from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.config import EditorConfig
from pixel_grid.core.errors import (
    PixelGridError,
    InvalidDimension,
    OutOfBounds,
    InvalidImage,
    DecodeError,
)

__all__ = [
    "Color",
    "EMPTY",
    "PixelBuffer",
    "EditorConfig",
    "PixelGridError",
    "InvalidDimension",
    "OutOfBounds",
    "InvalidImage",
    "DecodeError",
]

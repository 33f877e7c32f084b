"""
pixel-grid: grid state engine for pixel-art editors

Paint, erase, import and export fixed-size pixel grids with linear
undo/redo.

Quick Start:
    >>> import pixel_grid as pg
    >>> editor = pg.PixelEditor(16)
    >>> editor.color = "#ff0000"
    >>> editor.pointer_down(3, 4)
    >>> editor.pointer_up()
    True
    >>> editor.palette_hex
    ['#ff0000']
    >>> path = editor.save_png("pixel-art.png")

Features:
    - PixelBuffer grid model with bounds-checked cell access
    - Snapshot history: one undo step per stroke, import or clear
    - Image import with aspect-preserving scale-and-center sampling
    - Scaled RGBA/PNG export with transparent empty cells
    - Palette of colors in use, canonicalized to hex
"""

__version__ = "0.1.0"

# Core types
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

# Engine
from pixel_grid.edit.history import HistoryManager
from pixel_grid.edit.palette import PaletteTracker
from pixel_grid.edit.gesture import GestureController, Tool
from pixel_grid.edit.editor import PixelEditor

# Import / export
from pixel_grid.import_image import rasterize, decode_image, image_to_buffer, RgbaSamples
from pixel_grid.render.bitmap import Bitmap, export_bitmap
from pixel_grid.render.png import save_png

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "EMPTY",
    "PixelBuffer",
    "EditorConfig",
    # Errors
    "PixelGridError",
    "InvalidDimension",
    "OutOfBounds",
    "InvalidImage",
    "DecodeError",
    # Engine
    "HistoryManager",
    "PaletteTracker",
    "GestureController",
    "Tool",
    "PixelEditor",
    # Import / export
    "rasterize",
    "decode_image",
    "image_to_buffer",
    "RgbaSamples",
    "Bitmap",
    "export_bitmap",
    "save_png",
]

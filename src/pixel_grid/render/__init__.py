"""Renderers for exporting and previewing pixel buffers."""

from pixel_grid.render.bitmap import Bitmap, export_bitmap
from pixel_grid.render.png import encode_png, save_png
from pixel_grid.render.terminal import TerminalRenderer

__all__ = ["Bitmap", "export_bitmap", "encode_png", "save_png", "TerminalRenderer"]

"""Edit module - history, gestures, palette and the editor engine."""

from pixel_grid.edit.history import HistoryManager
from pixel_grid.edit.palette import PaletteTracker, used_colors
from pixel_grid.edit.gesture import GestureController, Tool
from pixel_grid.edit.editor import PixelEditor, ImportTicket

__all__ = [
    "HistoryManager",
    "PaletteTracker",
    "used_colors",
    "GestureController",
    "Tool",
    "PixelEditor",
    "ImportTicket",
]

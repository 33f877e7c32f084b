"""PixelEditor - the grid editing engine.

PixelEditor owns the live buffer, its history, the palette and the
gesture state machine. UI layers call into it with grid coordinates and
render from ``editor.buffer``; they never keep their own copy of the grid.

Example:
    editor = PixelEditor(16)
    editor.color = "#ff0000"
    editor.pointer_down(0, 0)
    editor.pointer_move(0, 1)
    editor.pointer_up()          # one undo step for the whole stroke
    editor.undo()
    editor.save_png("pixel-art.png")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color
from pixel_grid.core.config import EditorConfig
from pixel_grid.core.errors import InvalidDimension
from pixel_grid.edit.gesture import GestureController, Tool
from pixel_grid.edit.history import HistoryManager
from pixel_grid.edit.palette import PaletteTracker
from pixel_grid.import_image import ImageInput, SourceImage, decode_image, rasterize
from pixel_grid.render.bitmap import Bitmap, export_bitmap
from pixel_grid.render import png


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportTicket:
    """Grid size captured when an import was started."""
    grid_size: int


class PixelEditor:
    """Single editing engine for one square grid."""

    def __init__(self, size: Optional[int] = None, config: Optional[EditorConfig] = None):
        """
        Initialize an editor with a blank grid.

        Args:
            size: Cells per side (defaults to ``config.default_size``)
            config: Editor settings (defaults to EditorConfig())

        Raises:
            InvalidDimension: If size is outside the configured range
        """
        self.config = config or EditorConfig()
        size = self.config.default_size if size is None else size
        self._check_size(size)

        self._size = size
        self._buffer = PixelBuffer.create(size, size)
        self._history = HistoryManager(self._buffer, limit=self.config.history_limit)
        self._palette = PaletteTracker(self._buffer)
        self._gesture = GestureController(lambda: self._buffer, self._commit)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def grid_size(self) -> int:
        return self._size

    @property
    def buffer(self) -> PixelBuffer:
        """The live buffer. Treat as read-only; edit through the editor."""
        return self._buffer

    def snapshot(self) -> PixelBuffer:
        """A copy of the live buffer that callers may mutate freely."""
        return self._buffer.clone()

    @property
    def history(self) -> HistoryManager:
        return self._history

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def palette(self) -> tuple[Color, ...]:
        """Distinct colors in use, in first-occurrence order."""
        return self._palette.colors

    @property
    def palette_hex(self) -> list[str]:
        return self._palette.hex_codes

    @property
    def tool(self) -> Tool:
        return self._gesture.tool

    @tool.setter
    def tool(self, value: Tool | str) -> None:
        self._gesture.tool = Tool(value)

    @property
    def color(self) -> Color:
        return self._gesture.color

    @color.setter
    def color(self, value: Color | str | tuple[int, ...]) -> None:
        self._gesture.color = Color.coerce(value)

    @property
    def is_drawing(self) -> bool:
        return self._gesture.is_drawing

    # -------------------------------------------------------------------------
    # Grid size
    # -------------------------------------------------------------------------

    def _check_size(self, size: int) -> None:
        if not self.config.accepts_size(size):
            raise InvalidDimension(
                f"Grid size must be {self.config.min_size}-{self.config.max_size}, got {size}"
            )

    def set_grid_size(self, size: int) -> None:
        """
        Switch to a blank ``size x size`` grid, discarding all history.

        Setting the current size again does nothing.

        Raises:
            InvalidDimension: If size is outside the configured range
        """
        self._check_size(size)
        if size == self._size:
            return
        self._gesture.cancel()
        self._size = size
        self._replace(PixelBuffer.create(size, size))
        self._history.reset(self._buffer)
        logger.debug("Grid resized to %dx%d", size, size)

    # -------------------------------------------------------------------------
    # Drawing gestures
    # -------------------------------------------------------------------------

    def pointer_down(self, row: int, col: int) -> None:
        """Start a stroke on a cell."""
        self._gesture.press(row, col)

    def pointer_move(self, row: int, col: int) -> None:
        """Extend the current stroke to a cell."""
        self._gesture.move(row, col)

    def pointer_up(self) -> bool:
        """End the stroke; returns True if it was committed."""
        return self._gesture.release()

    def pointer_leave(self) -> bool:
        """Pointer left the grid; ends the stroke like pointer_up."""
        return self._gesture.leave()

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def _commit(self, buffer: PixelBuffer) -> None:
        self._history.commit(buffer)
        self._palette.update(buffer)

    def _replace(self, buffer: PixelBuffer) -> None:
        self._buffer = buffer
        self._palette.update(buffer)

    def _finish_gesture(self) -> None:
        # Wholesale replacements must not swallow a stroke in progress
        self._gesture.release()

    def undo(self) -> bool:
        """Step back one history entry. Returns False at the oldest entry."""
        self._finish_gesture()
        previous = self._history.undo()
        if previous is None:
            return False
        self._replace(previous)
        return True

    def redo(self) -> bool:
        """Step forward one history entry. Returns False at the newest entry."""
        self._finish_gesture()
        following = self._history.redo()
        if following is None:
            return False
        self._replace(following)
        return True

    def clear(self) -> None:
        """Blank the grid as a single undoable step."""
        self._finish_gesture()
        self._buffer = PixelBuffer.create(self._size, self._size)
        self._commit(self._buffer)

    # -------------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------------

    def begin_import(self) -> ImportTicket:
        """Capture the current grid size for an import that completes later."""
        return ImportTicket(grid_size=self._size)

    def complete_import(self, ticket: ImportTicket, source: SourceImage) -> Optional[PixelBuffer]:
        """
        Rasterize ``source`` at the ticket's grid size and commit it.

        If the grid size changed since ``begin_import``, the result is
        discarded and the editor is left untouched.

        Returns:
            The imported buffer, or None if it was discarded

        Raises:
            InvalidImage: If the source has no area (editor untouched)
        """
        if ticket.grid_size != self._size:
            logger.info(
                "Discarding %dx%d import; grid is now %dx%d",
                ticket.grid_size, ticket.grid_size, self._size, self._size,
            )
            return None
        return self._apply_import(rasterize(source, ticket.grid_size))

    def _apply_import(self, imported: PixelBuffer) -> PixelBuffer:
        self._finish_gesture()
        self._buffer = imported
        self._commit(self._buffer)
        return imported.clone()

    def import_image(self, source: SourceImage) -> PixelBuffer:
        """Rasterize and commit ``source`` at the current grid size."""
        return self._apply_import(rasterize(source, self._size))

    def import_file(self, source: ImageInput) -> PixelBuffer:
        """
        Decode an image file and import it.

        Raises:
            DecodeError: If the file cannot be decoded (editor untouched)
            InvalidImage: If the image has no area (editor untouched)
        """
        return self.import_image(decode_image(source))

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export(self, scale: Optional[int] = None) -> Bitmap:
        """Export the live buffer as a scaled RGBA bitmap."""
        return export_bitmap(self._buffer, self._scale(scale))

    def save_png(self, path: str | Path, scale: Optional[int] = None) -> Path:
        """Export the live buffer to a PNG file."""
        return png.save_png(self._buffer, path, self._scale(scale))

    def _scale(self, scale: Optional[int]) -> int:
        return self.config.export_scale if scale is None else scale

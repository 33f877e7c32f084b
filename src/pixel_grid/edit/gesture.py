"""GestureController - turns pointer strokes into single undo steps.

A stroke edits the live buffer directly; only when the pointer is
released (or leaves the grid) is the buffer committed to history. That
makes a whole multi-cell drag one undo unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color, EMPTY


class Tool(Enum):
    """Active editing tool."""
    DRAW = "draw"
    ERASE = "erase"


@dataclass
class GestureState:
    """Transient state for the stroke in progress."""
    is_drawing: bool = False
    last_cell: Optional[tuple[int, int]] = None
    touched: set[tuple[int, int]] = field(default_factory=set)


class GestureController:
    """
    Idle -> Drawing -> Idle state machine over a live buffer.

    Args:
        get_buffer: Returns the live buffer to edit
        on_commit: Called with the live buffer when a stroke ends after
            touching at least one cell
    """

    def __init__(
        self,
        get_buffer: Callable[[], PixelBuffer],
        on_commit: Callable[[PixelBuffer], None],
        tool: Tool = Tool.DRAW,
        color: Color = Color.BLACK,
    ):
        self._get_buffer = get_buffer
        self._on_commit = on_commit
        self.tool = tool
        self.color = color
        self._state = GestureState()

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color | str | tuple[int, ...]) -> None:
        self._color = Color.coerce(value)

    @property
    def is_drawing(self) -> bool:
        return self._state.is_drawing

    @property
    def touched_count(self) -> int:
        """Number of distinct cells edited in the current stroke."""
        return len(self._state.touched)

    def _paint_value(self) -> Color:
        return self.color if self.tool is Tool.DRAW else EMPTY

    def _apply(self, row: int, col: int) -> None:
        # Bounds are checked by PixelBuffer.set before any state changes
        self._get_buffer().set(row, col, self._paint_value())
        self._state.touched.add((row, col))
        self._state.last_cell = (row, col)

    def press(self, row: int, col: int) -> None:
        """Pointer down over a cell: start a stroke and edit that cell."""
        if self._state.is_drawing:
            # A second press without a release closes the previous stroke
            self._get_buffer().get(row, col)
            self.release()
        self._apply(row, col)
        self._state.is_drawing = True

    def move(self, row: int, col: int) -> None:
        """Pointer entered a cell. Ignored unless a stroke is in progress."""
        if not self._state.is_drawing:
            return
        if self._state.last_cell == (row, col):
            return
        self._apply(row, col)

    def release(self) -> bool:
        """
        Pointer up: end the stroke.

        Returns:
            True if the stroke was committed to history
        """
        if not self._state.is_drawing:
            return False
        touched = bool(self._state.touched)
        self._state = GestureState()
        if touched:
            self._on_commit(self._get_buffer())
        return touched

    def leave(self) -> bool:
        """Pointer left the grid: same as a release."""
        return self.release()

    def cancel(self) -> None:
        """Drop the stroke without committing."""
        self._state = GestureState()

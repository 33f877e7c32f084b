"""PixelBuffer - 2D grid of cell colors."""

from __future__ import annotations

from typing import Iterator, Sequence

from pixel_grid.core.color import Color, EMPTY
from pixel_grid.core.errors import InvalidDimension, OutOfBounds


def _check_color(color: object) -> None:
    if not isinstance(color, Color):
        raise TypeError(f"Cells hold Color values, got {type(color).__name__}")


class PixelBuffer:
    """
    A ``rows x cols`` grid of Colors, stored row-major.

    Every row has the same length and every cell holds a Color
    (``EMPTY`` when unset). Colors are immutable, so copying the row
    lists is enough to give a clone no shared mutable state.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int):
        """
        Initialize a blank buffer.

        Args:
            rows: Number of rows (height in cells)
            cols: Number of columns (width in cells)

        Raises:
            InvalidDimension: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: list[list[Color]] = [[EMPTY] * cols for _ in range(rows)]

    @classmethod
    def create(cls, rows: int, cols: int) -> PixelBuffer:
        """Create a buffer with every cell set to EMPTY."""
        return cls(rows, cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> PixelBuffer:
        """
        Build a buffer from nested rows of Colors.

        Raises:
            InvalidDimension: If the grid is empty or the rows are ragged
        """
        if not rows or not rows[0]:
            raise InvalidDimension("Cannot build a buffer from an empty grid")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimension(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
            for color in row:
                _check_color(color)
        buffer = cls(len(rows), width)
        buffer._cells = [list(row) for row in rows]
        return buffer

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)"""
        return (self._rows, self._cols)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfBounds(
                f"Cell ({row}, {col}) out of bounds ({self._rows}x{self._cols})"
            )

    def get(self, row: int, col: int) -> Color:
        """
        Get the color at a cell.

        Raises:
            OutOfBounds: If the cell is outside the grid
        """
        self._check_bounds(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, color: Color) -> None:
        """
        Set the color at a cell, in place.

        Raises:
            OutOfBounds: If the cell is outside the grid
            TypeError: If color is not a Color
        """
        self._check_bounds(row, col)
        _check_color(color)
        self._cells[row][col] = color

    def __getitem__(self, pos: tuple[int, int]) -> Color:
        """Get cell using indexing: buffer[row, col]."""
        row, col = pos
        return self.get(row, col)

    def __setitem__(self, pos: tuple[int, int], color: Color) -> None:
        """Set cell using indexing: buffer[row, col] = color."""
        row, col = pos
        self.set(row, col, color)

    def fill(self, color: Color) -> None:
        """Fill the whole grid with a single color."""
        _check_color(color)
        self._cells = [[color] * self._cols for _ in range(self._rows)]

    def clone(self) -> PixelBuffer:
        """Return a deep value copy of this buffer."""
        copy = PixelBuffer.__new__(PixelBuffer)
        copy._rows = self._rows
        copy._cols = self._cols
        copy._cells = [list(row) for row in self._cells]
        return copy

    def iter_rows(self) -> Iterator[tuple[Color, ...]]:
        """Iterate over rows as immutable tuples."""
        for row in self._cells:
            yield tuple(row)

    def cells(self) -> Iterator[tuple[int, int, Color]]:
        """Iterate over all cells as (row, col, color) tuples."""
        for r, row in enumerate(self._cells):
            for c, color in enumerate(row):
                yield r, c, color

    def is_blank(self) -> bool:
        """True if every cell is EMPTY."""
        return all(color.is_empty for row in self._cells for color in row)

    def to_lists(self) -> list[list[Color]]:
        """Return a nested-list copy of the grid."""
        return [list(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"PixelBuffer(rows={self._rows}, cols={self._cols})"

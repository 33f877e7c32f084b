"""PaletteTracker - the distinct colors currently painted on a buffer."""

from __future__ import annotations

from typing import Iterator

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color


def used_colors(buffer: PixelBuffer) -> list[Color]:
    """Distinct non-empty colors in row-major first-occurrence order."""
    seen: dict[Color, None] = {}
    for _, _, color in buffer.cells():
        if not color.is_empty:
            seen.setdefault(color, None)
    return list(seen)


class PaletteTracker:
    """
    Holds the palette derived from the most recent buffer.

    The palette is always rebuilt from a full scan; grids are at most
    100x100 so there is nothing to gain from tracking diffs.
    """

    def __init__(self, buffer: PixelBuffer | None = None):
        self._colors: tuple[Color, ...] = ()
        if buffer is not None:
            self.update(buffer)

    def update(self, buffer: PixelBuffer) -> list[Color]:
        """Rescan ``buffer`` and return the new palette."""
        colors = used_colors(buffer)
        self._colors = tuple(colors)
        return colors

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def hex_codes(self) -> list[str]:
        """Canonical ``#rrggbb`` / ``#rrggbbaa`` strings for display."""
        return [color.hex for color in self._colors]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __contains__(self, color: object) -> bool:
        return color in self._colors

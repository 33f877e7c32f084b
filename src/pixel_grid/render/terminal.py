"""Render a pixel buffer as true-color ANSI half blocks."""

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color, EMPTY
from pixel_grid.core.constants import CSI, LOWER_HALF, RESET, UPPER_HALF


class TerminalRenderer:
    """
    Render a PixelBuffer for terminal display.

    Each terminal line shows two grid rows: the top cell as the
    foreground of ``▀`` and the bottom cell as its background. EMPTY
    cells use the terminal's default background. Alpha is ignored for
    non-empty cells since terminals cannot blend.

    Optimizes output by only emitting SGR codes when colors change.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, buffer: PixelBuffer) -> str:
        """Render buffer to ANSI string."""
        rows = list(buffer.iter_rows())
        lines: list[str] = []

        for top_y in range(0, len(rows), 2):
            top_row = rows[top_y]
            bottom_row = rows[top_y + 1] if top_y + 1 < len(rows) else (EMPTY,) * buffer.cols

            line_parts: list[str] = []
            last_fg: tuple[int, int, int] | None = None
            last_bg: tuple[int, int, int] | None = None
            last_bg_transparent = True

            for top, bottom in zip(top_row, bottom_row):
                char, fg, bg = _half_block(top, bottom)

                if fg is not None and fg != last_fg:
                    line_parts.append(f"{CSI}38;2;{fg[0]};{fg[1]};{fg[2]}m")
                    last_fg = fg

                if bg is None:
                    if not last_bg_transparent:
                        line_parts.append(f"{CSI}49m")
                        last_bg_transparent = True
                elif bg != last_bg or last_bg_transparent:
                    line_parts.append(f"{CSI}48;2;{bg[0]};{bg[1]};{bg[2]}m")
                    last_bg = bg
                    last_bg_transparent = False

                line_parts.append(char)

            # Reset at end of each line to prevent color bleeding
            line_parts.append(RESET)
            lines.append("".join(line_parts))

        result = "\n".join(lines)
        if self.reset_at_end:
            result += RESET
        return result


def _half_block(
    top: Color, bottom: Color
) -> tuple[str, tuple[int, int, int] | None, tuple[int, int, int] | None]:
    """Pick (char, fg, bg) for a pair of vertically stacked cells."""
    if top.is_empty and bottom.is_empty:
        return " ", None, None
    if top.is_empty:
        return LOWER_HALF, bottom.rgb, None
    if bottom.is_empty:
        return UPPER_HALF, top.rgb, None
    return UPPER_HALF, top.rgb, bottom.rgb

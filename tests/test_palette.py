"""Tests for PaletteTracker."""

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color, EMPTY
from pixel_grid.edit.palette import PaletteTracker, used_colors

from conftest import RED, GREEN, BLUE


class TestPaletteTracker:
    """Tests for PaletteTracker."""

    def test_blank_buffer(self, blank_4x4: PixelBuffer) -> None:
        tracker = PaletteTracker(blank_4x4)
        assert tracker.colors == ()
        assert len(tracker) == 0

    def test_single_color(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(0, 0, RED)
        tracker = PaletteTracker()
        tracker.update(blank_4x4)
        assert tracker.colors == (RED,)
        assert tracker.hex_codes == ["#ff0000"]

    def test_duplicates_collapse(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(0, 0, RED)
        blank_4x4.set(3, 3, Color.parse("rgba(255, 0, 0, 1)"))
        assert PaletteTracker(blank_4x4).hex_codes == ["#ff0000"]

    def test_first_occurrence_order(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(2, 0, RED)
        blank_4x4.set(0, 3, BLUE)
        blank_4x4.set(1, 1, GREEN)
        blank_4x4.set(3, 3, BLUE)
        assert used_colors(blank_4x4) == [BLUE, GREEN, RED]

    def test_translucent_is_distinct(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(0, 0, RED)
        blank_4x4.set(0, 1, Color(255, 0, 0, 128))
        assert PaletteTracker(blank_4x4).hex_codes == ["#ff0000", "#ff000080"]

    def test_update_replaces(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(0, 0, RED)
        tracker = PaletteTracker(blank_4x4)
        blank_4x4.set(0, 0, EMPTY)
        tracker.update(blank_4x4)
        assert RED not in tracker
        assert list(tracker) == []

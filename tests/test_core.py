"""Tests for core data structures."""

import pytest

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color, EMPTY
from pixel_grid.core.config import EditorConfig
from pixel_grid.core.errors import InvalidDimension, OutOfBounds, PixelGridError

from conftest import RED, BLUE


class TestColor:
    """Tests for Color."""

    def test_zero_alpha_is_empty(self) -> None:
        assert Color(12, 34, 56, 0) == EMPTY
        assert Color(12, 34, 56, 0).is_empty
        assert not RED.is_empty

    def test_alpha_fraction(self) -> None:
        assert RED.alpha == 1.0
        assert Color(0, 0, 0, 51).alpha == pytest.approx(0.2)

    def test_hex_opaque(self) -> None:
        assert RED.hex == "#ff0000"
        assert Color(1, 2, 3).hex == "#010203"

    def test_hex_translucent(self) -> None:
        assert Color(255, 0, 0, 128).hex == "#ff000080"

    def test_hex_empty(self) -> None:
        assert EMPTY.hex == "transparent"

    def test_css(self) -> None:
        assert RED.css == "rgba(255, 0, 0, 1)"
        assert EMPTY.css == "transparent"

    def test_out_of_range_channel(self) -> None:
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_parse_forms_agree(self) -> None:
        black = Color(0, 0, 0)
        assert Color.parse("rgba(0, 0, 0, 1)") == black
        assert Color.parse("#000000") == black
        assert Color.parse("#000") == black
        assert Color.parse("000000") == black
        assert Color.parse("black") == black
        assert Color.parse("rgb(0,0,0)") == black
        assert Color.parse("0, 0, 0") == black

    def test_parse_alpha(self) -> None:
        assert Color.parse("#ff000080") == Color(255, 0, 0, 128)
        assert Color.parse("rgba(255, 0, 0, 0.5)") == Color(255, 0, 0, 128)
        assert Color.parse("rgba(255, 0, 0, 0)") == EMPTY

    def test_css_alpha_rounds_half_up(self) -> None:
        # 0.3 * 255 == 76.5
        assert Color.parse("rgba(0, 0, 0, 0.3)").a == 77
        assert Color.parse("rgba(0, 0, 0, 0.3)").hex == "#0000004d"
        assert Color.from_css_alpha(0, 0, 0, 0.5).a == 128

    def test_parse_transparent(self) -> None:
        assert Color.parse("transparent") is EMPTY

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("not-a-color")
        with pytest.raises(ValueError):
            Color.parse("rgba(0, 0, 0, 2)")

    def test_coerce(self) -> None:
        assert Color.coerce(RED) is RED
        assert Color.coerce("#0000ff") == BLUE
        assert Color.coerce((0, 0, 255)) == BLUE
        assert Color.coerce((0, 0, 255, 0)) == EMPTY

    def test_hashable(self) -> None:
        assert len({Color(1, 1, 1), Color.parse("#010101")}) == 1


class TestPixelBuffer:
    """Tests for PixelBuffer."""

    def test_create_all_empty(self) -> None:
        buffer = PixelBuffer.create(3, 5)
        assert buffer.shape == (3, 5)
        assert buffer.is_blank()
        assert all(color == EMPTY for _, _, color in buffer.cells())

    @pytest.mark.parametrize("rows,cols", [(0, 4), (4, 0), (-1, 4)])
    def test_create_invalid(self, rows: int, cols: int) -> None:
        with pytest.raises(InvalidDimension):
            PixelBuffer.create(rows, cols)

    def test_set_and_get(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(1, 2, RED)
        assert blank_4x4.get(1, 2) == RED
        assert blank_4x4[1, 2] == RED
        assert not blank_4x4.is_blank()

    def test_indexing_assignment(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4[3, 0] = BLUE
        assert blank_4x4.get(3, 0) == BLUE

    def test_out_of_bounds(self, blank_4x4: PixelBuffer) -> None:
        with pytest.raises(OutOfBounds):
            blank_4x4.set(4, 0, RED)
        with pytest.raises(OutOfBounds):
            blank_4x4.set(0, -1, RED)
        with pytest.raises(OutOfBounds):
            blank_4x4.get(0, 4)

    def test_out_of_bounds_is_index_error(self, blank_4x4: PixelBuffer) -> None:
        with pytest.raises(IndexError):
            blank_4x4.get(10, 10)

    def test_rectangular(self) -> None:
        buffer = PixelBuffer.create(2, 6)
        buffer.set(1, 5, RED)
        assert buffer.get(1, 5) == RED
        with pytest.raises(OutOfBounds):
            buffer.set(2, 0, RED)

    def test_clone_is_independent(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.set(0, 0, RED)
        copy = blank_4x4.clone()
        assert copy == blank_4x4
        copy.set(0, 0, BLUE)
        assert blank_4x4.get(0, 0) == RED
        blank_4x4.set(1, 1, BLUE)
        assert copy.get(1, 1) == EMPTY

    def test_from_rows(self) -> None:
        buffer = PixelBuffer.from_rows([[RED, EMPTY, BLUE]])
        assert buffer.shape == (1, 3)
        assert buffer.get(0, 2) == BLUE

    def test_from_rows_ragged(self) -> None:
        with pytest.raises(InvalidDimension):
            PixelBuffer.from_rows([[RED, RED], [RED]])
        with pytest.raises(InvalidDimension):
            PixelBuffer.from_rows([])

    def test_rejects_non_color(self, blank_4x4: PixelBuffer) -> None:
        with pytest.raises(TypeError):
            blank_4x4.set(0, 0, "#ff0000")
        with pytest.raises(TypeError):
            blank_4x4[1, 1] = (255, 0, 0)
        with pytest.raises(TypeError):
            blank_4x4.fill(None)
        with pytest.raises(TypeError):
            PixelBuffer.from_rows([[RED, "red"]])
        assert blank_4x4.is_blank()

    def test_fill(self, blank_4x4: PixelBuffer) -> None:
        blank_4x4.fill(RED)
        assert all(color == RED for _, _, color in blank_4x4.cells())

    def test_equality(self) -> None:
        assert PixelBuffer.create(2, 2) == PixelBuffer.create(2, 2)
        assert PixelBuffer.create(2, 2) != PixelBuffer.create(2, 3)


class TestEditorConfig:
    """Tests for EditorConfig."""

    def test_defaults(self) -> None:
        config = EditorConfig()
        assert (config.min_size, config.max_size) == (8, 100)
        assert config.default_size == 16
        assert config.export_scale == 20
        assert config.history_limit is None

    def test_accepts_size(self) -> None:
        config = EditorConfig()
        assert config.accepts_size(8)
        assert config.accepts_size(100)
        assert not config.accepts_size(7)
        assert not config.accepts_size(101)

    def test_from_env(self) -> None:
        config = EditorConfig.from_env({
            "PIXEL_GRID_MAX_SIZE": "64",
            "PIXEL_GRID_HISTORY_LIMIT": "50",
            "UNRELATED": "x",
        })
        assert config.max_size == 64
        assert config.history_limit == 50
        assert config.min_size == 8

    def test_from_env_empty(self) -> None:
        assert EditorConfig.from_env({}) == EditorConfig()

    def test_from_env_not_integer(self) -> None:
        with pytest.raises(ValueError, match="PIXEL_GRID_EXPORT_SCALE"):
            EditorConfig.from_env({"PIXEL_GRID_EXPORT_SCALE": "big"})

    def test_invalid_range(self) -> None:
        with pytest.raises(ValueError):
            EditorConfig(min_size=50, max_size=10)
        with pytest.raises(ValueError):
            EditorConfig(default_size=200)


class TestErrors:
    """Error hierarchy."""

    def test_common_base(self) -> None:
        assert issubclass(InvalidDimension, PixelGridError)
        assert issubclass(OutOfBounds, PixelGridError)
        assert issubclass(InvalidDimension, ValueError)

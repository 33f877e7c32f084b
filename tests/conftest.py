"""Shared fixtures for pixel-grid tests."""

import io
from pathlib import Path

import pytest
from PIL import Image

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color, EMPTY
from pixel_grid.edit.editor import PixelEditor


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def solid_image(width: int, height: int, rgba: tuple[int, int, int, int] = (255, 0, 0, 255)) -> Image.Image:
    """Create a single-color RGBA Pillow image."""
    return Image.new("RGBA", (width, height), rgba)


def gradient_image(width: int, height: int) -> Image.Image:
    """Create an image where every pixel has a distinct color: (x, y, 0, 255)."""
    img = Image.new("RGBA", (width, height))
    for y in range(height):
        for x in range(width):
            img.putpixel((x, y), (x, y, 0, 255))
    return img


def png_bytes(img: Image.Image) -> bytes:
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def blank_4x4() -> PixelBuffer:
    return PixelBuffer.create(4, 4)


@pytest.fixture
def editor() -> PixelEditor:
    """A 16x16 editor drawing in opaque red."""
    ed = PixelEditor(16)
    ed.color = RED
    return ed


@pytest.fixture
def red_png(tmp_path: Path) -> Path:
    """A 4x4 opaque red PNG on disk."""
    path = tmp_path / "red.png"
    solid_image(4, 4).save(path)
    return path


@pytest.fixture
def sample_export_buffer() -> PixelBuffer:
    """2x2 buffer: [[red, EMPTY], [blue, green]]."""
    return PixelBuffer.from_rows([[RED, EMPTY], [BLUE, GREEN]])

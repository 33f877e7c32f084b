"""Convert source images into pixel grids.

The image is scaled uniformly to fit inside the grid, centered, and
point-sampled once per cell. Cells outside the scaled footprint, and
cells that land on fully transparent source pixels, stay EMPTY.

Example:
    from pixel_grid.import_image import image_to_buffer

    buffer = image_to_buffer("logo.png", 32)
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol, Sequence, Union

from PIL import Image, UnidentifiedImageError

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.color import Color
from pixel_grid.core.errors import DecodeError, InvalidDimension, InvalidImage


logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, bytes, BinaryIO]


class SourceImage(Protocol):
    """A decoded image that can be sampled per pixel."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get_rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (r, g, b, a) with 0-255 channels."""
        ...


@dataclass(frozen=True)
class RgbaSamples:
    """
    In-memory RGBA image.

    ``data`` is row-major, four bytes per pixel.
    """
    width: int
    height: int
    data: Sequence[int]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidImage(f"Negative image size {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise InvalidImage(
                f"Expected {expected} RGBA bytes for {self.width}x{self.height}, "
                f"got {len(self.data)}"
            )

    @classmethod
    def from_pixels(cls, rows: Sequence[Sequence[tuple[int, int, int, int]]]) -> RgbaSamples:
        """Build from nested rows of (r, g, b, a) tuples."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        data: list[int] = []
        for row in rows:
            if len(row) != width:
                raise InvalidImage("Ragged pixel rows")
            for pixel in row:
                data.extend(pixel)
        return cls(width, height, data)

    def get_rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        i = (y * self.width + x) * 4
        return (self.data[i], self.data[i + 1], self.data[i + 2], self.data[i + 3])


class PilSourceImage:
    """SourceImage adapter over a Pillow image."""

    def __init__(self, image: Image.Image):
        self._image = image if image.mode == "RGBA" else image.convert("RGBA")
        self._pixels = self._image.load()

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def get_rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        return self._pixels[x, y]


def decode_image(source: ImageInput) -> PilSourceImage:
    """
    Decode an image file with Pillow.

    Args:
        source: Path, raw file bytes, or a binary file object

    Raises:
        DecodeError: If the data cannot be read as an image
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    try:
        with Image.open(source) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
        logger.warning("Could not decode image %s: %s", _describe(source), exc)
        raise DecodeError(f"Cannot decode image: {exc}") from exc
    return PilSourceImage(rgba)


def _describe(source: ImageInput) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return f"<{type(source).__name__}>"


def rasterize(source: SourceImage, rows: int, cols: int | None = None) -> PixelBuffer:
    """
    Rasterize a source image into a new buffer.

    The scale factor ``s = min(cols / W, rows / H)`` fits the image inside
    the grid without distortion; the scaled image is centered. Each cell
    samples the source pixel under its center. A footprint less than one
    cell thick is widened to one cell so thin images are not lost.

    Args:
        source: Decoded image to sample
        rows: Grid height in cells
        cols: Grid width in cells (defaults to ``rows``)

    Returns:
        New PixelBuffer of size rows x cols

    Raises:
        InvalidImage: If the source has zero width or height
        InvalidDimension: If the target size is not positive
    """
    if cols is None:
        cols = rows
    if rows <= 0 or cols <= 0:
        raise InvalidDimension(f"Grid dimensions must be positive, got {rows}x{cols}")

    src_w, src_h = source.width, source.height
    if src_w <= 0 or src_h <= 0:
        raise InvalidImage(f"Source image has no area ({src_w}x{src_h})")

    scale = min(cols / src_w, rows / src_h)
    # A footprint thinner than one cell still covers one row or column
    footprint_w = max(src_w * scale, 1.0)
    footprint_h = max(src_h * scale, 1.0)
    scale_x = footprint_w / src_w
    scale_y = footprint_h / src_h
    off_x = (cols - footprint_w) / 2
    off_y = (rows - footprint_h) / 2

    buffer = PixelBuffer(rows, cols)

    for y in range(rows):
        cy = y + 0.5
        if not off_y <= cy < off_y + footprint_h:
            continue
        sy = min(src_h - 1, math.floor((cy - off_y) / scale_y))

        for x in range(cols):
            cx = x + 0.5
            if not off_x <= cx < off_x + footprint_w:
                continue
            sx = min(src_w - 1, math.floor((cx - off_x) / scale_x))

            r, g, b, a = source.get_rgba(sx, sy)[:4]
            # Color normalizes a == 0 to EMPTY
            buffer.set(y, x, Color(r, g, b, a))

    logger.debug(
        "Rasterized %dx%d image into %dx%d grid (scale %.3f)",
        src_w, src_h, rows, cols, scale,
    )
    return buffer


def image_to_buffer(source: ImageInput, size: int) -> PixelBuffer:
    """Decode an image and rasterize it into a ``size x size`` grid."""
    return rasterize(decode_image(source), size)

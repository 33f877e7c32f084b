"""Export a buffer as a scaled-up RGBA bitmap."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.constants import BYTES_PER_PIXEL, DEFAULT_EXPORT_SCALE
from pixel_grid.core.errors import InvalidDimension, OutOfBounds


@dataclass(frozen=True)
class Bitmap:
    """
    Raw RGBA pixels, row-major.

    ``stride`` is the number of bytes per bitmap row.
    """
    width: int
    height: int
    stride: int
    data: bytes

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (r, g, b, a) at bitmap coordinate (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(f"Pixel ({x}, {y}) out of bounds ({self.width}x{self.height})")
        i = y * self.stride + x * BYTES_PER_PIXEL
        r, g, b, a = self.data[i:i + BYTES_PER_PIXEL]
        return (r, g, b, a)

    def to_image(self) -> Image.Image:
        """Wrap the bitmap in a Pillow RGBA image."""
        return Image.frombytes("RGBA", (self.width, self.height), self.data, "raw", "RGBA", self.stride)


def export_bitmap(buffer: PixelBuffer, scale: int = DEFAULT_EXPORT_SCALE) -> Bitmap:
    """
    Paint every cell as a solid ``scale x scale`` block.

    EMPTY cells are written as fully transparent pixels.

    Raises:
        InvalidDimension: If scale is less than 1
    """
    if scale < 1:
        raise InvalidDimension(f"Export scale must be >= 1, got {scale}")

    width = buffer.cols * scale
    height = buffer.rows * scale
    stride = width * BYTES_PER_PIXEL
    data = bytearray(stride * height)

    for r, row in enumerate(buffer.iter_rows()):
        # Build one scaled bitmap row, then repeat it scale times
        line = b"".join(bytes(color.rgba) * scale for color in row)
        start = r * scale * stride
        data[start:start + stride * scale] = line * scale

    return Bitmap(width=width, height=height, stride=stride, data=bytes(data))

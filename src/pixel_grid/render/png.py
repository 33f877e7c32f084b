"""Encode exported bitmaps as PNG files."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from pixel_grid.core.buffer import PixelBuffer
from pixel_grid.core.constants import DEFAULT_EXPORT_SCALE
from pixel_grid.render.bitmap import export_bitmap


logger = logging.getLogger(__name__)


def encode_png(buffer: PixelBuffer, scale: int = DEFAULT_EXPORT_SCALE) -> bytes:
    """Return the PNG bytes of a scaled export."""
    out = io.BytesIO()
    export_bitmap(buffer, scale).to_image().save(out, format="PNG")
    return out.getvalue()


def save_png(
    buffer: PixelBuffer,
    path: str | Path,
    scale: int = DEFAULT_EXPORT_SCALE,
) -> Path:
    """
    Write a scaled export to a PNG file.

    Returns:
        The path written
    """
    path = Path(path)
    bitmap = export_bitmap(buffer, scale)
    bitmap.to_image().save(path, format="PNG")
    logger.info("Saved %dx%d PNG to %s", bitmap.width, bitmap.height, path)
    return path

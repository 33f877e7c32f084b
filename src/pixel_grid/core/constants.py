"""Shared constants for the grid engine."""

# Supported grid sizes (cells per side)
MIN_GRID_SIZE = 8
MAX_GRID_SIZE = 100
DEFAULT_GRID_SIZE = 16

# Export upscaling factor (output pixels per cell)
DEFAULT_EXPORT_SCALE = 20
DEFAULT_EXPORT_NAME = "pixel-art.png"

# Bytes per exported pixel (RGBA)
BYTES_PER_PIXEL = 4

# Half-block characters for terminal previews
UPPER_HALF = "▀"  # FG = top cell, BG = bottom cell
LOWER_HALF = "▄"  # FG = bottom cell, BG = top cell

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Environment variables read by EditorConfig.from_env()
ENV_PREFIX = "PIXEL_GRID_"

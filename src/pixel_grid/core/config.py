"""Editor configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

from pixel_grid.core.constants import (
    DEFAULT_EXPORT_SCALE,
    DEFAULT_GRID_SIZE,
    ENV_PREFIX,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
)


@dataclass(frozen=True)
class EditorConfig:
    """
    Settings for a PixelEditor.

    Grid-size clamping for small viewports is left to the UI; the engine
    only rejects sizes outside ``[min_size, max_size]``.
    """
    min_size: int = MIN_GRID_SIZE
    max_size: int = MAX_GRID_SIZE
    default_size: int = DEFAULT_GRID_SIZE
    export_scale: int = DEFAULT_EXPORT_SCALE
    history_limit: Optional[int] = None  # None = unbounded

    def __post_init__(self) -> None:
        if not 1 <= self.min_size <= self.max_size:
            raise ValueError(
                f"Invalid size range: {self.min_size}-{self.max_size}"
            )
        if not self.min_size <= self.default_size <= self.max_size:
            raise ValueError(
                f"default_size {self.default_size} outside "
                f"{self.min_size}-{self.max_size}"
            )
        if self.export_scale < 1:
            raise ValueError(f"export_scale must be >= 1, got {self.export_scale}")
        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError(f"history_limit must be >= 1, got {self.history_limit}")

    def accepts_size(self, size: int) -> bool:
        return self.min_size <= size <= self.max_size

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorConfig:
        """
        Build a config, overriding defaults from the environment.

        Reads PIXEL_GRID_MIN_SIZE, PIXEL_GRID_MAX_SIZE, PIXEL_GRID_DEFAULT_SIZE,
        PIXEL_GRID_EXPORT_SCALE and PIXEL_GRID_HISTORY_LIMIT.

        Raises:
            ValueError: If a variable is not an integer or the result is invalid
        """
        if environ is None:
            environ = os.environ
        overrides: dict[str, int] = {}
        for f in fields(cls):
            raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None or not raw.strip():
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from None
        return replace(cls(), **overrides) if overrides else cls()

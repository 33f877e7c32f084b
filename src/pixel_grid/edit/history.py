"""HistoryManager - linear undo/redo over buffer snapshots.

The log holds deep copies of committed buffers and a cursor pointing at
the snapshot that matches what is displayed. Committing after an undo
prunes the redo branch, so history never forks.
"""

from __future__ import annotations

import logging
from typing import Optional

from pixel_grid.core.buffer import PixelBuffer


logger = logging.getLogger(__name__)


class HistoryManager:
    """Snapshot log with a movable cursor."""

    def __init__(self, initial: PixelBuffer, limit: Optional[int] = None):
        """
        Initialize history with a single entry.

        Args:
            initial: Buffer to store as the oldest state
            limit: Maximum number of entries kept (None = unbounded).
                The oldest entries are dropped once the log is full.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"History limit must be >= 1, got {limit}")
        self.limit = limit
        self._log: list[PixelBuffer] = []
        self._cursor = 0
        self.reset(initial)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._log) - 1

    def __len__(self) -> int:
        return len(self._log)

    def reset(self, initial: PixelBuffer) -> None:
        """Discard all history and start over from ``initial``."""
        self._log = [initial.clone()]
        self._cursor = 0
        logger.debug("History reset to %dx%d", initial.rows, initial.cols)

    def commit(self, buffer: PixelBuffer) -> None:
        """
        Append a snapshot of ``buffer``, pruning any redo branch.

        This is the only operation that grows the log.
        """
        pruned = len(self._log) - (self._cursor + 1)
        del self._log[self._cursor + 1:]
        self._log.append(buffer.clone())

        if self.limit is not None and len(self._log) > self.limit:
            del self._log[:len(self._log) - self.limit]

        self._cursor = len(self._log) - 1
        logger.debug(
            "Committed history entry %d (pruned %d redo entries)",
            self._cursor, pruned,
        )

    def undo(self) -> Optional[PixelBuffer]:
        """
        Step back one entry.

        Returns:
            A copy of the previous state, or None if already at the oldest
        """
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._log[self._cursor].clone()

    def redo(self) -> Optional[PixelBuffer]:
        """
        Step forward one entry.

        Returns:
            A copy of the next state, or None if already at the newest
        """
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._log[self._cursor].clone()

    def current(self) -> PixelBuffer:
        """Return a copy of the entry under the cursor."""
        return self._log[self._cursor].clone()

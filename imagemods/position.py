"""Row and column locations within an image."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A location given by row and column."""

    row: int = 0
    col: int = 0

    def offset(self, rows: int, cols: int) -> Position:
        """Return the position moved by the given rows and columns."""
        return Position(self.row + rows, self.col + cols)
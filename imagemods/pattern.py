"""Patterns of cells read from text files and stamped onto images."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Sequence

from .color import Color
from .constants import (
    ERROR_INVALID_PATTERN_DATA,
    ERROR_INVALID_PATTERN_DIMENSIONS,
    ERROR_UNABLE_TO_OPEN_PATTERN,
    MAX_IMAGE_DIM,
    MIN_IMAGE_DIM,
)
from .image import ColorImage
from .position import Position

_INTEGER_RE = re.compile(r"[+-]?\d+")
_LEADING_INT = re.compile(r"[+-]?\d")

_DRAWN_CELL = 1


class PatternError(Exception):
    """Raised when a pattern file cannot be read."""


def _to_int(text: str | None) -> int | None:
    if text is None or not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


class Pattern:
    """A grid of integers; cells equal to 1 are drawn, all others are skipped."""

    def __init__(self, cells: Iterable[Sequence[int]]) -> None:
        grid = tuple(tuple(int(value) for value in row) for row in cells)
        if not grid or not grid[0]:
            raise ValueError("a pattern needs at least one row and one column")
        if any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("pattern rows must all have the same length")
        self.cells = grid

    @property
    def num_rows(self) -> int:
        return len(self.cells)

    @property
    def num_cols(self) -> int:
        return len(self.cells[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Pattern(rows={self.num_rows}, cols={self.num_cols})"

    @classmethod
    def read(cls, path: str) -> Pattern:
        """Read a pattern file: row count, column count, then the cell values."""
        try:
            with open(path, "rb") as handle:
                text = handle.read().decode("latin-1")
        except OSError as exc:
            raise PatternError(f"{ERROR_UNABLE_TO_OPEN_PATTERN}{path}") from exc

        words: Iterator[str] = iter(text.split())
        dimensions = []
        for _ in range(2):
            value = _to_int(next(words, None))
            if value is None or not MIN_IMAGE_DIM <= value <= MAX_IMAGE_DIM:
                raise PatternError(f"{ERROR_INVALID_PATTERN_DIMENSIONS}{path}")
            dimensions.append(value)
        rows, cols = dimensions

        cells = []
        for _ in range(rows):
            row = []
            for _ in range(cols):
                value = _to_int(next(words, None))
                if value is None:
                    raise PatternError(f"{ERROR_INVALID_PATTERN_DATA}{path}")
                row.append(value)
            cells.append(row)

        extra = next(words, None)
        if extra is not None and _LEADING_INT.match(extra):
            raise PatternError(f"{ERROR_INVALID_PATTERN_DATA}{path}")
        return cls(cells)

    def draw(self, image: ColorImage, upper_left: Position, color: Color) -> None:
        """Paint each cell equal to 1 onto the image, skipping cells outside it."""
        for row_offset, row in enumerate(self.cells):
            for col_offset, value in enumerate(row):
                if value != _DRAWN_CELL:
                    continue
                target = upper_left.offset(row_offset, col_offset)
                if image.is_valid_location(target.row, target.col):
                    image.set_pixel(target.row, target.col, color)
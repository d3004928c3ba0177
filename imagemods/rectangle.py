"""Axis-aligned rectangles that can be drawn onto a color image."""

from __future__ import annotations

from dataclasses import dataclass, field

from .color import Color
from .image import ColorImage
from .position import Position


@dataclass(frozen=True)
class Rectangle:
    """An inclusive block of rows and columns, outlined or filled in one color.

    The bounds are normalized so that ``start_row <= end_row`` and
    ``start_col <= end_col``.
    """

    start_row: int = 0
    end_row: int = 0
    start_col: int = 0
    end_col: int = 0
    color: Color = field(default_factory=Color.black)
    fill: bool = False

    def __post_init__(self) -> None:
        if self.start_row > self.end_row:
            start, end = self.end_row, self.start_row
            object.__setattr__(self, "start_row", start)
            object.__setattr__(self, "end_row", end)
        if self.start_col > self.end_col:
            start, end = self.end_col, self.start_col
            object.__setattr__(self, "start_col", start)
            object.__setattr__(self, "end_col", end)

    @classmethod
    def from_corners(
        cls,
        upper_left: Position,
        lower_right: Position,
        color: Color,
        fill: bool,
    ) -> Rectangle:
        """Build a rectangle from two opposite corners."""
        return cls(
            start_row=upper_left.row,
            end_row=lower_right.row,
            start_col=upper_left.col,
            end_col=lower_right.col,
            color=color,
            fill=fill,
        )

    @classmethod
    def from_dimensions(
        cls,
        upper_left: Position,
        num_rows: int,
        num_cols: int,
        color: Color,
        fill: bool,
    ) -> Rectangle:
        """Build a rectangle from its upper left corner and its size."""
        lower_right = upper_left.offset(num_rows - 1, num_cols - 1)
        return cls.from_corners(upper_left, lower_right, color, fill)

    @classmethod
    def from_center(
        cls,
        center: Position,
        half_rows: int,
        half_cols: int,
        color: Color,
        fill: bool,
    ) -> Rectangle:
        """Build a rectangle extending the given amounts either side of a center."""
        return cls.from_corners(
            center.offset(-half_rows, -half_cols),
            center.offset(half_rows, half_cols),
            color,
            fill,
        )

    def _on_border(self, row: int, col: int) -> bool:
        return (
            row in (self.start_row, self.end_row)
            or col in (self.start_col, self.end_col)
        )

    def draw(self, image: ColorImage) -> None:
        """Paint the rectangle onto the image; parts outside it are skipped."""
        first_row = max(self.start_row, 0)
        last_row = min(self.end_row, image.height - 1)
        first_col = max(self.start_col, 0)
        last_col = min(self.end_col, image.width - 1)
        for row in range(first_row, last_row + 1):
            for col in range(first_col, last_col + 1):
                if not image.is_valid_location(row, col):
                    continue
                if self.fill or self._on_border(row, col):
                    image.set_pixel(row, col, self.color)
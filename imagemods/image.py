"""Color images held in memory and stored as ASCII PPM (P3) files."""

from __future__ import annotations

import re
from typing import Iterator

from .color import Color
from .constants import (
    ERROR_EXTRA_DATA,
    ERROR_INVALID_IMAGE_DIMENSIONS,
    ERROR_INVALID_PIXEL_DATA,
    ERROR_INVALID_PPM_MAGIC,
    ERROR_UNABLE_TO_CREATE_PPM,
    ERROR_UNABLE_TO_OPEN_PPM,
    MAX_COLOR_VALUE,
    MAX_IMAGE_DIM,
    MIN_COORDINATE,
    MIN_IMAGE_DIM,
    PPM_MAGIC_NUMBER,
)
from .position import Position

_INTEGER_RE = re.compile(r"[+-]?\d+")
_LEADING_INT = re.compile(r"[+-]?\d")


class PpmError(Exception):
    """Raised when a PPM file cannot be read or written."""


def _to_int(text: str | None) -> int | None:
    if text is None or not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


class ColorImage:
    """A rectangular grid of colors, all black when created."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        max_color_value: int = MAX_COLOR_VALUE,
    ) -> None:
        self.width = width
        self.height = height
        self.max_color_value = max_color_value
        if width < MIN_IMAGE_DIM or height < MIN_IMAGE_DIM:
            self._pixels: list[list[Color]] = []
        else:
            black = Color.black()
            self._pixels = [[black] * width for _ in range(height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorImage):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.max_color_value == other.max_color_value
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return (
            f"ColorImage(width={self.width}, height={self.height}, "
            f"max_color_value={self.max_color_value})"
        )

    def is_valid_location(self, row: int, col: int) -> bool:
        if not self._pixels:
            return False
        return MIN_COORDINATE <= row < self.height and MIN_COORDINATE <= col < self.width

    def get_pixel(self, row: int, col: int) -> Color:
        if not self.is_valid_location(row, col):
            raise IndexError(f"pixel location out of range: ({row}, {col})")
        return self._pixels[row][col]

    def set_pixel(self, row: int, col: int, color: Color) -> None:
        if not self.is_valid_location(row, col):
            raise IndexError(f"pixel location out of range: ({row}, {col})")
        self._pixels[row][col] = color

    def fill(self, color: Color) -> None:
        """Set every pixel to one color."""
        for row in self._pixels:
            row[:] = [color] * len(row)

    def copy(self) -> ColorImage:
        duplicate = ColorImage(0, 0, self.max_color_value)
        duplicate.width = self.width
        duplicate.height = self.height
        duplicate._pixels = [list(row) for row in self._pixels]
        return duplicate

    @classmethod
    def read_ppm(cls, path: str) -> ColorImage:
        """Read an ASCII P3 image; raise PpmError describing any problem."""
        try:
            with open(path, "rb") as handle:
                text = handle.read().decode("latin-1")
        except OSError as exc:
            raise PpmError(f"{ERROR_UNABLE_TO_OPEN_PPM}{path}") from exc

        words: Iterator[str] = iter(text.split())
        if next(words, None) != PPM_MAGIC_NUMBER:
            raise PpmError(f"{ERROR_INVALID_PPM_MAGIC}{path}")

        width, height, max_value = (_to_int(next(words, None)) for _ in range(3))
        if (
            width is None
            or height is None
            or max_value is None
            or not MIN_IMAGE_DIM <= width <= MAX_IMAGE_DIM
            or not MIN_IMAGE_DIM <= height <= MAX_IMAGE_DIM
            or max_value != MAX_COLOR_VALUE
        ):
            raise PpmError(f"{ERROR_INVALID_IMAGE_DIMENSIONS}{path}")

        image = cls(width, height, max_value)
        try:
            image._pixels = [
                [Color.from_tokens(words, max_value) for _ in range(width)]
                for _ in range(height)
            ]
        except ValueError as exc:
            raise PpmError(f"{ERROR_INVALID_PIXEL_DATA}{path}") from exc

        extra = next(words, None)
        if extra is not None and _LEADING_INT.match(extra):
            raise PpmError(f"{ERROR_EXTRA_DATA}{path}")
        return image

    def write_ppm(self, path: str) -> None:
        """Write the image as an ASCII P3 file; raise PpmError on failure."""
        lines = [PPM_MAGIC_NUMBER, f"{self.width} {self.height}", str(self.max_color_value)]
        lines.extend("".join(color.to_ppm() for color in row) for row in self._pixels)
        try:
            with open(path, "w", encoding="ascii", newline="\n") as handle:
                handle.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise PpmError(f"{ERROR_UNABLE_TO_CREATE_PPM}{path}") from exc

    def insert(self, source: ColorImage, upper_left: Position, transparency: Color) -> None:
        """Copy every non-transparent pixel of source onto this image.

        Pixels falling outside this image are skipped.
        """
        for src_row, row in enumerate(source._pixels):
            for src_col, color in enumerate(row):
                if color == transparency:
                    continue
                target = upper_left.offset(src_row, src_col)
                if self.is_valid_location(target.row, target.col):
                    self._pixels[target.row][target.col] = color
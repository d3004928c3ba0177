"""RGB colors with components clamped to the allowed range."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .constants import MAX_COLOR_VALUE, MIN_COLOR_VALUE

_INTEGER_RE = re.compile(r"[+-]?\d+")


def _clamp(value: int) -> int:
    return max(MIN_COLOR_VALUE, min(MAX_COLOR_VALUE, value))


def _to_int(text: str | None) -> int:
    if text is None or not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Color:
    """An immutable RGB color; out-of-range components are clamped."""

    red: int = MIN_COLOR_VALUE
    green: int = MIN_COLOR_VALUE
    blue: int = MIN_COLOR_VALUE

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _clamp(self.red))
        object.__setattr__(self, "green", _clamp(self.green))
        object.__setattr__(self, "blue", _clamp(self.blue))

    @classmethod
    def black(cls) -> Color:
        return cls(MIN_COLOR_VALUE, MIN_COLOR_VALUE, MIN_COLOR_VALUE)

    @classmethod
    def red(cls) -> Color:
        return cls(MAX_COLOR_VALUE, MIN_COLOR_VALUE, MIN_COLOR_VALUE)

    @classmethod
    def green(cls) -> Color:
        return cls(MIN_COLOR_VALUE, MAX_COLOR_VALUE, MIN_COLOR_VALUE)

    @classmethod
    def blue(cls) -> Color:
        return cls(MIN_COLOR_VALUE, MIN_COLOR_VALUE, MAX_COLOR_VALUE)

    @classmethod
    def white(cls) -> Color:
        return cls(MAX_COLOR_VALUE, MAX_COLOR_VALUE, MAX_COLOR_VALUE)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], max_color_value: int) -> Color:
        """Consume three integer words and build a color.

        Raises ValueError if one is missing, is not an integer, or lies
        outside ``0..max_color_value``.
        """
        it = iter(tokens)
        components = [_to_int(next(it, None)) for _ in range(3)]
        for value in components:
            if value < MIN_COLOR_VALUE or value > max_color_value:
                raise ValueError(f"color component out of range: {value}")
        return cls(*components)

    def to_ppm(self) -> str:
        """Return the components as written in a P3 pixel row."""
        return f"{self.red} {self.green} {self.blue} "
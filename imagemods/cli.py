"""Menu-driven command line for annotating and combining PPM images."""

from __future__ import annotations

import os
import re
import sys
from functools import partial
from typing import Callable, TextIO

from .color import Color
from .constants import (
    COLOR_CHOICE_BLACK,
    COLOR_CHOICE_BLUE,
    COLOR_CHOICE_GREEN,
    COLOR_CHOICE_RED,
    COLOR_CHOICE_WHITE,
    COLOR_NAME_BLACK,
    COLOR_NAME_BLUE,
    COLOR_NAME_GREEN,
    COLOR_NAME_RED,
    COLOR_NAME_WHITE,
    ERROR_INVALID_DATA,
    ERROR_INVALID_MENU_OPTION,
    ERROR_UNABLE_TO_OPEN_IMAGE,
    ERROR_UNABLE_TO_READ_INPUT,
    ERROR_UNABLE_TO_WRITE_FILE,
    EXIT_BAD_ARG,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS_CODE,
    FILL_OPTION_NO,
    FILL_OPTION_YES,
    MENU_CHOICE_EXIT,
    MENU_CHOICE_INSERT,
    MENU_CHOICE_OUTPUT,
    MENU_CHOICE_PATTERN,
    MENU_CHOICE_RECTANGLE,
    MENU_OPTION_EXIT,
    MENU_OPTION_INSERT,
    MENU_OPTION_OUTPUT,
    MENU_OPTION_PATTERN,
    MENU_OPTION_RECTANGLE,
    MSG_THANK_YOU,
    MSG_USAGE,
    PROMPT_HALF_NUMBER_OF_COLUMNS,
    PROMPT_HALF_NUMBER_OF_ROWS,
    PROMPT_INSERT_CORNER,
    PROMPT_INSERT_FILE,
    PROMPT_LOWER_RIGHT_CORNER,
    PROMPT_MAIN_MENU,
    PROMPT_NUMBER_OF_COLUMNS,
    PROMPT_NUMBER_OF_ROWS,
    PROMPT_OUTPUT_FILE,
    PROMPT_PATTERN_COLOR,
    PROMPT_PATTERN_CORNER,
    PROMPT_PATTERN_FILE,
    PROMPT_RECT_SPEC_METHOD,
    PROMPT_RECTANGLE_CENTER,
    PROMPT_RECTANGLE_COLOR,
    PROMPT_RECTANGLE_FILL,
    PROMPT_TRANSPARENCY_COLOR,
    PROMPT_UPPER_LEFT_CORNER,
    RECT_FILL_NO,
    RECT_FILL_YES,
    RECT_SPEC_CENTER_EXTENT,
    RECT_SPEC_METHOD_CENTER_EXTENT,
    RECT_SPEC_METHOD_UL_LR,
    RECT_SPEC_METHOD_UL_SIZE,
    RECT_SPEC_UL_LR,
    RECT_SPEC_UL_SIZE,
)
from .image import ColorImage, PpmError
from .pattern import Pattern, PatternError
from .position import Position
from .rectangle import Rectangle

_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\r\v\f"

_COLOR_CHOICES: dict[int, Callable[[], Color]] = {
    COLOR_CHOICE_RED: Color.red,
    COLOR_CHOICE_GREEN: Color.green,
    COLOR_CHOICE_BLUE: Color.blue,
    COLOR_CHOICE_BLACK: Color.black,
    COLOR_CHOICE_WHITE: Color.white,
}

_COLOR_MENU = (
    (COLOR_CHOICE_RED, COLOR_NAME_RED),
    (COLOR_CHOICE_GREEN, COLOR_NAME_GREEN),
    (COLOR_CHOICE_BLUE, COLOR_NAME_BLUE),
    (COLOR_CHOICE_BLACK, COLOR_NAME_BLACK),
    (COLOR_CHOICE_WHITE, COLOR_NAME_WHITE),
)

_MAIN_MENU = (
    (MENU_CHOICE_RECTANGLE, MENU_OPTION_RECTANGLE),
    (MENU_CHOICE_PATTERN, MENU_OPTION_PATTERN),
    (MENU_CHOICE_INSERT, MENU_OPTION_INSERT),
    (MENU_CHOICE_OUTPUT, MENU_OPTION_OUTPUT),
    (MENU_CHOICE_EXIT, MENU_OPTION_EXIT),
)

_RECTANGLE_MENU = (
    (RECT_SPEC_UL_LR, RECT_SPEC_METHOD_UL_LR),
    (RECT_SPEC_UL_SIZE, RECT_SPEC_METHOD_UL_SIZE),
    (RECT_SPEC_CENTER_EXTENT, RECT_SPEC_METHOD_CENTER_EXTENT),
)


def color_from_choice(choice: int) -> Color:
    """Return the color for a color-menu number; raise ValueError if unknown."""
    try:
        return _COLOR_CHOICES[choice]()
    except KeyError:
        raise ValueError(f"no color for menu choice {choice}") from None


class _InvalidInput(Exception):
    """Raised when the user enters something that cannot be used."""


class _Console:
    """Whitespace-separated token input with line-oriented error recovery."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._in = input_stream
        self._out = output_stream
        self._line = ""
        self._pos = 0
        self.eof = False

    def write(self, text: str) -> None:
        self._out.write(text)

    def say(self, text: str) -> None:
        self._out.write(text + "\n")

    def menu(self, entries) -> None:
        for number, text in entries:
            self.say(f"{number}. {text}")

    def _at_token(self) -> bool:
        while True:
            while self._pos < len(self._line) and self._line[self._pos] in _WHITESPACE:
                self._pos += 1
            if self._pos < len(self._line):
                return True
            self._out.flush()
            self._line = self._in.readline()
            self._pos = 0
            if not self._line:
                return False

    def _discard_line(self) -> None:
        self.eof = not self._line.endswith("\n")
        self._line = ""
        self._pos = 0

    def read_int(self) -> int | None:
        """Read an integer; on failure skip the rest of the line and return None."""
        if not self._at_token():
            self.eof = True
            return None
        match = _INT_PREFIX.match(self._line, self._pos)
        if match is None:
            self._discard_line()
            return None
        self._pos = match.end()
        value = int(match.group())
        if not _INT_MIN <= value <= _INT_MAX or self._pos == len(self._line):
            self._discard_line()
            return None
        self.eof = False
        return value

    def require_int(self) -> int:
        value = self.read_int()
        if value is None:
            raise _InvalidInput
        return value

    def read_token(self) -> str | None:
        """Read one whitespace-delimited word, or None at end of input."""
        if not self._at_token():
            self.eof = True
            return None
        end = self._pos
        while end < len(self._line) and self._line[end] not in _WHITESPACE:
            end += 1
        token = self._line[self._pos:end]
        self._pos = end
        self.eof = False
        return token


def _require_position(console: _Console) -> Position:
    row = console.require_int()
    col = console.require_int()
    return Position(row, col)


def _read_position(console: _Console, prompt: str) -> Position | None:
    """Prompt until a row and column are entered; None at end of input."""
    while True:
        console.write(prompt)
        row = console.read_int()
        if row is None:
            if console.eof:
                return None
            console.say(ERROR_INVALID_DATA)
            continue
        col = console.read_int()
        if col is None:
            if console.eof:
                return None
            console.say(ERROR_INVALID_DATA)
            continue
        return Position(row, col)


def _choose_color(console: _Console, prompt: str) -> Color:
    """Prompt until a valid color is chosen; red if input runs out."""
    while True:
        console.menu(_COLOR_MENU)
        console.write(prompt)
        choice = console.read_int()
        if choice is None:
            if console.eof:
                return Color.red()
            console.say(ERROR_INVALID_DATA)
            continue
        try:
            return color_from_choice(choice)
        except ValueError:
            console.say(ERROR_INVALID_MENU_OPTION)


def _require_fill(console: _Console) -> bool:
    console.menu(((RECT_FILL_NO, FILL_OPTION_NO), (RECT_FILL_YES, FILL_OPTION_YES)))
    console.write(PROMPT_RECTANGLE_FILL)
    return console.require_int() == RECT_FILL_YES


def _rectangle_option(console: _Console, image: ColorImage) -> None:
    console.menu(_RECTANGLE_MENU)
    console.write(PROMPT_RECT_SPEC_METHOD)
    try:
        method = console.require_int()
        if method not in (RECT_SPEC_UL_LR, RECT_SPEC_UL_SIZE, RECT_SPEC_CENTER_EXTENT):
            console.say(ERROR_INVALID_MENU_OPTION)
            return

        if method == RECT_SPEC_UL_LR:
            console.write(PROMPT_UPPER_LEFT_CORNER)
            upper_left = _require_position(console)
            console.write(PROMPT_LOWER_RIGHT_CORNER)
            lower_right = _require_position(console)
            build = partial(Rectangle.from_corners, upper_left, lower_right)
        elif method == RECT_SPEC_UL_SIZE:
            console.write(PROMPT_UPPER_LEFT_CORNER)
            upper_left = _require_position(console)
            console.write(PROMPT_NUMBER_OF_ROWS)
            num_rows = console.require_int()
            console.write(PROMPT_NUMBER_OF_COLUMNS)
            num_cols = console.require_int()
            build = partial(Rectangle.from_dimensions, upper_left, num_rows, num_cols)
        else:
            console.write(PROMPT_RECTANGLE_CENTER)
            center = _require_position(console)
            console.write(PROMPT_HALF_NUMBER_OF_ROWS)
            half_rows = console.require_int()
            console.write(PROMPT_HALF_NUMBER_OF_COLUMNS)
            half_cols = console.require_int()
            build = partial(Rectangle.from_center, center, half_rows, half_cols)

        color = _choose_color(console, PROMPT_RECTANGLE_COLOR)
        fill = _require_fill(console)
    except _InvalidInput:
        console.say(ERROR_INVALID_DATA)
        return

    build(color, fill).draw(image)


def _pattern_option(console: _Console, image: ColorImage) -> None:
    console.write(PROMPT_PATTERN_FILE)
    file_name = console.read_token()
    if file_name is None:
        console.say(ERROR_INVALID_DATA)
        return
    upper_left = _read_position(console, PROMPT_PATTERN_CORNER)
    if upper_left is None:
        return
    color = _choose_color(console, PROMPT_PATTERN_COLOR)
    try:
        pattern = Pattern.read(file_name)
    except PatternError as exc:
        console.say(str(exc))
        return
    pattern.draw(image, upper_left, color)


def _insert_option(console: _Console, image: ColorImage) -> None:
    console.write(PROMPT_INSERT_FILE)
    file_name = console.read_token()
    if file_name is None:
        console.say(ERROR_INVALID_DATA)
        return
    upper_left = _read_position(console, PROMPT_INSERT_CORNER)
    if upper_left is None:
        return
    transparency = _choose_color(console, PROMPT_TRANSPARENCY_COLOR)
    try:
        source = ColorImage.read_ppm(file_name)
    except PpmError as exc:
        console.say(str(exc))
        console.say(f"{ERROR_UNABLE_TO_OPEN_IMAGE}{file_name}")
        return
    image.insert(source, upper_left, transparency)


def _write_option(console: _Console, image: ColorImage) -> None:
    console.write(PROMPT_OUTPUT_FILE)
    file_name = console.read_token()
    if file_name is None:
        console.say(ERROR_INVALID_DATA)
        return
    try:
        image.write_ppm(file_name)
    except PpmError as exc:
        console.say(str(exc))
        console.say(f"{ERROR_UNABLE_TO_WRITE_FILE}{file_name}")


_HANDLERS = {
    MENU_CHOICE_RECTANGLE: _rectangle_option,
    MENU_CHOICE_PATTERN: _pattern_option,
    MENU_CHOICE_INSERT: _insert_option,
    MENU_CHOICE_OUTPUT: _write_option,
}


def run(image: ColorImage, input_stream: TextIO, output_stream: TextIO) -> None:
    """Run the main menu on image until the user exits or input runs out."""
    console = _Console(input_stream, output_stream)
    while True:
        console.menu(_MAIN_MENU)
        console.write(PROMPT_MAIN_MENU)
        choice = console.read_int()
        if choice is None:
            console.say(ERROR_INVALID_DATA)
            if console.eof:
                break
            continue
        handler = _HANDLERS.get(choice)
        if handler is not None:
            handler(console, image)
        elif choice == MENU_CHOICE_EXIT:
            console.say(MSG_THANK_YOU)
            break
        else:
            console.say(ERROR_INVALID_MENU_OPTION)
    output_stream.flush()


def main(argv: list[str] | None = None) -> int:
    """Load the image named on the command line and run the menu on it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "imagemods"
        print(f"{MSG_USAGE}{program} <input_ppm_file>")
        return EXIT_BAD_ARG

    input_path = args[0]
    try:
        image = ColorImage.read_ppm(input_path)
    except PpmError as exc:
        print(exc)
        print(f"{ERROR_UNABLE_TO_READ_INPUT}{input_path}")
        return EXIT_FILE_ERROR

    run(image, sys.stdin, sys.stdout)
    return EXIT_SUCCESS_CODE


if __name__ == "__main__":
    sys.exit(main())
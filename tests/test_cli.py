import io
import sys

import pytest

from imagemods.cli import color_from_choice, main, run
from imagemods.color import Color
from imagemods.constants import (
    ERROR_INVALID_DATA,
    ERROR_INVALID_MENU_OPTION,
    ERROR_UNABLE_TO_OPEN_IMAGE,
    ERROR_UNABLE_TO_OPEN_PATTERN,
    ERROR_UNABLE_TO_READ_INPUT,
    ERROR_UNABLE_TO_WRITE_FILE,
    EXIT_BAD_ARG,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS_CODE,
    MSG_THANK_YOU,
)
from imagemods.image import ColorImage
from imagemods.position import Position
from imagemods.rectangle import Rectangle


def _run(image, text):
    out = io.StringIO()
    run(image, io.StringIO(text), out)
    return out.getvalue()


@pytest.fixture
def image():
    return ColorImage(5, 5)


@pytest.mark.parametrize(
    "choice, expected",
    [
        (1, Color(255, 0, 0)),
        (2, Color(0, 255, 0)),
        (3, Color(0, 0, 255)),
        (4, Color(0, 0, 0)),
        (5, Color(255, 255, 255)),
    ],
)
def test_color_from_choice(choice, expected):
    assert color_from_choice(choice) == expected


@pytest.mark.parametrize("choice", [0, 6, -1])
def test_color_from_choice_rejects_unknown(choice):
    with pytest.raises(ValueError):
        color_from_choice(choice)


def test_exit_prints_thank_you_and_leaves_image(image):
    output = _run(image, "5\n")
    assert output.startswith("1. Annotate image with rectangle\n")
    assert output.endswith(MSG_THANK_YOU + "\n")
    assert image == ColorImage(5, 5)


def test_empty_input_stops_loop(image):
    output = _run(image, "")
    assert output.endswith(ERROR_INVALID_DATA + "\n")
    assert MSG_THANK_YOU not in output


def test_number_at_end_without_newline_is_rejected(image):
    output = _run(image, "5")
    assert ERROR_INVALID_DATA in output
    assert MSG_THANK_YOU not in output


def test_bad_menu_input_is_retried(image):
    output = _run(image, "abc\n9\n5\n")
    assert ERROR_INVALID_DATA in output
    assert ERROR_INVALID_MENU_OPTION in output
    assert output.endswith(MSG_THANK_YOU + "\n")


def test_rectangle_from_corners_filled(image):
    _run(image, "1\n1\n1 1\n3 3\n1\n2\n5\n")
    expected = ColorImage(5, 5)
    Rectangle.from_corners(Position(1, 1), Position(3, 3), Color.red(), True).draw(expected)
    assert image == expected
    assert image.get_pixel(2, 2) == Color.red()
    assert image.get_pixel(0, 0) == Color.black()


def test_rectangle_from_dimensions_outline(image):
    _run(image, "1\n2\n0 0\n4\n4\n3\n1\n5\n")
    expected = ColorImage(5, 5)
    Rectangle.from_dimensions(Position(0, 0), 4, 4, Color.blue(), False).draw(expected)
    assert image == expected
    assert image.get_pixel(1, 1) == Color.black()


def test_rectangle_from_center(image):
    _run(image, "1\n3\n2 2\n1\n1\n5\n2\n5\n")
    expected = ColorImage(5, 5)
    Rectangle.from_center(Position(2, 2), 1, 1, Color.white(), True).draw(expected)
    assert image == expected


def test_rectangle_invalid_method(image):
    output = _run(image, "1\n4\n5\n")
    assert ERROR_INVALID_MENU_OPTION in output
    assert image == ColorImage(5, 5)


def test_rectangle_bad_fill_input_draws_nothing(image):
    output = _run(image, "1\n1\n0 0\n2 2\n1\nx\n5\n")
    assert ERROR_INVALID_DATA in output
    assert image == ColorImage(5, 5)
    assert output.endswith(MSG_THANK_YOU + "\n")


def test_color_menu_retries_invalid_choice(image):
    output = _run(image, "1\n1\n0 0\n0 0\n7\n3\n2\n5\n")
    assert ERROR_INVALID_MENU_OPTION in output
    assert image.get_pixel(0, 0) == Color.blue()


def test_pattern_is_drawn(image, tmp_path):
    pattern_file = tmp_path / "pattern.txt"
    pattern_file.write_text("2 2\n1 0\n0 1\n")
    _run(image, f"2\n{pattern_file}\n0 0\n2\n5\n")
    assert image.get_pixel(0, 0) == Color.green()
    assert image.get_pixel(1, 1) == Color.green()
    assert image.get_pixel(0, 1) == Color.black()


def test_pattern_corner_retried_after_bad_input(image, tmp_path):
    pattern_file = tmp_path / "pattern.txt"
    pattern_file.write_text("1 1\n1\n")
    output = _run(image, f"2\n{pattern_file}\nx\n3 4\n1\n5\n")
    assert ERROR_INVALID_DATA in output
    assert image.get_pixel(3, 4) == Color.red()


def test_pattern_color_defaults_to_red_at_end_of_input(image, tmp_path):
    pattern_file = tmp_path / "pattern.txt"
    pattern_file.write_text("1 1\n1\n")
    _run(image, f"2\n{pattern_file}\n2 2\n")
    assert image.get_pixel(2, 2) == Color.red()


def test_missing_pattern_file(image, tmp_path):
    missing = tmp_path / "missing.txt"
    output = _run(image, f"2\n{missing}\n0 0\n1\n5\n")
    assert f"{ERROR_UNABLE_TO_OPEN_PATTERN}{missing}" in output
    assert image == ColorImage(5, 5)


def test_insert_skips_transparent_pixels(image, tmp_path):
    source = ColorImage(2, 2)
    source.set_pixel(0, 1, Color.red())
    source_file = tmp_path / "source.ppm"
    source.write_ppm(str(source_file))
    image.fill(Color.white())
    _run(image, f"3\n{source_file}\n1 1\n4\n5\n")
    assert image.get_pixel(1, 2) == Color.red()
    assert image.get_pixel(1, 1) == Color.white()
    assert image.get_pixel(2, 2) == Color.white()


def test_insert_missing_file(image, tmp_path):
    missing = tmp_path / "missing.ppm"
    output = _run(image, f"3\n{missing}\n0 0\n4\n5\n")
    assert f"{ERROR_UNABLE_TO_OPEN_IMAGE}{missing}" in output
    assert image == ColorImage(5, 5)


def test_write_round_trip(image, tmp_path):
    image.set_pixel(4, 0, Color(10, 20, 30))
    out_file = tmp_path / "out.ppm"
    _run(image, f"4\n{out_file}\n5\n")
    assert ColorImage.read_ppm(str(out_file)) == image


def test_write_failure_reported(image, tmp_path):
    out_file = tmp_path / "no_such_dir" / "out.ppm"
    output = _run(image, f"4\n{out_file}\n5\n")
    assert f"{ERROR_UNABLE_TO_WRITE_FILE}{out_file}" in output


def test_main_without_arguments(capsys):
    assert main([]) == EXIT_BAD_ARG
    assert "<input_ppm_file>" in capsys.readouterr().out


def test_main_with_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.ppm"
    assert main([str(missing)]) == EXIT_FILE_ERROR
    assert f"{ERROR_UNABLE_TO_READ_INPUT}{missing}" in capsys.readouterr().out


def test_main_runs_menu(tmp_path, capsys, monkeypatch):
    source_file = tmp_path / "in.ppm"
    ColorImage(3, 2).write_ppm(str(source_file))
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main([str(source_file)]) == EXIT_SUCCESS_CODE
    assert MSG_THANK_YOU in capsys.readouterr().out
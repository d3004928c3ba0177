# imagemods

A small console tool for annotating plain-text (P3) PPM images. Load an
image, then use a menu to:

1. draw a rectangle, outlined or filled, given by two corners, by a corner
   and a size, or by a center and half-extents;
2. stamp a pattern read from a file (cells holding `1` are painted);
3. insert another PPM image, skipping pixels of a chosen transparency color;
4. write the current image to a new PPM file;
5. exit.

Colors are chosen from a fixed menu: red, green, blue, black and white.
If input ends while a color is being chosen, red is used.

## Installing

```
pip install .
```

## Running

```
imagemods input.ppm
```

The program expects exactly one argument. It exits with status 2 when the
argument count is wrong and 3 when the input image cannot be read;
otherwise it runs the menu until you choose "Exit the program" or input
ends, and exits with status 0. Problems with files named at the menu
(a missing pattern, a malformed image to insert, an output file that cannot
be created) are reported and the menu carries on.

## Input formats

**Images** are ASCII PPM files: the magic number `P3`, then width and
height (each 1 to 2000), then a maximum color value of exactly 255,
followed by `width × height` RGB triples with every component from 0 to
255. A further number after the last pixel is an error.

**Patterns** are text files holding the number of rows, the number of
columns (each 1 to 2000), then that many integers, row by row. Cells equal
to `1` are drawn in the chosen color; any other value leaves the image
untouched. A further number after the last value is an error.

Anything drawn or inserted outside the image bounds is clipped.

## Using it as a library

```python
from imagemods.color import Color
from imagemods.image import ColorImage
from imagemods.pattern import Pattern
from imagemods.position import Position
from imagemods.rectangle import Rectangle

image = ColorImage.read_ppm("input.ppm")
Rectangle.from_center(Position(10, 10), 3, 5, Color.red(), True).draw(image)
Pattern.read("smiley.txt").draw(image, Position(0, 0), Color.blue())
image.insert(ColorImage.read_ppm("logo.ppm"), Position(20, 20), Color.white())
image.write_ppm("output.ppm")
```

- `imagemods.color.Color` is an immutable RGB value; components outside
  0–255 are clamped. `Color.black()`, `red()`, `green()`, `blue()` and
  `white()` give the menu colors.
- `imagemods.position.Position` is a row and column; `offset(rows, cols)`
  returns a moved copy.
- `imagemods.image.ColorImage(width, height)` starts all black.
  `get_pixel` and `set_pixel` raise `IndexError` outside the image;
  `is_valid_location`, `fill`, `copy` and `insert` do what their names say.
- `imagemods.rectangle.Rectangle` keeps its bounds ordered, so corners may
  be given in either order; `from_corners`, `from_dimensions` and
  `from_center` build one, and `draw` paints it.
- `imagemods.pattern.Pattern(cells)` takes rows of integers of equal length
  and raises `ValueError` otherwise.
- `imagemods.cli.run(image, input_stream, output_stream)` runs the menu on
  any pair of text streams, and `color_from_choice` maps a color-menu
  number to a `Color`.

Reading a malformed image raises `imagemods.image.PpmError`, and reading a
malformed pattern raises `imagemods.pattern.PatternError`; the message of
each names the problem and the file.

## Limits

Only ASCII P3 images with a maximum color value of 255 are read and
written; binary PPM and other image formats are not handled.

## Testing

```
pip install ".[test]"
pytest
```
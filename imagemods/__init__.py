"""Annotate ASCII PPM images with rectangles, patterns and inserted images."""

__version__ = "1.0.0"
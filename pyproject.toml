[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imagemods"
version = "1.0.0"
description = "Interactive annotation of ASCII PPM images with rectangles, patterns and inserted images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "image", "annotation", "raster", "p3"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
imagemods = "imagemods.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imagemods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

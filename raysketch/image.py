"""RGB images held in memory and stored as plain-text PPM (P3) files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from raysketch.vector import Vector3

PathLike = Union[str, "os.PathLike[str]"]


class ImageFormatError(ValueError):
    """Raised when a PPM file cannot be parsed."""


@dataclass
class Pixel:
    """One RGB pixel."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_vector(cls, vector: Vector3) -> Pixel:
        """Build a pixel from a colour vector (x, y, z as r, g, b)."""
        return cls(vector.x, vector.y, vector.z)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b


def _to_byte(value: float) -> int:
    return int(max(0.0, min(255.0, value)))


def _format_number(value: float) -> str:
    return format(value, "g")


def _content_lines(lines: Iterator[str]) -> Iterator[str]:
    return (line for line in lines if not line.startswith("#"))


class Image:
    """A grid of pixels plus a packed RGB byte buffer suitable for display."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        max_color: float = 255.0,
        filename: PathLike = "",
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.max_color = max_color
        self.filename = os.fspath(filename)
        self.pixels = [[Pixel() for _ in range(width)] for _ in range(height)]
        self.pixel_array = bytearray(width * height * 3)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height, or 0 for an empty image."""
        return self.width / self.height if self.height else 0.0

    def set_pixel(self, row: int, column: int, pixel: Pixel) -> None:
        """Store a pixel and mirror it into the byte buffer, clamped to 0..255."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"pixel ({row}, {column}) is outside the image")
        self.pixels[row][column] = pixel
        index = (row * self.width + column) * 3
        self.pixel_array[index:index + 3] = bytes(_to_byte(c) for c in pixel)

    @classmethod
    def load(cls, filename: PathLike) -> Image:
        """Read a P3 PPM file; comment lines starting with '#' are skipped."""
        name = os.fspath(filename)
        with open(name, encoding="utf-8") as handle:
            lines = iter(handle.read().splitlines())
        next(lines, None)  # magic number line
        content = _content_lines(lines)

        dims = next(content, None)
        tokens = dims.split() if dims is not None else []
        try:
            width, height = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            raise ImageFormatError(
                f"Error reading image dimensions from file: {name}"
            ) from None
        if width < 0 or height < 0:
            raise ImageFormatError(f"Negative image dimensions in file: {name}")

        max_line = next(content, None)
        tokens = max_line.split() if max_line is not None else []
        try:
            max_color = float(tokens[0])
        except (IndexError, ValueError):
            raise ImageFormatError(
                f"Error reading max color value from file: {name}"
            ) from None

        image = cls(width, height, max_color, name)
        for row, line in enumerate(content):
            if row >= height:
                raise ImageFormatError(f"Too many pixel rows in file: {name}")
            tokens = line.split()[: width * 3]
            if len(tokens) < width * 3:
                raise ImageFormatError(f"Error reading pixel data from file: {name}")
            try:
                values = [float(token) for token in tokens]
            except ValueError:
                raise ImageFormatError(
                    f"Error reading pixel data from file: {name}"
                ) from None
            for column in range(width):
                r, g, b = values[column * 3:column * 3 + 3]
                image.set_pixel(row, column, Pixel(r, g, b))
        return image

    def save(self, path: PathLike | None = None) -> None:
        """Write the image as P3 PPM to ``path``, or to its own filename."""
        target = self.filename if path is None else os.fspath(path)
        if not target:
            raise ValueError("Filename is empty, cannot save image.")
        if not self.width or not self.height:
            raise ValueError(f"No pixel data to write to file: {target}")
        lines = ["P3", f"{self.width} {self.height}", _format_number(self.max_color)]
        for row in self.pixels:
            lines.append(
                "".join(
                    " ".join(_format_number(c) for c in pixel) + " " for pixel in row
                )
            )
        Path(target).write_text("\n".join(lines) + "\n", encoding="utf-8")
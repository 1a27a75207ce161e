"""
Plain (ASCII) PPM encoding.

Output layout:

    P3
    <width> <height>
    255
    <r> <g> <b>        one line per pixel, top row first

Colors are quantized with `int(255.999 * c)`: truncation toward zero, no
clamping of the color beforehand. Values that fall outside the byte range
saturate the way an unsigned 8-bit cast does (NaN and negatives to 0,
anything at or above 256 to 255).
"""

from __future__ import annotations
import math
from typing import IO, Iterable, Tuple

import numpy as np

from .vec3 import Color

MAGIC = 'P3'
MAX_VALUE = 255


class PPMFormatError(ValueError):
    """Error while parsing a plain PPM stream."""
    pass


def to_byte(component: float) -> int:
    """Quantize one [0, 1] color component to an 8-bit channel value."""
    scaled = 255.999 * component
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0.0), float(MAX_VALUE)))


def encode_color(color: Color) -> Tuple[int, int, int]:
    return to_byte(color.x), to_byte(color.y), to_byte(color.z)


def write_header(stream: IO[str], width: int, height: int) -> None:
    stream.write(f"{MAGIC}\n{width} {height}\n{MAX_VALUE}\n")


def write_pixel(stream: IO[str], r: int, g: int, b: int) -> None:
    """Append one already-quantized pixel line to the stream."""
    stream.write(f"{r} {g} {b}\n")


def write_color(stream: IO[str], color: Color) -> None:
    """Append one pixel line to the stream."""
    write_pixel(stream, *encode_color(color))


def write_ppm(stream: IO[str], width: int, height: int, colors: Iterable[Color]) -> int:
    """Write a complete image from colors given in scan order.

    Returns:
        Number of pixel lines written
    """
    write_header(stream, width, height)
    count = 0
    for color in colors:
        write_color(stream, color)
        count += 1
    return count


def _tokens(stream: IO[str]):
    for line in stream:
        line = line.split('#', 1)[0]
        yield from line.split()


def read_ppm(stream: IO[str]) -> Tuple[int, int, np.ndarray]:
    """Parse a plain PPM stream.

    Args:
        stream: Text stream positioned at the magic token

    Returns:
        Tuple of (width, height, pixels) where pixels is a uint8 array of
        shape (height, width, 3), top row first

    Raises:
        PPMFormatError: If the header or the sample count is malformed
    """
    tokens = _tokens(stream)

    magic = next(tokens, None)
    if magic != MAGIC:
        raise PPMFormatError(f"Expected magic token {MAGIC!r}, got {magic!r}")

    try:
        width = int(next(tokens))
        height = int(next(tokens))
        max_value = int(next(tokens))
    except (StopIteration, ValueError) as e:
        raise PPMFormatError(f"Malformed PPM header: {e}") from e

    if width < 0 or height < 0:
        raise PPMFormatError(f"Invalid image size {width}x{height}")
    if max_value != MAX_VALUE:
        raise PPMFormatError(f"Unsupported max value {max_value}, expected {MAX_VALUE}")

    try:
        samples = [int(t) for t in tokens]
    except ValueError as e:
        raise PPMFormatError(f"Non-integer sample: {e}") from e

    expected = width * height * 3
    if len(samples) != expected:
        raise PPMFormatError(f"Expected {expected} samples, got {len(samples)}")
    if any(s < 0 or s > max_value for s in samples):
        raise PPMFormatError(f"Sample out of range [0, {max_value}]")

    pixels = np.array(samples, dtype=np.uint8).reshape((height, width, 3))
    return width, height, pixels

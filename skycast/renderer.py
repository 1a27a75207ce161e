"""
Renderer module - the scanline loop.

Casts exactly one ray per pixel, shades it with the gradient shader and
hands the color to the PPM encoder. Pixels are produced row-major, top
row first and left to right within a row; that order is part of the
output format.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import IO, Callable, Iterator, Optional, Tuple
import numpy as np

from .vec3 import Color
from .camera import Camera
from .shader import GradientShader, WHITE, SKY_BLUE
from . import ppm


@dataclass(frozen=True)
class RenderSettings:
    """Fixed configuration for a render, built once and passed in."""
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    viewport_height: float = 2.0
    focal_length: float = 1.0
    bottom_color: Color = field(default_factory=lambda: Color(*WHITE))
    top_color: Color = field(default_factory=lambda: Color(*SKY_BLUE))

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)


def _ratio(n: int, d: int) -> float:
    # IEEE division: a zero denominator gives nan/inf instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(n) / np.float64(d))


class Renderer:
    """Single-threaded scanline renderer."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self.camera = Camera(
            aspect_ratio=self.settings.aspect_ratio,
            viewport_height=self.settings.viewport_height,
            focal_length=self.settings.focal_length
        )
        self.shader = GradientShader(self.settings.bottom_color, self.settings.top_color)
        self._progress_callback: Optional[Callable[[int], None]] = None

    @property
    def width(self) -> int:
        return self.settings.image_width

    @property
    def height(self) -> int:
        return self.settings.image_height

    def set_progress_callback(self, callback: Callable[[int], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Called after each scanline with the number of
                scanlines still to render
        """
        self._progress_callback = callback

    def pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (i, j, color) for every pixel in output order.

        j runs from height - 1 down to 0 (row 0 is the bottom of the
        viewport), i from 0 to width - 1.
        """
        width = self.width
        height = self.height

        for j in range(height - 1, -1, -1):
            v = _ratio(j, height - 1)
            for i in range(width):
                u = _ratio(i, width - 1)
                ray = self.camera.get_ray(u, v)
                yield i, j, self.shader.shade(ray)

            if self._progress_callback:
                self._progress_callback(j)

    def render(self, stream: IO[str]) -> int:
        """Render the image as plain PPM onto a text stream.

        Args:
            stream: Writable text stream

        Returns:
            Number of pixels written
        """
        colors = (color for _, _, color in self.pixels())
        return ppm.write_ppm(stream, self.width, self.height, colors)

    def render_image(self) -> np.ndarray:
        """Render the image and return it as a numpy array.

        Returns:
            Float image of shape (height, width, 3), top row first
        """
        height = self.height
        image = np.zeros((height, self.width, 3), dtype=np.float64)
        for i, j, color in self.pixels():
            image[height - 1 - j, i] = color.to_array()
        return image

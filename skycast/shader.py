"""
Background shading for camera rays.

Rays are colored by a vertical gradient between two endpoint colors,
keyed only on the y component of the normalized ray direction.
"""

from __future__ import annotations
from typing import Optional

from .vec3 import Vec3, Color
from .ray import Ray

# Gradient endpoints as plain tuples; build a Color from them where needed
WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Blend `a` and `b` by fraction `t`: (1 - t) * a + t * b."""
    return a * (1.0 - t) + b * t


class GradientShader:
    """A vertical gradient (simple sky)."""

    def __init__(self, bottom_color: Optional[Color] = None, top_color: Optional[Color] = None):
        """Create a gradient shader.

        Args:
            bottom_color: Color for rays pointing straight down (WHITE if None)
            top_color: Color for rays pointing straight up (SKY_BLUE if None)
        """
        self.bottom_color = bottom_color.copy() if bottom_color is not None else Color(*WHITE)
        self.top_color = top_color.copy() if top_color is not None else Color(*SKY_BLUE)

    def shade(self, ray: Ray) -> Color:
        # Y-up: maps unit y in [-1, 1] to t in [0, 1]
        unit_direction = ray.direction.unit_vector()
        t = 0.5 * (unit_direction.y + 1.0)
        return lerp(self.bottom_color, self.top_color, t)

    def __call__(self, ray: Ray) -> Color:
        return self.shade(ray)

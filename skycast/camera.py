"""
Camera module for generating primary rays.

A fixed pinhole camera at the origin looking down -Z. The viewport is a
rectangle `focal_length` units in front of the camera; its geometry is
derived once and reused for every pixel.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A pinhole camera with an axis-aligned viewport."""

    def __init__(
        self,
        aspect_ratio: float = 16.0 / 9.0,
        viewport_height: float = 2.0,
        focal_length: float = 1.0
    ):
        """Create a camera.

        Args:
            aspect_ratio: Width / Height ratio
            viewport_height: Height of the viewport in camera space
            focal_length: Distance from the origin to the viewport plane
        """
        self.aspect_ratio = aspect_ratio
        self.viewport_height = viewport_height
        self.viewport_width = aspect_ratio * viewport_height
        self.focal_length = focal_length

        self.origin = Point3(0, 0, 0)
        self.horizontal = Vec3(self.viewport_width, 0, 0)
        self.vertical = Vec3(0, viewport_height, 0)
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - Vec3(0, 0, focal_length)
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the viewport.

        Args:
            u: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            v: Vertical coordinate [0, 1] (0 = bottom, 1 = top)

        Returns:
            A ray from the camera origin through the viewport point. The
            direction is left unnormalized.
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (
            f"Camera(viewport={self.viewport_width:.4f}x{self.viewport_height:.4f}, "
            f"focal_length={self.focal_length})"
        )

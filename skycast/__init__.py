"""
SkyCast - A minimal Python ray caster

Casts one ray per pixel through a pinhole camera and shades it with a
vertical sky gradient. Supports:
- Plain-text PPM (P3) output streamed in scanline order
- Float image rendering for programmatic use
- PNG and other formats through Pillow
"""

__version__ = "0.1.0"
__author__ = "SkyCast Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .camera import Camera
from .shader import GradientShader, WHITE, SKY_BLUE, lerp
from .renderer import Renderer, RenderSettings
from .ppm import PPMFormatError, encode_color, read_ppm, to_byte, write_color, write_header
from .image import save_image, to_ldr

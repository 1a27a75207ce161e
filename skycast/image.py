"""
Image export.

Float images from `Renderer.render_image` are quantized with the same
byte rule as the PPM encoder, so a saved PNG and the P3 stream agree
pixel for pixel.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union
import numpy as np

from . import ppm


def to_ldr(image: np.ndarray) -> np.ndarray:
    """Convert a float image to 8-bit.

    Args:
        image: Float image array of shape (height, width, 3)

    Returns:
        uint8 array of the same shape
    """
    with np.errstate(invalid='ignore'):
        scaled = np.nan_to_num(255.999 * np.asarray(image, dtype=np.float64), nan=0.0)
        return np.trunc(np.clip(scaled, 0, ppm.MAX_VALUE)).astype(np.uint8)


def save_image(image: np.ndarray, filename: Union[str, Path]) -> None:
    """Save image to file.

    Args:
        image: Image array (float or uint8), top row first
        filename: Output filename (extension determines format)
    """
    path = Path(filename)
    if image.dtype != np.uint8:
        image = to_ldr(image)

    if path.suffix.lower() == '.ppm':
        height, width = image.shape[:2]
        with open(path, 'w') as f:
            ppm.write_header(f, width, height)
            for r, g, b in image.reshape(-1, 3).tolist():
                ppm.write_pixel(f, r, g, b)
    else:
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(image)
        pil_image.save(path)

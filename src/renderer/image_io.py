# renderer/image_io.py
import os
from typing import Optional
import numpy as np
from PIL import Image
from core.config import RenderConfig
from .ppm import quantize_buffer
from .raytracer import Renderer

def render_to_array(config: Optional[RenderConfig] = None, backend: str = "python") -> np.ndarray:
    """Renders the scene into a (height, width, 3) float buffer, row 0 on top."""
    return Renderer(config, backend).render_buffer()

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Quantizes a float buffer with the PPM rule and narrows it to uint8.
    Without clamping, channels that quantize to 256 would wrap, so this
    always clamps at the 8-bit boundary.
    """
    return quantize_buffer(image, clamp=True).astype(np.uint8)

def save_image(image: np.ndarray, image_path: str) -> None:
    """
    Save a float buffer in any format Pillow can write, chosen by extension.

    Args:
        image: (height, width, 3) float buffer, row 0 at the top
        image_path: Destination path, e.g. "output.png"

    Raises:
        ValueError: If Pillow cannot encode the requested format
    """
    try:
        Image.fromarray(to_rgb8(image)).save(image_path)
    except (KeyError, ValueError) as e:
        raise ValueError(f"Error saving image {image_path}: {str(e)}")

def parse_ppm(text: str) -> np.ndarray:
    """
    Parse an ASCII (P3) PPM into an int64 (height, width, 3) array.
    Comments starting with '#' are ignored. Channel values above the
    declared maximum are kept as-is.
    """
    tokens = []
    for line in text.splitlines():
        tokens.extend(line.split("#", 1)[0].split())
    if len(tokens) < 4 or tokens[0] != "P3":
        raise ValueError("Not an ASCII PPM (missing P3 header)")
    width, height = int(tokens[1]), int(tokens[2])
    values = np.array(tokens[4:], dtype=np.int64)
    if values.size != width * height * 3:
        raise ValueError(
            f"PPM declares {width}x{height} pixels but holds {values.size} channel values"
        )
    return values.reshape(height, width, 3)

def read_ppm(image_path: str) -> np.ndarray:
    """
    Load an ASCII PPM file written by the renderer.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a well-formed P3 image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Image file not found: {image_path}")
    with open(image_path, "r", encoding="ascii") as f:
        return parse_ppm(f.read())

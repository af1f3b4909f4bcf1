# renderer/ppm.py
import math
from typing import Tuple
import numpy as np
from core.vector import Color

MAX_VALUE = 255
SCALE = 255.999

def ppm_header(width: int, height: int) -> str:
    """Header for an ASCII (P3) PPM image."""
    return f"P3\n{width} {height}\n{MAX_VALUE}\n"

def quantize(color: Color, clamp: bool = True) -> Tuple[int, int, int]:
    """
    Maps each channel to ceil(255.999 * c).

    Any positive channel becomes at least 1 and 1.0 becomes 256. With clamp
    enabled the result is limited to [0, 255].
    """
    channels = tuple(math.ceil(SCALE * c) for c in color)
    if clamp:
        channels = tuple(min(MAX_VALUE, max(0, c)) for c in channels)
    return channels

def format_pixel(color: Color, clamp: bool = True) -> str:
    r, g, b = quantize(color, clamp)
    return f"{r} {g} {b}\n"

def quantize_buffer(image: np.ndarray, clamp: bool = True) -> np.ndarray:
    """
    Vectorized quantize() over a float (height, width, 3) buffer.
    Returns an int64 array of the same shape.
    """
    out = np.ceil(SCALE * np.asarray(image, dtype=np.float64)).astype(np.int64)
    if clamp:
        out = out.clip(0, MAX_VALUE)
    return out

def write_pixels(sink, rows: np.ndarray, clamp: bool = True) -> None:
    """One line per pixel for a (n, width, 3) slice of buffer rows, no header."""
    for row in quantize_buffer(rows, clamp):
        for r, g, b in row.tolist():
            sink.write(f"{r} {g} {b}\n")


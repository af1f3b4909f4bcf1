# renderer/raytracer.py
from typing import Callable, Iterator, List, Optional, Tuple
import numpy as np
from core.config import RenderConfig
from core.vector import Color
from camera.camera import Camera
from geometry.sphere import Sphere
from .shading import ray_color, T_MIN, INFINITY
from .ppm import ppm_header, format_pixel, write_pixels
from .kernels import render_normals_kernel

BACKENDS = ("python", "numba")

class Renderer:
    """
    Renders the single-sphere scene one ray per pixel.

    The "python" backend shades pixels one at a time with Vector3 math. The
    "numba" backend fills a whole buffer with a compiled kernel, rows in
    parallel, and serializes it afterwards. Both emit the top scanline first
    and columns left to right.
    """
    def __init__(self, config: Optional[RenderConfig] = None, backend: str = "python"):
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
        self.config = (config if config is not None else RenderConfig()).validate()
        self.backend = backend
        self.width = self.config.image_width
        self.height = self.config.image_height
        self.camera = Camera(self.config)
        self.world = Sphere(self.config.center, self.config.sphere_radius)

    def render_row(self, j: int) -> List[Color]:
        """Colors for row j (j = 0 is the bottom row), left to right."""
        return [ray_color(self.camera.pixel_ray(i, j), self.world)
                for i in range(self.width)]

    def scanlines(self) -> Iterator[Tuple[int, List[Color]]]:
        """Yields (j, colors) from the top row (j = height - 1) down to j = 0."""
        for j in range(self.height - 1, -1, -1):
            yield j, self.render_row(j)

    def render_buffer(self) -> np.ndarray:
        """
        Returns a (height, width, 3) float64 buffer, row 0 at the top.
        """
        if self.backend == "numba":
            cam = self.camera
            return render_normals_kernel(
                self.width, self.height,
                np.array(tuple(cam.origin)),
                np.array(tuple(cam.lower_left_corner)),
                np.array(tuple(cam.horizontal)),
                np.array(tuple(cam.vertical)),
                np.array(tuple(self.world.center)),
                float(self.world.radius),
                T_MIN, INFINITY,
            )
        image = np.empty((self.height, self.width, 3), dtype=np.float64)
        for row, (_, colors) in enumerate(self.scanlines()):
            image[row] = [tuple(c) for c in colors]
        return image

    def render(self, sink, progress: Optional[Callable[[int], None]] = None) -> None:
        """
        Writes the full PPM image to sink, which only needs a write(str)
        method. progress, if given, is called with the number of scanlines
        still to go after each row is written. Errors raised by the sink
        propagate unchanged.
        """
        if self.backend == "numba":
            self.write_image(sink, self.render_buffer(), progress)
            return

        sink.write(ppm_header(self.width, self.height))
        for j, colors in self.scanlines():
            for color in colors:
                sink.write(format_pixel(color, self.config.clamp))
            if progress is not None:
                progress(j)

    def write_image(self, sink, image: np.ndarray,
                    progress: Optional[Callable[[int], None]] = None) -> None:
        """
        Serializes a buffer from render_buffer() to sink, reporting progress
        per row the same way render() does.
        """
        sink.write(ppm_header(self.width, self.height))
        for row in range(self.height):
            write_pixels(sink, image[row:row + 1], self.config.clamp)
            if progress is not None:
                progress(self.height - 1 - row)

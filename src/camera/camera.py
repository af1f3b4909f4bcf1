# camera/camera.py
from core.config import RenderConfig
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera at the world origin looking down -z.

    The viewport is a plane one focal length in front of the camera,
    viewport_height units tall and aspect_ratio * viewport_height wide.
    """
    def __init__(self, config: RenderConfig):
        self.image_width = config.image_width
        self.image_height = config.image_height
        self.focal_length = config.focal_length
        self.origin = Vector3(0, 0, 0)
        self.update_camera(config.viewport_height, config.viewport_width)

    def update_camera(self, viewport_height: float, viewport_width: float):
        """Computes the viewport span vectors and its lower-left corner."""
        self.horizontal = Vector3(viewport_width, 0, 0)
        self.vertical = Vector3(0, viewport_height, 0)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  Vector3(0, 0, self.focal_length))

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray through the viewport point at fractions (u, v) measured from the
        lower-left corner. The direction is left unnormalized.
        """
        direction = (self.lower_left_corner +
                     u * self.horizontal +
                     v * self.vertical -
                     self.origin)
        return Ray(self.origin, direction)

    def pixel_ray(self, i: int, j: int) -> Ray:
        """Ray for pixel column i and row j, with j = 0 the bottom row."""
        u = i / (self.image_width - 1)
        v = j / (self.image_height - 1)
        return self.get_ray(u, v)

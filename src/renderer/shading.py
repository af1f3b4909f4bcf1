# renderer/shading.py
import math
from core.vector import Color, unit_vector
from core.ray import Ray
from geometry.hittable import Hittable

INFINITY = math.inf
T_MIN = 0.0

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background(ray: Ray) -> Color:
    """
    Vertical gradient: white looking straight down, sky blue straight up.
    """
    unit_direction = unit_vector(ray.direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE

def ray_color(ray: Ray, world: Hittable) -> Color:
    """
    Colors a hit by its surface normal, remapped from [-1, 1] to [0, 1].
    Misses fall through to the background gradient.
    """
    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is not None:
        return 0.5 * (rec.normal + WHITE)
    return background(ray)

# renderer/kernels.py
import math
import numpy as np
from numba import njit, prange

@njit(cache=True)
def ray_sphere_intersect(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius, t_min, t_max):
    """
    Compiled counterpart of Sphere.hit. Returns (hit, t); t is only
    meaningful when hit is True.
    """
    ocx = ox - cx
    ocy = oy - cy
    ocz = oz - cz
    a = dx * dx + dy * dy + dz * dz
    half_b = ocx * dx + ocy * dy + ocz * dz
    c = ocx * ocx + ocy * ocy + ocz * ocz - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0.0:
        return False, 0.0

    sqrtd = math.sqrt(discriminant)
    root = (-half_b - sqrtd) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrtd) / a
        if root < t_min or root > t_max:
            return False, 0.0
    return True, root

@njit(parallel=True, cache=True)
def render_normals_kernel(width, height, origin, lower_left, horizontal, vertical,
                          center, radius, t_min, t_max):
    """
    Shades every pixel into a (height, width, 3) float64 buffer. Buffer row 0
    is the top scanline. Rows run in parallel and only touch their own slice.
    """
    image = np.empty((height, width, 3), dtype=np.float64)
    for row in prange(height):
        j = height - 1 - row
        v = j / (height - 1)
        for i in range(width):
            u = i / (width - 1)
            dx = lower_left[0] + u * horizontal[0] + v * vertical[0] - origin[0]
            dy = lower_left[1] + u * horizontal[1] + v * vertical[1] - origin[1]
            dz = lower_left[2] + u * horizontal[2] + v * vertical[2] - origin[2]

            hit, t = ray_sphere_intersect(origin[0], origin[1], origin[2], dx, dy, dz,
                                          center[0], center[1], center[2], radius,
                                          t_min, t_max)
            if hit:
                nx = origin[0] + dx * t - center[0]
                ny = origin[1] + dy * t - center[1]
                nz = origin[2] + dz * t - center[2]
                n = math.sqrt(nx * nx + ny * ny + nz * nz)
                image[row, i, 0] = 0.5 * (nx / n + 1.0)
                image[row, i, 1] = 0.5 * (ny / n + 1.0)
                image[row, i, 2] = 0.5 * (nz / n + 1.0)
            else:
                length = math.sqrt(dx * dx + dy * dy + dz * dz)
                s = 0.5 * (dy / length + 1.0)
                image[row, i, 0] = (1.0 - s) * 1.0 + s * 0.5
                image[row, i, 1] = (1.0 - s) * 1.0 + s * 0.7
                image[row, i, 2] = (1.0 - s) * 1.0 + s * 1.0
    return image

# geometry/hittable.py
from typing import Optional
from core.vector import Vector3, Point3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t")

    def __init__(self, p: Point3, normal: Vector3, t: float):
        self.p = p              # Intersection point
        self.normal = normal    # Unit outward normal at p
        self.t = t              # Ray parameter at intersection

    def __repr__(self) -> str:
        return f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

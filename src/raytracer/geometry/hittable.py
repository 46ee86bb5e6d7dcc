# geometry/hittable.py
from typing import Optional
from raytracer.core.aabb import AABB
from raytracer.core.interval import Interval
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "material", "t", "u", "v", "front_face")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None, material=None,
                 t: float = 0.0, u: float = 0.0, v: float = 0.0,
                 front_face: bool = True):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always facing against the ray
        self.material = material
        self.t = t              # Ray parameter at intersection
        self.u = u              # Surface coordinates of the hit point
        self.v = v
        self.front_face = front_face  # Whether the ray hit the outside

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

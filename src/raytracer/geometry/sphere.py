# geometry/sphere.py
import math
from typing import Optional, Tuple
from raytracer.core.aabb import AABB
from raytracer.core.interval import Interval
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Spherical (u, v) of a point p on the unit sphere centered at the origin.

    u runs around the Y axis from X=-1, v from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

class Sphere(Hittable):
    """
    A sphere defined by its center, radius, and material.

    The center is stored as a ray so a moving sphere can be evaluated at the
    time carried by the incoming ray; a stationary sphere has a zero direction.
    """
    def __init__(self, center1: Vector3, center2: Vector3, radius: float, material):
        self.center = Ray(center1, center2 - center1)
        self.radius = max(0.0, radius)
        self.material = material

        rvec = Vector3(self.radius, self.radius, self.radius)
        box1 = AABB.from_points(center1 - rvec, center1 + rvec)
        box2 = AABB.from_points(center2 - rvec, center2 + rvec)
        self.bbox = AABB.surrounding_box(box1, box2)

    @classmethod
    def stationary(cls, center: Vector3, radius: float, material) -> "Sphere":
        return cls(center, center, radius, material)

    @classmethod
    def moving(cls, center1: Vector3, center2: Vector3, radius: float, material) -> "Sphere":
        return cls(center1, center2, radius, material)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        current_center = self.center.at(ray.time)
        oc = ray.origin - current_center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or self.radius == 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

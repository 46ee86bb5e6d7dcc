# materials/metal.py
import random
from typing import Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.core.utils import reflect, random_unit_vector
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties; fuzz in [0, 1] blurs the reflection.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction, rec.normal)
        if self.fuzz > 0.0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward

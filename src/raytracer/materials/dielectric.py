# materials/dielectric.py
import math
import random
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.core.utils import reflect, refract, reflectance
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water...) described by its refractive
    index relative to the surrounding medium.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Ray(rec.p, direction, ray_in.time), attenuation

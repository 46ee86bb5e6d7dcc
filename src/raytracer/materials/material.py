# materials/material.py
import random
from typing import Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are plain values: they hold parameters only, so one instance can
    be shared by any number of objects and rendering processes.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

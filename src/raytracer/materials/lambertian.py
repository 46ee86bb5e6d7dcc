# materials/lambertian.py
import random
from typing import Tuple, Union
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.core.utils import random_on_hemisphere, random_unit_vector
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material
from raytracer.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.

    Passing a Texture instead of a color gives a textured Lambertian whose
    attenuation is looked up at the hit's (u, v, p).
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation); diffuse surfaces never absorb.
        """
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction
        if scatter_direction.length_squared() < 1e-8:
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation

class Hemisphere(Material):
    """
    Diffuse material sampling directions uniformly over the normal's hemisphere.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        direction = random_on_hemisphere(rec.normal, rng)
        scattered = Ray(rec.p, direction, ray_in.time)
        return scattered, self.texture.value(rec.u, rec.v, rec.p)

# materials/presets.py
from raytracer.core.vector import Vector3
from raytracer.materials.metal import Metal
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.textures import CheckerTexture

class MetalPresets:
    """Metals shared by the demo scenes."""

    @staticmethod
    def bronze() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)

class DielectricPresets:
    """Refractive indices relative to the medium the object sits in."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Air pocket inside glass: air relative to the glass around it.
        return Dielectric(1.0 / 1.5)

class DiffusePresets:
    """Diffuse surfaces shared by the demo scenes."""

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(Vector3(0.5, 0.5, 0.5))

    @staticmethod
    def lawn() -> Lambertian:
        return Lambertian(Vector3(0.8, 0.8, 0.0))

    @staticmethod
    def brown() -> Lambertian:
        return Lambertian(Vector3(0.4, 0.2, 0.1))

    @staticmethod
    def checker_ground(scale: float = 3.0) -> Lambertian:
        return Lambertian(CheckerTexture(scale, Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9)))

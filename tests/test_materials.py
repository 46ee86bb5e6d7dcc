"""Unit tests for the scattering materials.

Tests cover:
- Lambertian scattering and its degenerate-direction fallback
- Metal reflection, fuzz clamping and absorption
- Dielectric refraction and total internal reflection
"""

import math

import pytest

from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Hemisphere, Lambertian
from raytracer.materials.metal import Metal
from raytracer.materials.presets import DielectricPresets, MetalPresets
from raytracer.materials.textures import CheckerTexture

UP = Vector3(0, 1, 0)


class ScriptedRandom:
    """Stands in for random.Random, replaying a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)

    def uniform(self, a, b):
        return self.values.pop(0)

    def random(self):
        return self.values.pop(0)


def _record(p=Vector3(0, 0, 0), normal=UP, front_face=True, u=0.0, v=0.0):
    return HitRecord(p=p, normal=normal, t=1.0, u=u, v=v, front_face=front_face)


class TestLambertian:
    """Tests for diffuse scattering."""

    def test_scatters_into_normal_hemisphere(self, rng):
        material = Lambertian(Vector3(0.8, 0.3, 0.3))
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0), 0.25)
        for _ in range(50):
            scattered, attenuation = material.scatter(ray_in, _record(), rng)
            assert scattered.direction.dot(UP) >= 0
            assert scattered.origin == Vector3(0, 0, 0)
            assert scattered.time == 0.25
            assert attenuation == Vector3(0.8, 0.3, 0.3)

    def test_degenerate_direction_falls_back_to_normal(self):
        """A unit vector opposite the normal would cancel it; the normal is used instead."""
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        rng = ScriptedRandom([0.0, -0.5, 0.0])
        scattered, _ = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng)
        assert scattered.direction == UP

    def test_textured_attenuation(self, rng):
        checker = CheckerTexture(1.0, Vector3(1, 0, 0), Vector3(0, 0, 1))
        material = Lambertian(checker)
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))

        _, even = material.scatter(ray_in, _record(p=Vector3(0.5, 0.5, 0.5)), rng)
        _, odd = material.scatter(ray_in, _record(p=Vector3(1.5, 0.5, 0.5)), rng)
        assert even == Vector3(1, 0, 0)
        assert odd == Vector3(0, 0, 1)

    def test_hemisphere_material(self, rng):
        material = Hemisphere(Vector3(0.2, 0.2, 0.2))
        for _ in range(50):
            scattered, _ = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng)
            assert scattered.direction.dot(UP) > 0
            assert scattered.direction.length() == pytest.approx(1.0)


class TestMetal:
    """Tests for specular reflection."""

    def test_mirror_reflection(self, rng):
        material = Metal(Vector3(0.9, 0.9, 0.9))
        scattered, attenuation = material.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)),
                                                  _record(), rng)
        assert scattered.direction == Vector3(1, 1, 0)
        assert attenuation == Vector3(0.9, 0.9, 0.9)

    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), fuzz=5.0).fuzz == 1.0
        assert Metal(Vector3(1, 1, 1), fuzz=-1.0).fuzz == 0.0

    def test_absorbs_when_fuzz_pushes_below_surface(self):
        material = Metal(Vector3(1, 1, 1), fuzz=1.0)
        rng = ScriptedRandom([0.0, -0.5, 0.0])
        result = material.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), _record(), rng)
        assert result is None

    def test_presets(self):
        bronze = MetalPresets.bronze()
        assert bronze.albedo == Vector3(0.7, 0.6, 0.5)
        assert bronze.fuzz == 0.0


class TestDielectric:
    """Tests for refraction through clear materials."""

    def test_index_one_passes_straight_through(self):
        material = Dielectric(1.0)
        direction = Vector3(1, -1, 0)
        rng = ScriptedRandom([0.999999])
        scattered, attenuation = material.scatter(Ray(Vector3(-1, 1, 0), direction), _record(), rng)

        unit = direction.normalize()
        assert attenuation == Vector3(1.0, 1.0, 1.0)
        assert scattered.direction.x == pytest.approx(unit.x)
        assert scattered.direction.y == pytest.approx(unit.y)
        assert scattered.direction.z == pytest.approx(unit.z)

    def test_total_internal_reflection(self, rng):
        """Leaving glass at a grazing angle can only reflect."""
        material = DielectricPresets.glass()
        ray_in = Ray(Vector3(-1, 0.2, 0), Vector3(1, -0.2, 0))
        for _ in range(20):
            scattered, _ = material.scatter(ray_in, _record(front_face=False), rng)
            expected = Vector3(1, 0.2, 0).normalize()
            assert scattered.direction.x == pytest.approx(expected.x)
            assert scattered.direction.y == pytest.approx(expected.y)

    def test_entering_glass_bends_toward_normal(self):
        material = Dielectric(1.5)
        rng = ScriptedRandom([0.999999])
        incident = Vector3(1, -1, 0).normalize()
        scattered, _ = material.scatter(Ray(Vector3(-1, 1, 0), incident), _record(), rng)

        sin_out = abs(scattered.direction.x) / scattered.direction.length()
        assert sin_out == pytest.approx(math.sin(math.pi / 4) / 1.5)
        assert scattered.direction.y < 0

    def test_scattered_ray_keeps_time(self, rng):
        material = Dielectric(1.5)
        scattered, _ = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0), 0.75),
                                        _record(), rng)
        assert scattered.time == 0.75

    def test_air_bubble_inverts_glass(self):
        bubble = DielectricPresets.air_bubble()
        assert bubble.refraction_index * DielectricPresets.glass().refraction_index == pytest.approx(1.0)

    def test_index_one_at_normal_incidence(self, rng):
        material = Dielectric(1.0)
        for _ in range(20):
            scattered, _ = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng)
            unit = scattered.direction.normalize()
            assert unit.cross(Vector3(0, -1, 0)).length() == pytest.approx(0.0, abs=1e-12)

"""Pytest configuration for raytracer tests.

Provides seeded random generators and small cameras/scenes shared by the
test modules, so every test is reproducible.
"""

import random

import pytest

from raytracer.camera.camera import Camera
from raytracer.core.vector import Vector3
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import World
from raytracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """A deterministic generator for sampling helpers and materials."""
    return random.Random(1234)


@pytest.fixture
def pinhole_camera():
    """Pinhole camera at the origin looking down -Z with a 90 degree field of view."""
    return Camera(
        samples_per_pixel=1,
        max_depth=5,
        vertical_fov=90.0,
        look_from=Vector3(0, 0, 0),
        look_at=Vector3(0, 0, -1),
        up_direction=Vector3(0, 1, 0),
        focus_distance=1.0,
    )


@pytest.fixture
def random_sphere_list():
    """Forty non-moving spheres scattered through a 20-unit cube."""
    gen = random.Random(99)
    spheres = []
    for _ in range(40):
        center = Vector3(gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(-10, 10))
        spheres.append(Sphere.stationary(center, gen.uniform(0.2, 1.5),
                                         Lambertian(Vector3(0.5, 0.5, 0.5))))
    return spheres


@pytest.fixture
def single_sphere_world():
    """One diffuse sphere of radius 0.5 centered at (0, 0, -1)."""
    world = World()
    world.add(Sphere.stationary(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    return world

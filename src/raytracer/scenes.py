# scenes.py
"""
Programmatic demo scenes.

Each builder returns a (world, camera) pair; the world already has its BVH
built and is ready to hand to a Renderer.
"""
import random
from typing import Optional, Tuple
from raytracer.camera.camera import Camera
from raytracer.core.vector import Vector3
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import World
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal
from raytracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets
from raytracer.materials.texture_loader import load_texture

def _default_camera(samples_per_pixel: int, max_depth: int, look_from: Vector3,
                    defocus_angle: float = 0.6) -> Camera:
    return Camera(
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        vertical_fov=20.0,
        look_from=look_from,
        look_at=Vector3(0, 0, 0),
        up_direction=Vector3(0, 1, 0),
        defocus_angle=defocus_angle,
        focus_distance=10.0,
    )

def random_spheres(samples_per_pixel: int = 100, max_depth: int = 50,
                   rng: Optional[random.Random] = None) -> Tuple[World, Camera]:
    """Checkered ground, a grid of small random spheres and three large ones."""
    if rng is None:
        rng = random.Random()
    world = World()
    world.add(Sphere.stationary(Vector3(0, -1000, 0), 1000, DiffusePresets.checker_ground()))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing upwards during the exposure
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere.moving(center, center2, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Vector3(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere.stationary(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere.stationary(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere.stationary(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere.stationary(Vector3(-4, 1, 0), 1.0, DiffusePresets.brown()))
    world.add(Sphere.stationary(Vector3(4, 1, 0), 1.0, MetalPresets.bronze()))

    world.build_bvh(rng)
    return world, _default_camera(samples_per_pixel, max_depth, Vector3(13, 2, 3))

def two_spheres(samples_per_pixel: int = 100, max_depth: int = 50) -> Tuple[World, Camera]:
    """Two large checkered spheres touching at the origin."""
    world = World()
    checker = DiffusePresets.checker_ground()
    world.add(Sphere.stationary(Vector3(0, -10, 0), 10, checker))
    world.add(Sphere.stationary(Vector3(0, 10, 0), 10, checker))
    world.build_bvh()
    return world, _default_camera(samples_per_pixel, max_depth, Vector3(13, 2, 3))

def three_spheres(samples_per_pixel: int = 5, max_depth: int = 10) -> Tuple[World, Camera]:
    """Glass, diffuse and metal spheres on a grey ground; light enough for real time."""
    world = World()
    world.add(Sphere.stationary(Vector3(0, -1000, 0), 1000, DiffusePresets.ground()))
    world.add(Sphere.stationary(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere.stationary(Vector3(-4, 1, 0), 1.0, DiffusePresets.brown()))
    world.add(Sphere.stationary(Vector3(4, 1, 0), 1.0, MetalPresets.bronze()))
    world.build_bvh()
    return world, _default_camera(samples_per_pixel, max_depth, Vector3(13, 2, 3))

def material_spheres(samples_per_pixel: int = 100, max_depth: int = 50) -> Tuple[World, Camera]:
    """Diffuse, hollow glass and fuzzy metal spheres side by side on a yellow ground."""
    world = World()
    world.add(Sphere.stationary(Vector3(0, -100.5, -1), 100, DiffusePresets.lawn()))
    world.add(Sphere.stationary(Vector3(0, 0, -1.2), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere.stationary(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    world.add(Sphere.stationary(Vector3(-1, 0, -1), 0.4, DielectricPresets.air_bubble()))
    world.add(Sphere.stationary(Vector3(1, 0, -1), 0.5, MetalPresets.brushed_gold()))
    world.build_bvh()
    camera = Camera(
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        vertical_fov=20.0,
        look_from=Vector3(-2, 2, 1),
        look_at=Vector3(0, 0, -1),
        up_direction=Vector3(0, 1, 0),
        defocus_angle=10.0,
        focus_distance=3.4,
    )
    return world, camera

def earth(image_path: str, samples_per_pixel: int = 100,
          max_depth: int = 50) -> Tuple[World, Camera]:
    """A globe wrapped in an equirectangular image texture."""
    world = World()
    surface = Lambertian(load_texture(image_path))
    world.add(Sphere.stationary(Vector3(0, 0, 0), 2.0, surface))
    world.build_bvh()
    return world, _default_camera(samples_per_pixel, max_depth, Vector3(0, 0, 12),
                                  defocus_angle=0.0)

SCENES = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "three_spheres": three_spheres,
    "material_spheres": material_spheres,
}

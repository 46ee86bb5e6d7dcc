# renderer/raytracer.py
import logging
import math
import os
import random
import time
from multiprocessing import Pool
from typing import Optional
import numpy as np
from raytracer.camera.camera import Camera
from raytracer.config import RENDER_SETTINGS, T_MIN
from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable
from raytracer.renderer.tone_mapping import encode_pixels

logger = logging.getLogger(__name__)

BLACK = Vector3(0.0, 0.0, 0.0)
SKY_HORIZON = Vector3(*RENDER_SETTINGS['sky_horizon_color'])
SKY_ZENITH = Vector3(*RENDER_SETTINGS['sky_zenith_color'])

# Per-process state for pool workers, set once by the pool initializer
_worker_data = {}

def _init_worker(renderer: "Renderer", world: Hittable):
    _worker_data['renderer'] = renderer
    _worker_data['world'] = world

def _render_row(j: int):
    renderer = _worker_data['renderer']
    world = _worker_data['world']
    return j, renderer.render_row(world, j, renderer.row_rng(j))

def background(ray: Ray) -> Vector3:
    """Vertical white to sky-blue gradient seen by rays that miss everything."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - a) + SKY_ZENITH * a

class Renderer:
    """
    Samples a scene through a Camera into an RGBA8 raster.

    The viewport geometry is derived once here; rendering itself keeps no
    state, so the same Renderer can render any number of worlds, serially or
    across a process pool.

    Attributes:
        image_width, image_height: Output size in pixels.
        pixel00_loc: World-space center of the upper-left pixel.
        pixel_delta_u, pixel_delta_v: Offsets to the next pixel to the right / below.
        seed: When set, each scanline draws from its own deterministic generator,
            so serial and parallel renders produce identical images.
    """
    def __init__(self, aspect_ratio: float, image_width: int, camera: Camera,
                 seed: Optional[int] = None):
        if aspect_ratio == 0:
            raise ValueError("aspect_ratio must be non-zero")
        image_height = int(image_width / aspect_ratio)
        if image_height <= 0:
            raise ValueError(
                f"Image height computed from width {image_width} and aspect ratio "
                f"{aspect_ratio} must be positive, got {image_height}"
            )

        self.image_width = image_width
        self.image_height = image_height
        self.camera = camera
        self.seed = seed

        # Viewport dimensions at the focus plane
        h = math.tan(math.radians(camera.vertical_fov) / 2)
        self.viewport_height = 2 * h * camera.focus_distance
        self.viewport_width = self.viewport_height * aspect_ratio

        # Edge vectors: across the horizontal edge, down the vertical edge
        viewport_u = camera.u * self.viewport_width
        viewport_v = -camera.v * self.viewport_height

        self.pixel_delta_u = viewport_u / image_width
        self.pixel_delta_v = viewport_v / image_height

        viewport_upper_left = (camera.center
                               - camera.w * camera.focus_distance
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

    def row_rng(self, j: int) -> random.Random:
        """A fresh generator owned by the task rendering scanline j."""
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{j}")

    def get_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        """
        Camera ray through a random point of pixel (i, j), leaving from a random
        point of the defocus disk at a random time.
        """
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))
        ray_origin = self.camera.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin, rng.random())

    def ray_color(self, ray: Ray, depth: int, world: Hittable, rng: random.Random) -> Vector3:
        # Out of bounces: no more light is gathered.
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, Interval(T_MIN, math.inf))
        if rec is None:
            return background(ray)

        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return BLACK
        scattered, attenuation = scatter
        return attenuation * self.ray_color(scattered, depth - 1, world, rng)

    def render_row(self, world: Hittable, j: int, rng: random.Random) -> np.ndarray:
        """Render scanline j into a (width, 4) uint8 RGBA array."""
        samples = self.camera.samples_per_pixel
        max_depth = self.camera.max_depth
        scale = 1.0 / samples
        colors = np.zeros((self.image_width, 3), dtype=np.float64)
        for i in range(self.image_width):
            r = g = b = 0.0
            for _ in range(samples):
                c = self.ray_color(self.get_ray(i, j, rng), max_depth, world, rng)
                r += c.x
                g += c.y
                b += c.z
            colors[i] = (r * scale, g * scale, b * scale)
        return encode_pixels(colors, self.camera.gamma)

    def render(self, world: Hittable) -> np.ndarray:
        """
        Render on the calling thread.

        Returns:
            np.ndarray: A (height x width x 4) uint8 RGBA raster, row-major.
        """
        logger.info("Rendering %dx%d, %d samples per pixel",
                    self.image_width, self.image_height, self.camera.samples_per_pixel)
        start = time.perf_counter()
        image = np.zeros((self.image_height, self.image_width, 4), dtype=np.uint8)
        for j in range(self.image_height):
            image[j] = self.render_row(world, j, self.row_rng(j))
            logger.debug("Row %d/%d done", j + 1, self.image_height)
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def render_parallel(self, world: Hittable, workers: Optional[int] = None) -> np.ndarray:
        """
        Render with scanlines spread over a process pool.

        The world and renderer are sent to each worker once, by the pool
        initializer. Rows come back in any order and are written to their own
        index, so the raster is laid out exactly as render() lays it out.
        """
        if workers is None:
            workers = os.cpu_count() or 1
        logger.info("Rendering %dx%d, %d samples per pixel, %d workers",
                    self.image_width, self.image_height,
                    self.camera.samples_per_pixel, workers)
        start = time.perf_counter()
        image = np.zeros((self.image_height, self.image_width, 4), dtype=np.uint8)

        with Pool(processes=workers, initializer=_init_worker, initargs=(self, world)) as pool:
            completed = 0
            for j, row in pool.imap_unordered(_render_row, range(self.image_height)):
                image[j] = row
                completed += 1
                logger.debug("Row %d done (%d/%d)", j, completed, self.image_height)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def render_parallel_bytes(self, world: Hittable, workers: Optional[int] = None) -> bytes:
        """Parallel render flattened to raw RGBA bytes, for real-time consumers."""
        return self.render_parallel(world, workers).tobytes()

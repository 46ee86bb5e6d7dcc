# camera/camera.py
import math
import random
from typing import Tuple
from raytracer.core.vector import Vector3
from raytracer.core.utils import random_in_unit_disk
from raytracer.renderer.tone_mapping import Gamma, encode_pixels

_ZERO = Vector3(0.0, 0.0, 0.0)

class Camera:
    """
    A thin-lens camera positioned with look-from / look-at / up vectors.

    The camera is validated and fully derived at construction and never
    changes afterwards, so it can be shared freely between render workers.

    Attributes:
        center: The point rays are emitted from (look_from).
        u, v, w: Orthonormal frame; u points right, v up, w backwards.
        disk_u, disk_v: Defocus disk basis, zero vectors for a pinhole camera.
    """
    def __init__(self, samples_per_pixel: int, max_depth: int, vertical_fov: float,
                 look_from: Vector3, look_at: Vector3, up_direction: Vector3,
                 gamma: Gamma = Gamma.GAMMA2, defocus_angle: float = 0.0,
                 focus_distance: float = 10.0):
        if samples_per_pixel <= 0:
            raise ValueError("samples_per_pixel must be positive")
        if not 0.0 <= vertical_fov < 360.0:
            raise ValueError(f"vertical_fov must be in [0, 360) degrees, got {vertical_fov}")
        if not 0.0 <= defocus_angle < 360.0:
            raise ValueError(f"defocus_angle must be in [0, 360) degrees, got {defocus_angle}")
        if look_from == look_at:
            raise ValueError("look_from and look_at must be different points")
        if not focus_distance > 0.0:
            raise ValueError(f"focus_distance must be positive, got {focus_distance}")

        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vertical_fov = vertical_fov
        self.defocus_angle = defocus_angle
        self.focus_distance = focus_distance
        self.gamma = gamma
        self.center = look_from

        # Camera frame
        self.w = (look_from - look_at).normalize()
        right = up_direction.cross(self.w)
        if right.near_zero():
            raise ValueError("up_direction must not be parallel to the viewing direction")
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        # Defocus disk, scaled so the blur cone has the requested angle
        defocus_radius = focus_distance * math.tan(math.radians(defocus_angle / 2.0))
        self.disk_u = self.u * defocus_radius
        self.disk_v = self.v * defocus_radius

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        """Returns a random ray origin on the lens disk."""
        if self.disk_u == _ZERO and self.disk_v == _ZERO:
            return self.center
        p = random_in_unit_disk(rng)
        return self.center + self.disk_u * p.x + self.disk_v * p.y

    def color_to_pixel(self, color: Vector3) -> Tuple[int, int, int, int]:
        """Converts a linear color into a gamma-encoded (r, g, b, 255) pixel."""
        r, g, b, a = encode_pixels([color.x, color.y, color.z], self.gamma)
        return int(r), int(g), int(b), int(a)

# core/utils.py
import math
import random
from raytracer.core.vector import Vector3

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).

    Rejection-samples the cube [-1, 1]^3, discarding points outside the unit
    ball and the origin itself, then normalizes.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        lensq = p.length_squared()
        if 0.0 < lensq < 1.0:
            return p / math.sqrt(lensq)

def random_on_hemisphere(normal: Vector3, rng: random.Random) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around the normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """Returns a random point in the unit disk of the z = 0 plane."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, refraction_index: float) -> float:
    # Schlick's approximation.
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

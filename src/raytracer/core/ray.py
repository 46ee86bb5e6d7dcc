# core/ray.py
from raytracer.core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and a time.

    The direction is not required to be unit length. The time lies in [0, 1]
    and selects where moving geometry sits when the ray is traced.
    """
    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"

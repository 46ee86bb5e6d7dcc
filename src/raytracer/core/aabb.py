# core/aabb.py
import math
from raytracer.core.interval import Interval
from raytracer.core.vector import Vector3

def _inverse(component: float) -> float:
    # Python raises on float division by zero; emulate IEEE 1/±0 = ±inf.
    if component == 0.0:
        return math.copysign(math.inf, component)
    return 1.0 / component

class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = Interval.EMPTY, y: Interval = Interval.EMPTY,
                 z: Interval = Interval.EMPTY):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        """Creates the box spanned by two corner points, in any order."""
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z)),
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z),
        )

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis(self, n: int) -> Interval:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"AABB axis must be 0, 1 or 2, got {n}")

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: clip the parameter range against each axis in turn.
        t_min = ray_t.min
        t_max = ray_t.max
        origin = ray.origin
        direction = ray.direction
        for a in range(3):
            slab = self.axis(a)
            inv_d = _inverse(direction[a])
            orig = origin[a]
            t0 = (slab.min - orig) * inv_d
            t1 = (slab.max - orig) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)

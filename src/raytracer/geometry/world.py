# geometry/world.py
import logging
import random
import time
from typing import List, Optional
from raytracer.core.aabb import AABB
from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.geometry.bvh import BVHNode
from raytracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class World(Hittable):
    """
    A list of Hittable objects with an aggregate bounding box.

    Queries scan the list linearly until build_bvh() is called; from then on
    they go through the BVH. Adding an object drops the BVH until the next
    build_bvh().
    """
    def __init__(self):
        self.objects: List[Hittable] = []
        self.bbox = AABB.EMPTY
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())
        # A BVH built earlier no longer covers every object
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.EMPTY
        self.bvh_root = None

    def build_bvh(self, rng: Optional[random.Random] = None) -> Optional[BVHNode]:
        if len(self.objects) == 0:
            self.bvh_root = None
            return None
        start = time.perf_counter()
        self.bvh_root = BVHNode(list(self.objects), rng)
        logger.debug("Built BVH over %d objects (depth %d) in %.3fs",
                     len(self.objects), self.bvh_root.depth(),
                     time.perf_counter() - start)
        return self.bvh_root

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, ray_t)

        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox

    def __len__(self) -> int:
        return len(self.objects)

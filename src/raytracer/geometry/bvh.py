# geometry/bvh.py
import logging
import random
from typing import List, Optional
import numpy as np
from raytracer.core.aabb import AABB
from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode(Hittable):
    """
    Bounding volume hierarchy over a list of hittables.

    Each node splits its objects along a randomly chosen axis, ordered by the
    minimum of their bounding boxes on that axis, and halves them at the median.
    A node always has a left child; the right child is None when the node was
    built from a single object.
    """
    def __init__(self, objects: List[Hittable], rng: Optional[random.Random] = None):
        if not objects:
            raise ValueError("Cannot build a BVH node from an empty object list")
        if rng is None:
            rng = random.Random()

        axis = rng.randint(0, 2)
        object_span = len(objects)
        self.right: Optional[Hittable] = None

        if object_span == 1:
            self.left = objects[0]
            self.box = self.left.bounding_box()
            return

        # sorted() returns a new list, so the caller's list is never reordered.
        ordered = sorted(objects, key=lambda obj: obj.bounding_box().axis(axis).min)

        if object_span == 2:
            self.left, self.right = ordered
        else:
            mid = object_span // 2
            self.left = BVHNode(ordered[:mid], rng)
            self.right = BVHNode(ordered[mid:], rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)
        if self.right is None:
            return hit_left

        # Only accept right-hand hits strictly closer than the left one.
        t_max = hit_left.t if hit_left is not None else ray_t.max
        hit_right = self.right.hit(ray, Interval(ray_t.min, t_max))

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of BVHNode levels from this node down to the deepest leaf."""
        depths = [child.depth() for child in (self.left, self.right)
                  if isinstance(child, BVHNode)]
        return 1 + max(depths, default=0)

def flatten_bvh(bvh_root: BVHNode):
    """
    Traverse and flatten the BVH tree into NumPy arrays, depth first.

    Interior nodes and primitive leaves each get one entry.

    Returns six arrays:
      - bbox_min: (n,3) array of minimum coordinates.
      - bbox_max: (n,3) array of maximum coordinates.
      - left_indices: (n,) array (index of left child, or -1 for a leaf).
      - right_indices: (n,) array (index of right child, or -1 if absent).
      - is_leaf: (n,) int array (1 for a primitive, 0 for a BVH node).
      - object_indices: (n,) array, the primitive's position in leaf order (or -1).
    """
    nodes = []
    leaf_count = 0

    def traverse(node) -> int:
        nonlocal leaf_count
        index = len(nodes)
        nodes.append(None)  # placeholder
        box = node.bounding_box()
        if isinstance(node, BVHNode):
            left_index = traverse(node.left)
            right_index = traverse(node.right) if node.right is not None else -1
            flat_node = (box, left_index, right_index, 0, -1)
        else:
            flat_node = (box, -1, -1, 1, leaf_count)
            leaf_count += 1
        nodes[index] = flat_node
        return index

    traverse(bvh_root)
    n = len(nodes)

    bbox_min = np.zeros((n, 3), dtype=np.float64)
    bbox_max = np.zeros((n, 3), dtype=np.float64)
    left_indices = -np.ones(n, dtype=np.int32)
    right_indices = -np.ones(n, dtype=np.int32)
    is_leaf = np.zeros(n, dtype=np.int32)
    object_indices = -np.ones(n, dtype=np.int32)

    for i, (box, left, right, leaf, obj) in enumerate(nodes):
        bbox_min[i] = [box.x.min, box.y.min, box.z.min]
        bbox_max[i] = [box.x.max, box.y.max, box.z.max]
        left_indices[i] = left
        right_indices[i] = right
        is_leaf[i] = leaf
        object_indices[i] = obj

    logger.debug("Flattened BVH into %d entries (%d primitives)", n, leaf_count)
    return bbox_min, bbox_max, left_indices, right_indices, is_leaf, object_indices

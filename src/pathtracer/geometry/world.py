# geometry/world.py
import logging
import random
import time
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode, FlatBVH, flatten_bvh
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects, queried by linear scan unless a BVH has been
    built over them with build_bvh().
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root: Optional[BVHNode] = None
        self.bvh_flat: Optional[FlatBVH] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None
        self.bvh_flat = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None
        self.bvh_flat = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng: Optional[random.Random] = None, nearest_hit: bool = True,
                  flatten: bool = False) -> BVHNode:
        """
        Build the acceleration structure. Raises BVHConstructionError (or its
        UnboundedGeometryError subclass) before any rendering can start.
        """
        start = time.perf_counter()
        self.bvh_root = BVHNode(self.objects, rng=rng, nearest_hit=nearest_hit)
        self.bvh_flat = flatten_bvh(self.bvh_root) if flatten else None
        logger.debug(
            "Built BVH over %d objects: %d nodes, depth %d, %.3fs",
            len(self.objects), self.bvh_root.node_count(), self.bvh_root.depth(),
            time.perf_counter() - start,
        )
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_flat is not None:
            return self.bvh_flat.hit(ray, t_min, t_max)
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        """Union of all object boxes; None if empty or any object is unbounded."""
        result = None
        for obj in self.objects:
            box = obj.bounding_box()
            if box is None:
                return None
            result = box if result is None else AABB.surrounding_box(result, box)
        return result

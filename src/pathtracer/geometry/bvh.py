# geometry/bvh.py
import random
from typing import List, Optional
import numpy as np
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class BVHConstructionError(ValueError):
    """Raised when a BVH cannot be built from the given objects."""

class UnboundedGeometryError(BVHConstructionError):
    """Raised when an object without a bounding box is put into a BVH."""

def _require_box(obj: Hittable) -> AABB:
    box = obj.bounding_box()
    if box is None:
        raise UnboundedGeometryError(f"unbounded geometry in BVH: {obj!r} has no bounding box")
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of hittables.

    Splits are count based: the object range is cut at its midpoint by index
    and a pair of objects is ordered along a randomly chosen axis.

    With nearest_hit=True the right subtree is searched only up to the left
    hit, so the closest intersection is returned. With nearest_hit=False any
    left hit wins over the right subtree, whatever its distance.
    """
    def __init__(self, objects: List[Hittable], start: int = 0, end: Optional[int] = None,
                 rng: Optional[random.Random] = None, nearest_hit: bool = True):
        if end is None:
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise BVHConstructionError("cannot build a BVH from an empty object list")

        rng = rng if rng is not None else random.Random()
        self.nearest_hit = nearest_hit
        axis = rng.randrange(3)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            a, b = objects[start], objects[start + 1]
            if _require_box(a).minimum[axis] < _require_box(b).minimum[axis]:
                self.left, self.right = a, b
            else:
                self.left, self.right = b, a
        else:
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng, nearest_hit)
            self.right = BVHNode(objects, mid, end, rng, nearest_hit)

        self.box = AABB.surrounding_box(_require_box(self.left), _require_box(self.right))

    @property
    def is_leaf(self) -> bool:
        return not isinstance(self.left, BVHNode) and not isinstance(self.right, BVHNode)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is self.left:
            return hit_left

        if not self.nearest_hit:
            if hit_left is not None:
                return hit_left
            return self.right.hit(ray, t_min, t_max)

        # Narrow the right search to anything closer than the left hit
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def node_count(self) -> int:
        count = 1
        for child in {id(self.left): self.left, id(self.right): self.right}.values():
            if isinstance(child, BVHNode):
                count += child.node_count()
        return count

    def depth(self) -> int:
        children = [c.depth() for c in (self.left, self.right) if isinstance(c, BVHNode)]
        return 1 + max(children, default=0)

class FlatBVH(Hittable):
    """
    Index-addressed (arena) form of a BVH produced by flatten_bvh().

    Node i has its box in bbox_min[i]/bbox_max[i]. Interior nodes store child
    indices in left/right and -1 in object_index; leaf nodes store -1 children
    and the index of their object in `objects`. Node 0 is the root.
    """
    def __init__(self, bbox_min: np.ndarray, bbox_max: np.ndarray, left: np.ndarray,
                 right: np.ndarray, object_index: np.ndarray, objects: List[Hittable],
                 nearest_hit: bool = True):
        self.bbox_min = bbox_min
        self.bbox_max = bbox_max
        self.left = left
        self.right = right
        self.object_index = object_index
        self.objects = objects
        self.nearest_hit = nearest_hit

    def __len__(self) -> int:
        return len(self.left)

    def _box_hit(self, node: int, origin: np.ndarray, inv_dir: np.ndarray,
                 t_min: float, t_max: float) -> bool:
        # Per axis, as AABB.hit does. fmax/fmin drop the NaN of 0 * inf
        with np.errstate(invalid="ignore"):
            t0 = (self.bbox_min[node] - origin) * inv_dir
            t1 = (self.bbox_max[node] - origin) * inv_dir
            lo = np.fmax(np.minimum(t0, t1), t_min)
            hi = np.fmin(np.maximum(t0, t1), t_max)
            return not bool(np.any(hi <= lo))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        origin = np.array(tuple(ray.origin), dtype=np.float64)
        with np.errstate(divide="ignore"):
            inv_dir = 1.0 / np.array(tuple(ray.direction), dtype=np.float64)

        closest = t_max
        result = None
        stack = [0]
        while stack:
            node = stack.pop()
            if not self._box_hit(node, origin, inv_dir, t_min, closest):
                continue
            obj = self.object_index[node]
            if obj >= 0:
                rec = self.objects[obj].hit(ray, t_min, closest)
                if rec is None:
                    continue
                if not self.nearest_hit:
                    # First hit in left-first order, as BVHNode does
                    return rec
                closest = rec.t
                result = rec
                continue
            right = self.right[node]
            if right != self.left[node]:
                stack.append(right)
            stack.append(self.left[node])
        return result

    def bounding_box(self) -> AABB:
        return AABB(Vector3(*self.bbox_min[0].tolist()), Vector3(*self.bbox_max[0].tolist()))

def flatten_bvh(bvh_root: BVHNode) -> FlatBVH:
    """
    Traverse and flatten the BVH tree into NumPy arrays.

    Every object reachable from the tree becomes a leaf node; an object that
    is both children of a node (single object subtree) is stored once.
    """
    nodes = []
    objects = []

    def traverse(node) -> int:
        index = len(nodes)
        nodes.append(None)  # placeholder
        box = node.bounding_box()
        if isinstance(node, BVHNode):
            left_index = traverse(node.left)
            right_index = left_index if node.right is node.left else traverse(node.right)
            obj_index = -1
        else:
            left_index = right_index = -1
            obj_index = len(objects)
            objects.append(node)
        nodes[index] = (list(box.minimum), list(box.maximum), left_index, right_index, obj_index)
        return index

    traverse(bvh_root)
    n = len(nodes)

    bbox_min = np.zeros((n, 3), dtype=np.float64)
    bbox_max = np.zeros((n, 3), dtype=np.float64)
    left_indices = -np.ones(n, dtype=np.int64)
    right_indices = -np.ones(n, dtype=np.int64)
    object_indices = -np.ones(n, dtype=np.int64)

    for i, (lo, hi, left, right, obj) in enumerate(nodes):
        bbox_min[i] = lo
        bbox_max[i] = hi
        left_indices[i] = left
        right_indices[i] = right
        object_indices[i] = obj

    return FlatBVH(bbox_min, bbox_max, left_indices, right_indices, object_indices,
                   objects, nearest_hit=bvh_root.nearest_hit)

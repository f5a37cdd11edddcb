from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.bvh import (
    BVHNode, FlatBVH, flatten_bvh, BVHConstructionError, UnboundedGeometryError,
)
from pathtracer.geometry.world import HittableList

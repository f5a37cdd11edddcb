# geometry/rect.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the bounding box along the fixed axis.
BOX_PADDING = 0.0001

class AxisAlignedRect(Hittable):
    """
    A rectangle lying in the plane `axis k = k`, spanning [a0, a1] on axis `a`
    and [b0, b1] on axis `b`. Subclasses only choose the axes.
    """
    axis_a = 0
    axis_b = 1
    axis_k = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.axis_k] = 1.0
        return Vector3(*n)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        dk = ray.direction[self.axis_k]
        if dk == 0:
            # Parallel to the plane
            return None
        t = (self.k - ray.origin[self.axis_k]) / dk
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.axis_a] + t * ray.direction[self.axis_a]
        b = ray.origin[self.axis_b] + t * ray.direction[self.axis_b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        u = (a - self.a0) / (self.a1 - self.a0)
        v = (b - self.b0) / (self.b1 - self.b0)
        return HitRecord.from_ray(ray, ray.at(t), self.outward_normal(), t, u, v, self.material)

    def bounding_box(self) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.axis_a], hi[self.axis_a] = self.a0, self.a1
        lo[self.axis_b], hi[self.axis_b] = self.b0, self.b1
        lo[self.axis_k], hi[self.axis_k] = self.k - BOX_PADDING, self.k + BOX_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

class XYRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)

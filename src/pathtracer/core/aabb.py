# core/aabb.py
import math
from pathtracer.core.vector import Vector3

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method. A zero direction component gives an infinite
        # reciprocal; the comparisons below still do the right thing.
        for a in range(3):
            d = ray.direction[a]
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            # 0 * inf is NaN when the origin sits on a slab plane; that
            # bound is dropped and the axis only keeps the ray interval.
            lo = t_min if math.isnan(t0) else max(t0, t_min)
            hi = t_max if math.isnan(t1) else min(t1, t_max)
            if hi <= lo:
                return False
        return True

    def contains(self, point: Vector3) -> bool:
        return all(self.minimum[a] <= point[a] <= self.maximum[a] for a in range(3))

    def centroid(self) -> Vector3:
        return (self.minimum + self.maximum) * 0.5

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

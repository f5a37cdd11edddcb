# geometry/sphere.py
import math
from typing import Optional, Tuple
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        u, v = self.get_uv(outward_normal)
        return HitRecord.from_ray(ray, p, outward_normal, root, u, v, self.material)

    @staticmethod
    def get_uv(p: Vector3) -> Tuple[float, float]:
        # p: a point on the unit sphere centered at the origin.
        # u: angle around the Y axis from X=-1, v: angle from Y=-1 to Y=+1.
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

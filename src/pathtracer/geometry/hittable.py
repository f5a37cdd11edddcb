# geometry/hittable.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, u: float = 0, v: float = 0,
                 front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always opposing the ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Surface coordinates for texturing
        self.v = v
        self.front_face = front_face  # Whether the hit was on the front side
        self.material = material

    @classmethod
    def from_ray(cls, ray: Ray, p: Vector3, outward_normal: Vector3, t: float,
                 u: float, v: float, material) -> "HitRecord":
        rec = cls(p=p, t=t, u=u, v=v, material=material)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        """Returns None for geometry that cannot be bounded."""
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

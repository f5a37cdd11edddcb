# materials/dielectric.py
import math
import random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, reflectance
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterResult

class Dielectric(Material):
    """Clear refractive material (glass, water) described by its index of refraction."""
    def __init__(self, ir: float):
        self.ir = ir

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> ScatterResult:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Entering the material from outside, or leaving it
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return ScatterResult(attenuation, Ray(rec.p, direction))

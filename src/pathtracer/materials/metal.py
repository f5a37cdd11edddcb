# materials/metal.py
import random
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterResult, as_texture
from pathtracer.materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) > 0:
            attenuation = self.texture.value(rec.u, rec.v, rec.p)
            return ScatterResult(attenuation, Ray(rec.p, direction))

        return None  # Absorb the ray if it does not scatter forward

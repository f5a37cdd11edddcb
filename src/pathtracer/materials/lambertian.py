# materials/lambertian.py
import random
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterResult, as_texture
from pathtracer.materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> ScatterResult:
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can cancel the normal; fall back to the normal alone.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterResult(attenuation, Ray(rec.p, scatter_direction))

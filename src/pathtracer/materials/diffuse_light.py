# materials/diffuse_light.py
import random
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture.
        """
        return self.texture.value(u, v, p)

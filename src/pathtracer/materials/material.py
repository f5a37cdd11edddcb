# materials/material.py
import random
from typing import NamedTuple, Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, SolidColor

BLACK = Vector3(0.0, 0.0, 0.0)

class ScatterResult(NamedTuple):
    attenuation: Vector3
    scattered: Ray

def as_texture(color: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidColor; textures pass through."""
    if isinstance(color, Vector3):
        return SolidColor(color)
    return color

class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emissive
    materials also override emitted().

    Materials are shared between objects and render threads and must not be
    mutated after construction. All randomness comes from the rng argument.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[ScatterResult]:
        """
        Computes the attenuation and scattered ray, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK

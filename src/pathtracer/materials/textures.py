# materials/textures.py
import math
import os
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(scale*x)*sin(scale*y)*sin(scale*z)
    selects the odd or even texture.
    """
    def __init__(self, odd, even, scale: float = 10.0):
        self.odd = odd if isinstance(odd, Texture) else SolidColor(odd)
        self.even = even if isinstance(even, Texture) else SolidColor(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            # Normalize to [0,1] once; the array is shared read-only
            self.data = np.asarray(img, dtype=np.float64) / 255.0
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Clamp to [0,1] and flip V to image coordinates
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

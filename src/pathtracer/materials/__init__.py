from pathtracer.materials.textures import Texture, SolidColor, CheckerTexture, ImageTexture
from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight

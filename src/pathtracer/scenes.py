"""Built-in demo scenes.

Each builder returns a Scene holding an un-accelerated HittableList; the
renderer builds the BVH over it before rendering. Builders draw from the
given random generator so a seeded scene is reproducible.
"""
import math
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture
from pathtracer.renderer.settings import ASPECT_RATIO

@dataclass
class Scene:
    world: HittableList
    camera: Camera
    background: Optional[Vector3]  # None means the sky gradient

SKY = Vector3(0.7, 0.8, 1.0)

def _ground_checker() -> CheckerTexture:
    return CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))

def _random_material(rng: random.Random):
    choose_mat = rng.random()
    if choose_mat < 0.8:
        # diffuse
        return Lambertian(random_vector(rng) * random_vector(rng))
    if choose_mat < 0.95:
        # metal
        return Metal(random_vector(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
    # glass
    return Dielectric(1.5)

def random_scene(rng: random.Random, aspect_ratio: float = ASPECT_RATIO) -> Scene:
    """The classic field of small random spheres around three large ones."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(_ground_checker())))

    clearance_point = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance_point).length() > 0.9:
                world.add(Sphere(center, 0.2, _random_material(rng)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    20.0, aspect_ratio, aperture=0.1, focus_dist=10.0)
    return Scene(world, camera, SKY)

def random_spheres(rng: random.Random, aspect_ratio: float = ASPECT_RATIO) -> Scene:
    """A planet covered in 1500 tiny spheres with a small cluster on top."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, 0), 10.0, Lambertian(_ground_checker())))
    world.add(Sphere(Vector3(0, 11, 0), 1.0, Metal(Vector3(1, 1, 1), 0.35)))
    world.add(Sphere(Vector3(1.25, 10.5, 1.0), 0.4, Lambertian(Vector3(0.7, 0.2, 0.3))))
    world.add(Sphere(Vector3(0.5, 10.3, -1.0125), 0.3, Lambertian(Vector3(0.2, 0.3, 0.7))))
    world.add(Sphere(Vector3(1.4, 10.3, -0.5), 0.2, Dielectric(1.5)))

    clearance_point = Vector3(4, 0.2, 0)
    for _ in range(1500):
        # Uniform point on a sphere of radius 10.1
        theta = 2 * math.pi * rng.random()
        phi = math.acos(2 * rng.random() - 1)
        center = Vector3(10.1 * math.sin(phi) * math.cos(theta),
                         10.1 * math.sin(phi) * math.sin(theta),
                         10.1 * math.cos(phi))
        if (center - clearance_point).length() > 0.9:
            world.add(Sphere(center, 0.1, _random_material(rng)))

    lookfrom = Vector3(10, 14, 2)
    lookat = Vector3(0, 10.5, 0)
    camera = Camera(lookfrom, lookat, Vector3(0, 1, 0), 20.0, aspect_ratio,
                    aperture=0.25, focus_dist=(lookfrom - lookat).length())
    return Scene(world, camera, SKY)

def glowing_sphere(rng: random.Random, aspect_ratio: float = ASPECT_RATIO) -> Scene:
    """A light-emitting sphere on a checkered ground, no ambient light."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(_ground_checker())))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, DiffuseLight(Vector3(1, 1, 1))))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(0.5, 0.5, 1.5), 0.5, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    world.add(Sphere(Vector3(1.5, 0.75, -1.5), 0.75, Dielectric(1.5)))

    lookfrom = Vector3(6, 2, 3)
    lookat = Vector3(0, 1, 0)
    camera = Camera(lookfrom, lookat, Vector3(0, 1, 0), 30.0, aspect_ratio,
                    aperture=0.1, focus_dist=(lookfrom - lookat).length())
    return Scene(world, camera, Vector3(0, 0, 0))

def simple_light(rng: random.Random, aspect_ratio: float = ASPECT_RATIO) -> Scene:
    """Spheres lit by a rectangular area light, closed in by two walls."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(_ground_checker())))
    world.add(Sphere(Vector3(0, 2, 0), 2.0, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, 7, 0), 1.0, DiffuseLight(Vector3(4, 4, 4))))
    world.add(XYRect(3, 5, 1, 3, -2, DiffuseLight(Vector3(4, 4, 4))))
    world.add(XZRect(-3, 3, -3, 3, 9, Lambertian(Vector3(0.73, 0.73, 0.73))))
    world.add(YZRect(0, 5, -3, 3, -4, Metal(Vector3(0.8, 0.85, 0.88), 0.05)))

    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), Vector3(0, 1, 0), 20.0,
                    aspect_ratio)
    return Scene(world, camera, Vector3(0, 0, 0))

SCENES: Dict[str, Callable[..., Scene]] = {
    "random": random_scene,
    "random_spheres": random_spheres,
    "glowing_sphere": glowing_sphere,
    "simple_light": simple_light,
}

def build_scene(name: str, rng: Optional[random.Random] = None,
                aspect_ratio: float = ASPECT_RATIO) -> Scene:
    if name not in SCENES:
        raise ValueError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}")
    return SCENES[name](rng if rng is not None else random.Random(), aspect_ratio)

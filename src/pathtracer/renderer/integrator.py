# renderer/integrator.py
import math
import random
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable

# Lower bound on hit distance, keeps a scattered ray from re-hitting its origin
T_MIN = 0.001

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def sky_gradient(ray: Ray) -> Vector3:
    """Vertical white-to-blue blend used when the scene has no background color."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE.lerp(SKY_BLUE, t)

def ray_color(ray: Ray, background: Optional[Vector3], world: Hittable, depth: int,
              rng: random.Random) -> Vector3:
    """
    Monte Carlo estimate of the radiance carried back along `ray`.

    Equivalent to the recursion
        color(ray, d) = emitted + attenuation * color(scattered, d - 1)
    with color(_, 0) = black, unrolled into a loop: `throughput` is the product
    of attenuations so far and `radiance` the emission gathered so far.
    Termination is a hard depth cutoff.
    """
    radiance = Vector3(0.0, 0.0, 0.0)
    throughput = Vector3(1.0, 1.0, 1.0)

    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            sky = background if background is not None else sky_gradient(ray)
            return radiance + throughput * sky

        radiance = radiance + throughput * rec.material.emitted(rec.u, rec.v, rec.p)
        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return radiance

        throughput = throughput * result.attenuation
        ray = result.scattered
        depth -= 1

    # Bounce limit reached, no more light is gathered
    return radiance

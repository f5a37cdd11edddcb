# camera/camera.py
import math
import random
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    Look-at camera with a thin lens. get_ray() maps normalized view-plane
    coordinates s, t in [0, 1] (origin at the lower left) to a ray.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov  # vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        h = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.origin = self.lookfrom
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Generates a ray, jittering the origin over the lens when aperture > 0."""
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction)

        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)

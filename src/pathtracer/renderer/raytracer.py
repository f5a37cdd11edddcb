# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Optional
import numpy as np
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.settings import RenderSettings
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Multiplier that spreads per-row seeds of different base seeds apart
ROW_SEED_STRIDE = 1_000_003

def row_rng(seed: Optional[int], row: int) -> random.Random:
    """Independent generator for one image row; deterministic when seed is set."""
    if seed is None:
        return random.Random()
    return random.Random(seed * ROW_SEED_STRIDE + row)

def render_row(row: int, world: Hittable, camera, background: Optional[Vector3],
               settings: RenderSettings) -> np.ndarray:
    """
    Render one image row (row 0 is the top of the image) and return a
    (width, 3) array of gamma-corrected colors.
    """
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    rng = row_rng(settings.seed, row)
    j = height - 1 - row

    pixels = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(spp):
            s = (i + rng.random()) / (width - 1)
            t = (j + rng.random()) / (height - 1)
            ray = camera.get_ray(s, t, rng)
            color = ray_color(ray, background, world, settings.max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        pixels[i] = (r, g, b)
    return gamma_correct(pixels, spp)

# Scene installed in each worker process by the pool initializer
_worker_scene = None

def _init_worker(world, camera, background):
    global _worker_scene
    _worker_scene = (world, camera, background)

def _render_row_in_worker(row: int, settings: RenderSettings) -> np.ndarray:
    world, camera, background = _worker_scene
    return render_row(row, world, camera, background, settings)

class Renderer:
    """
    Row-parallel Monte Carlo renderer.

    The world, camera and background are shared read-only by every worker.
    Each row draws from its own random generator, so a seeded render is
    identical whatever the number of workers.
    """
    def __init__(self, settings: Optional[RenderSettings] = None, **kwargs):
        if settings is None:
            settings = RenderSettings(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a RenderSettings or keyword settings, not both")
        self.settings = settings.validate()

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    def prepare(self, world: HittableList, rng: Optional[random.Random] = None) -> Hittable:
        """
        Build the BVH on the calling thread. Construction errors surface here,
        before any pixel work starts.
        """
        if not self.settings.use_bvh:
            return world
        if rng is None and self.settings.seed is not None:
            rng = random.Random(self.settings.seed)
        world.build_bvh(rng=rng, nearest_hit=self.settings.nearest_hit,
                        flatten=self.settings.flat_bvh)
        return world

    def render(self, world: Hittable, camera, background: Optional[Vector3] = None) -> np.ndarray:
        """
        Render the full image. Returns a (height, width, 3) float array of
        gamma-corrected colors, top row first.
        """
        settings = self.settings
        image = np.zeros((settings.height, settings.width, 3), dtype=np.float64)

        logger.info(
            "Rendering %dx%d, %d spp, max depth %d",
            settings.width, settings.height, settings.samples_per_pixel, settings.max_depth,
        )
        start = time.perf_counter()

        if settings.use_processes:
            executor = ProcessPoolExecutor(
                max_workers=settings.workers,
                initializer=_init_worker,
                initargs=(world, camera, background),
            )
        else:
            executor = ThreadPoolExecutor(max_workers=settings.workers)

        with executor:
            if settings.use_processes:
                futures = {executor.submit(_render_row_in_worker, row, settings): row
                           for row in range(settings.height)}
            else:
                futures = {executor.submit(render_row, row, world, camera, background, settings): row
                           for row in range(settings.height)}

            step = max(1, settings.height // 10)
            for done, future in enumerate(as_completed(futures), start=1):
                image[futures[future]] = future.result()
                if done % step == 0 or done == settings.height:
                    logger.debug("%d/%d rows done", done, settings.height)

        logger.info("Rendering completed in %.2fs", time.perf_counter() - start)
        return image

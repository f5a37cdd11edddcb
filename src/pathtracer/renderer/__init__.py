from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.raytracer import Renderer, render_row
from pathtracer.renderer.settings import RenderSettings, QUALITY_PRESETS

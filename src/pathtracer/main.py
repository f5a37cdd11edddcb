"""Command-line front end: build a demo scene, render it, write the image.

Usage:
    pathtracer --scene random --width 400 --samples 50 --output image.ppm
"""
import argparse
import logging
import random
import sys
from typing import List, Optional
from pathtracer.geometry.bvh import BVHConstructionError
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.settings import (
    ASPECT_RATIO, DEFAULT_MAX_DEPTH, DEFAULT_SAMPLES, DEFAULT_WIDTH, QUALITY_PRESETS,
    RenderSettings,
)
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Offline Monte Carlo path tracer.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="Built-in scene to render (default: random)")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help=f"Image width in pixels (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (default: width / 16:9)")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default=None,
                        help="Preset for samples and depth; explicit flags override it")
    parser.add_argument("--samples", type=int, default=None,
                        help=f"Samples per pixel (default: {DEFAULT_SAMPLES})")
    parser.add_argument("--max-depth", type=int, default=None,
                        help=f"Maximum light bounces per ray (default: {DEFAULT_MAX_DEPTH})")
    parser.add_argument("--workers", type=int, default=None,
                        help="Number of worker threads or processes")
    parser.add_argument("--processes", action="store_true",
                        help="Render rows in worker processes instead of threads. Threads share "
                             "one interpreter lock, so only processes spread this "
                             "pure-Python work over several cores")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible scene and render")
    parser.add_argument("--legacy-bvh", action="store_true",
                        help="Let a left-subtree BVH hit win even if the right one is closer")
    parser.add_argument("--no-bvh", action="store_true",
                        help="Intersect the scene by linear scan")
    parser.add_argument("--flat-bvh", action="store_true",
                        help="Traverse the BVH as a flat array arena")
    parser.add_argument("--output", "-o", default="image.ppm",
                        help="Output file; .ppm is written as plain text, other "
                             "suffixes through Pillow (default: image.ppm)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    return parser.parse_args(argv)

def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    height = args.height if args.height is not None else int(args.width / ASPECT_RATIO)
    overrides = dict(
        width=args.width,
        height=height,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        workers=args.workers,
        seed=args.seed,
        use_processes=args.processes,
        nearest_hit=not args.legacy_bvh,
        use_bvh=not args.no_bvh,
        flat_bvh=args.flat_bvh,
    )
    return RenderSettings.from_quality(args.quality or "final", **overrides).validate()

def print_rendering_info(settings: RenderSettings, scene_name: str):
    rows = [
        ("Scene", scene_name),
        ("Image resolution", f"{settings.width}x{settings.height}"),
        ("Number of samples per pixel", str(settings.samples_per_pixel)),
        ("Maximum amount of light bounces per ray", str(settings.max_depth)),
        ("Workers", "auto" if settings.workers is None else str(settings.workers)),
    ]
    key_width = max(len(k) for k, _ in rows)
    value_width = max(len(v) for _, v in rows)
    border = "+" + "-" * (key_width + 2) + "+" + "-" * (value_width + 2) + "+"
    print(border, file=sys.stderr)
    print(f"| {'Rendering information'.center(key_width + value_width + 3)} |", file=sys.stderr)
    print(border, file=sys.stderr)
    for key, value in rows:
        print(f"| {key.ljust(key_width)} | {value.ljust(value_width)} |", file=sys.stderr)
    print(border, file=sys.stderr)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_rendering_info(settings, args.scene)

    rng = random.Random(args.seed)
    scene = build_scene(args.scene, rng, settings.width / settings.height)
    renderer = Renderer(settings)

    try:
        world = renderer.prepare(scene.world)
    except BVHConstructionError as e:
        print(f"error: cannot build scene: {e}", file=sys.stderr)
        return 1

    image = renderer.render(world, scene.camera, scene.background)

    save_image(args.output, image)
    print("Done!", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())

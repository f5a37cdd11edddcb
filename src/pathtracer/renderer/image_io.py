# renderer/image_io.py
import logging
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image
from pathtracer.renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def format_ppm(image) -> str:
    """
    Plain-text PPM (P3): header, 'width height', max value 255, then one
    'r g b' line per pixel in row-major order, top row first.
    """
    rgb = to_rgb8(image)
    height, width = rgb.shape[:2]
    lines = ["P3", f"{width} {height}", "255"]
    lines.extend(f"{r} {g} {b}" for r, g, b in rgb.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"

def write_ppm(path: PathLike, image) -> Path:
    path = Path(path)
    path.write_text(format_ppm(image), encoding="ascii")
    return path

def save_image(path: PathLike, image) -> Path:
    """Write the image as PPM for a .ppm suffix, otherwise through Pillow."""
    path = Path(path)
    if path.parent != Path(""):
        path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, image)
    else:
        Image.fromarray(to_rgb8(image)).save(path)
    logger.info("Saved %dx%d image to %s", np.shape(image)[1], np.shape(image)[0], path)
    return path

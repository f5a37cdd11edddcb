# renderer/tone_mapping.py
import numpy as np

def gamma_correct(accumulated, samples_per_pixel: int):
    """
    Average the summed samples and apply gamma 2 (a square root).
    Works on a single color sum or on a whole (h, w, 3) buffer.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) / samples_per_pixel
    # Tiny negative values can only come from rounding
    return np.sqrt(np.maximum(scaled, 0.0))

def to_rgb8(image) -> np.ndarray:
    """
    Quantize gamma-corrected colors in [0,1] to 8-bit channels using
    floor(255.999 * c). Values outside [0,1] are clamped first.
    """
    clipped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    return np.floor(255.999 * clipped).astype(np.uint8)

# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

ASPECT_RATIO = 16.0 / 9.0
DEFAULT_WIDTH = 400
DEFAULT_SAMPLES = 100
DEFAULT_MAX_DEPTH = 50

# Named quality levels; explicit settings override them.
QUALITY_PRESETS = {
    "preview": {"samples_per_pixel": 4, "max_depth": 8},
    "balanced": {"samples_per_pixel": 32, "max_depth": 20},
    "final": {"samples_per_pixel": DEFAULT_SAMPLES, "max_depth": DEFAULT_MAX_DEPTH},
}

@dataclass(frozen=True)
class RenderSettings:
    width: int = DEFAULT_WIDTH
    height: int = int(DEFAULT_WIDTH / ASPECT_RATIO)
    samples_per_pixel: int = DEFAULT_SAMPLES
    max_depth: int = DEFAULT_MAX_DEPTH
    workers: Optional[int] = None      # None lets the executor decide
    seed: Optional[int] = None         # None gives a non-reproducible render
    use_processes: bool = False        # threads share the GIL; processes use every core
    nearest_hit: bool = True           # False keeps the left-hit-wins BVH policy
    use_bvh: bool = True
    flat_bvh: bool = False             # query the numpy arena instead of the tree

    def validate(self) -> "RenderSettings":
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Image must be at least 2x2 pixels, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        return self

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        if quality not in QUALITY_PRESETS:
            raise ValueError(
                f"Unknown quality level {quality!r}; expected one of {sorted(QUALITY_PRESETS)}"
            )
        settings = replace(cls(), **QUALITY_PRESETS[quality])
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(settings, **overrides)

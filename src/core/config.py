# core/config.py
import math

# Minimum hit distance for secondary rays, avoids self-intersection ("shadow acne").
EPSILON = 1e-3
INFINITY = math.inf

DEFAULT_WORKERS = 8

# Progress is reported every 1/PROGRESS_STEPS of the image (every 20%).
PROGRESS_STEPS = 5

# Named presets overriding the per-scene sampling parameters.
QUALITY_LEVELS = {
    "preview": {"samples_per_pixel": 4, "depth": 8},
    "balanced": {"samples_per_pixel": 32, "depth": 25},
    "final": {"samples_per_pixel": 100, "depth": 50},
}

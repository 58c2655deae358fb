# renderer/tone_mapping.py
import math
from typing import Tuple
from core.color import Color
from core.utils import clamp

def gamma_correct(color: Color, samples: int) -> Tuple[int, int, int]:
    """
    Average `samples` accumulated radiance, apply gamma 2 (square root) and
    quantize each channel to an integer in [0, 255].
    """
    scale = 1.0 / samples
    r, g, b = (int(clamp(math.sqrt(max(0.0, scale * c)) * 255.0, 0.0, 255.0))
               for c in color)
    return r, g, b

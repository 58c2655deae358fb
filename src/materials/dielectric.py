# materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray
from core.color import Color, WHITE
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water...). Always scatters: each
    sample either reflects or refracts, chosen with Schlick's reflectance.
    """
    def __init__(self, ref_idx: float):
        if ref_idx <= 0:
            raise ValueError(f"Refraction index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        attenuation = WHITE  # Glass doesn't absorb light

        # Entering the medium from outside, or leaving it
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ni_over_nt) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Ray(rec.p, direction), attenuation

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"

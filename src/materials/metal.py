# materials/metal.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.color import Color
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material with mirror reflection blurred by `fuzz` (0 is a perfect mirror).
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be in [0, 1], got {fuzz}")
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction, rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if fuzz pushed it below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"

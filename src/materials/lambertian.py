# materials/lambertian.py
import random
from typing import Tuple
from core.ray import Ray
from core.color import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Offsetting the normal by a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"

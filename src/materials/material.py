# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.color import Color, BLACK
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emitters
    override emitted().

    Materials are immutable once built and may be shared by any number of
    objects and render threads.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the path is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self) -> Color:
        """
        Radiance emitted by the surface itself. Non-emissive by default.
        """
        return BLACK

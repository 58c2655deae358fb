# materials/diffuse_light.py
import random
from core.ray import Ray
from core.color import Color
from geometry.hittable import HitRecord
from materials.material import Material

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance. Paths end on it.
    """
    def __init__(self, emit: Color):
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self) -> Color:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight({self.emit!r})"

# Short name used by the scene builders
Light = DiffuseLight

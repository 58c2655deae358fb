# materials/presets.py
from core.color import Color, WHITE
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Predefined light sources."""

    @staticmethod
    def white_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(WHITE * intensity)

class ColorPresets:
    """Albedos used by the stock scenes."""

    GROUND = Color(0.5, 0.5, 0.5)
    CORNELL_RED = Color(0.65, 0.05, 0.05)
    CORNELL_GREEN = Color(0.12, 0.45, 0.15)
    CORNELL_WHITE = Color(0.73, 0.73, 0.73)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

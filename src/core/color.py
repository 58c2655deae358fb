# core/color.py
import random

class Color:
    """
    Linear RGB radiance. Channels are unclamped until tone mapping.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        # Scalar scale, otherwise the componentwise (attenuation) product.
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.r / t, self.g / t, self.b / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    @staticmethod
    def random(rng=random) -> "Color":
        return Color(rng.random(), rng.random(), rng.random())

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)

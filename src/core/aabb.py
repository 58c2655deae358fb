# core/aabb.py
import math
from typing import Optional
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: narrow [t_min, t_max] by the interval of each axis.
        for a in range(3):
            d = ray.direction[a]
            # A zero component gives a signed infinity: the ray never leaves
            # that slab if it starts inside it.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def contains(self, point: Vector3) -> bool:
        return all(self.minimum[a] <= point[a] <= self.maximum[a] for a in range(3))

    def encloses(self, other: "AABB") -> bool:
        return self.contains(other.minimum) and self.contains(other.maximum)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: Optional["AABB"], box1: Optional["AABB"]) -> Optional["AABB"]:
        """
        Union of two optional boxes. An absent operand is ignored; the result
        is absent only when both are.
        """
        if box0 is None:
            return box1
        if box1 is None:
            return box0
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

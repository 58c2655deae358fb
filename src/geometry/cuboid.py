# geometry/cuboid.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.rectangle import RectangleXY, RectangleXZ, RectangleYZ

class RectangularCuboid(Hittable):
    """
    Axis-aligned box between two opposite corners, built from its six faces.
    Every face shares the cuboid's material.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.p0 = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.p1 = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material

        lo, hi = self.p0, self.p1
        self.sides = [
            RectangleXY(lo.x, hi.x, lo.y, hi.y, hi.z, material),
            RectangleXY(lo.x, hi.x, lo.y, hi.y, lo.z, material),
            RectangleXZ(lo.x, hi.x, lo.z, hi.z, hi.y, material),
            RectangleXZ(lo.x, hi.x, lo.z, hi.z, lo.y, material),
            RectangleYZ(lo.y, hi.y, lo.z, hi.z, hi.x, material),
            RectangleYZ(lo.y, hi.y, lo.z, hi.z, lo.x, material),
        ]

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for side in self.sides:
            rec = side.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return AABB(self.p0, self.p1)

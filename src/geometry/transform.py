# geometry/transform.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.utils import degrees_to_radians
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves a child object by a fixed offset.
    """
    def __init__(self, child: Hittable, offset: Vector3):
        self.child = child
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction)
        rec = self.child.hit(moved, t_min, t_max)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        # The child oriented its normal against `moved`; recover the outward
        # normal and orient it again, keeping front_face from the local test.
        outward = rec.normal if rec.front_face else -rec.normal
        rec.front_face = moved.direction.dot(outward) < 0
        rec.normal = outward if rec.front_face else -outward
        rec.incoming = ray.direction
        return rec

    def bounding_box(self) -> Optional[AABB]:
        box = self.child.bounding_box()
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """
    Rotates a child object about the Y axis by `angle` degrees.
    """
    def __init__(self, child: Hittable, angle: float):
        self.child = child
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(child.bounding_box())

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for x in (box.minimum.x, box.maximum.x):
            for y in (box.minimum.y, box.maximum.y):
                for z in (box.minimum.z, box.maximum.z):
                    corner = self._to_world(Vector3(x, y, z))
                    for a in range(3):
                        lo[a] = min(lo[a], corner[a])
                        hi[a] = max(hi[a], corner[a])
        return AABB(Vector3(*lo), Vector3(*hi))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated = Ray(self._to_local(ray.origin), self._to_local(ray.direction))
        rec = self.child.hit(rotated, t_min, t_max)
        if rec is None:
            return None

        local_outward = rec.normal if rec.front_face else -rec.normal
        rec.front_face = rotated.direction.dot(local_outward) < 0
        outward = self._to_world(local_outward)
        rec.p = self._to_world(rec.p)
        rec.normal = outward if rec.front_face else -outward
        rec.incoming = ray.direction
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.box

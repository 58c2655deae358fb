# geometry/rectangle.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half thickness given to the bounding box along the fixed axis, so that
# the slab test does not degenerate on a zero-width box.
BOX_PADDING = 1e-4

_AXIS_UNIT = (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))

class AxisAlignedRectangle(Hittable):
    """
    Rectangle lying in the plane `axis == k`, bounded on the two remaining
    axes. Subclasses only choose which axes those are.
    """
    # (fixed axis, first free axis, second free axis)
    axes = (2, 0, 1)

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if a0 > a1 or b0 > b1:
            raise ValueError(f"Inverted rectangle bounds: [{a0}, {a1}] x [{b0}, {b1}]")
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        fixed, u, v = self.axes
        d = ray.direction[fixed]
        # A ray parallel to the plane never crosses it.
        if d == 0:
            return None
        t = (self.k - ray.origin[fixed]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[u] + t * ray.direction[u]
        b = ray.origin[v] + t * ray.direction[v]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, _AXIS_UNIT[fixed])
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        fixed, u, v = self.axes
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[u], hi[u] = self.a0, self.a1
        lo[v], hi[v] = self.b0, self.b1
        lo[fixed], hi[fixed] = self.k - BOX_PADDING, self.k + BOX_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")

class RectangleXY(AxisAlignedRectangle):
    """Rectangle in the plane z = k, spanning [x0, x1] x [y0, y1]."""
    axes = (2, 0, 1)

class RectangleXZ(AxisAlignedRectangle):
    """Rectangle in the plane y = k, spanning [x0, x1] x [z0, z1]."""
    axes = (1, 0, 2)

class RectangleYZ(AxisAlignedRectangle):
    """Rectangle in the plane x = k, spanning [y0, y1] x [z0, z1]."""
    axes = (0, 1, 2)

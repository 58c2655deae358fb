# geometry/world.py
import random
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

class HittableList(Hittable):
    """
    An ordered list of Hittable objects.

    Lookups are a linear closest-hit scan until build_bvh() is called; after
    that, bounded objects are searched through the hierarchy and objects
    without a bounding box are still scanned linearly.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)
        self.bvh_root: Optional[BVHNode] = None
        self.unbounded: List[Hittable] = []

    def add(self, obj: Hittable):
        self.objects.append(obj)
        # The hierarchy no longer covers the full list
        self.bvh_root = None
        self.unbounded = []

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, rng=random):
        if len(self.objects) == 0:
            raise ValueError("Cannot build a BVH for an empty world")
        bounded = [obj for obj in self.objects if obj.bounding_box() is not None]
        self.unbounded = [obj for obj in self.objects if obj.bounding_box() is None]
        self.bvh_root = BVHNode(bounded, 0, len(bounded), rng) if bounded else None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is None:
            return _closest_hit(self.objects, ray, t_min, t_max)

        hit_record = self.bvh_root.hit(ray, t_min, t_max)
        if self.unbounded:
            closest_so_far = hit_record.t if hit_record is not None else t_max
            rec = _closest_hit(self.unbounded, ray, t_min, closest_so_far)
            if rec is not None:
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        # An unbounded member makes the whole list unbounded.
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box()
            if box is None:
                return None
            output_box = AABB.surrounding_box(output_box, box)
        return output_box

def _closest_hit(objects, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
    hit_record = None
    closest_so_far = t_max
    for obj in objects:
        rec = obj.hit(ray, t_min, closest_so_far)
        if rec is not None:
            closest_so_far = rec.t
            hit_record = rec
    return hit_record

# geometry/bvh.py
import random
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Bounding volume hierarchy over objects[start:end].

    Each interior node owns two subtrees and the union of their boxes; a
    leaf wraps a single object. The slice of `objects` is reordered in
    place while building, so callers should pass a list they own.
    """
    def __init__(self, objects: list, start: int, end: int, rng=random):
        object_span = end - start
        if object_span < 1:
            raise ValueError("Cannot build a BVH over an empty range of objects")

        if object_span == 1:
            obj = objects[start]
            box = obj.bounding_box()
            if box is None:
                raise ValueError(f"{obj!r} has no bounding box and cannot be placed in a BVH")
            self.left = self.right = obj
            self.box = box
            self.is_leaf = True
            self.object = obj
            return

        # Split on a random axis at the median of the boxes' minimum corners.
        axis = rng.randrange(3)
        objects[start:end] = sorted(objects[start:end],
                                    key=lambda obj: _box_of(obj).minimum[axis])
        mid = start + object_span // 2

        self.left = BVHNode(objects, start, mid, rng)
        self.right = BVHNode(objects, mid, end, rng)
        self.box = AABB.surrounding_box(self.left.box, self.right.box)
        self.is_leaf = False
        self.object = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max)

        hit_left = self.left.hit(ray, t_min, t_max)

        # A hit on the left narrows the search on the right
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def leaves(self):
        """Yield every leaf node under this one."""
        if self.is_leaf:
            yield self
            return
        yield from self.left.leaves()
        yield from self.right.leaves()

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

def _box_of(obj) -> AABB:
    box = obj.bounding_box()
    if box is None:
        raise ValueError(f"{obj!r} has no bounding box and cannot be placed in a BVH")
    return box

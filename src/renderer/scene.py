# renderer/scene.py
import random
from geometry.world import HittableList
from renderer.integrator import sky_gradient

class Scene:
    """
    Everything a render needs: image size, sampling parameters, camera,
    objects and the background policy. Read-only once rendering starts.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int, depth: int,
                 camera, objects, background=sky_gradient, use_bvh: bool = False,
                 rng=random):
        for name, value in (("width", width), ("height", height),
                            ("samples_per_pixel", samples_per_pixel), ("depth", depth)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"Scene {name} must be a positive integer, got {value!r}")

        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.depth = depth
        self.camera = camera
        self.background = background
        self.world = objects if isinstance(objects, HittableList) else HittableList(objects)
        if use_bvh:
            self.world.build_bvh(rng)

    @property
    def objects(self):
        return self.world.objects

    def with_quality(self, samples_per_pixel: int = None, depth: int = None) -> "Scene":
        """Copy of this scene with different sampling parameters."""
        return Scene(self.width, self.height,
                     self.samples_per_pixel if samples_per_pixel is None else samples_per_pixel,
                     self.depth if depth is None else depth,
                     self.camera, self.world, self.background)

    def __repr__(self) -> str:
        return (f"Scene({self.width}x{self.height}, spp={self.samples_per_pixel}, "
                f"depth={self.depth}, objects={len(self.world)})")

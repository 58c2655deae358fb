# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians

class Camera:
    """
    Pinhole camera looking from `look_from` towards `look_at`.

    `vfov` is the vertical field of view in degrees. Image-plane coordinates
    (u, v) run from (0, 0) at the bottom-left corner to (1, 1) at the top-right.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = degrees_to_radians(self.vfov)
        half_height = math.tan(theta / 2)
        half_width = self.aspect_ratio * half_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * (2.0 * half_width)
        self.vertical = self.v * (2.0 * half_height)
        self.lower_left_corner = (self.origin -
                                  self.u * half_width -
                                  self.v * half_height -
                                  self.w)

    def get_ray(self, u: float, v: float) -> Ray:
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)

# renderer/integrator.py
import random
from core.ray import Ray
from core.color import Color, BLACK, WHITE
from core.config import EPSILON, INFINITY

SKY_BLUE = Color(0.5, 0.7, 1.0)

def sky_gradient(ray: Ray) -> Color:
    """
    Vertical white-to-blue blend on the ray's unit direction.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def black_background(ray: Ray) -> Color:
    return BLACK

def solid_background(color: Color):
    """Background policy returning the same color for every escaping ray."""
    def background(ray: Ray) -> Color:
        return color
    return background

def ray_color(ray: Ray, scene, depth: int, rng=random) -> Color:
    """
    Radiance arriving along `ray`, following at most `depth` bounces.

    Single-sample estimate: emitted + attenuation * radiance of the
    scattered ray. Paths that run out of depth contribute nothing.
    """
    if depth <= 0:
        return BLACK

    rec = scene.world.hit(ray, EPSILON, INFINITY)
    if rec is None:
        return scene.background(ray)

    emitted = rec.material.emitted()
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, scene, depth - 1, rng)

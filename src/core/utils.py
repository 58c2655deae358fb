# core/utils.py
import math
import random
from core.vector import Vector3

# Every sampling helper takes the random source explicitly so that a render
# can be replayed from a seed. The `random` module itself is a valid source.

def random_vector(rng=random, lo: float = -1.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng)
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Reject points so close to the center that normalizing them is unstable.
        if p.length_squared() > 1e-12:
            return p.normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n using
    the perpendicular/parallel decomposition of Snell's law.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x

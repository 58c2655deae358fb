# scenes/presets.py
import random
from core.vector import Vector3
from core.color import Color
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.rectangle import RectangleXY, RectangleXZ, RectangleYZ
from geometry.cuboid import RectangularCuboid
from geometry.transform import Translate, RotateY
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import MetalPresets, DielectricPresets, LightPresets, ColorPresets
from renderer.integrator import sky_gradient, black_background
from renderer.scene import Scene

def final_scene(rng=random) -> Scene:
    """Large ground sphere, three feature spheres and a field of small random ones."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(ColorPresets.GROUND)))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.gold()))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(Color.random(rng) * Color.random(rng))
            elif choose_mat < 0.95:
                material = Metal(Color.random(rng), rng.random() * 0.5)
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    print(f"Building scene 'final_scene' with {len(world)} objects")
    return Scene(
        width=300, height=200, samples_per_pixel=50, depth=50,
        camera=Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20, 3 / 2),
        objects=world,
        background=sky_gradient,
        use_bvh=True,
        rng=rng,
    )

def three_balls(rng=random) -> Scene:
    """Matte, glass-shelled and hollow-glass spheres next to a fuzzy gold one."""
    glass = DielectricPresets.glass()
    world = HittableList([
        Sphere(Vector3(0, -100.5, -1), 100, Lambertian(ColorPresets.GROUND)),
        Sphere(Vector3(0, 0, -1), 0.45, Lambertian(Color(0.7, 0.3, 0.3))),
        Sphere(Vector3(0, 0, -1), 0.5, glass),
        Sphere(Vector3(-1, 0, -1), 0.5, glass),
        # Negative radius flips the normals: a hollow bubble inside the glass ball
        Sphere(Vector3(-1, 0, -1), -0.45, glass),
        Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()),
    ])
    print(f"Building scene 'three_balls' with {len(world)} objects")
    return Scene(
        width=640, height=360, samples_per_pixel=10, depth=50,
        camera=Camera(Vector3(-2, 2, 1), Vector3(0, 0, -1), Vector3(0, 1, 0), 20, 16 / 9),
        objects=world,
        background=sky_gradient,
    )

def simple_light(rng=random) -> Scene:
    """A sphere on the ground lit by a single rectangular light in a black void."""
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(ColorPresets.GROUND)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(Color(0.8, 0.8, 0.8))),
        RectangleXY(3, 5, 1, 3, -2, LightPresets.white_light(4.0)),
    ])
    print(f"Building scene 'simple_light' with {len(world)} objects")
    return Scene(
        width=640, height=360, samples_per_pixel=100, depth=50,
        camera=Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), Vector3(0, 1, 0), 20, 16 / 9),
        objects=world,
        background=black_background,
    )

def _cornell_walls(world: HittableList, z_front: float):
    red = ColorPresets.matte(ColorPresets.CORNELL_RED)
    green = ColorPresets.matte(ColorPresets.CORNELL_GREEN)
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    light = LightPresets.white_light(15.0)

    world.add(RectangleYZ(0, 555, z_front, 555, 555, green))
    world.add(RectangleYZ(0, 555, z_front, 555, 0, red))
    world.add(RectangleXZ(213, 343, 227, 332, 554, light))
    world.add(RectangleXZ(0, 555, z_front, 555, 0, white))
    world.add(RectangleXZ(0, 555, z_front, 555, 555, white))
    world.add(RectangleXY(0, 555, 0, 555, 555, white))
    return white

def cornell_box(rng=random) -> Scene:
    """Closed Cornell box; the camera sits inside the extended front section."""
    world = HittableList()
    white = _cornell_walls(world, -1000)
    world.add(RectangleXY(0, 555, 0, 555, -1000, white))
    print(f"Building scene 'cornell_box' with {len(world)} objects")
    return Scene(
        width=400, height=400, samples_per_pixel=10, depth=50,
        camera=Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0), 40, 1.0),
        objects=world,
        background=black_background,
    )

def cornell_blocks(rng=random) -> Scene:
    """Open Cornell box holding two rotated blocks."""
    world = HittableList()
    white = _cornell_walls(world, 0)

    tall = RectangularCuboid(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    world.add(Translate(RotateY(tall, 15), Vector3(265, 0, 295)))
    short = RectangularCuboid(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    world.add(Translate(RotateY(short, -18), Vector3(130, 0, 65)))

    print(f"Building scene 'cornell_blocks' with {len(world)} objects")
    return Scene(
        width=400, height=400, samples_per_pixel=50, depth=50,
        camera=Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0), 40, 1.0),
        objects=world,
        background=black_background,
        use_bvh=True,
        rng=rng,
    )

# Every builder takes the random source used for scene generation and BVH splits.
SCENES = {
    "final_scene": final_scene,
    "three_balls": three_balls,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_blocks": cornell_blocks,
}

def build_scene(name: str, rng=random) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose one of {', '.join(SCENES)}") from None
    return builder(rng)

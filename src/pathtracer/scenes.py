# scenes.py
"""
Example scenes. Each builder returns the world to render and the camera
settings that frame it.
"""
import logging
from typing import Callable, Dict, Tuple

from pathtracer.camera.camera import CameraConfig, sky_gradient
from pathtracer.core.errors import SceneError
from pathtracer.core.utils import random_double, random_vector
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry import (
    BVHNode,
    ConstantMedium,
    Hittable,
    HittableList,
    Quad,
    RotateY,
    Sphere,
    Translate,
    box,
)
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Lambertian,
    Metal,
    NoiseTexture,
)
from pathtracer.materials.presets import DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

Scene = Tuple[Hittable, CameraConfig]


def spheres() -> Scene:
    """Glass sphere with an air bubble between a mirror and a brushed metal sphere."""
    world = HittableList()

    material_ground = Lambertian(Color(0.8, 0.8, 0.0))
    material_center = DielectricPresets.glass()
    material_left = MetalPresets.chrome()
    material_right = MetalPresets.brushed_metal()

    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, material_center))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), -0.4, material_center))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, material_left))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, material_right))

    config = CameraConfig(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=40,
        max_depth=10,
        background=sky_gradient,
        vfov=40,
        lookfrom=Point3(-2, 2, 1),
        lookat=Point3(0, 0, -1),
        vup=Vector3(0, 1, 0),
        defocus_angle=4.0,
        focus_dist=3.4,
    )
    return world, config


def random_spheres() -> Scene:
    """A checkered ground covered in small random spheres, with three large ones."""
    world = HittableList()

    checker = CheckerTexture(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector() * random_vector()
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = random_vector(0.5, 1)
                material = Metal(albedo, random_double(0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    config = CameraConfig(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=20,
        max_depth=20,
        background=sky_gradient,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return compile_world(world), config


def quads() -> Scene:
    world = HittableList()

    left_red = Lambertian(Color(1.0, 0.2, 0.2))
    back_green = Lambertian(Color(0.2, 1.0, 0.2))
    right_blue = Lambertian(Color(0.2, 0.2, 1.0))
    upper_orange = Lambertian(Color(1.0, 0.5, 0.0))
    lower_teal = Lambertian(Color(0.2, 0.8, 0.8))

    world.add(Quad(Point3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), left_red))
    world.add(Quad(Point3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), back_green))
    world.add(Quad(Point3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), right_blue))
    world.add(Quad(Point3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), upper_orange))
    world.add(Quad(Point3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), lower_teal))

    config = CameraConfig(
        aspect_ratio=1.0,
        image_width=400,
        samples_per_pixel=50,
        max_depth=20,
        background=sky_gradient,
        vfov=80,
        lookfrom=Point3(0, 0, 9),
        lookat=Point3(0, 0, 0),
    )
    return world, config


def _cornell_walls(world: HittableList, light: Quad):
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))

    world.add(Quad(Point3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Point3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(light)
    world.add(Quad(Point3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Point3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Point3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))
    return white


def _cornell_boxes(white) -> Tuple[Hittable, Hittable]:
    box1 = box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    box1 = RotateY(box1, 15)
    box1 = Translate(box1, Vector3(265, 0, 295))

    box2 = box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    box2 = RotateY(box2, -18)
    box2 = Translate(box2, Vector3(130, 0, 65))
    return box1, box2


def _cornell_camera() -> CameraConfig:
    return CameraConfig(
        aspect_ratio=1.0,
        image_width=300,
        samples_per_pixel=100,
        max_depth=50,
        background=Color(0, 0, 0),
        vfov=40,
        lookfrom=Point3(278, 278, -800),
        lookat=Point3(278, 278, 0),
    )


def cornell_box() -> Scene:
    world = HittableList()
    light = DiffuseLight(Color(15, 15, 15))
    white = _cornell_walls(world, Quad(Point3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light))
    box1, box2 = _cornell_boxes(white)
    world.add(box1)
    world.add(box2)
    return compile_world(world), _cornell_camera()


def cornell_smoke() -> Scene:
    world = HittableList()
    light = DiffuseLight(Color(7, 7, 7))
    white = _cornell_walls(world, Quad(Point3(113, 554, 127), Vector3(330, 0, 0), Vector3(0, 0, 305), light))
    box1, box2 = _cornell_boxes(white)
    world.add(ConstantMedium(box1, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(box2, 0.01, Color(1, 1, 1)))
    return compile_world(world), _cornell_camera()


def perlin_spheres() -> Scene:
    world = HittableList()
    pertext = NoiseTexture(4)
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))

    config = CameraConfig(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=50,
        max_depth=20,
        background=sky_gradient,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
    )
    return world, config


def earth() -> Scene:
    """A globe textured from earthmap.jpg; renders cyan when the image is missing."""
    earth_texture = ImageTexture("earthmap.jpg")
    globe = Sphere(Point3(0, 0, 0), 2, Lambertian(earth_texture))

    config = CameraConfig(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=50,
        max_depth=20,
        background=sky_gradient,
        vfov=20,
        lookfrom=Point3(0, 0, 12),
        lookat=Point3(0, 0, 0),
    )
    return HittableList(globe), config


def simple_light() -> Scene:
    world = HittableList()
    pertext = NoiseTexture(4)
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))

    difflight = DiffuseLight(Color(4, 4, 4))
    world.add(Sphere(Point3(0, 7, 0), 2, difflight))
    world.add(Quad(Point3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), difflight))

    config = CameraConfig(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        background=Color(0, 0, 0),
        vfov=20,
        lookfrom=Point3(26, 3, 6),
        lookat=Point3(0, 2, 0),
    )
    return world, config


SCENES: Dict[str, Callable[[], Scene]] = {
    "spheres": spheres,
    "random_spheres": random_spheres,
    "quads": quads,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "perlin_spheres": perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
}


def compile_world(world: HittableList) -> HittableList:
    """Wraps the list's objects in a BVH, returned as a one-element list."""
    root = BVHNode.from_list(world)
    logger.info("BVH built over %d objects (depth %d)", len(world), root.depth())
    return HittableList(root)


def build_scene(name: str) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise SceneError(f"Unknown scene '{name}'. Available: {', '.join(sorted(SCENES))}") from None
    logger.info("Building scene '%s'", name)
    return builder()

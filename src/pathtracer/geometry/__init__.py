from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.quad import Quad, box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.transforms import Translate, Rotate, RotateX, RotateY, RotateZ
from pathtracer.geometry.medium import ConstantMedium

__all__ = [
    "Hittable",
    "HitRecord",
    "HittableList",
    "Sphere",
    "Quad",
    "box",
    "BVHNode",
    "Translate",
    "Rotate",
    "RotateX",
    "RotateY",
    "RotateZ",
    "ConstantMedium",
]

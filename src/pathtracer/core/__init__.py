from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.errors import PathTracerError, ConfigurationError, SceneError

__all__ = [
    "Vector3",
    "Color",
    "Point3",
    "Interval",
    "Ray",
    "AABB",
    "PathTracerError",
    "ConfigurationError",
    "SceneError",
]

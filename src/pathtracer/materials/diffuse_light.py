# materials/diffuse_light.py
from typing import TYPE_CHECKING, Union

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Return the emitted radiance, taken from the texture.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Color: The emission color from the texture.
        """
        return self.texture.value(u, v, p)

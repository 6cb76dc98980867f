# materials/textures.py
import math
from typing import Union

from pathtracer.core.interval import Interval
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.image import TextureImage
from pathtracer.materials.perlin import Perlin

UNIT_INTERVAL = Interval(0.0, 1.0)
# Returned by ImageTexture when its image could not be loaded.
DEBUG_CYAN = Color(0.0, 1.0, 1.0)


class Texture:
    """Base class for all textures: a color field over (u, v, p)."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color


def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Texture):
        return albedo
    return SolidColor(albedo)


class CheckerTexture(Texture):
    """
    A 3D checker pattern: alternates between two textures on cubes of side
    scale in world space.
    """
    def __init__(self, scale: float, even: Union[Color, Texture], odd: Union[Color, Texture]):
        self.inv_scale = 1.0 / scale
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        is_even = (x + y + z) % 2 == 0
        return self.even.value(u, v, p) if is_even else self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture from an image file, looked up by surface (u, v)."""
    def __init__(self, filename: str):
        self.image = TextureImage(filename)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Without texture data, return solid cyan as a debugging aid.
        if self.image.height <= 0:
            return DEBUG_CYAN

        u = UNIT_INTERVAL.clamp(u)
        v = 1.0 - UNIT_INTERVAL.clamp(v)  # Flip V to image coordinates

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)

        color_scale = 1.0 / 255.0
        return Color(color_scale * r, color_scale * g, color_scale * b)


class NoiseTexture(Texture):
    """A marble-like texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, color: Color = Color(1.0, 1.0, 1.0)):
        self.noise = Perlin()
        self.scale = scale
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        s = p * self.scale
        return self.color * (0.5 * (1 + math.sin(s.z + 10 * self.noise.turb(s))))

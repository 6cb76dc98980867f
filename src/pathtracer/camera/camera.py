# camera/camera.py
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

import numpy as np

from pathtracer.core.errors import ConfigurationError
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import as_vector, degrees_to_radians, random_double, random_in_unit_disk
from pathtracer.core.vector import Color, Point3, Vector3

# Ignore hits closer than this to avoid re-hitting the surface a ray leaves from.
SHADOW_ACNE_EPSILON = 0.001
# Each bounce is a Python stack frame (plus those of the hit traversal).
MAX_DEPTH_LIMIT = 500

BLACK = Color(0.0, 0.0, 0.0)

Background = Union[Color, Callable[[Ray], Color]]


def sky_gradient(ray: Ray) -> Color:
    """
    White-to-blue blend on the ray's vertical direction, the classic sky.
    """
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return Color(1.0, 1.0, 1.0) * (1.0 - a) + Color(0.5, 0.7, 1.0) * a


@dataclass
class CameraConfig:
    """
    Image, sampling and viewing settings for a render.
    """
    aspect_ratio: float = 1.0        # Ratio of image width over height
    image_width: int = 100           # Rendered image width in pixel count
    samples_per_pixel: int = 10      # Count of random samples for each pixel
    max_depth: int = 10              # Maximum number of ray bounces into scene
    background: Background = field(default_factory=lambda: Color(0, 0, 0))

    vfov: float = 90.0               # Vertical view angle (field of view), degrees
    lookfrom: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))

    defocus_angle: float = 0.0       # Variation angle of rays through each pixel, degrees
    focus_dist: float = 10.0         # Distance from lookfrom to the plane of perfect focus

    def __post_init__(self):
        self.lookfrom = as_vector(self.lookfrom)
        self.lookat = as_vector(self.lookat)
        self.vup = as_vector(self.vup)
        if not callable(self.background):
            self.background = as_vector(self.background)

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    def validate(self):
        """
        Raises ConfigurationError describing the first invalid setting found.
        """
        if not isinstance(self.image_width, numbers.Integral) or self.image_width <= 0:
            raise ConfigurationError(f"image_width must be a positive integer, got {self.image_width!r}")
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if not isinstance(self.samples_per_pixel, numbers.Integral) or self.samples_per_pixel <= 0:
            raise ConfigurationError(
                f"samples_per_pixel must be a positive integer, got {self.samples_per_pixel!r}")
        if not isinstance(self.max_depth, numbers.Integral) or self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if self.max_depth > MAX_DEPTH_LIMIT:
            raise ConfigurationError(f"max_depth must not exceed {MAX_DEPTH_LIMIT}, got {self.max_depth}")
        if not 0 < self.vfov < 180:
            raise ConfigurationError(f"vfov must lie strictly between 0 and 180 degrees, got {self.vfov}")
        if self.focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.defocus_angle < 0:
            raise ConfigurationError(f"defocus_angle must not be negative, got {self.defocus_angle}")
        if self.lookfrom == self.lookat:
            raise ConfigurationError("lookfrom and lookat must be different points")
        # Unit vectors: independent of scene scale.
        view = self.lookfrom - self.lookat
        if self.vup.normalize().cross(view.normalize()).near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")


class Camera:
    """
    Generates primary rays for each pixel and estimates the radiance they carry.

    The camera looks from lookfrom toward lookat; the viewport sits on the
    focus plane, and with a positive defocus_angle ray origins are spread over
    a disk around the camera centre to simulate a finite aperture.
    """
    def __init__(self, config: CameraConfig):
        config.validate()
        self.config = config
        self.image_width = config.image_width
        self.image_height = config.image_height
        self.samples_per_pixel = config.samples_per_pixel
        self.pixel_samples_scale = 1.0 / config.samples_per_pixel
        self.max_depth = config.max_depth
        self.background = config.background
        self.defocus_angle = config.defocus_angle
        self.update_camera()

    def update_camera(self):
        """Derives the camera basis, viewport and defocus disk from the config."""
        config = self.config
        self.center = config.lookfrom

        theta = degrees_to_radians(config.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * config.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Unit basis vectors for the camera coordinate frame.
        self.w = (config.lookfrom - config.lookat).normalize()
        self.u = config.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        viewport_u = self.u * viewport_width     # across the horizontal edge
        viewport_v = -self.v * viewport_height   # down the vertical edge

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * config.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = config.focus_dist * math.tan(degrees_to_radians(config.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int) -> Ray:
        """
        A ray from the defocus disk through a random point in pixel (i, j).
        """
        offset_x = random_double() - 0.5
        offset_y = random_double() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self) -> Point3:
        p = random_in_unit_disk()
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def background_color(self, ray: Ray) -> Color:
        if callable(self.background):
            return self.background(ray)
        return self.background

    def ray_color(self, ray: Ray, depth: int, world) -> Color:
        """
        Radiance arriving along ray, following at most depth bounces.
        """
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))
        if rec is None:
            return self.background_color(ray)

        color_from_emission = rec.material.emitted(rec.u, rec.v, rec.p)

        scatter = rec.material.scatter(ray, rec)
        if scatter is None:
            return color_from_emission

        attenuation, scattered = scatter
        color_from_scatter = attenuation * self.ray_color(scattered, depth - 1, world)
        return color_from_emission + color_from_scatter

    def render_pixel(self, i: int, j: int, world) -> Color:
        """Average radiance of samples_per_pixel rays through pixel (i, j)."""
        r = g = b = 0.0
        for _ in range(self.samples_per_pixel):
            sample = self.ray_color(self.get_ray(i, j), self.max_depth, world)
            r += sample.x
            g += sample.y
            b += sample.z
        scale = self.pixel_samples_scale
        return Color(r * scale, g * scale, b * scale)

    def render_row(self, j: int, world, out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Linear radiance of every pixel in row j as a (width, 3) float array.
        """
        if out is None:
            out = np.zeros((self.image_width, 3), dtype=np.float64)
        for i in range(self.image_width):
            pixel = self.render_pixel(i, j, world)
            out[i, 0] = pixel.x
            out[i, 1] = pixel.y
            out[i, 2] = pixel.z
        return out

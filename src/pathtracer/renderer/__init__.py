from pathtracer.renderer.raytracer import Renderer, RenderResult
from pathtracer.renderer.output import save_image, save_png, write_ppm
from pathtracer.renderer.tone_mapping import linear_to_gamma, to_display

__all__ = [
    "Renderer",
    "RenderResult",
    "save_image",
    "save_png",
    "write_ppm",
    "linear_to_gamma",
    "to_display",
]

# renderer/output.py
import logging
import os
from typing import IO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PathOrStream = Union[str, os.PathLike, IO[str]]


def write_ppm(target: PathOrStream, image: np.ndarray):
    """
    Writes an (H, W, 3) uint8 image as plain-text PPM (P3): the header, then
    one "r g b" line per pixel, top row first and left to right.

    The header is the standard three lines (P3, "width height", 255) rather
    than a two-line tag-and-size form; image viewers require the maxval line.
    """
    if hasattr(target, "write"):
        _write_ppm_stream(target, image)
        return
    with open(target, "w", encoding="ascii", newline="\n") as stream:
        _write_ppm_stream(stream, image)


def _write_ppm_stream(stream: IO[str], image: np.ndarray):
    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_png(path: Union[str, os.PathLike], image: np.ndarray):
    """Saves an (H, W, 3) uint8 image through Pillow; the format follows the suffix."""
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)


def save_image(path: Union[str, os.PathLike], image: np.ndarray):
    """
    Writes the image to path, choosing PPM for a .ppm suffix and Pillow
    otherwise.
    """
    suffix = os.path.splitext(os.fspath(path))[1].lower()
    if suffix == ".ppm":
        write_ppm(path, image)
    else:
        save_png(path, image)
    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], path)

# materials/image.py
import logging
import os
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from pathtracer.config import IMAGES_DIR_ENV

logger = logging.getLogger(__name__)

# Returned for lookups into an image that has no data.
MAGENTA = (255, 0, 255)


class TextureImage:
    """
    8-bit RGB image data for image textures.

    A missing or unreadable file is not an error: the image is left empty
    (width and height 0) and callers fall back to a debug color.
    """
    def __init__(self, filename: Optional[str] = None):
        self.data: Optional[np.ndarray] = None
        self.width = 0
        self.height = 0
        if filename is not None:
            self.load(filename)

    def load(self, filename: str) -> bool:
        for candidate in self._candidates(filename):
            if not os.path.exists(candidate):
                continue
            try:
                with Image.open(candidate) as img:
                    if img.mode != 'RGB':
                        img = img.convert('RGB')
                    self.data = np.asarray(img, dtype=np.uint8)
            except (OSError, ValueError) as e:
                logger.warning("Error loading texture %s: %s", candidate, e)
                continue
            self.height, self.width = self.data.shape[:2]
            logger.debug("Loaded texture %s (%dx%d)", candidate, self.width, self.height)
            return True

        logger.warning("Could not load texture image file '%s'", filename)
        return False

    @staticmethod
    def _candidates(filename: str):
        yield filename
        images_dir = os.environ.get(IMAGES_DIR_ENV)
        if images_dir:
            yield os.path.join(images_dir, filename)

    def pixel_data(self, x: int, y: int) -> Tuple[int, int, int]:
        """
        RGB bytes of pixel (x, y), with coordinates clamped to the image.
        """
        if self.data is None:
            return MAGENTA
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        r, g, b = self.data[y, x]
        return int(r), int(g), int(b)

# renderer/raytracer.py
import logging
import multiprocessing as mp
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.errors import ConfigurationError
from pathtracer.core.utils import seed_rng
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import to_display

logger = logging.getLogger(__name__)

# Rows handed to a worker per task.
ROWS_PER_TASK = 4

# Per-process state of pool workers, set once by _init_worker.
_worker_camera: Optional[Camera] = None
_worker_world: Optional[Hittable] = None


def _init_worker(camera: Camera, world: Hittable):
    global _worker_camera, _worker_world
    _worker_camera = camera
    _worker_world = world


def _render_row(task: Tuple[int, np.random.SeedSequence]) -> Tuple[int, np.ndarray]:
    j, row_seed = task
    seed_rng(row_seed)
    return j, _worker_camera.render_row(j, _worker_world)


@dataclass
class RenderResult:
    """Output of a render: linear radiance and its 8-bit display form."""
    linear: np.ndarray   # (H, W, 3) float64, averaged per pixel
    image: np.ndarray    # (H, W, 3) uint8, gamma corrected
    seed_entropy: int
    elapsed: float

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]


class Renderer:
    """
    Renders a scene through a camera, one image row per task.

    Every row draws its random numbers from its own stream, spawned from a
    single SeedSequence, so a seeded render gives the same image for any
    number of workers. With workers > 1 rows are traced in a process pool;
    the camera and scene are sent to each worker once.
    """
    def __init__(self, camera: Camera, workers: int = 1, seed: Optional[int] = None):
        if workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {workers}")
        self.camera = camera
        self.workers = workers
        self.seed = seed

    def render(self, world: Hittable) -> RenderResult:
        camera = self.camera
        width, height = camera.image_width, camera.image_height
        seed_sequence = np.random.SeedSequence(self.seed)
        tasks = list(enumerate(seed_sequence.spawn(height)))

        logger.info(
            "Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s), seed entropy %d",
            width, height, camera.samples_per_pixel, camera.max_depth, self.workers,
            seed_sequence.entropy,
        )

        linear = np.zeros((height, width, 3), dtype=np.float64)
        start = time.perf_counter()
        progress = _Progress(height)

        if self.workers == 1:
            _init_worker(camera, world)
            try:
                for task in tasks:
                    j, row = _render_row(task)
                    linear[j] = row
                    progress.advance()
            finally:
                _init_worker(None, None)
        else:
            with mp.Pool(self.workers, initializer=_init_worker, initargs=(camera, world)) as pool:
                for j, row in pool.imap_unordered(_render_row, tasks, chunksize=ROWS_PER_TASK):
                    linear[j] = row
                    progress.advance()

        elapsed = time.perf_counter() - start
        logger.info("Done in %.2fs", elapsed)
        return RenderResult(linear=linear, image=to_display(linear),
                            seed_entropy=seed_sequence.entropy, elapsed=elapsed)


class _Progress:
    """Logs the number of scanlines remaining roughly every tenth of the image."""
    def __init__(self, total: int):
        self.total = total
        self.remaining = total
        self.step = max(1, total // 10)

    def advance(self):
        self.remaining -= 1
        if self.remaining % self.step == 0 or self.remaining == 0:
            logger.info("Scanlines remaining: %d", self.remaining)
        else:
            logger.debug("Scanlines remaining: %d", self.remaining)

# main.py
"""
Command-line entry point: build a named scene, render it and write the image.

Usage:
    pathtracer [scene] [options]

Example:
    pathtracer cornell_box --width 200 --samples 20 --workers 4 -o cornell.png
"""
import argparse
import logging
import sys
from typing import List, Optional

from pathtracer.camera.camera import Camera
from pathtracer.config import LOG_LEVEL, default_seed, default_workers
from pathtracer.core.errors import PathTracerError
from pathtracer.core.utils import seed_rng
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.output import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render an example scene with a Monte Carlo path tracer.",
    )
    parser.add_argument(
        "scene",
        nargs="?",
        default="spheres",
        choices=sorted(SCENES),
        help="Scene to render (default: spheres)",
    )
    parser.add_argument("--width", type=int, help="Image width in pixels (default: scene setting)")
    parser.add_argument("--samples", type=int, help="Samples per pixel (default: scene setting)")
    parser.add_argument("--depth", type=int, help="Maximum bounce depth (default: scene setting)")
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed; the same seed reproduces the same image (default: $PATHTRACER_SEED, else random)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Worker processes tracing rows in parallel (default: $PATHTRACER_WORKERS, else 1)",
    )
    parser.add_argument(
        "-o", "--output",
        default="image.ppm",
        help="Output file; .ppm writes plain PPM, other suffixes go through Pillow (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace):
    if args.seed is None:
        args.seed = default_seed()
    if args.workers is None:
        args.workers = default_workers()

    # Scene construction draws random numbers too (BVH axes, random spheres).
    seed_rng(args.seed)
    world, config = build_scene(args.scene)

    if args.width is not None:
        config.image_width = args.width
    if args.samples is not None:
        config.samples_per_pixel = args.samples
    if args.depth is not None:
        config.max_depth = args.depth

    camera = Camera(config)
    renderer = Renderer(camera, workers=args.workers, seed=args.seed)
    result = renderer.render(world)
    save_image(args.output, result.image)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        run(args)
    except PathTracerError as e:
        logger.error("%s", e)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

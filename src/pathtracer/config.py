# config.py
"""Environment-driven defaults for the command line and renderer."""
import os
from typing import Optional

from pathtracer.core.errors import ConfigurationError

LOG_LEVEL_ENV = "PATHTRACER_LOG_LEVEL"
WORKERS_ENV = "PATHTRACER_WORKERS"
SEED_ENV = "PATHTRACER_SEED"
IMAGES_DIR_ENV = "PATHTRACER_IMAGES"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "INFO")


def env_int(name: str, default: Optional[int]) -> Optional[int]:
    """
    Integer value of environment variable name, or default when it is unset
    or empty. Raises ConfigurationError when the value is not an integer.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def default_workers() -> int:
    return env_int(WORKERS_ENV, 1)


def default_seed() -> Optional[int]:
    return env_int(SEED_ENV, None)

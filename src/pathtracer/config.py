"""Configuration for the path tracer: environment defaults and render settings."""

import os
from dataclasses import dataclass
from typing import Optional

# Logging settings
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PATHTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Render driver settings
DEFAULT_WORKERS = int(os.getenv("PATHTRACER_WORKERS", str(os.cpu_count() or 1)))
DEFAULT_SEED: Optional[int] = (
    int(os.environ["PATHTRACER_SEED"]) if os.getenv("PATHTRACER_SEED") else None
)

EXECUTORS = ("thread", "process")


class ConfigurationError(ValueError):
    """Raised when render or camera parameters cannot produce a valid image."""


@dataclass(frozen=True)
class RenderSettings:
    """
    Options for the parallel render driver.

    Args:
        workers: Size of the worker pool; 1 renders rows inline.
        executor: "thread" or "process" pool.
        seed: Root seed for the per-row random streams. None draws fresh entropy.
        gamma_correct: Apply the square-root transfer function before quantizing.
        show_progress: Display a scanline progress bar on stderr.
    """
    workers: int = DEFAULT_WORKERS
    executor: str = "thread"
    seed: Optional[int] = DEFAULT_SEED
    gamma_correct: bool = True
    show_progress: bool = True

    def __post_init__(self):
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise ConfigurationError(
                f"executor must be one of {', '.join(EXECUTORS)}, got {self.executor!r}"
            )
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"seed must be non-negative, got {self.seed}")


__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "DEFAULT_WORKERS",
    "DEFAULT_SEED",
    "EXECUTORS",
    "ConfigurationError",
    "RenderSettings",
]

import logging
import os
from dataclasses import dataclass
from typing import Optional

# density used by BenchmarkCoordinator.run_benchmarks for the random grid
BENCHMARK_OBSTACLE_PERCENTAGE = 0.3

# obstacle placement gives up after MAX_ATTEMPTS_FACTOR * width * height tries
MAX_ATTEMPTS_FACTOR = 3

# the connected fallback grid scatters obstacles at this fraction of the requested density
FALLBACK_DENSITY_RATIO = 0.5

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


@dataclass
class Config:
    width: int = 20
    height: int = 20

    # fraction of cells the random-obstacle grid tries to block
    obstacle_percentage: float = BENCHMARK_OBSTACLE_PERCENTAGE

    iterations: int = 10  # trials per (algorithm, grid) pair
    seed: Optional[int] = None

    # None runs every registered algorithm, otherwise a single key ("astar", "bfs", ...)
    algorithm: Optional[str] = None

    log_events: bool = False

    @property
    def grid_size(self) -> tuple[int, int]:
        return (self.width, self.height)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

"""
Benchmark coordinator.

Runs every pathfinding algorithm against a fixed set of generated grids
and collects one PathfindingMetrics row per (algorithm, grid) pair.

High-level behavior
-------------------

1. Generate three grids of the requested size: obstacle-free, random
   obstacles (connectivity guaranteed) and a maze-like pillar pattern.
2. For each algorithm and each grid, run `iterations` trials, each with
   a fresh PerformanceCounter.
3. Keep only trials that found a path. Their wall-clock durations are
   averaged; counters and path are taken from the last successful trial.
4. Pairs with no successful trial produce no row.

The resulting list is handed to reporting code (see results.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from config import BENCHMARK_OBSTACLE_PERCENTAGE
from env import Grid, GridGenerator, Position
from pathfinding import ALGORITHM_ORDER, get_algorithm
from pathfinding.instrumentation import PerformanceCounter

logger = logging.getLogger(__name__)

GRID_LABELS = ("empty", "random", "maze")


@dataclass(frozen=True)
class PathfindingMetrics:
    algorithm_name: str
    path_found: bool
    path_length: int
    nodes_explored: int
    nodes_in_frontier: int
    duration: float  # seconds, averaged over successful trials
    theoretical_complexity: str
    grid_size: Tuple[int, int]  # (width, height)
    obstacle_count: int
    path: Tuple[Position, ...] = field(repr=False)

    comparisons: int = 0
    memory_allocations: int = 0
    grid_label: str = ""
    successful_runs: int = 0
    iterations: int = 0

    @property
    def duration_us(self) -> float:
        return self.duration * 1e6


class BenchmarkCoordinator:
    """Owns the benchmark grids and runs the algorithms against them."""

    def __init__(self, seed: Optional[int] = None, log_events: bool = False) -> None:
        self.generator = GridGenerator(seed)
        self.grids: List[Grid] = []
        self.grid_labels: List[str] = []
        self.log_events = log_events

    # ---------- logging helper ---------- #

    def _log(self, msg: str, *args: Any) -> None:
        if self.log_events:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)

    # ---------------- grids ---------------- #

    def generate_test_grids(self, grid_size: Tuple[int, int], obstacle_percentage: float) -> None:
        """Replace the held grids with an empty, a random-obstacle and a maze-like grid."""
        width, height = grid_size
        self.grids = [
            self.generator.empty(width, height),
            self.generator.generate(width, height, obstacle_percentage),
            self.generator.maze_like(width, height),
        ]
        self.grid_labels = list(GRID_LABELS)
        self._log(
            "[GRIDS] %dx%d, obstacles per grid: %s",
            width, height, [g.obstacle_count for g in self.grids],
        )

    # ---------------- benchmarking ---------------- #

    def run_benchmarks(self, grid_size: Tuple[int, int], iterations: int) -> List[PathfindingMetrics]:
        """All algorithms against fresh grids at the fixed benchmark density."""
        self.generate_test_grids(grid_size, BENCHMARK_OBSTACLE_PERCENTAGE)

        self._log("[RUN] Grid size %dx%d, %d iterations per algorithm", grid_size[0], grid_size[1], iterations)

        all_metrics: List[PathfindingMetrics] = []
        for key in ALGORITHM_ORDER:
            all_metrics.extend(self.benchmark_algorithm(key, iterations))
        return all_metrics

    def run_single(
        self,
        key: str,
        grid_size: Tuple[int, int],
        iterations: int,
        obstacle_percentage: float = BENCHMARK_OBSTACLE_PERCENTAGE,
    ) -> List[PathfindingMetrics]:
        """One algorithm against fresh grids at the given density."""
        get_algorithm(key)  # fail before generating anything
        self.generate_test_grids(grid_size, obstacle_percentage)
        return self.benchmark_algorithm(key, iterations)

    def benchmark_algorithm(self, key: str, iterations: int) -> List[PathfindingMetrics]:
        """
        Run `iterations` trials of one algorithm on every held grid.

        Duration is averaged over successful trials only, while counters
        and path come from the last successful trial, not an average.
        """
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")

        algo = get_algorithm(key)
        algo.reset_stats()
        results: List[PathfindingMetrics] = []

        for grid, label in zip(self.grids, self.grid_labels):
            total_duration = 0.0
            successful_runs = 0
            last_path: List[Position] = []
            last_counter: Optional[PerformanceCounter] = None

            for _ in range(iterations):
                path, counter = algo.find_path(grid, PerformanceCounter())
                if not path:
                    continue
                total_duration += algo.last_runtime
                successful_runs += 1
                last_path, last_counter = path, counter

            if successful_runs == 0 or last_counter is None:
                logger.debug("%s found no path on %s grid; no row emitted", algo.name, label)
                continue

            results.append(
                PathfindingMetrics(
                    algorithm_name=algo.name,
                    path_found=True,
                    path_length=len(last_path),
                    nodes_explored=last_counter.nodes_explored,
                    nodes_in_frontier=last_counter.nodes_in_frontier,
                    duration=total_duration / successful_runs,
                    theoretical_complexity=algo.complexity,
                    grid_size=(grid.width, grid.height),
                    obstacle_count=grid.obstacle_count,
                    path=tuple(last_path),
                    comparisons=last_counter.comparisons,
                    memory_allocations=last_counter.memory_allocations,
                    grid_label=label,
                    successful_runs=successful_runs,
                    iterations=iterations,
                )
            )

        self._log("[DONE] %s: %d rows, avg runtime %.6fs", algo.name, len(results),
                  (algo.total_runtime / algo.call_count) if algo.call_count else 0.0)
        return results

    # ---------------- algorithm info ---------------- #

    @staticmethod
    def theoretical_complexity(key: str) -> str:
        return get_algorithm(key).complexity

    @staticmethod
    def algorithm_info() -> List[Dict[str, Any]]:
        return [
            {
                "key": algo.key,
                "name": algo.name,
                "complexity": algo.complexity,
                "optimal": algo.optimal,
            }
            for algo in (get_algorithm(k) for k in ALGORITHM_ORDER)
        ]

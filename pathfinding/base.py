from __future__ import annotations

import math
from typing import Dict, List, Optional, Protocol, Tuple

from env import Grid, Position
from .instrumentation import Instrumentation, PerformanceCounter

Path = List[Position]


class PathfindingAlgorithm(Protocol):
    key: str            # registry key, e.g. "astar"
    name: str           # display name, e.g. "A*"
    complexity: str     # theoretical time complexity
    optimal: bool       # guaranteed shortest path on a uniform-cost grid

    # timing stats (seconds)
    total_runtime: float
    call_count: int
    last_runtime: float

    def find_path(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        ...

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1


def new_counter(instrumentation: Optional[Instrumentation]) -> Instrumentation:
    return instrumentation if instrumentation is not None else PerformanceCounter()


def heuristic(a: Position, b: Position) -> float:
    """Manhattan distance; admissible and consistent on a 4-connected unit grid."""
    return float(abs(a.col - b.col) + abs(a.row - b.row))


def heap_priority(value: float) -> float:
    """
    Heap key for a priority. NaN never compares as smaller than anything,
    so it is ranked last (as +inf) instead of being left to heapq.
    """
    return math.inf if math.isnan(value) else value


def reconstruct_path(parent: Dict[Position, Position], end: Position) -> Path:
    cur = end
    path: Path = [cur]
    while cur in parent:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path

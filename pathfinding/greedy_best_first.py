from __future__ import annotations

from heapq import heappop, heappush
from time import perf_counter
from typing import Dict, List, Optional, Set, Tuple

from env import Grid, Position
from .base import Path, PathfindingAlgorithm, heap_priority, heuristic, new_counter, reconstruct_path
from .instrumentation import Instrumentation


class GreedyBestFirstPlanner(PathfindingAlgorithm):
    """
    Greedy Best-First Search (GBFS) on a 4-connected grid.

    Uses only the heuristic value h(n) (Manhattan distance to the goal)
    to guide search:

        f(n) = h(n)

    This often expands far fewer nodes than BFS, but is not guaranteed
    to find an optimal path. It is still complete on finite grids when
    implemented with a closed set, as we do here.
    """

    key = "greedy"
    name = "Greedy Best-First"
    complexity = "O(b^m)"
    optimal = False

    def __init__(self) -> None:
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def find_path(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        """
        Returns:
            - list of positions [start, ..., end] if a path exists
            - [] if no path exists (never returns None)
        """
        counter = new_counter(instrumentation)
        t0 = perf_counter()

        start, goal = grid.start, grid.end

        open_heap: List[Tuple[float, int, Position]] = []
        parent: Dict[Position, Position] = {}
        discovered: Set[Position] = {start}
        closed: Set[Position] = set()

        seq = 0
        heappush(open_heap, (heap_priority(heuristic(start, goal)), seq, start))
        counter.on_frontier_add(start)

        while open_heap:
            _, _, cur = heappop(open_heap)

            if cur in closed:
                continue
            closed.add(cur)
            counter.on_explore(cur)

            if cur == goal:
                path = reconstruct_path(parent, cur)
                counter.on_path(path)
                self._update_stats(perf_counter() - t0)
                return path, counter

            for np_ in grid.neighbors(cur):
                counter.on_compare()
                if np_ in discovered:
                    continue
                discovered.add(np_)
                parent[np_] = cur
                seq += 1
                heappush(open_heap, (heap_priority(heuristic(np_, goal)), seq, np_))
                counter.on_frontier_add(np_)

        # No path
        self._update_stats(perf_counter() - t0)
        return [], counter


ALGORITHM = GreedyBestFirstPlanner()

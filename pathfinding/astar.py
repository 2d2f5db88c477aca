from __future__ import annotations

from heapq import heappop, heappush
from time import perf_counter
from typing import Dict, List, Optional, Set, Tuple

from env import Grid, Position
from .base import Path, PathfindingAlgorithm, heap_priority, heuristic, new_counter, reconstruct_path
from .instrumentation import Instrumentation


class AStarPlanner(PathfindingAlgorithm):
    """
    A* path planner on a 4-connected grid.
    Uses Manhattan distance as heuristic, so paths are still optimal
    (same length as BFS) but usually found with fewer expansions.
    """

    key = "astar"
    name = "A*"
    complexity = "O(b^d)"
    optimal = True

    def __init__(self) -> None:
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    def find_path(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        """
        Returns the path from grid.start to grid.end (inclusive), or []
        if end is unreachable, together with the instrumentation used.
        """
        counter = new_counter(instrumentation)
        t0 = perf_counter()

        start, goal = grid.start, grid.end

        # open set: (f, seq, g, pos); seq keeps ties in insertion order
        open_heap: List[Tuple[float, int, float, Position]] = []
        seq = 0
        heappush(open_heap, (heap_priority(heuristic(start, goal)), seq, 0.0, start))
        counter.on_frontier_add(start)

        g_cost: Dict[Position, float] = {start: 0.0}
        parent: Dict[Position, Position] = {}
        closed: Set[Position] = set()

        while open_heap:
            _, _, g_cur, cur = heappop(open_heap)

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

                new_g = g_cur + 1.0  # unit-cost grid
                old_g = g_cost.get(np_)
                if old_g is not None and new_g >= old_g:
                    continue

                g_cost[np_] = new_g
                parent[np_] = cur
                seq += 1
                heappush(open_heap, (heap_priority(new_g + heuristic(np_, goal)), seq, new_g, np_))
                if old_g is None:
                    counter.on_frontier_add(np_)

        # no path
        self._update_stats(perf_counter() - t0)
        return [], counter


ALGORITHM = AStarPlanner()
